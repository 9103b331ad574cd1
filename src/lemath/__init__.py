"""
lemath — immutable complex numbers and elementary complex functions.

Public API:
- Complex value type, its constants and factories (lemath.core.domain)
- AngleUnit conversions and angle normalization (lemath.core.domain)
- Elementary function library (lemath.functions)
- IEEE-754 safe real primitives (lemath.core.math)
"""

from lemath.core.domain import (
    NEGATIVE_I,
    NEGATIVE_ONE,
    ONE,
    ZERO,
    AngleUnit,
    Complex,
    I,
    from_builtin,
    normalize_angle,
    value_of,
    value_of_imag,
    value_of_polar,
    value_of_random,
    value_of_real,
)
from lemath.core.math import DEFAULT_TOLERANCE
from lemath import functions

__version__ = "1.0.0"

__all__ = [
    # Constants
    "DEFAULT_TOLERANCE",
    "ZERO",
    "ONE",
    "NEGATIVE_ONE",
    "I",
    "NEGATIVE_I",
    # Types
    "Complex",
    "AngleUnit",
    # Factories
    "value_of",
    "value_of_real",
    "value_of_imag",
    "value_of_polar",
    "value_of_random",
    "from_builtin",
    # Angle utilities
    "normalize_angle",
    # Function library
    "functions",
]
