"""
Domain models and value objects.

Contains the Complex value type with its factories and constants, and the
AngleUnit enumeration.
"""

from lemath.core.domain.angle_unit import AngleUnit, normalize_angle
from lemath.core.domain.complex_number import (
    I,
    NEGATIVE_I,
    NEGATIVE_ONE,
    ONE,
    ZERO,
    Complex,
    from_builtin,
    value_of,
    value_of_imag,
    value_of_polar,
    value_of_random,
    value_of_real,
)

__all__ = [
    # Complex model
    "Complex",
    # Complex constants
    "ZERO",
    "ONE",
    "NEGATIVE_ONE",
    "I",
    "NEGATIVE_I",
    # Complex factories
    "value_of",
    "value_of_real",
    "value_of_imag",
    "value_of_polar",
    "value_of_random",
    "from_builtin",
    # Angle units
    "AngleUnit",
    "normalize_angle",
]
