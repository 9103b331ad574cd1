"""
Core math modules для lemath

Вещественные примитивы с семантикой IEEE-754 и толерантными сравнениями.
"""

from lemath.core.math.numerical_safeguards import (
    # Epsilon constants
    DEFAULT_TOLERANCE,
    # IEEE-754 wrappers
    ieee_cbrt,
    ieee_cos,
    ieee_divide,
    ieee_exp,
    ieee_fmod,
    ieee_log,
    ieee_pow,
    ieee_sin,
    ieee_sqrt,
    # Comparisons
    is_valid_float,
    is_within_tolerance,
    # Rounding
    round_half_away_from_zero,
    # Validation
    validate_digits,
    validate_non_negative,
)

__all__ = [
    # Epsilon constants
    "DEFAULT_TOLERANCE",
    # IEEE-754 wrappers
    "ieee_cbrt",
    "ieee_cos",
    "ieee_divide",
    "ieee_exp",
    "ieee_fmod",
    "ieee_log",
    "ieee_pow",
    "ieee_sin",
    "ieee_sqrt",
    # Comparisons
    "is_valid_float",
    "is_within_tolerance",
    # Rounding
    "round_half_away_from_zero",
    # Validation
    "validate_digits",
    "validate_non_negative",
]
