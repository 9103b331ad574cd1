"""
Rounding — Покомпонентное округление

Каждая компонента округляется независимо, половины — от нуля.
С digits компоненты сначала масштабируются на 10^digits, округляются
и делятся обратно.
"""

from lemath.core.domain.complex_number import Complex, value_of
from lemath.core.math.numerical_safeguards import (
    ieee_pow,
    is_valid_float,
    round_half_away_from_zero,
    validate_digits,
)


def _round_component(value: float, factor: float) -> float:
    scaled = value * factor
    if not is_valid_float(scaled):
        # Переполнение при масштабировании: значение уже целое на этой точности
        return value
    return round_half_away_from_zero(scaled) / factor


def round_(z: Complex, digits: int | None = None) -> Complex:
    """
    Округление до целых или до digits знаков после запятой.

    Args:
        z: Округляемое значение
        digits: Количество знаков (None — до целых)

    Returns:
        Новое значение с округлёнными компонентами

    Raises:
        ValueError: Если digits < 0

    Examples:
        >>> str(round_(value_of(2.5, -2.5)))
        '3.0 - i3.0'
        >>> str(round_(value_of(1.23456, 0.0), 2))
        '1.23 + i0.0'
    """
    if digits is None:
        return value_of(
            round_half_away_from_zero(z.real),
            round_half_away_from_zero(z.imag),
        )

    validate_digits(digits)
    factor = ieee_pow(10.0, digits)
    return value_of(_round_component(z.real, factor), _round_component(z.imag, factor))
