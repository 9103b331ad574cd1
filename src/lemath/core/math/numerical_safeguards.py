"""
Numerical Safeguards — IEEE-754 Safe Real Primitives

Модуль содержит вещественные примитивы, на которых построена комплексная
арифметика:
- Толерантность по умолчанию для сравнений float
- IEEE-754 совместимые обёртки над math (деление, log, exp, pow, sin, cos)
- Округление half-away-from-zero
- Валидация аргументов (invalid argument → ValueError)

Стандартный модуль math выбрасывает исключения там, где IEEE-754
возвращает специальные значения (log(0), переполнение exp, cos(inf),
деление float на ноль). Обёртки этого модуля возвращают NaN/±Inf, чтобы
специальные значения распространялись к вызывающему коду как данные.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна ieee_* функция не выбрасывает исключений для float аргументов
2. NaN на входе даёт NaN на выходе (кроме pow(x, 0) = 1.0 по IEEE-754)
3. Все операции детерминированы и воспроизводимы
"""

import logging
import math
from typing import Final

logger = logging.getLogger(__name__)

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность для покомпонентного сравнения
# Значения равны, если abs(a - b) < DEFAULT_TOLERANCE (строгое неравенство)
DEFAULT_TOLERANCE: Final[float] = 1e-12

NAN: Final[float] = float("nan")
INF: Final[float] = float("inf")


# =============================================================================
# NaN/Inf ПРОВЕРКИ И СРАВНЕНИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_within_tolerance(a: float, b: float, tol: float = DEFAULT_TOLERANCE) -> bool:
    """
    Сравнение двух float с абсолютной толерантностью.

    Алгоритм:
        abs(a - b) < tol

    Неравенство строгое: разница ровно tol считается неравенством.
    NaN никогда не равен ничему (включая NaN).

    Examples:
        >>> is_within_tolerance(1.0, 1.0 + 5e-13)
        True
        >>> is_within_tolerance(1.0, 1.0 + 2e-12)
        False
    """
    return abs(a - b) < tol


# =============================================================================
# IEEE-754 ОБЁРТКИ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление по правилам IEEE-754.

    В отличие от оператора `/` не выбрасывает ZeroDivisionError:
    - x / 0 → ±Inf (знак = знак x * знак нуля)
    - 0 / 0 → NaN
    - NaN / 0 → NaN

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if math.isnan(numerator) or numerator == 0.0:
            return NAN
        return math.copysign(INF, numerator) * math.copysign(1.0, denominator)


def ieee_log(value: float) -> float:
    """
    Натуральный логарифм по правилам IEEE-754.

    - log(±0) → -Inf
    - log(x < 0) → NaN
    - log(+Inf) → +Inf
    """
    if math.isnan(value) or value < 0.0:
        return NAN
    if value == 0.0:
        return -INF
    return math.log(value)


def ieee_exp(value: float) -> float:
    """Экспонента: при переполнении возвращает +Inf вместо OverflowError."""
    try:
        return math.exp(value)
    except OverflowError:
        return INF


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value == math.floor(value) and math.fmod(value, 2.0) != 0.0


def ieee_pow(base: float, exponent: float) -> float:
    """
    Возведение в степень по правилам IEEE-754 (аналог C pow).

    - Переполнение → ±Inf (минус только для отрицательного base и нечётного
      целого exponent)
    - 0 ** (exponent < 0) → ±Inf
    - base < 0 ** (нецелый exponent) → NaN

    Examples:
        >>> ieee_pow(2.0, 3.0)
        8.0
        >>> ieee_pow(0.0, -1.0)
        inf
        >>> ieee_pow(10.0, 400.0)
        inf
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0.0 and _is_odd_integer(exponent):
            return -INF
        return INF
    except ValueError:
        if base == 0.0:
            if _is_odd_integer(exponent):
                return math.copysign(INF, base)
            return INF
        return NAN


def ieee_sin(value: float) -> float:
    """Синус: sin(±Inf) → NaN вместо ValueError."""
    if math.isinf(value):
        return NAN
    return math.sin(value)


def ieee_cos(value: float) -> float:
    """Косинус: cos(±Inf) → NaN вместо ValueError."""
    if math.isinf(value):
        return NAN
    return math.cos(value)


def ieee_sqrt(value: float) -> float:
    """Квадратный корень: sqrt(x < 0) → NaN вместо ValueError."""
    if value < 0.0:
        return NAN
    return math.sqrt(value)


def ieee_cbrt(value: float) -> float:
    """Кубический корень (определён для всех вещественных, сохраняет знак)."""
    return math.cbrt(value)


def ieee_fmod(value: float, modulus: float) -> float:
    """
    Остаток от деления с знаком делимого (C fmod / Java %).

    - fmod(±Inf, m) → NaN
    - fmod(x, 0) → NaN
    """
    if math.isinf(value) or math.isnan(modulus) or modulus == 0.0:
        return NAN
    return math.fmod(value, modulus)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_away_from_zero(value: float) -> float:
    """
    Округление до ближайшего целого, половины — от нуля.

    Неконечные значения (NaN, ±Inf) возвращаются без изменений.

    Examples:
        >>> round_half_away_from_zero(2.5)
        3.0
        >>> round_half_away_from_zero(-2.5)
        -3.0
        >>> round_half_away_from_zero(0.49999999999999994)
        0.0
    """
    if not is_valid_float(value):
        return value

    magnitude = abs(value)
    steps = math.floor(magnitude)

    # Сравнение дробной части вместо floor(x + 0.5): x + 0.5 может
    # округлиться вверх для значений чуть меньше 0.5
    if magnitude - steps >= 0.5:
        steps += 1

    return math.copysign(float(steps), value)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    NaN проходит проверку и распространяется дальше по правилам IEEE-754.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0
    """
    if value < 0.0:
        logger.debug(f"Rejected negative {name}: {value}")
        raise ValueError(f"{name} cannot be negative, got {value}")


def validate_digits(digits: int) -> None:
    """
    Валидация количества знаков после запятой для округления.

    Raises:
        ValueError: Если digits < 0
    """
    if digits < 0:
        logger.debug(f"Rejected negative digits: {digits}")
        raise ValueError(f"digits must be greater than or equal to zero, got {digits}")
