"""
Exponential — exp, log, sqrt, cbrt

Все функции возвращают главную ветвь: аргумент берётся из atan2
в диапазоне (-pi, pi], корни — единственный главный корень.

ФОРМУЛЫ:
    exp(a + ib) = e^a * (cos b + i sin b)
    log(z) = ln|z| + i*arg(z)
    log_base(z) = log(z) / log(base)
    sqrt(z) = sqrt(|z|) at arg(z) / 2
    cbrt(z) = cbrt(|z|) at arg(z) / 3
"""

from lemath.core.domain.complex_number import Complex, value_of, value_of_polar
from lemath.core.math.numerical_safeguards import (
    ieee_cbrt,
    ieee_exp,
    ieee_log,
    ieee_sqrt,
)


def exp(z: Complex) -> Complex:
    """Экспонента: полярная форма с модулем e^real и аргументом imag."""
    return value_of_polar(ieee_exp(z.real), z.imag)


def log(z: Complex, base: "Complex | float | None" = None) -> Complex:
    """
    Натуральный логарифм (главная ветвь) или логарифм по основанию base.

    log(ZERO) даёт (-Inf, 0.0).

    Args:
        z: Аргумент
        base: Основание — вещественное или Complex (default: e)

    Examples:
        >>> log(value_of(1000.0, 0.0), 10.0).real  # doctest: +ELLIPSIS
        2.9999...
    """
    result = value_of(ieee_log(z.magnitude), z.angle)
    if base is None:
        return result
    if isinstance(base, Complex):
        return result.div(log(base))
    return result.div(ieee_log(base))


def sqrt(z: Complex) -> Complex:
    """Главный квадратный корень."""
    return value_of_polar(ieee_sqrt(z.magnitude), z.angle / 2.0)


def cbrt(z: Complex) -> Complex:
    """Главный кубический корень."""
    return value_of_polar(ieee_cbrt(z.magnitude), z.angle / 3.0)
