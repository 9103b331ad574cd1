"""
Power — Возведение в комплексную и вещественную степень

ФОРМУЛЫ (z = r at t, c = cr + i*ci):
    |z^c| = r^cr * exp(-t * ci)
    arg(z^c) = ln(r) * ci + t * cr

    Вещественная степень e (ci = 0):
    z^e = r^e at t * e

Нулевое основание даёт ровно ZERO для любой степени.
"""

from lemath.core.domain.complex_number import (
    ZERO,
    Complex,
    value_of_polar,
    value_of_real,
)
from lemath.core.math.numerical_safeguards import ieee_exp, ieee_log, ieee_pow


def power(z: "Complex | float", c: "Complex | float") -> Complex:
    """
    z в степени c (главная ветвь).

    Args:
        z: Основание — Complex или вещественное
        c: Показатель — Complex или вещественное

    Returns:
        z^c; ZERO если |z| == 0

    Examples:
        >>> power(value_of_real(2.0), 3.0).real
        8.0
    """
    if not isinstance(z, Complex):
        z = value_of_real(z)

    r = z.magnitude
    if r == 0.0:
        return ZERO

    t = z.angle
    if not isinstance(c, Complex):
        return value_of_polar(ieee_pow(r, c), t * c)

    return value_of_polar(
        ieee_pow(r, c.real) * ieee_exp(-t * c.imag),
        ieee_log(r) * c.imag + t * c.real,
    )
