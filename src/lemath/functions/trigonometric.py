"""
Trigonometric — Тригонометрические функции и обратные к ним

Прямые функции выражены через экспоненту, обратные — через логарифм.
Отдельной обработки разрезов нет: ветвь определяется главным корнем
(sqrt) и главным логарифмом (log через atan2).

ФОРМУЛЫ:
    sin(z) = (exp(iz) - exp(-iz)) / 2i
    cos(z) = (exp(iz) + exp(-iz)) / 2
    tan(z) = sin(z) / cos(z),  cot(z) = cos(z) / sin(z)
    csc(z) = 1 / sin(z),       sec(z) = 1 / cos(z)

    asin(z) = -i * log(iz + sqrt(1 - z^2))
    acos(z) = -i * log(z + sqrt(z^2 - 1))
    atan(z) = i/2 * log((i + z) / (i - z))
    acot(z) = i/2 * log((z - i) / (z + i))
    acsc(z) = asin(1 / z),     asec(z) = acos(1 / z)
"""

from typing import Final

from lemath.core.domain.complex_number import (
    I,
    NEGATIVE_I,
    ONE,
    Complex,
    value_of_imag,
)
from lemath.functions.exponential import exp, log, sqrt

_TWO_I: Final[Complex] = value_of_imag(2.0)


def sin(z: Complex) -> Complex:
    iz = I.times(z)
    return exp(iz).minus(exp(iz.neg)).div(_TWO_I)


def cos(z: Complex) -> Complex:
    iz = I.times(z)
    return exp(iz).plus(exp(iz.neg)).div(2.0)


def tan(z: Complex) -> Complex:
    return sin(z).div(cos(z))


def cot(z: Complex) -> Complex:
    return cos(z).div(sin(z))


def csc(z: Complex) -> Complex:
    return ONE.div(sin(z))


def sec(z: Complex) -> Complex:
    return ONE.div(cos(z))


def asin(z: Complex) -> Complex:
    return NEGATIVE_I.times(log(I.times(z).plus(sqrt(ONE.minus(z.times(z))))))


def acos(z: Complex) -> Complex:
    return NEGATIVE_I.times(log(z.plus(sqrt(z.times(z).minus(1.0)))))


def atan(z: Complex) -> Complex:
    return I.times(log(I.plus(z).div(I.minus(z)))).div(2.0)


def acot(z: Complex) -> Complex:
    return I.times(log(z.minus(I).div(z.plus(I)))).div(2.0)


def acsc(z: Complex) -> Complex:
    return asin(ONE.div(z))


def asec(z: Complex) -> Complex:
    return acos(ONE.div(z))
