"""
Hyperbolic — Гиперболические функции и обратные к ним

ФОРМУЛЫ:
    sinh(z) = (exp(z) - exp(-z)) / 2
    cosh(z) = (exp(z) + exp(-z)) / 2
    tanh(z) = sinh(z) / cosh(z),  coth(z) = cosh(z) / sinh(z)
    csch(z) = 1 / sinh(z),        sech(z) = 1 / cosh(z)

    asinh(z) = log(z + sqrt(z^2 + 1))
    acosh(z) = log(z + sqrt(z^2 - 1))
    atanh(z) = log((1 + z) / (1 - z)) / 2
    acoth(z) = log((z + 1) / (z - 1)) / 2
    acsch(z) = log((1 + sqrt(1 + z^2)) / z)
    asech(z) = log((1 + sqrt(1 - z^2)) / z)
"""

from lemath.core.domain.complex_number import ONE, Complex
from lemath.functions.exponential import exp, log, sqrt


def sinh(z: Complex) -> Complex:
    return exp(z).minus(exp(z.neg)).div(2.0)


def cosh(z: Complex) -> Complex:
    return exp(z).plus(exp(z.neg)).div(2.0)


def tanh(z: Complex) -> Complex:
    return sinh(z).div(cosh(z))


def coth(z: Complex) -> Complex:
    return cosh(z).div(sinh(z))


def csch(z: Complex) -> Complex:
    return ONE.div(sinh(z))


def sech(z: Complex) -> Complex:
    return ONE.div(cosh(z))


def asinh(z: Complex) -> Complex:
    return log(z.plus(sqrt(z.times(z).plus(1.0))))


def acosh(z: Complex) -> Complex:
    return log(z.plus(sqrt(z.times(z).minus(1.0))))


def atanh(z: Complex) -> Complex:
    return log(ONE.plus(z).div(ONE.minus(z))).div(2.0)


def acoth(z: Complex) -> Complex:
    return log(z.plus(1.0).div(z.minus(1.0))).div(2.0)


def acsch(z: Complex) -> Complex:
    return log(ONE.plus(sqrt(ONE.plus(z.times(z)))).div(z))


def asech(z: Complex) -> Complex:
    return log(ONE.plus(sqrt(ONE.minus(z.times(z)))).div(z))
