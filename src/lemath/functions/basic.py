"""
Basic — Константы и покомпонентные функции

Функциональные формы свойств Complex (модуль, аргумент, сопряжение и т.д.)
и часто используемые вещественные константы в виде Complex.
"""

import math
from typing import Final

from lemath.core.domain.complex_number import (
    Complex,
    value_of_random,
    value_of_real,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

E: Final[Complex] = value_of_real(math.e)
PHI: Final[Complex] = value_of_real((1.0 + math.sqrt(5.0)) / 2.0)
PI: Final[Complex] = value_of_real(math.pi)
TAU: Final[Complex] = value_of_real(math.tau)


# =============================================================================
# ПОКОМПОНЕНТНЫЕ ФУНКЦИИ
# =============================================================================


def magnitude(z: Complex) -> float:
    return z.magnitude


def angle(z: Complex) -> float:
    return z.angle


def real(z: Complex) -> float:
    return z.real


def imag(z: Complex) -> float:
    return z.imag


def neg(z: Complex) -> Complex:
    return z.neg


def conj(z: Complex) -> Complex:
    return z.conj


def neg_conj(z: Complex) -> Complex:
    return z.neg_conj


def reciprocal(z: Complex) -> Complex:
    return z.reciprocal


def neg_reciprocal(z: Complex) -> Complex:
    return z.neg_reciprocal


def random() -> Complex:
    """Случайное значение в [0, 1) x [0, 1)."""
    return value_of_random()
