"""
Reduction — Выбор по модулю

При равенстве модулей (в пределах толерантности) выбирается первый аргумент.
"""

from lemath.core.domain.complex_number import Complex


def maximum(z1: Complex, z2: Complex) -> Complex:
    """Значение с большим модулем."""
    return z1 if z1.is_greater_or_equal_to(z2) else z2


def minimum(z1: Complex, z2: Complex) -> Complex:
    """Значение с меньшим модулем."""
    return z1 if z1.is_lesser_or_equal_to(z2) else z2
