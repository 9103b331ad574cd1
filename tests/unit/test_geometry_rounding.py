"""
Тесты для геометрических преобразований, округления и выбора по модулю

Проверяет:
1. rotate / scale / translate относительно начала координат и точки
2. round_ до целых и до digits знаков, half-away-from-zero
3. maximum / minimum с предпочтением первого аргумента при равенстве
"""

import math

import pytest

from lemath import (
    DEFAULT_TOLERANCE,
    I,
    ZERO,
    functions as cm,
    value_of,
    value_of_real,
)

SAMPLES = [
    value_of(2.0, 1.0),
    value_of(-1.5, 0.25),
    value_of(0.0, -3.0),
]


# =============================================================================
# GEOMETRY
# =============================================================================


class TestRotate:
    """Тесты rotate"""

    def test_quarter_turn_about_origin(self) -> None:
        assert cm.rotate(value_of(1.0, 0.0), math.pi / 2) == I

    def test_full_turn_is_identity(self) -> None:
        """Поворот на 2*pi возвращает исходное значение"""
        for z in SAMPLES:
            assert cm.rotate(z, math.tau) == z

    def test_rotation_about_point_and_back(self) -> None:
        point = value_of(1.0, -2.0)
        for z in SAMPLES:
            assert cm.rotate(cm.rotate(z, 0.7, point), -0.7, point) == z

    def test_rotation_about_coordinate_pair(self) -> None:
        """Точка как пара (x, y) эквивалентна Complex"""
        z = value_of(2.0, 1.0)
        assert cm.rotate(z, math.pi, (1.0, 1.0)) == value_of(0.0, 1.0)
        assert cm.rotate(z, 0.3, (1.0, 1.0)) == cm.rotate(z, 0.3, value_of(1.0, 1.0))

    def test_point_is_fixed(self) -> None:
        point = value_of(3.0, 3.0)
        assert cm.rotate(point, 1.234, point) == point

    def test_rotation_keeps_magnitude(self) -> None:
        for z in SAMPLES:
            assert cm.rotate(z, 2.5).magnitude == pytest.approx(z.magnitude)


class TestScale:
    """Тесты scale"""

    def test_real_factor_about_origin(self) -> None:
        assert cm.scale(value_of(1.0, 2.0), 2.0) == value_of(2.0, 4.0)

    def test_complex_factor_rotates(self) -> None:
        """Умножение на i — поворот на 90 градусов"""
        assert cm.scale(value_of(1.0, 0.0), I) == I

    def test_about_point(self) -> None:
        assert cm.scale(value_of(1.0, 2.0), 2.0, value_of(1.0, 1.0)) == value_of(1.0, 3.0)
        assert cm.scale(value_of(1.0, 2.0), 2.0, (1.0, 1.0)) == value_of(1.0, 3.0)

    def test_scale_and_back(self) -> None:
        point = (0.5, -0.5)
        for z in SAMPLES:
            assert cm.scale(cm.scale(z, 4.0, point), 0.25, point) == z


class TestTranslate:
    """Тесты translate"""

    def test_translate_complex(self) -> None:
        assert cm.translate(value_of(1.0, 2.0), value_of(3.0, 4.0)) == value_of(4.0, 6.0)

    def test_translate_pair(self) -> None:
        assert cm.translate(value_of(1.0, 2.0), (-1.0, -2.0)) == ZERO


# =============================================================================
# ROUNDING
# =============================================================================


class TestRound:
    """Тесты round_"""

    def test_round_to_integers(self) -> None:
        assert cm.round_(value_of(1.4, -1.6)) == value_of(1.0, -2.0)

    def test_round_half_away_from_zero(self) -> None:
        z = cm.round_(value_of(2.5, -2.5))
        assert (z.real, z.imag) == (3.0, -3.0)

    def test_round_to_digits(self) -> None:
        z = cm.round_(value_of(1.23456, -1.23456), 2)
        assert z.real == pytest.approx(1.23)
        assert z.imag == pytest.approx(-1.23)

    def test_round_digits_half(self) -> None:
        z = cm.round_(value_of(0.125, -0.125), 2)
        assert z.real == pytest.approx(0.13)
        assert z.imag == pytest.approx(-0.13)

    def test_round_zero_digits(self) -> None:
        assert cm.round_(value_of(2.5, 0.4), 0) == value_of(3.0, 0.0)

    def test_angle_to_four_digits(self) -> None:
        """Сценарий: arg(3 + 4i), округлённый до 4 знаков, ≈ 0.9273"""
        angle = value_of(3.0, 4.0).angle
        assert cm.round_(value_of_real(angle), 4).real == pytest.approx(0.9273)

    def test_negative_digits_raises(self) -> None:
        """Сценарий: round(2 + 2i, -1) → ValueError"""
        with pytest.raises(ValueError, match="digits must be greater than or equal to zero"):
            cm.round_(value_of(2.0, 2.0), -1)

    def test_non_finite_components_unchanged(self) -> None:
        z = cm.round_(value_of(math.nan, math.inf), 3)
        assert math.isnan(z.real)
        assert z.imag == math.inf

    def test_huge_digits_keeps_value(self) -> None:
        """Переполнение масштаба не портит значение"""
        z = cm.round_(value_of(1.5, -2.25), 400)
        assert (z.real, z.imag) == (1.5, -2.25)


# =============================================================================
# REDUCTION
# =============================================================================


class TestMinMax:
    """Тесты maximum / minimum"""

    def test_maximum(self) -> None:
        big = value_of(3.0, 4.0)
        small = value_of(1.0, 1.0)
        assert cm.maximum(big, small) is big
        assert cm.maximum(small, big) is big

    def test_minimum(self) -> None:
        big = value_of(3.0, 4.0)
        small = value_of(1.0, 1.0)
        assert cm.minimum(big, small) is small
        assert cm.minimum(small, big) is small

    def test_tie_prefers_first(self) -> None:
        """При равных модулях выбирается первый аргумент"""
        a = value_of(3.0, 4.0)
        b = value_of(4.0, 3.0)
        assert cm.maximum(a, b) is a
        assert cm.maximum(b, a) is b
        assert cm.minimum(a, b) is a
        assert cm.minimum(b, a) is b

    def test_tolerance_tie_prefers_first(self) -> None:
        """Разница модулей меньше толерантности — тоже ничья"""
        a = value_of_real(1.0)
        b = value_of_real(1.0 + 0.5 * DEFAULT_TOLERANCE)
        assert cm.minimum(b, a) is b
        assert cm.maximum(a, b) is a
