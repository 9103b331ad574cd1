"""
AngleUnit — Конверсия единиц измерения углов

Единицы: радианы, градусы, грады, обороты. Конверсия идёт через радианы
по фиксированным коэффициентам (полный оборот = 2*pi рад = 360 град =
400 град(ов) = 1 оборот).

Нормализация приводит угол к полуинтервалу (-pi, pi] (в радианах) или
к эквивалентному полуинтервалу в выбранной единице.
"""

import math
from enum import Enum
from typing import Final

from lemath.core.math.numerical_safeguards import ieee_fmod

PI: Final[float] = math.pi
TAU: Final[float] = math.tau


class AngleUnit(str, Enum):
    """Единица измерения угла"""

    RADIANS = "radians"
    DEGREES = "degrees"
    GRADIANS = "gradians"
    TURNS = "turns"

    def to_radians(self, value: float) -> float:
        """Конверсия value (в этой единице) → радианы."""
        if self is AngleUnit.RADIANS:
            return value
        return value * TAU / _UNITS_PER_TURN[self]

    def from_radians(self, radians: float) -> float:
        """Конверсия радианы → эта единица."""
        if self is AngleUnit.RADIANS:
            return radians
        return radians * _UNITS_PER_TURN[self] / TAU

    def convert_from(self, value: float, unit: "AngleUnit") -> float:
        """
        Конверсия value из единицы unit в эту единицу.

        Examples:
            >>> AngleUnit.DEGREES.convert_from(0.5, AngleUnit.TURNS)
            180.0
        """
        return self.from_radians(unit.to_radians(value))

    def convert_to(self, value: float, unit: "AngleUnit") -> float:
        """
        Конверсия value из этой единицы в единицу unit.

        Examples:
            >>> AngleUnit.DEGREES.convert_to(90.0, AngleUnit.GRADIANS)
            100.0
        """
        return unit.from_radians(self.to_radians(value))

    def normalize(self, angle: float) -> float:
        """Нормализация угла в этой единице, см. normalize_angle."""
        return normalize_angle(angle, self)


# Количество единиц в полном обороте
_UNITS_PER_TURN: Final[dict[AngleUnit, float]] = {
    AngleUnit.RADIANS: TAU,
    AngleUnit.DEGREES: 360.0,
    AngleUnit.GRADIANS: 400.0,
    AngleUnit.TURNS: 1.0,
}


def _normalize_radians(angle: float) -> float:
    angle = ieee_fmod(angle, TAU)
    if angle > PI:
        angle -= TAU
    elif angle <= -PI:
        angle += TAU
    return angle


def normalize_angle(angle: float, unit: AngleUnit = AngleUnit.RADIANS) -> float:
    """
    Приведение угла к полуинтервалу (-pi, pi] в единице unit.

    Алгоритм:
        1. Конверсия в радианы
        2. fmod(angle, 2*pi) (знак делимого)
        3. Коррекция границ: > pi → -2*pi; <= -pi → +2*pi
        4. Конверсия обратно в unit

    Неконечный угол (NaN, ±Inf) даёт NaN.

    Examples:
        >>> normalize_angle(3 * math.pi / 2)
        -1.5707963267948966
        >>> normalize_angle(-180.0, AngleUnit.DEGREES)
        180.0
    """
    return unit.from_radians(_normalize_radians(unit.to_radians(angle)))
