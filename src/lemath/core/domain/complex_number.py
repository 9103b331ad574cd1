"""
Complex — Immutable complex number value type

Immutable Pydantic модель комплексного числа с двумя float компонентами
(real, imag). Любая "модифицирующая" операция создаёт новый экземпляр.

Создание — через фабрики модуля:
- value_of(real, imag)          прямоугольная форма
- value_of_real(real)           imag = 0
- value_of_imag(imag)           real = 0
- value_of_polar(magnitude, angle)  полярная форма (magnitude >= 0)
- value_of_random()             равномерно в [0, 1) x [0, 1)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. real и imag не меняются после создания (frozen=True)
2. Равенство — покомпонентно с толерантностью DEFAULT_TOLERANCE (строго <)
3. NaN/Inf принимаются и распространяются по правилам IEEE-754
4. hash() строится по точным значениям (real, imag) и НЕ согласован
   с толерантным равенством: равные по == значения могут иметь разный hash
"""

import math
import random as _random
from typing import Final

from pydantic import BaseModel, Field

from lemath.core.math.numerical_safeguards import (
    DEFAULT_TOLERANCE,
    ieee_cos,
    ieee_divide,
    ieee_sin,
    is_within_tolerance,
    validate_non_negative,
)

# Общий генератор для value_of_random. Методы random.Random атомарны в CPython,
# поэтому экземпляр можно разделять между потоками.
_RANDOM: Final[_random.Random] = _random.Random()


def _is_real(value: object) -> bool:
    return isinstance(value, (int, float))


# =============================================================================
# COMPLEX MODEL
# =============================================================================


class Complex(BaseModel):
    """
    Комплексное число z = real + i*imag.

    Immutable модель (frozen=True). Все операции возвращают новый экземпляр.
    Операнд арифметики и сравнений — Complex или вещественное число (int/float).
    """

    real: float = Field(..., description="Действительная часть")
    imag: float = Field(..., description="Мнимая часть")

    model_config = {"frozen": True}

    # -------------------------------------------------------------------------
    # Производные величины
    # -------------------------------------------------------------------------

    @property
    def default_tolerance(self) -> float:
        return DEFAULT_TOLERANCE

    @property
    def magnitude(self) -> float:
        """Модуль: sqrt(real^2 + imag^2)."""
        return math.sqrt(self.real * self.real + self.imag * self.imag)

    @property
    def angle(self) -> float:
        """Аргумент: atan2(imag, real) в диапазоне (-pi, pi]."""
        return math.atan2(self.imag, self.real)

    @property
    def neg(self) -> "Complex":
        return Complex(real=-self.real, imag=-self.imag)

    @property
    def conj(self) -> "Complex":
        return Complex(real=self.real, imag=-self.imag)

    @property
    def neg_conj(self) -> "Complex":
        return Complex(real=-self.real, imag=self.imag)

    @property
    def reciprocal(self) -> "Complex":
        """1 / z. Для нуля обе компоненты NaN."""
        return ONE.div(self)

    @property
    def neg_reciprocal(self) -> "Complex":
        """-1 / z. Для нуля обе компоненты NaN."""
        return NEGATIVE_ONE.div(self)

    @property
    def norm(self) -> "Complex":
        """
        Единичный вектор z / |z|.

        Для нуля возвращает ZERO (а не NaN, как дало бы деление).
        """
        r = self.magnitude
        if r == 0.0:
            return ZERO
        return self.div(r)

    @property
    def real_ratio(self) -> float:
        """|real| / |z|. NaN для нуля."""
        return ieee_divide(abs(self.real), self.magnitude)

    @property
    def imag_ratio(self) -> float:
        """|imag| / |z|. NaN для нуля."""
        return ieee_divide(abs(self.imag), self.magnitude)

    def to_polar(self) -> tuple[float, float]:
        """
        Полярная форма.

        Returns:
            (magnitude, angle)
        """
        return (self.magnitude, self.angle)

    # -------------------------------------------------------------------------
    # Withers
    # -------------------------------------------------------------------------

    def with_real(self, real: float) -> "Complex":
        return Complex(real=real, imag=self.imag)

    def with_imag(self, imag: float) -> "Complex":
        return Complex(real=self.real, imag=imag)

    def with_magnitude(self, magnitude: float) -> "Complex":
        """
        Новое значение с тем же аргументом и заданным модулем.

        Raises:
            ValueError: Если magnitude < 0
        """
        return value_of_polar(magnitude, self.angle)

    def with_angle(self, angle: float) -> "Complex":
        return value_of_polar(self.magnitude, angle)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def plus(self, other: "Complex | float") -> "Complex":
        """Сумма. Вещественный операнд добавляется только к real."""
        if isinstance(other, Complex):
            return Complex(real=self.real + other.real, imag=self.imag + other.imag)
        return Complex(real=self.real + other, imag=self.imag)

    def minus(self, other: "Complex | float") -> "Complex":
        """Разность. Вещественный операнд вычитается только из real."""
        if isinstance(other, Complex):
            return Complex(real=self.real - other.real, imag=self.imag - other.imag)
        return Complex(real=self.real - other, imag=self.imag)

    def times(self, other: "Complex | float") -> "Complex":
        """Произведение. Вещественный операнд масштабирует обе компоненты."""
        if isinstance(other, Complex):
            return Complex(
                real=self.real * other.real - self.imag * other.imag,
                imag=self.real * other.imag + self.imag * other.real,
            )
        return Complex(real=self.real * other, imag=self.imag * other)

    def div(self, other: "Complex | float") -> "Complex":
        """
        Частное.

        Complex делитель: умножение на сопряжённое и деление на |other|^2.
        Делитель ZERO даёт NaN в обеих компонентах.

        Вещественный делитель: каждая компонента делится независимо
        по IEEE-754 (x / 0 → ±Inf, 0 / 0 → NaN).
        """
        if isinstance(other, Complex):
            denominator = other.real * other.real + other.imag * other.imag
            return Complex(
                real=ieee_divide(self.real * other.real + self.imag * other.imag, denominator),
                imag=ieee_divide(self.imag * other.real - self.real * other.imag, denominator),
            )
        return Complex(
            real=ieee_divide(self.real, other),
            imag=ieee_divide(self.imag, other),
        )

    def __add__(self, other: object) -> "Complex":
        if isinstance(other, Complex) or _is_real(other):
            return self.plus(other)
        return NotImplemented

    def __radd__(self, other: object) -> "Complex":
        if _is_real(other):
            return self.plus(other)
        return NotImplemented

    def __sub__(self, other: object) -> "Complex":
        if isinstance(other, Complex) or _is_real(other):
            return self.minus(other)
        return NotImplemented

    def __rsub__(self, other: object) -> "Complex":
        if _is_real(other):
            return value_of_real(other).minus(self)
        return NotImplemented

    def __mul__(self, other: object) -> "Complex":
        if isinstance(other, Complex) or _is_real(other):
            return self.times(other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Complex":
        if _is_real(other):
            return self.times(other)
        return NotImplemented

    def __truediv__(self, other: object) -> "Complex":
        if isinstance(other, Complex) or _is_real(other):
            return self.div(other)
        return NotImplemented

    def __rtruediv__(self, other: object) -> "Complex":
        if _is_real(other):
            return value_of_real(other).div(self)
        return NotImplemented

    def __neg__(self) -> "Complex":
        return self.neg

    def __abs__(self) -> float:
        return self.magnitude

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.is_equal_to(ZERO)

    def is_equal_to(self, other: "Complex | float") -> bool:
        """
        Покомпонентное равенство с толерантностью DEFAULT_TOLERANCE.

        Вещественный операнд трактуется как Complex с нулевой мнимой частью.
        """
        if isinstance(other, Complex):
            return is_within_tolerance(self.real, other.real) and is_within_tolerance(
                self.imag, other.imag
            )
        return is_within_tolerance(self.real, other) and is_within_tolerance(self.imag, 0.0)

    def is_abs_equal_to(self, other: "Complex | float") -> bool:
        """Равенство модулей с толерантностью. Для float сравнивается abs(other)."""
        return is_within_tolerance(self.magnitude, _magnitude_of(other))

    def is_greater_than(self, other: "Complex | float") -> bool:
        return self.magnitude > _magnitude_of(other)

    def is_greater_or_equal_to(self, other: "Complex | float") -> bool:
        # Две независимые проверки: строгое > ИЛИ равенство модулей в пределах tol
        return self.is_greater_than(other) or self.is_abs_equal_to(other)

    def is_lesser_than(self, other: "Complex | float") -> bool:
        return self.magnitude < _magnitude_of(other)

    def is_lesser_or_equal_to(self, other: "Complex | float") -> bool:
        return self.is_lesser_than(other) or self.is_abs_equal_to(other)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Complex) or _is_real(other):
            return self.is_equal_to(other)
        return NotImplemented

    def __hash__(self) -> int:
        # По точным значениям: НЕ согласовано с толерантным __eq__
        return hash((self.real, self.imag))

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Complex) or _is_real(other):
            return self.is_lesser_than(other)
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if isinstance(other, Complex) or _is_real(other):
            return self.is_lesser_or_equal_to(other)
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if isinstance(other, Complex) or _is_real(other):
            return self.is_greater_than(other)
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        if isinstance(other, Complex) or _is_real(other):
            return self.is_greater_or_equal_to(other)
        return NotImplemented

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        """'<real> + i<|imag|>' или '<real> - i<|imag|>' (знак по imag >= 0)."""
        sign = " + i" if self.imag >= 0.0 else " - i"
        return f"{self.real!r}{sign}{abs(self.imag)!r}"


def _magnitude_of(value: "Complex | float") -> float:
    if isinstance(value, Complex):
        return value.magnitude
    return abs(value)


# =============================================================================
# ФАБРИКИ
# =============================================================================


def value_of(real: float, imag: float) -> Complex:
    """Прямоугольная форма real + i*imag. NaN/Inf допускаются."""
    return Complex(real=real, imag=imag)


def value_of_real(real: float) -> Complex:
    return Complex(real=real, imag=0.0)


def value_of_imag(imag: float) -> Complex:
    return Complex(real=0.0, imag=imag)


def value_of_polar(magnitude: float, angle: float) -> Complex:
    """
    Полярная форма: real = magnitude*cos(angle), imag = magnitude*sin(angle).

    Args:
        magnitude: Модуль (>= 0; NaN допускается)
        angle: Аргумент в радианах

    Raises:
        ValueError: Если magnitude < 0

    Examples:
        >>> str(value_of_polar(2.0, 0.0))
        '2.0 + i0.0'
        >>> value_of_polar(-1.0, 0.0)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ValueError: magnitude cannot be negative, got -1.0
    """
    validate_non_negative(magnitude, "magnitude")
    return Complex(real=magnitude * ieee_cos(angle), imag=magnitude * ieee_sin(angle))


def value_of_random(rng: _random.Random | None = None) -> Complex:
    """
    Случайное значение: real и imag независимо и равномерно в [0, 1).

    Args:
        rng: Генератор (default: общий генератор модуля)
    """
    source = rng if rng is not None else _RANDOM
    return Complex(real=source.random(), imag=source.random())


def from_builtin(z: complex) -> Complex:
    """Конверсия из встроенного complex."""
    return Complex(real=z.real, imag=z.imag)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[Complex] = value_of(0.0, 0.0)
ONE: Final[Complex] = value_of(1.0, 0.0)
NEGATIVE_ONE: Final[Complex] = value_of(-1.0, 0.0)
I: Final[Complex] = value_of(0.0, 1.0)
NEGATIVE_I: Final[Complex] = value_of(0.0, -1.0)
