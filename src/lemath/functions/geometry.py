"""
Geometry — Поворот, масштабирование и перенос на комплексной плоскости

Операции относительно произвольной точки выполняются по схеме
"перенос в начало координат → операция → перенос обратно".
Точка задаётся как Complex или как пара вещественных координат (x, y).
"""

from lemath.core.domain.complex_number import Complex, value_of, value_of_polar

Point = Complex | tuple[float, float]


def _as_complex(point: Point) -> Complex:
    if isinstance(point, Complex):
        return point
    x, y = point
    return value_of(x, y)


def rotate(z: Complex, delta_angle: float, point: Point | None = None) -> Complex:
    """
    Поворот на delta_angle радиан вокруг начала координат или точки point.

    Examples:
        >>> str(rotate(value_of(2.0, 1.0), 3.141592653589793, (1.0, 1.0)))
        '0.0 + i1.0000000000000002'
    """
    if point is None:
        return value_of_polar(z.magnitude, z.angle + delta_angle)
    center = _as_complex(point)
    return rotate(z.minus(center), delta_angle).plus(center)


def scale(z: Complex, factor: "Complex | float", point: Point | None = None) -> Complex:
    """
    Масштабирование на factor (вещественный или Complex) относительно
    начала координат или точки point.
    """
    if point is None:
        return z.times(factor)
    center = _as_complex(point)
    return z.minus(center).times(factor).plus(center)


def translate(z: Complex, point: Point) -> Complex:
    """Перенос на вектор point."""
    return z.plus(_as_complex(point))
