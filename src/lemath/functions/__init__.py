"""
Elementary complex functions.

Stateless functions over Complex values, grouped by family. Every function
returns a new value and never mutates its arguments.
"""

from lemath.functions.basic import (
    E,
    PHI,
    PI,
    TAU,
    angle,
    conj,
    imag,
    magnitude,
    neg,
    neg_conj,
    neg_reciprocal,
    random,
    real,
    reciprocal,
)
from lemath.functions.exponential import cbrt, exp, log, sqrt
from lemath.functions.geometry import Point, rotate, scale, translate
from lemath.functions.hyperbolic import (
    acosh,
    acoth,
    acsch,
    asech,
    asinh,
    atanh,
    cosh,
    coth,
    csch,
    sech,
    sinh,
    tanh,
)
from lemath.functions.power import power
from lemath.functions.reduction import maximum, minimum
from lemath.functions.rounding import round_
from lemath.functions.trigonometric import (
    acos,
    acot,
    acsc,
    asec,
    asin,
    atan,
    cos,
    cot,
    csc,
    sec,
    sin,
    tan,
)

__all__ = [
    # Basic: constants
    "E",
    "PHI",
    "PI",
    "TAU",
    # Basic: functions
    "angle",
    "conj",
    "imag",
    "magnitude",
    "neg",
    "neg_conj",
    "neg_reciprocal",
    "random",
    "real",
    "reciprocal",
    # Exponential
    "cbrt",
    "exp",
    "log",
    "sqrt",
    # Power
    "power",
    # Trigonometric
    "acos",
    "acot",
    "acsc",
    "asec",
    "asin",
    "atan",
    "cos",
    "cot",
    "csc",
    "sec",
    "sin",
    "tan",
    # Hyperbolic
    "acosh",
    "acoth",
    "acsch",
    "asech",
    "asinh",
    "atanh",
    "cosh",
    "coth",
    "csch",
    "sech",
    "sinh",
    "tanh",
    # Rounding
    "round_",
    # Geometry
    "Point",
    "rotate",
    "scale",
    "translate",
    # Reduction
    "maximum",
    "minimum",
]
