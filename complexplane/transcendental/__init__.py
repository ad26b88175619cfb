"""
Transcendental functions of a complex variable.

Branch-aware logarithms and powers, plus the circular and hyperbolic
families built on them. Every function is pure and returns a new Complex.
"""

from .hyperbolic import cosh, coth, csch, sech, sinh, tanh
from .logarithm import ln, log_base
from .power import exp, pow_complex_exponent, pow_real_base, pow_real_exponent, power
from .trigonometric import cos, cot, csc, sec, sin, tan

__all__ = [
    # Logarithms
    "ln",
    "log_base",
    # Powers
    "exp",
    "pow_complex_exponent",
    "pow_real_base",
    "pow_real_exponent",
    "power",
    # Trigonometric
    "cos",
    "cot",
    "csc",
    "sec",
    "sin",
    "tan",
    # Hyperbolic
    "cosh",
    "coth",
    "csch",
    "sech",
    "sinh",
    "tanh",
]
