"""
complexplane: complex-number arithmetic

Immutable Complex value type, textual notation, and branch-aware
logarithm / power / trigonometric / hyperbolic functions.
"""

from complexplane.core.domain import Complex, ParseError, ParserConfig
from complexplane.core.math import factorial, log_b
from complexplane.core.math import ln as real_ln
from complexplane.transcendental import (
    cos,
    cosh,
    cot,
    coth,
    csc,
    csch,
    exp,
    ln,
    log_base,
    pow_complex_exponent,
    pow_real_base,
    pow_real_exponent,
    power,
    sec,
    sech,
    sin,
    sinh,
    tan,
    tanh,
)

__version__ = "0.1.0"

__all__ = [
    # Value type
    "Complex",
    "ParseError",
    "ParserConfig",
    # Real helpers
    "factorial",
    "log_b",
    "real_ln",
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
