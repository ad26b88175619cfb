"""
Core math modules for complexplane

Real-valued primitives with IEEE-754 preserving behaviour.
"""

# Numerical Safeguards
from complexplane.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_COMPLEX_COMPARE_ABS,
    TWO_PI,
    # IEEE division
    ieee_divide,
    # Comparisons
    is_valid_float,
    within_tolerance,
    # Validation
    validate_branch,
    validate_tolerance,
)

# Real Operations
from complexplane.core.math.real_ops import (
    cos,
    cosh,
    exp,
    factorial,
    ln,
    log_b,
    power,
    sin,
    sinh,
)

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_COMPLEX_COMPARE_ABS",
    "TWO_PI",
    # Numerical Safeguards: IEEE division
    "ieee_divide",
    # Numerical Safeguards: Comparisons
    "is_valid_float",
    "within_tolerance",
    # Numerical Safeguards: Validation
    "validate_branch",
    "validate_tolerance",
    # Real Operations
    "cos",
    "cosh",
    "exp",
    "factorial",
    "ln",
    "log_b",
    "power",
    "sin",
    "sinh",
]
