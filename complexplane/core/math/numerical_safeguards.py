"""
Numerical Safeguards: IEEE-754 Preserving Primitives

Floating-point helpers shared by every layer of the library:
- Division that yields inf/NaN instead of raising ZeroDivisionError
- Absolute-tolerance float comparison
- Validation of branch selectors and tolerances

CRITICAL INVARIANTS:
1. Degenerate arithmetic never raises: inf/NaN propagate as data
2. Float comparisons always go through an explicit tolerance
3. All operations are deterministic and side-effect free
"""

import math
from typing import Final

# =============================================================================
# EPSILON PARAMETERS
# =============================================================================

# Absolute tolerance for component-wise comparison of complex values
EPS_COMPLEX_COMPARE_ABS: Final[float] = 1e-12

# Full turn in radians; a branch N shifts an angle by N * TWO_PI
TWO_PI: Final[float] = 2.0 * math.pi


# =============================================================================
# IEEE-754 DIVISION
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Division with native IEEE-754 semantics.

    Python raises ZeroDivisionError for float division by zero; this helper
    returns what the hardware would instead.

    Args:
        numerator: Dividend
        denominator: Divisor (may be +0.0 or -0.0)

    Returns:
        numerator / denominator, where for a zero denominator:
        - 0/0 and NaN/0 give NaN
        - x/±0 gives ±inf, the sign being the product of both signs

    Examples:
        >>> ieee_divide(6.0, 3.0)
        2.0
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator) or math.isnan(denominator):
        return math.nan

    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


# =============================================================================
# FLOAT CHECKS AND COMPARISONS
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check that a float is finite (neither NaN nor Inf).

    Args:
        value: Value to check

    Returns:
        True if finite, False for NaN or Inf
    """
    return math.isfinite(value)


def within_tolerance(a: float, b: float, tol: float = EPS_COMPLEX_COMPARE_ABS) -> bool:
    """
    Strict absolute-difference comparison: abs(a - b) < tol.

    Identical infinities compare equal; NaN never compares equal.
    """
    if a == b:
        return True
    return abs(a - b) < tol


# =============================================================================
# VALIDATION
# =============================================================================


def validate_branch(branch: int) -> int:
    """
    Validate a branch selector of a multi-valued function.

    Args:
        branch: Branch index N (adds 2 * pi * N to the angle)

    Returns:
        branch unchanged

    Raises:
        ValueError: If branch is not an integer (bool included)
    """
    if isinstance(branch, bool) or not isinstance(branch, int):
        raise ValueError(f"branch must be an integer, got {branch!r}")

    return branch


def validate_tolerance(value: float, name: str = "tolerance") -> None:
    """
    Validate that a comparison tolerance is a positive finite float.

    Raises:
        ValueError: If value <= 0 or NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
