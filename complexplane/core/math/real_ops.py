"""
Real Operations: Real-Valued Helpers for Complex Identities

Real-valued building blocks used by the complex function family:
- Logarithms via the log-quotient identity: log_b(x) = ln(x) / ln(b)
- exp / power / sin / cos / sinh / cosh with native IEEE-754 behaviour
- Integer factorial

Python's math module raises OverflowError or ValueError ("math domain error")
where IEEE-754 hardware returns inf or NaN. Every helper here converts those
exceptions back into the IEEE-754 result so that degeneracy propagates as data.

FORMULAS:
    ln(x)      = log_e(x)
    log_b(x)   = ln(x) / ln(b)
    n!         = n * (n - 1) * ... * 2 * 1,  0! = 1
"""

import math

from complexplane.core.math.numerical_safeguards import ieee_divide

# =============================================================================
# LOGARITHMS
# =============================================================================


def ln(x: float) -> float:
    """
    Natural logarithm of x.

    Args:
        x: Real number

    Returns:
        ln(x), with ln(0) = -inf, ln(x < 0) = NaN, ln(NaN) = NaN, ln(inf) = inf

    Examples:
        >>> ln(math.e)
        1.0
        >>> ln(0.0)
        -inf
    """
    if math.isnan(x) or x < 0:
        return math.nan

    if x == 0:
        return -math.inf

    return math.log(x)


def log_b(x: float, base: float) -> float:
    """
    Logarithm of x in the given base.

    Args:
        x: Real number
        base: Logarithm base

    Returns:
        ln(x) / ln(base); base 1 gives +-inf (or NaN for x == 1)

    Examples:
        >>> log_b(2.0, 2.0)
        1.0
        >>> log_b(8.0, 2.0)
        3.0
    """
    return ieee_divide(ln(x), ln(base))


# =============================================================================
# EXPONENTIALS
# =============================================================================


def exp(x: float) -> float:
    """e ** x; overflow gives inf."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _is_odd_integer(y: float) -> bool:
    return math.isfinite(y) and float(y).is_integer() and int(y) % 2 == 1


def power(x: float, y: float) -> float:
    """
    x ** y with IEEE-754 special cases.

    Args:
        x: Base
        y: Exponent

    Returns:
        x ** y, where:
        - overflow gives inf (-inf for a negative base and odd integer y)
        - 0 ** negative gives inf (signed for -0.0 and odd integer y)
        - negative ** non-integer gives NaN

    Examples:
        >>> power(2.0, 10.0)
        1024.0
        >>> power(0.0, -1.0)
        inf
        >>> power(10.0, 400.0)
        inf
    """
    try:
        return math.pow(x, y)
    except OverflowError:
        if x < 0 and _is_odd_integer(y):
            return -math.inf
        return math.inf
    except ValueError:
        if x == 0:
            if _is_odd_integer(y):
                return math.copysign(math.inf, x)
            return math.inf
        return math.nan


# =============================================================================
# TRIGONOMETRIC / HYPERBOLIC
# =============================================================================


def sin(x: float) -> float:
    """sin(x); infinite input gives NaN."""
    if math.isinf(x):
        return math.nan
    return math.sin(x)


def cos(x: float) -> float:
    """cos(x); infinite input gives NaN."""
    if math.isinf(x):
        return math.nan
    return math.cos(x)


def sinh(x: float) -> float:
    """sinh(x); overflow gives +-inf with the sign of x."""
    try:
        return math.sinh(x)
    except OverflowError:
        return math.copysign(math.inf, x)


def cosh(x: float) -> float:
    """cosh(x); overflow gives inf."""
    try:
        return math.cosh(x)
    except OverflowError:
        return math.inf


# =============================================================================
# COMBINATORICS
# =============================================================================


def factorial(n: int) -> int:
    """
    Factorial of a non-negative integer.

    Args:
        n: Non-negative integer

    Returns:
        n!, with 0! = 1

    Raises:
        ValueError: If n is negative or not an integer

    Examples:
        >>> factorial(5)
        120
        >>> factorial(0)
        1
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"factorial is defined for integers only, got {n!r}")

    if n < 0:
        raise ValueError(f"factorial is undefined for negative integers, got {n}")

    return math.factorial(n)
