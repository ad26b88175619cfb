"""
Logarithm: Branch-Aware Complex Logarithms

In polar form z = r * e^(i * theta):

    log_b(z) = log_b(r) + i * log_b(e) * (theta + 2 * pi * N)

The real axis carries the logarithm of the modulus, the imaginary axis the
branch-shifted angle scaled by 1 / ln(b). Branch N = 0 gives the principal
value.
"""

import math

from complexplane.core.domain.complex_number import Complex
from complexplane.core.math import real_ops
from complexplane.core.math.numerical_safeguards import TWO_PI, validate_branch


def log_base(z: Complex | float, base: float, branch: int = 0) -> Complex:
    """
    Logarithm of z in a real base.

    Args:
        z: Complex number (a real number is lifted to Complex(x, 0))
        base: Real logarithm base
        branch: Branch N, adds 2 * pi * N to the argument (default: 0)

    Returns:
        Complex(log_b(|z|, base), log_b(e, base) * (Arg(z) + 2 * pi * N))

    Raises:
        ValueError: If branch is not an integer

    Examples:
        >>> log_base(Complex(8, 0), 2)
        Complex(real=3.0, imaginary=0.0)
    """
    validate_branch(branch)
    z = Complex.coerce(z)

    theta = z.argument() + TWO_PI * branch

    return Complex(real_ops.log_b(z.modulus(), base), real_ops.log_b(math.e, base) * theta)


def ln(z: Complex | float, branch: int = 0) -> Complex:
    """
    Natural logarithm of z.

    Examples:
        >>> ln(Complex(-1, 0))
        Complex(real=0.0, imaginary=3.141592653589793)
    """
    return log_base(z, math.e, branch)
