"""
Power: Branch-Aware Complex Exponentiation

Three overloads computed in polar form. Branch N adds 2 * pi * N to the angle
of a complex base, or to the result angle for a real base:

    z^p   (real p)     = r^p * (cos(p * theta), sin(p * theta))
    z^w   (complex w)  = e^(w * ln z)
    x^w   (real x > 0) = e^(c * ln x) * cis(d * ln x + 2 * pi * N)

For z^w with z = a + bi, w = c + di, rho = ln(a^2 + b^2) avoids a redundant
square root:

    magnitude = e^((c / 2) * rho - d * theta)
    angle     = (d / 2) * rho + c * theta

Zero bases have no defined argument, so their powers propagate NaN.
"""

import math

from complexplane.core.domain.complex_number import Complex
from complexplane.core.math import real_ops
from complexplane.core.math.numerical_safeguards import TWO_PI, validate_branch


def _require_real(value: float, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a real number or Complex, got {type(value).__name__}")
    return value


def pow_real_exponent(z: Complex, exponent: float, branch: int = 0) -> Complex:
    """
    z raised to a real exponent.

    Args:
        z: Complex base
        exponent: Real exponent p
        branch: Branch N (default: 0)

    Returns:
        r^p * (cos(p * theta), sin(p * theta)), theta = Arg(z) + 2 * pi * N

    Examples:
        >>> pow_real_exponent(Complex(0, 1), 2).is_close(Complex(-1, 0))
        True
    """
    validate_branch(branch)

    r_to_the_p = real_ops.power(z.modulus(), exponent)
    theta = z.argument() + TWO_PI * branch

    return Complex(
        r_to_the_p * real_ops.cos(exponent * theta),
        r_to_the_p * real_ops.sin(exponent * theta),
    )


def pow_complex_exponent(z: Complex, exponent: Complex, branch: int = 0) -> Complex:
    """
    z raised to a complex exponent, (a + bi)^(c + di).

    Args:
        z: Complex base
        exponent: Complex exponent w
        branch: Branch N (default: 0)

    Returns:
        e^(w * ln z) on branch N

    Examples:
        >>> i = Complex(0, 1)
        >>> pow_complex_exponent(i, i).is_close(Complex(math.exp(-math.pi / 2), 0))
        True
    """
    validate_branch(branch)

    a = z.real
    b = z.imaginary

    ln_r_squared = real_ops.ln(a * a + b * b)
    theta = z.argument() + TWO_PI * branch

    c = exponent.real
    d = exponent.imaginary

    magnitude = real_ops.exp((c / 2) * ln_r_squared - d * theta)
    angle = (d / 2) * ln_r_squared + c * theta

    return Complex(magnitude * real_ops.cos(angle), magnitude * real_ops.sin(angle))


def pow_real_base(base: float, exponent: Complex, branch: int = 0) -> Complex:
    """
    Positive real number raised to a complex exponent, x^(c + di).

    Only the angle term is shifted by the branch; the magnitude e^(c * ln x)
    is the same on every branch. A negative base has no real logarithm and
    yields NaN components.

    Args:
        base: Real base x
        exponent: Complex exponent w
        branch: Branch N (default: 0)

    Returns:
        e^(c * ln x) * (cos(d * ln x + 2 * pi * N), sin(d * ln x + 2 * pi * N))

    Examples:
        >>> pow_real_base(math.e, Complex(0, math.pi)).is_close(Complex(-1, 0))
        True
    """
    validate_branch(branch)
    _require_real(base, "base")

    ln_base = real_ops.ln(base)

    c = exponent.real
    d = exponent.imaginary

    magnitude = real_ops.exp(c * ln_base)
    angle = d * ln_base + TWO_PI * branch

    return Complex(magnitude * real_ops.cos(angle), magnitude * real_ops.sin(angle))


def power(base: Complex | float, exponent: Complex | float, branch: int = 0) -> Complex:
    """
    base ** exponent, dispatched on operand types.

    - Complex ** real      -> pow_real_exponent
    - Complex ** Complex   -> pow_complex_exponent
    - real ** Complex      -> pow_real_base
    - real ** real         -> pow_real_exponent on Complex(base, 0)

    Raises:
        TypeError: If an operand is neither Complex nor a real number
        ValueError: If branch is not an integer
    """
    if isinstance(base, Complex):
        if isinstance(exponent, Complex):
            return pow_complex_exponent(base, exponent, branch)
        return pow_real_exponent(base, _require_real(exponent, "exponent"), branch)

    _require_real(base, "base")

    if isinstance(exponent, Complex):
        return pow_real_base(base, exponent, branch)

    return pow_real_exponent(Complex(base, 0.0), _require_real(exponent, "exponent"), branch)


def exp(z: Complex | float) -> Complex:
    """e^z"""
    return pow_real_base(math.e, Complex.coerce(z))
