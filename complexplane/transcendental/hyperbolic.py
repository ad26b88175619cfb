"""
Hyperbolic: Hyperbolic Functions on the Complex Plane

Direct component formulas for z = a + bi:

    sinh(z) = cos(b) * sinh(a) + i * sin(b) * cosh(a)
    cosh(z) = cos(b) * cosh(a) + i * sin(b) * sinh(a)

tanh = sinh / cosh; sech, csch, coth are the reciprocals of cosh, sinh, tanh.
"""

from complexplane.core.domain.complex_number import Complex
from complexplane.core.math import real_ops


def sinh(z: Complex | float) -> Complex:
    """Hyperbolic sine of z."""
    z = Complex.coerce(z)
    a = z.real
    b = z.imaginary

    return Complex(
        real_ops.cos(b) * real_ops.sinh(a),
        real_ops.sin(b) * real_ops.cosh(a),
    )


def cosh(z: Complex | float) -> Complex:
    """Hyperbolic cosine of z."""
    z = Complex.coerce(z)
    a = z.real
    b = z.imaginary

    return Complex(
        real_ops.cos(b) * real_ops.cosh(a),
        real_ops.sin(b) * real_ops.sinh(a),
    )


def tanh(z: Complex | float) -> Complex:
    return sinh(z).div(cosh(z))


def sech(z: Complex | float) -> Complex:
    return cosh(z).reciprocal()


def csch(z: Complex | float) -> Complex:
    return sinh(z).reciprocal()


def coth(z: Complex | float) -> Complex:
    return tanh(z).reciprocal()
