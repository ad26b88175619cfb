"""
Trigonometric: Circular Functions on the Complex Plane

Built from Euler's identity, with i * z = -b + ai for z = a + bi:

    sin(z) = (e^(iz) - e^(-iz)) / 2i
    cos(z) = (e^(iz) + e^(-iz)) / 2

tan = sin / cos; sec, csc, cot are the reciprocals of cos, sin, tan.
Poles give inf/NaN components instead of raising.
"""

from complexplane.core.domain.complex_number import Complex
from complexplane.transcendental.power import exp

_TWO_I = Complex(0.0, 2.0)
_TWO = Complex(2.0, 0.0)


def sin(z: Complex | float) -> Complex:
    """
    Sine of z.

    Examples:
        >>> import math
        >>> z = Complex(math.pi / 2, -math.log(2 + math.sqrt(3)))
        >>> sin(z).is_close(Complex(2, 0))
        True
    """
    z = Complex.coerce(z)
    a = z.real
    b = z.imaginary

    numerator = exp(Complex(-b, a)).sub(exp(Complex(b, -a)))

    return numerator.div(_TWO_I)


def cos(z: Complex | float) -> Complex:
    """Cosine of z."""
    z = Complex.coerce(z)
    a = z.real
    b = z.imaginary

    numerator = exp(Complex(-b, a)).add(exp(Complex(b, -a)))

    return numerator.div(_TWO)


def tan(z: Complex | float) -> Complex:
    return sin(z).div(cos(z))


def sec(z: Complex | float) -> Complex:
    return cos(z).reciprocal()


def csc(z: Complex | float) -> Complex:
    return sin(z).reciprocal()


def cot(z: Complex | float) -> Complex:
    return tan(z).reciprocal()
