"""
Complex: Immutable Value Type for a + bi

Immutable Pydantic model holding the real and imaginary components of a
complex number, with modulus, argument, conjugate, field arithmetic and the
textual notation (parse / format).

Two values are interchangeable when their components are equal; use
Complex.is_close for equality within floating-point tolerance.

Division by a zero-modulus divisor follows IEEE-754: the result carries
inf/NaN components, nothing is raised.
"""

import math
from typing import Any

from pydantic import BaseModel, Field

from complexplane.core.contracts.validators import validate_complex_number
from complexplane.core.domain.parsing import ParserConfig, parse_components
from complexplane.core.math.numerical_safeguards import (
    EPS_COMPLEX_COMPARE_ABS,
    ieee_divide,
    within_tolerance,
)
from complexplane.core.math.real_ops import cos, sin


class Complex(BaseModel):
    """
    Complex number a + bi.

    Immutable model (frozen=True). NaN and Infinity components are stored
    verbatim.

    Examples:
        >>> Complex(1, 1) + Complex(2, -3)
        Complex(real=3.0, imaginary=-2.0)
        >>> str(Complex(1, -2))
        '1.0-2.0i'
    """

    real: float = Field(0.0, description="Real component")
    imaginary: float = Field(0.0, description="Imaginary component")

    model_config = {"frozen": True}

    def __init__(self, real: float = 0.0, imaginary: float = 0.0) -> None:
        super().__init__(real=real, imaginary=imaginary)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str, config: ParserConfig | None = None) -> "Complex":
        """
        Parse "a+bi" notation.

        Raises:
            ParseError: If the text is malformed
        """
        real, imaginary = parse_components(text, config)
        return cls(real, imaginary)

    @classmethod
    def from_polar(cls, modulus: float, argument: float) -> "Complex":
        """r * e^(i * theta) in rectangular form."""
        return cls(modulus * cos(argument), modulus * sin(argument))

    @classmethod
    def from_builtin(cls, value: complex) -> "Complex":
        return cls(value.real, value.imag)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Complex":
        """
        Build from {"real": ..., "imaginary": ...}.

        Raises:
            ValidationError: If data violates the complex_number contract
        """
        validate_complex_number(data)
        return cls.model_validate(data)

    @classmethod
    def coerce(cls, value: "Complex | float") -> "Complex":
        """Lift a real number to Complex(value, 0); Complex passes through."""
        if isinstance(value, Complex):
            return value
        return cls(value, 0.0)

    # -------------------------------------------------------------------------
    # Polar form
    # -------------------------------------------------------------------------

    def modulus(self) -> float:
        """
        |z| = sqrt(a^2 + b^2), distance from the origin.

        Returns:
            Non-negative float, 0 only at the origin
        """
        return math.hypot(self.real, self.imaginary)

    def argument(self) -> float:
        """
        Principal argument Arg(z) in (-pi, pi].

        Uses 2 * atan2(b, |z| + a), which stays accurate next to the
        negative real axis where atan2(b, a) jumps.

        Returns:
            - 0 for a > 0, b == 0
            - pi for a < 0, b == 0
            - NaN at the origin, where the argument is undefined
        """
        a = self.real
        b = self.imaginary

        if b != 0:
            return 2.0 * math.atan2(b, self.modulus() + a)
        if a > 0:
            return 0.0
        if a < 0:
            return math.pi

        return math.nan

    def to_polar(self) -> tuple[float, float]:
        """(modulus, argument)"""
        return self.modulus(), self.argument()

    # -------------------------------------------------------------------------
    # Field arithmetic
    # -------------------------------------------------------------------------

    def conjugate(self) -> "Complex":
        """a + bi -> a - bi"""
        return Complex(self.real, -self.imaginary)

    def add(self, other: "Complex") -> "Complex":
        return Complex(self.real + other.real, self.imaginary + other.imaginary)

    def sub(self, other: "Complex") -> "Complex":
        return Complex(self.real - other.real, self.imaginary - other.imaginary)

    def mul(self, other: "Complex") -> "Complex":
        """(a + bi)(c + di) = (ac - bd) + (ad + bc)i"""
        a, b = self.real, self.imaginary
        c, d = other.real, other.imaginary
        return Complex(a * c - b * d, a * d + b * c)

    def div(self, other: "Complex") -> "Complex":
        """
        (a + bi) / (c + di) = ((ac + bd) + (bc - ad)i) / (c^2 + d^2)

        A zero divisor yields inf/NaN components (IEEE-754), never an exception.
        """
        a, b = self.real, self.imaginary
        c, d = other.real, other.imaginary
        denominator = c * c + d * d
        return Complex(
            ieee_divide(a * c + b * d, denominator),
            ieee_divide(b * c - a * d, denominator),
        )

    def reciprocal(self) -> "Complex":
        """1 / z"""
        return Complex(1.0, 0.0).div(self)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def is_close(self, other: "Complex | float", abs_tol: float = EPS_COMPLEX_COMPARE_ABS) -> bool:
        """Component-wise comparison: abs difference < abs_tol for both parts."""
        other = Complex.coerce(other)
        return within_tolerance(self.real, other.real, abs_tol) and within_tolerance(
            self.imaginary, other.imaginary, abs_tol
        )

    def is_finite(self) -> bool:
        return math.isfinite(self.real) and math.isfinite(self.imaginary)

    # -------------------------------------------------------------------------
    # Text / serialization
    # -------------------------------------------------------------------------

    def format(self) -> str:
        """
        "<real><sign><imag>i" display text.

        The sign is '+' when the sign bit of the imaginary part is clear,
        otherwise the '-' carried by the number itself. The coefficient is
        always shown. Display only: negative zero and NaN do not round-trip
        through parse.
        """
        op = "+" if math.copysign(1.0, self.imaginary) > 0 else ""
        return f"{self.real!r}{op}{self.imaginary!r}i"

    def to_dict(self) -> dict[str, float]:
        """Serialize to a dict conforming to the complex_number contract."""
        data = {"real": self.real, "imaginary": self.imaginary}
        validate_complex_number(data)
        return data

    # -------------------------------------------------------------------------
    # Python protocols
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.format()

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)

    def __abs__(self) -> float:
        return self.modulus()

    def __neg__(self) -> "Complex":
        return Complex(-self.real, -self.imaginary)

    def __add__(self, other: "Complex | float") -> "Complex":
        if not isinstance(other, (Complex, int, float)):
            return NotImplemented
        return self.add(Complex.coerce(other))

    def __radd__(self, other: float) -> "Complex":
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Complex.coerce(other).add(self)

    def __sub__(self, other: "Complex | float") -> "Complex":
        if not isinstance(other, (Complex, int, float)):
            return NotImplemented
        return self.sub(Complex.coerce(other))

    def __rsub__(self, other: float) -> "Complex":
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Complex.coerce(other).sub(self)

    def __mul__(self, other: "Complex | float") -> "Complex":
        if not isinstance(other, (Complex, int, float)):
            return NotImplemented
        return self.mul(Complex.coerce(other))

    def __rmul__(self, other: float) -> "Complex":
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Complex.coerce(other).mul(self)

    def __truediv__(self, other: "Complex | float") -> "Complex":
        if not isinstance(other, (Complex, int, float)):
            return NotImplemented
        return self.div(Complex.coerce(other))

    def __rtruediv__(self, other: float) -> "Complex":
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Complex.coerce(other).div(self)
