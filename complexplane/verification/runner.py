"""
Verification Runner: Example Computations Against Expected Values

Drives named example computations through an absolute-tolerance comparison
and returns a report. Failures accumulate in the returned report; the runner
keeps no state between runs.

Comparison:
    float   : abs(actual - expected) < tolerance
    Complex : both components within tolerance
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Union

from complexplane.core.contracts.validators import validate_verification_report
from complexplane.core.domain.complex_number import Complex
from complexplane.core.math.numerical_safeguards import (
    EPS_COMPLEX_COMPARE_ABS,
    validate_tolerance,
    within_tolerance,
)
from complexplane.core.math.real_ops import factorial, ln as real_ln, log_b
from complexplane.transcendental import ln, power, sin

logger = logging.getLogger(__name__)

Value = Union[float, Complex]


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class VerificationConfig:
    """Verification run configuration."""

    # Absolute tolerance of every comparison
    tolerance: float = EPS_COMPLEX_COMPARE_ABS

    def __post_init__(self) -> None:
        validate_tolerance(self.tolerance)


# =============================================================================
# CHECKS AND RESULTS
# =============================================================================


@dataclass(frozen=True)
class Check:
    """Named example computation with its expected value."""

    description: str
    compute: Callable[[], Value]
    expected: Value


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single check."""

    description: str
    passed: bool
    actual: Value
    expected: Value


def _serialize(value: Value) -> Any:
    if isinstance(value, Complex):
        return value.to_dict()
    return float(value)


@dataclass(frozen=True)
class VerificationReport:
    """Outcome of a verification run."""

    results: tuple[CheckResult, ...]
    tolerance: float

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def failures(self) -> tuple[CheckResult, ...]:
        return tuple(result for result in self.results if not result.passed)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def all_passed(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize the report.

        Returns:
            dict conforming to the verification_report contract

        Raises:
            ValidationError: If the serialized report violates the contract
        """
        data = {
            "tolerance": self.tolerance,
            "total": self.total,
            "failed": self.failed,
            "results": [
                {
                    "description": result.description,
                    "passed": result.passed,
                    "actual": _serialize(result.actual),
                    "expected": _serialize(result.expected),
                }
                for result in self.results
            ],
        }
        validate_verification_report(data)
        return data


# =============================================================================
# RUNNER
# =============================================================================


def values_match(actual: Value, expected: Value, tolerance: float) -> bool:
    """
    Compare two values with an absolute tolerance.

    A real value compared against a Complex is lifted to Complex(x, 0).
    """
    if isinstance(actual, Complex) or isinstance(expected, Complex):
        return Complex.coerce(actual).is_close(Complex.coerce(expected), tolerance)
    return within_tolerance(actual, expected, tolerance)


def run_checks(
    checks: Iterable[Check],
    config: VerificationConfig | None = None,
) -> VerificationReport:
    """
    Evaluate every check and collect the results.

    Args:
        checks: Checks to run, in order
        config: Run configuration (default: VerificationConfig())

    Returns:
        VerificationReport with one CheckResult per check

    Exceptions raised by a check's computation propagate to the caller.
    """
    if config is None:
        config = VerificationConfig()

    results = []
    for check in checks:
        actual = check.compute()
        passed = values_match(actual, check.expected, config.tolerance)

        if passed:
            logger.info("%s: passed", check.description)
        else:
            logger.warning("%s: failed (%s returned)", check.description, actual)

        results.append(
            CheckResult(
                description=check.description,
                passed=passed,
                actual=actual,
                expected=check.expected,
            )
        )

    report = VerificationReport(results=tuple(results), tolerance=config.tolerance)
    logger.info(
        "Comparisons accurate within %g: %d checks, %d failed",
        config.tolerance,
        report.total,
        report.failed,
    )
    return report


# =============================================================================
# BUILT-IN CHECKS
# =============================================================================

DEFAULT_CHECKS: tuple[Check, ...] = (
    Check("Factorial (5!)", lambda: float(factorial(5)), 120.0),
    Check("Parsing (1 + i)", lambda: Complex.parse("1 + i"), Complex(1, 1)),
    Check("Parsing (1 - 2i)", lambda: Complex.parse("1 - 2i"), Complex(1, -2)),
    Check("Parsing (-1 + 2i)", lambda: Complex.parse("-1 + 2i"), Complex(-1, 2)),
    Check("Parsing (-1 - i)", lambda: Complex.parse("-1 - i"), Complex(-1, -1)),
    Check(
        "Parsing (1.912871 - 7.837i)",
        lambda: Complex.parse("1.912871 - 7.837i"),
        Complex(1.912871, -7.837),
    ),
    Check("Logarithm base 2 of 2", lambda: log_b(2, 2), 1.0),
    Check("Natural logarithm of e^2", lambda: real_ln(math.e * math.e), 2.0),
    Check("Natural logarithm of i", lambda: ln(Complex(0, 1)), Complex(0, math.pi / 2)),
    Check("Natural logarithm of -1", lambda: ln(Complex(-1, 0)), Complex(0, math.pi)),
    Check("Argument of 1 + i", lambda: Complex(1, 1).argument(), math.pi / 4),
    Check("Argument of -1 + i", lambda: Complex(-1, 1).argument(), 3 * math.pi / 4),
    Check("Argument of -1 - i", lambda: Complex(-1, -1).argument(), -3 * math.pi / 4),
    Check("Argument of 1 - i", lambda: Complex(1, -1).argument(), -math.pi / 4),
    Check("(1 + i)^2", lambda: power(Complex(1, 1), 2), Complex(0, 2)),
    Check(
        "i^i",
        lambda: power(Complex(0, 1), Complex(0, 1)),
        Complex(math.exp(-math.pi / 2), 0),
    ),
    Check("e^(i pi)", lambda: power(math.e, Complex(0, math.pi)), Complex(-1, 0)),
    Check("(1 + i) + (2 - 3i)", lambda: Complex(1, 1) + Complex(2, -3), Complex(3, -2)),
    Check("(2 - 5i) - (3 + 3i)", lambda: Complex(2, -5) - Complex(3, 3), Complex(-1, -8)),
    Check("(1 + i)(2 + 2i)", lambda: Complex(1, 1) * Complex(2, 2), Complex(0, 4)),
    Check("(6 - 4i) / (2 - 2i)", lambda: Complex(6, -4) / Complex(2, -2), Complex(2.5, 0.5)),
    Check(
        "sin(pi/2 - ln(2 + sqrt(3))i)",
        lambda: sin(Complex(math.pi / 2, -math.log(2 + math.sqrt(3)))),
        Complex(2, 0),
    ),
)
