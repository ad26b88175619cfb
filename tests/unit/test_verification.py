"""
Tests for the verification runner

Checks:
1. Built-in checks all pass at the default tolerance
2. Failures accumulate in the returned report, not in shared state
3. Real / complex comparison rules
4. Logging of passing and failing checks
5. Report serialization against the verification_report contract
"""

import logging
import math

import pytest

from complexplane.core.contracts import validate_verification_report
from complexplane.core.domain import Complex
from complexplane.verification import (
    DEFAULT_CHECKS,
    Check,
    VerificationConfig,
    run_checks,
    values_match,
)

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def mixed_checks():
    """One passing and one failing check."""
    return [
        Check("one plus one", lambda: 1.0 + 1.0, 2.0),
        Check("wrong product", lambda: Complex(1, 1) * Complex(1, 1), Complex(0, 3)),
    ]


# =============================================================================
# CONFIG
# =============================================================================


class TestVerificationConfig:
    """Tests for VerificationConfig"""

    def test_default_tolerance(self) -> None:
        assert VerificationConfig().tolerance == 1e-12

    def test_invalid_tolerance(self) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            VerificationConfig(tolerance=-1e-9)


# =============================================================================
# COMPARISON
# =============================================================================


class TestValuesMatch:
    """Tests for values_match"""

    def test_floats(self) -> None:
        assert values_match(1.0, 1.0 + 1e-13, 1e-12)
        assert not values_match(1.0, 1.0 + 1e-11, 1e-12)

    def test_complex(self) -> None:
        assert values_match(Complex(1, 1), Complex(1, 1 + 1e-13), 1e-12)
        assert not values_match(Complex(1, 1), Complex(1, 1.1), 1e-12)

    def test_real_against_complex(self) -> None:
        assert values_match(2.0, Complex(2, 0), 1e-12)
        assert not values_match(2.0, Complex(2, 1), 1e-12)

    def test_nan_never_matches(self) -> None:
        assert not values_match(math.nan, math.nan, 1e-12)


# =============================================================================
# RUNNER
# =============================================================================


class TestRunChecks:
    """Tests for run_checks"""

    def test_default_checks_pass(self) -> None:
        report = run_checks(DEFAULT_CHECKS)
        assert report.total == len(DEFAULT_CHECKS)
        assert report.failures == ()
        assert report.all_passed

    def test_failures_accumulate_in_report(self, mixed_checks) -> None:
        report = run_checks(mixed_checks)
        assert report.total == 2
        assert report.failed == 1
        assert report.failures[0].description == "wrong product"
        assert report.failures[0].actual == Complex(0, 2)
        assert not report.all_passed

    def test_runs_are_independent(self, mixed_checks) -> None:
        """A second run does not inherit the first run's failures"""
        run_checks(mixed_checks)
        report = run_checks(mixed_checks[:1])
        assert report.failed == 0

    def test_tolerance_applies(self) -> None:
        checks = [Check("coarse", lambda: 1.001, 1.0)]
        assert run_checks(checks, VerificationConfig(tolerance=1e-2)).all_passed
        assert not run_checks(checks, VerificationConfig(tolerance=1e-6)).all_passed

    def test_check_exceptions_propagate(self) -> None:
        checks = [Check("bad parse", lambda: Complex.parse("1 +"), Complex(1, 0))]
        with pytest.raises(ValueError):
            run_checks(checks)

    def test_logging(self, mixed_checks, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="complexplane.verification.runner"):
            run_checks(mixed_checks)

        messages = [record.getMessage() for record in caplog.records]
        assert "one plus one: passed" in messages
        assert any(m.startswith("wrong product: failed") for m in messages)
        assert any(record.levelno == logging.WARNING for record in caplog.records)
        assert "2 checks, 1 failed" in messages[-1]


class TestReportSerialization:
    """Tests for VerificationReport.to_dict"""

    def test_conforms_to_contract(self, mixed_checks) -> None:
        data = run_checks(mixed_checks).to_dict()
        validate_verification_report(data)
        assert data["total"] == 2
        assert data["failed"] == 1
        assert data["results"][1]["actual"] == {"real": 0.0, "imaginary": 2.0}

    def test_default_report_serializes(self) -> None:
        data = run_checks(DEFAULT_CHECKS).to_dict()
        assert data["failed"] == 0
        assert len(data["results"]) == len(DEFAULT_CHECKS)
