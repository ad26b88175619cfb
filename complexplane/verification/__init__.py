"""Verification runner for example computations."""

from .runner import (
    DEFAULT_CHECKS,
    Check,
    CheckResult,
    VerificationConfig,
    VerificationReport,
    run_checks,
    values_match,
)

__all__ = [
    "DEFAULT_CHECKS",
    "Check",
    "CheckResult",
    "VerificationConfig",
    "VerificationReport",
    "run_checks",
    "values_match",
]
