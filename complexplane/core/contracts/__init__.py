"""
Contract Validation Module

Validation of the JSON contracts of complexplane.
"""

from .validators import (
    ComplexNumberValidator,
    ContractValidator,
    SchemaLoader,
    VerificationReportValidator,
    validate_complex_number,
    validate_verification_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ComplexNumberValidator",
    "VerificationReportValidator",
    # Functions
    "validate_complex_number",
    "validate_verification_report",
]
