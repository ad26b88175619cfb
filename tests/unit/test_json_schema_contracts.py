"""
Tests for JSON Schema Contract Validators

Checks:
- Validity of the schemas themselves
- Validation of conforming data
- Detection of missing required fields, wrong types, extra properties
- Integration with the Complex model and the verification report
"""

import json
import math
from pathlib import Path

import pytest
from jsonschema import ValidationError

from complexplane.core.contracts import (
    ComplexNumberValidator,
    SchemaLoader,
    VerificationReportValidator,
    validate_complex_number,
    validate_verification_report,
)
from complexplane.core.domain import Complex

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_complex_number():
    """Conforming serialized complex number."""
    return {"real": 1.5, "imaginary": -2.0}


@pytest.fixture
def valid_report():
    """Conforming verification report."""
    return {
        "tolerance": 1e-12,
        "total": 2,
        "failed": 1,
        "results": [
            {
                "description": "Argument of 1 + i",
                "passed": True,
                "actual": 0.7853981633974483,
                "expected": 0.7853981633974483,
            },
            {
                "description": "Parsing (1 + i)",
                "passed": False,
                "actual": {"real": 1.0, "imaginary": 2.0},
                "expected": {"real": 1.0, "imaginary": 1.0},
            },
        ],
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Tests for SchemaLoader"""

    def test_loads_and_caches(self) -> None:
        loader = SchemaLoader()
        schema = loader.load_schema("complex_number")
        assert schema["title"] == "ComplexNumber"
        assert loader.load_schema("complex_number") is schema

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# COMPLEX NUMBER CONTRACT
# =============================================================================


class TestComplexNumberContract:
    """Tests for the complex_number contract"""

    def test_valid(self, valid_complex_number) -> None:
        validate_complex_number(valid_complex_number)

    def test_integers_accepted(self) -> None:
        validate_complex_number({"real": 1, "imaginary": 0})

    def test_model_output_conforms(self) -> None:
        validate_complex_number(Complex(3, -4).to_dict())
        validate_complex_number(Complex(3, -4).model_dump())

    def test_missing_imaginary(self) -> None:
        with pytest.raises(ValidationError):
            validate_complex_number({"real": 1.0})

    def test_wrong_type(self) -> None:
        with pytest.raises(ValidationError):
            validate_complex_number({"real": "1.0", "imaginary": 0.0})

    def test_additional_property(self) -> None:
        with pytest.raises(ValidationError):
            validate_complex_number({"real": 1.0, "imaginary": 0.0, "branch": 0})

    def test_validator_class(self) -> None:
        ComplexNumberValidator().validate({"real": 0.0, "imaginary": 0.0})
        with pytest.raises(ValidationError):
            ComplexNumberValidator().validate({})

    def test_from_dict_enforces_contract(self) -> None:
        """Pydantic coercion of "1.0" is not reached: the contract rejects it first"""
        with pytest.raises(ValidationError):
            Complex.from_dict({"real": "1.0", "imaginary": 0.0})
        with pytest.raises(ValidationError):
            Complex.from_dict({"real": 1.0, "imaginary": 0.0, "branch": 0})

    def test_from_dict_accepts_conforming_data(self) -> None:
        assert Complex.from_dict({"real": 1, "imaginary": -2}) == Complex(1, -2)

    def test_to_dict_of_degenerate_value_conforms(self) -> None:
        data = Complex(math.inf, math.nan).to_dict()
        assert data["real"] == math.inf
        assert math.isnan(data["imaginary"])


# =============================================================================
# VERIFICATION REPORT CONTRACT
# =============================================================================


class TestVerificationReportContract:
    """Tests for the verification_report contract"""

    def test_valid(self, valid_report) -> None:
        validate_verification_report(valid_report)

    def test_missing_results(self, valid_report) -> None:
        del valid_report["results"]
        with pytest.raises(ValidationError):
            validate_verification_report(valid_report)

    def test_negative_count(self, valid_report) -> None:
        valid_report["failed"] = -1
        with pytest.raises(ValidationError):
            validate_verification_report(valid_report)

    def test_zero_tolerance(self, valid_report) -> None:
        valid_report["tolerance"] = 0
        with pytest.raises(ValidationError):
            validate_verification_report(valid_report)

    def test_malformed_value(self, valid_report) -> None:
        valid_report["results"][0]["actual"] = {"real": 1.0}
        with pytest.raises(ValidationError):
            VerificationReportValidator().validate(valid_report)

    def test_empty_description(self, valid_report) -> None:
        valid_report["results"][0]["description"] = ""
        with pytest.raises(ValidationError):
            validate_verification_report(valid_report)
