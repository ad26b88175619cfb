"""
JSON Schema Contract Validators

Validation of serialized data against the formal JSON Schema contracts
shipped with the package. Uses the jsonschema library.

Schemas:
- complex_number.json (serialized Complex)
- verification_report.json (verification runner output)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader of JSON Schema files.

    Schemas live in the schema/ directory next to this module.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Cache of loaded schemas
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'complex_number')

        Returns:
            Loaded schema as dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation of the schema itself
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Shared loader instance
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class of contract validators.

    Wraps validation of data against one JSON Schema.
    """

    def __init__(self, schema_name: str):
        """
        Args:
            schema_name: Name of the schema to validate against
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Validate data against the schema.

        Raises:
            ValidationError: If the data does not conform
        """
        self.validator.validate(data)


class ComplexNumberValidator(ContractValidator):
    """Validator of the complex_number contract."""

    def __init__(self):
        super().__init__("complex_number")


class VerificationReportValidator(ContractValidator):
    """Validator of the verification_report contract."""

    def __init__(self):
        super().__init__("verification_report")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_complex_number(data: Dict[str, Any]) -> None:
    """
    Validate serialized complex number data.

    Raises:
        ValidationError: If the data does not conform to the schema
    """
    ComplexNumberValidator().validate(data)


def validate_verification_report(data: Dict[str, Any]) -> None:
    """
    Validate a serialized verification report.

    Raises:
        ValidationError: If the data does not conform to the schema
    """
    VerificationReportValidator().validate(data)
