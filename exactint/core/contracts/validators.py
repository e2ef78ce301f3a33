"""
JSON Schema Contract Validators

Validation of JSON payloads against the formal contracts shipped in
``exactint/core/contracts/schema/``, using the jsonschema library
(Draft 2020-12).

Schemas:
- big_integer_snapshot.json (BigIntegerSnapshot payload)

The schema checks structure, sign values, digit ranges and the non-negative
zero rule. The "no most-significant zero digit" rule is enforced by the
BigIntegerSnapshot model.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader for JSON Schema files.

    Looks up schemas in the ``schema/`` directory next to this module.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Cache of loaded schemas
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: schema name without extension (e.g. 'big_integer_snapshot')

        Returns:
            The schema as a dict

        Raises:
            FileNotFoundError: schema file does not exist
            json.JSONDecodeError: file is not valid JSON
            ValueError: file is not a valid Draft 2020-12 schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps a Draft202012Validator built from a named schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Validate data against the schema.

        Raises:
            ValidationError: data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """All validation errors, one per violated constraint."""
        return self.validator.iter_errors(data)


class BigIntegerSnapshotValidator(ContractValidator):
    """Validator for the big_integer_snapshot contract."""

    def __init__(self):
        super().__init__("big_integer_snapshot")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_big_integer_snapshot(data: Dict[str, Any]) -> None:
    """
    Validate a big_integer_snapshot payload.

    Raises:
        ValidationError: data does not match the schema
    """
    BigIntegerSnapshotValidator().validate(data)
