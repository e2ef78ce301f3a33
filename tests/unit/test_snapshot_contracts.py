"""
Tests for BigIntegerSnapshot and the JSON Schema contract

Checked:
- The shipped schema is a valid Draft 2020-12 schema
- Snapshots of ints and BigIntegers match the contract
- Required fields, types, digit ranges and the non-negative zero rule
- Pydantic model validation, immutability and conversion back to Integer
- SchemaLoader error paths
"""

import json

import pytest
from jsonschema import Draft202012Validator, ValidationError as SchemaValidationError
from pydantic import ValidationError

from exactint.core.contracts import (
    BigIntegerSnapshotValidator,
    SchemaLoader,
    validate_big_integer_snapshot,
)
from exactint.core.domain import BigIntegerSnapshot, from_snapshot, to_snapshot
from exactint.core.domain.big_integer import BigInteger, from_int, to_int
from exactint.core.errors import NativeRangeError
from exactint.core.math.exact_primitives import BASE_INT, MAX_SAFE_INTEGER


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_snapshot():
    """-(2^53 + 5)"""
    return {"sign": 1, "digits": [5, 1]}


@pytest.fixture
def zero_snapshot():
    return {"sign": 0, "digits": []}


@pytest.fixture
def validator():
    return BigIntegerSnapshotValidator()


# =============================================================================
# SCHEMA
# =============================================================================


class TestSchemaLoader:
    """Schema discovery and meta-validation."""

    def test_schema_is_valid(self) -> None:
        schema = SchemaLoader().load_schema("big_integer_snapshot")
        Draft202012Validator.check_schema(schema)
        assert schema["title"] == "big_integer_snapshot"

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("big_integer_snapshot") is loader.load_schema(
            "big_integer_snapshot"
        )

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_missing_schema(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader(tmp_path).load_schema("nothing")

    def test_invalid_schema(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 5}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# CONTRACT VALIDATION
# =============================================================================


class TestSnapshotContract:
    """Payload validation with jsonschema."""

    def test_valid(self, validator, valid_snapshot, zero_snapshot) -> None:
        validator.validate(valid_snapshot)
        validator.validate(zero_snapshot)
        validate_big_integer_snapshot({"sign": 0, "digits": [MAX_SAFE_INTEGER]})

    def test_missing_required(self, validator) -> None:
        with pytest.raises(SchemaValidationError):
            validator.validate({"sign": 0})
        with pytest.raises(SchemaValidationError):
            validator.validate({"digits": [1]})

    def test_additional_property(self, validator, valid_snapshot) -> None:
        with pytest.raises(SchemaValidationError):
            validator.validate({**valid_snapshot, "radix": 10})

    @pytest.mark.parametrize("sign", [2, -1, "0", True, None])
    def test_invalid_sign(self, validator, sign) -> None:
        assert not validator.is_valid({"sign": sign, "digits": [1]})

    @pytest.mark.parametrize("digit", [-1, BASE_INT, 1.5, "7"])
    def test_invalid_digit(self, validator, digit) -> None:
        assert not validator.is_valid({"sign": 0, "digits": [digit]})

    def test_negative_zero(self, validator) -> None:
        with pytest.raises(SchemaValidationError):
            validator.validate({"sign": 1, "digits": []})

    def test_errors_listed(self, validator) -> None:
        errors = list(validator.iter_errors({"sign": 3, "digits": [-1], "x": 0}))
        assert len(errors) == 3

    def test_generated_snapshots_match(self, validator) -> None:
        for n in [0, -1, MAX_SAFE_INTEGER, -(10**40), 2**200]:
            value = n if abs(n) <= MAX_SAFE_INTEGER else from_int(n)
            validator.validate(to_snapshot(value).model_dump())


# =============================================================================
# PYDANTIC MODEL
# =============================================================================


class TestSnapshotModel:
    """BigIntegerSnapshot model."""

    def test_to_snapshot(self) -> None:
        snapshot = to_snapshot(from_int(-(BASE_INT + 5)))
        assert snapshot.sign == 1
        assert snapshot.digits == [5, 1]
        assert not snapshot.is_zero

    def test_small_int(self) -> None:
        assert to_snapshot(0).is_zero
        assert to_snapshot(-7).model_dump() == {"sign": 1, "digits": [7]}

    def test_int_out_of_range(self) -> None:
        with pytest.raises(NativeRangeError):
            to_snapshot(2**60)

    def test_back_to_integer(self, valid_snapshot, zero_snapshot) -> None:
        value = from_snapshot(valid_snapshot)
        assert isinstance(value, BigInteger)
        assert to_int(value) == -(BASE_INT + 5)
        assert from_snapshot(zero_snapshot) == 0
        assert from_snapshot({"sign": 1, "digits": [3]}) == -3

    def test_json_round_trip(self) -> None:
        snapshot = to_snapshot(from_int(10**50))
        restored = BigIntegerSnapshot.model_validate_json(snapshot.model_dump_json())
        assert restored == snapshot
        assert to_int(restored.to_big_integer()) == 10**50

    def test_most_significant_zero_rejected(self) -> None:
        """Accepted by the schema, rejected by the model."""
        payload = {"sign": 0, "digits": [1, 0]}
        validate_big_integer_snapshot(payload)
        with pytest.raises(ValidationError, match="most significant"):
            BigIntegerSnapshot(**payload)

    @pytest.mark.parametrize(
        "payload",
        [
            {"sign": 1, "digits": []},
            {"sign": 2, "digits": [1]},
            {"sign": 0, "digits": [BASE_INT]},
            {"sign": 0, "digits": [-3]},
        ],
    )
    def test_invalid_payloads(self, payload) -> None:
        with pytest.raises(ValidationError):
            BigIntegerSnapshot.model_validate(payload)
        with pytest.raises(ValueError):
            from_snapshot(payload)

    def test_frozen(self) -> None:
        snapshot = to_snapshot(5)
        with pytest.raises(ValidationError):
            snapshot.sign = 1
