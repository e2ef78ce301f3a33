"""
BigIntegerSnapshot — Serializable Form of an Integer

Immutable Pydantic model holding the sign and the little-endian base-2^53
digits of an integer as plain ints. Matches the JSON Schema contract
``big_integer_snapshot.json`` (see exactint.core.contracts).

Example payload (2^53 + 5):
    {"sign": 0, "digits": [5, 1]}
"""

from typing import Any, Dict, List, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from exactint.core.domain import big_integer
from exactint.core.domain.arithmetic import Integer, big_int
from exactint.core.domain.big_integer import BigInteger
from exactint.core.math.exact_primitives import BASE_INT


class BigIntegerSnapshot(BaseModel):
    """
    Sign + digit vector of an integer.

    Immutable model (frozen=True); equal integers produce equal snapshots.
    """

    sign: int = Field(..., ge=0, le=1, description="0 for non-negative, 1 for negative")
    digits: List[int] = Field(
        default_factory=list,
        description="Little-endian digits in [0, 2^53), no most-significant zero",
    )

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_digits(cls, v: List[int]) -> List[int]:
        """Each digit in [0, BASE); no most-significant zero digit."""
        for digit in v:
            if digit < 0 or digit >= BASE_INT:
                raise ValueError(f"digit {digit} outside [0, {BASE_INT})")
        if v and v[-1] == 0:
            raise ValueError("most significant digit must not be zero")
        return v

    @model_validator(mode="after")
    def validate_zero_sign(self) -> "BigIntegerSnapshot":
        """Zero is always non-negative."""
        if not self.digits and self.sign != 0:
            raise ValueError("zero must have sign 0")
        return self

    @property
    def is_zero(self) -> bool:
        return not self.digits

    def to_big_integer(self) -> BigInteger:
        return big_integer.from_digits(self.sign, self.digits)

    def to_integer(self) -> Integer:
        """Most compact value (int when it fits the exact native range)."""
        return big_int(self.to_big_integer())


def to_snapshot(value: Integer) -> BigIntegerSnapshot:
    """
    Snapshot of an int or BigInteger.

    Raises:
        NativeRangeError: int outside the exact native range
    """
    big = value if isinstance(value, BigInteger) else big_integer.from_number(value)
    return BigIntegerSnapshot(
        sign=big.sign,
        digits=[int(digit) for digit in big.magnitude],
    )


def from_snapshot(snapshot: Union[BigIntegerSnapshot, Dict[str, Any]]) -> Integer:
    """
    Integer from a snapshot model or its dict form.

    Raises:
        pydantic.ValidationError: dict does not describe a valid snapshot
    """
    if not isinstance(snapshot, BigIntegerSnapshot):
        snapshot = BigIntegerSnapshot.model_validate(snapshot)
    return snapshot.to_integer()
