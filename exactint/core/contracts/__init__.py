"""
Contract Validation Module

JSON Schema contracts for exactint payloads.
"""

from .validators import (
    BigIntegerSnapshotValidator,
    ContractValidator,
    SchemaLoader,
    validate_big_integer_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntegerSnapshotValidator",
    # Functions
    "validate_big_integer_snapshot",
]
