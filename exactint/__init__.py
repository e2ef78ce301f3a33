"""
exactint — arbitrary-precision integers on float digits

Exact integer arithmetic whose digits are binary64 floats below 2^53,
with a small-value fast path that keeps results in the exact native range
as plain ints.

Usage:
    >>> import exactint
    >>> exactint.to_string(exactint.add(exactint.from_string("9007199254740991"), 1))
    '9007199254740992'
"""

from exactint.core.domain import (
    ONE,
    TWO,
    ZERO,
    Arithmetic,
    ArithmeticConfig,
    BigInteger,
    BigIntegerSnapshot,
    Integer,
    add,
    big_int,
    compare,
    divide,
    exponentiate,
    from_number,
    from_snapshot,
    from_string,
    less_than,
    multiply,
    parse_int,
    remainder,
    subtract,
    to_number,
    to_snapshot,
    to_string,
    unary_minus,
)
from exactint.core.errors import (
    BigIntegerError,
    DivisionByZeroError,
    DivisionInvariantError,
    InternalConsistencyError,
    InvalidRadixError,
    MalformedLiteralError,
    NativeRangeError,
    OperandTooLargeError,
    UnsupportedExponentError,
)
from exactint.core.logging_config import get_logger, setup_logging
from exactint.core.math.exact_primitives import BASE, MAX_SAFE_INTEGER

__version__ = "1.0.0"

__all__ = [
    # Constants
    "BASE",
    "MAX_SAFE_INTEGER",
    # Value types
    "BigInteger",
    "Integer",
    "ZERO",
    "ONE",
    "TWO",
    # Facade
    "Arithmetic",
    "ArithmeticConfig",
    "add",
    "big_int",
    "compare",
    "divide",
    "exponentiate",
    "from_number",
    "from_string",
    "less_than",
    "multiply",
    "parse_int",
    "remainder",
    "subtract",
    "to_number",
    "to_string",
    "unary_minus",
    # Snapshots
    "BigIntegerSnapshot",
    "from_snapshot",
    "to_snapshot",
    # Errors
    "BigIntegerError",
    "DivisionByZeroError",
    "DivisionInvariantError",
    "InternalConsistencyError",
    "InvalidRadixError",
    "MalformedLiteralError",
    "NativeRangeError",
    "OperandTooLargeError",
    "UnsupportedExponentError",
    # Logging
    "get_logger",
    "setup_logging",
]
