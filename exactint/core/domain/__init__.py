"""
Domain models and value objects.

Contains the BigInteger value type, the int/BigInteger arithmetic facade and
the serializable snapshot model.
"""

from exactint.core.domain.big_integer import ONE, TWO, ZERO, BigInteger
from exactint.core.domain.arithmetic import (
    Arithmetic,
    ArithmeticConfig,
    Integer,
    add,
    big_int,
    compare,
    divide,
    exponentiate,
    from_number,
    from_string,
    less_than,
    multiply,
    parse_int,
    remainder,
    subtract,
    to_number,
    to_string,
    unary_minus,
)
from exactint.core.domain.snapshot import (
    BigIntegerSnapshot,
    from_snapshot,
    to_snapshot,
)

__all__ = [
    # Value type
    "BigInteger",
    "ZERO",
    "ONE",
    "TWO",
    # Facade
    "Arithmetic",
    "ArithmeticConfig",
    "Integer",
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
    # Snapshot
    "BigIntegerSnapshot",
    "from_snapshot",
    "to_snapshot",
]
