"""
Exception hierarchy for exactint.

All errors are deterministic: they describe malformed input or a violated
precondition and are never retriable. Each error carries a ``context`` dict
with the operation and the offending values.

Hierarchy:
    BigIntegerError (base)
    ├── MalformedLiteralError      (also ValueError)
    ├── InvalidRadixError          (also ValueError)
    ├── NativeRangeError           (also ValueError)
    ├── UnsupportedExponentError   (also ValueError)
    ├── DivisionByZeroError        (also ZeroDivisionError)
    ├── DivisionInvariantError     (also ArithmeticError)
    ├── OperandTooLargeError       (also ArithmeticError)
    └── InternalConsistencyError   (also AssertionError, fatal)

Usage:
    from exactint.core.errors import DivisionByZeroError

    try:
        divide(a, b)
    except DivisionByZeroError as e:
        logger.error(f"Division failed: {e}")
        logger.error(f"Context: {e.context}")
"""

from typing import Any, Dict, Optional


class BigIntegerError(Exception):
    """
    Base exception for all exactint errors.

    Supports:
    - a human readable message
    - contextual information (dict)
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        base_msg = self.message

        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            base_msg += f" | Context: {context_str}"

        return base_msg

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, context={self.context!r})"


# =============================================================================
# INPUT ERRORS
# =============================================================================


class MalformedLiteralError(BigIntegerError, ValueError):
    """
    Text could not be parsed as an integer literal.

    Causes:
    - empty text or empty digit run after sign/prefix
    - a character that is not a digit of the radix
    """

    def __init__(self, message: str, text: Optional[str] = None, position: Optional[int] = None):
        context: Dict[str, Any] = {}
        if text is not None:
            context["text"] = text
        if position is not None:
            context["position"] = position
        super().__init__(message, context)


class InvalidRadixError(BigIntegerError, ValueError):
    """Radix is not an integer in [2, 36]."""

    def __init__(self, radix: Any):
        super().__init__(
            "radix argument must be an integer between 2 and 36",
            {"radix": radix},
        )
        self.radix = radix


class NativeRangeError(BigIntegerError, ValueError):
    """
    A native number is not an exact integer within the safe range.

    Causes:
    - NaN or infinity
    - non-integral float
    - magnitude above MAX_SAFE_INTEGER
    """

    def __init__(self, message: str, value: Any):
        super().__init__(message, {"value": value})
        self.value = value


class UnsupportedExponentError(BigIntegerError, ValueError):
    """Exponent is negative, or too large while the base is not 0, 1 or -1."""


# =============================================================================
# ARITHMETIC ERRORS
# =============================================================================


class DivisionByZeroError(BigIntegerError, ZeroDivisionError):
    """Divisor magnitude is zero."""

    def __init__(self, operation: str):
        super().__init__("division by zero", {"operation": operation})


class DivisionInvariantError(BigIntegerError, ArithmeticError):
    """Double-width division called with high part >= divisor."""


class OperandTooLargeError(BigIntegerError, ArithmeticError):
    """Operand or result exceeds the configured digit limit."""


class InternalConsistencyError(BigIntegerError, AssertionError):
    """
    Engine invariant broken (for example a non-zero leftover after
    de-normalizing a remainder).

    Indicates a defect in the division engine, never a user input problem.
    """
