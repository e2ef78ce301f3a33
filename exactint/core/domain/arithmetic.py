"""
Arithmetic — Small-Value Fast Path Facade

Every operation accepts ``Integer = int | BigInteger`` operands and returns
the most compact exact result:
- both operands are ints within ±MAX_SAFE_INTEGER and the native result stays
  in range → plain int, no digit vectors involved
- otherwise operands are promoted to BigInteger, the exact result is computed
  by ``big_integer`` and demoted back to int when it fits one digit

Configuration (ArithmeticConfig):
- max_digits: bound on operand/result digit length (memory guard)
- default_radix: radix for from_string/to_string when none is given
- small_fast_path: False → results always stay BigInteger

Module-level functions delegate to a shared default Arithmetic instance.
"""

from dataclasses import dataclass
from typing import Final, Optional, Union

from exactint.core.domain import big_integer
from exactint.core.domain.big_integer import BigInteger
from exactint.core.errors import NativeRangeError, OperandTooLargeError
from exactint.core.logging_config import get_logger
from exactint.core.math.exact_primitives import MAX_SAFE_INTEGER
from exactint.core.math.radix import DEFAULT_RADIX, validate_radix

logger = get_logger(__name__)

Integer = Union[int, BigInteger]

# Bits per digit (BASE = 2^53)
DIGIT_BITS: Final[int] = MAX_SAFE_INTEGER.bit_length()

# Largest exponent for which 2^n still fits the native range
NATIVE_EXPONENT_LIMIT: Final[int] = DIGIT_BITS


def _is_small(x: object) -> bool:
    return (
        isinstance(x, int)
        and not isinstance(x, bool)
        and -MAX_SAFE_INTEGER <= x <= MAX_SAFE_INTEGER
    )


def _fits_native(value: int) -> bool:
    return -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ArithmeticConfig:
    """Configuration of the arithmetic facade.

    Defaults reproduce the unbounded library behaviour.
    """

    # Maximum digit length of an operand or result (None → unbounded)
    max_digits: Optional[int] = None

    # Radix used by from_string/to_string when the caller gives none
    default_radix: int = DEFAULT_RADIX

    # Demote results that fit the native range to int
    small_fast_path: bool = True

    def __post_init__(self) -> None:
        if self.max_digits is not None:
            if isinstance(self.max_digits, bool) or not isinstance(self.max_digits, int):
                raise ValueError(f"max_digits must be an int or None, got {self.max_digits!r}")
            if self.max_digits <= 0:
                raise ValueError(f"max_digits must be positive, got {self.max_digits}")
        validate_radix(self.default_radix)


# =============================================================================
# FACADE
# =============================================================================


class Arithmetic:
    """Integer arithmetic over ``int | BigInteger`` operands.

    Order of work per binary operation:
    1. Native fast path when both operands are small ints and the result fits
    2. Promotion of int operands to BigInteger (range and size checks)
    3. Exact BigInteger computation
    4. Demotion of the result to int when it fits (and the fast path is on)
    """

    def __init__(self, config: Optional[ArithmeticConfig] = None):
        """Initialize the facade.

        Args:
            config: facade configuration (optional, defaults used otherwise)
        """
        self.config = config or ArithmeticConfig()
        logger.debug(
            "Arithmetic facade created",
            extra={
                "extra_info": {
                    "max_digits": self.config.max_digits,
                    "default_radix": self.config.default_radix,
                    "small_fast_path": self.config.small_fast_path,
                }
            },
        )

    # ---- promotion / demotion ----

    @property
    def _fast(self) -> bool:
        return self.config.small_fast_path

    def _check_size(self, value: BigInteger, role: str) -> None:
        limit = self.config.max_digits
        if limit is not None and value.length > limit:
            logger.debug(
                "Digit limit exceeded",
                extra={"extra_info": {"role": role, "digits": value.length, "limit": limit}},
            )
            raise OperandTooLargeError(
                f"{role} exceeds the configured digit limit",
                {"role": role, "digits": value.length, "max_digits": limit},
            )

    def _promote(self, x: Integer) -> BigInteger:
        if isinstance(x, BigInteger):
            self._check_size(x, "operand")
            return x
        if isinstance(x, bool) or not isinstance(x, int):
            raise TypeError(f"expected int or BigInteger, got {type(x).__name__}")
        if not _fits_native(x):
            raise NativeRangeError("int operand exceeds the exact integer range", x)
        return big_integer.from_number(x)

    def _result(self, value: BigInteger) -> Integer:
        self._check_size(value, "result")
        if self._fast and value.length <= 1:
            return big_integer.to_int(value)
        return value

    def _native(self, value: int) -> Integer:
        """Result of a native computation that is known to fit."""
        if self._fast:
            return value
        return big_integer.from_number(value)

    # ---- conversion ----

    def big_int(self, x: Union[int, float, str, BigInteger]) -> Integer:
        """
        Integer from a number, a literal or a BigInteger.

        Raises:
            NativeRangeError: number outside the exact range / not integral
            MalformedLiteralError: bad literal
            TypeError: unsupported type
        """
        if isinstance(x, BigInteger):
            return self._result(x)
        if isinstance(x, str):
            return self.from_string(x)
        return self.from_number(x)

    def from_number(self, n: Union[int, float]) -> Integer:
        return self._result(big_integer.from_number(n))

    def from_string(self, text: str, radix: Optional[int] = None) -> Integer:
        """
        Parse a literal; radix defaults to config.default_radix.

        Raises:
            MalformedLiteralError, InvalidRadixError
        """
        if radix is None:
            radix = self.config.default_radix
        return self._result(big_integer.from_string(text, radix))

    def parse_int(self, text: str, radix: int = DEFAULT_RADIX) -> Integer:
        """Parse digits in an explicit radix (same as from_string)."""
        return self.from_string(text, radix)

    def to_string(self, x: Integer, radix: Optional[int] = None) -> str:
        if radix is None:
            radix = self.config.default_radix
        return big_integer.to_string(self._promote(x), radix)

    def to_number(self, x: Integer) -> Union[int, float]:
        """Native value: ints pass through, BigIntegers convert lossily to float."""
        if isinstance(x, BigInteger):
            return big_integer.to_number(x)
        self._promote(x)
        return x

    # ---- arithmetic ----

    def add(self, x: Integer, y: Integer) -> Integer:
        if _is_small(x) and _is_small(y):
            value = x + y
            if _fits_native(value):
                return self._native(value)
        return self._result(big_integer.add(self._promote(x), self._promote(y)))

    def subtract(self, x: Integer, y: Integer) -> Integer:
        if _is_small(x) and _is_small(y):
            value = x - y
            if _fits_native(value):
                return self._native(value)
        return self._result(big_integer.subtract(self._promote(x), self._promote(y)))

    def multiply(self, x: Integer, y: Integer) -> Integer:
        if _is_small(x) and _is_small(y):
            value = x * y
            if _fits_native(value):
                return self._native(value)

        if x is y:
            a = b = self._promote(x)
        else:
            a = self._promote(x)
            b = self._promote(y)

        limit = self.config.max_digits
        if limit is not None and a.length + b.length - 1 > limit:
            raise OperandTooLargeError(
                "product exceeds the configured digit limit",
                {"digits": a.length + b.length - 1, "max_digits": limit},
            )
        return self._result(big_integer.multiply(a, b))

    def divide(self, x: Integer, y: Integer) -> Integer:
        """
        Quotient truncated toward zero.

        Raises:
            DivisionByZeroError: y is zero
        """
        if _is_small(x) and _is_small(y) and y != 0:
            quotient = abs(x) // abs(y)
            return self._native(-quotient if (x < 0) != (y < 0) else quotient)
        return self._result(big_integer.divide(self._promote(x), self._promote(y)))

    def remainder(self, x: Integer, y: Integer) -> Integer:
        """
        Remainder of truncating division, with the sign of x.

        Raises:
            DivisionByZeroError: y is zero
        """
        if _is_small(x) and _is_small(y) and y != 0:
            rest = abs(x) % abs(y)
            return self._native(-rest if x < 0 else rest)
        return self._result(big_integer.remainder(self._promote(x), self._promote(y)))

    def exponentiate(self, x: Integer, y: Integer) -> Integer:
        """
        x ** y for a non-negative exponent.

        Raises:
            UnsupportedExponentError: negative exponent, or huge exponent with |x| > 1
            OperandTooLargeError: estimated result above max_digits
        """
        if _is_small(x) and _is_small(y) and 0 <= y < NATIVE_EXPONENT_LIMIT:
            value = x ** y
            if _fits_native(value):
                return self._native(value)

        base = self._promote(x)
        exponent = self._promote(y)
        self._check_power_size(base, exponent)
        return self._result(big_integer.exponentiate(base, exponent))

    def _check_power_size(self, base: BigInteger, exponent: BigInteger) -> None:
        limit = self.config.max_digits
        if limit is None or exponent.sign == 1 or exponent.length != 1:
            return
        if base.is_zero or (base.length == 1 and base.magnitude[0] == 1):
            return
        # lower bound: |base| >= 2^(base_bits - 1)
        base_bits = (base.length - 1) * DIGIT_BITS + int(base.magnitude[-1]).bit_length()
        min_bits = (base_bits - 1) * int(exponent.magnitude[0]) + 1
        estimated_digits = (min_bits - 1) // DIGIT_BITS + 1
        if estimated_digits > limit:
            raise OperandTooLargeError(
                "power exceeds the configured digit limit",
                {"estimated_digits": estimated_digits, "max_digits": limit},
            )

    def unary_minus(self, x: Integer) -> Integer:
        if _is_small(x):
            return self._native(-x)
        return self._result(big_integer.negate(self._promote(x)))

    # ---- comparison ----

    def compare(self, x: Integer, y: Integer) -> int:
        """Three-way comparison (-1, 0, +1), exact for mixed operands."""
        if _is_small(x) and _is_small(y):
            return (x > y) - (x < y)
        return big_integer.compare(self._promote(x), self._promote(y))

    def less_than(self, x: Integer, y: Integer) -> bool:
        if _is_small(x) and _is_small(y):
            return x < y
        return self.compare(x, y) < 0


# =============================================================================
# CONVENIENCE FUNCTIONS (default instance)
# =============================================================================

_DEFAULT_ARITHMETIC = Arithmetic()


def big_int(x: Union[int, float, str, BigInteger]) -> Integer:
    return _DEFAULT_ARITHMETIC.big_int(x)


def from_number(n: Union[int, float]) -> Integer:
    """
    Integer from an exact native number.

    Raises:
        NativeRangeError: NaN, infinity, fractional or out of ±MAX_SAFE_INTEGER
    """
    return _DEFAULT_ARITHMETIC.from_number(n)


def from_string(text: str, radix: Optional[int] = None) -> Integer:
    """
    Integer from ``[+|-] [0b|0o|0x] digits``.

    Examples:
        >>> from_string("12345")
        12345
        >>> to_string(from_string("-ff", 16), 10)
        '-255'
    """
    return _DEFAULT_ARITHMETIC.from_string(text, radix)


def parse_int(text: str, radix: int = DEFAULT_RADIX) -> Integer:
    return _DEFAULT_ARITHMETIC.parse_int(text, radix)


def to_string(x: Integer, radix: Optional[int] = None) -> str:
    """
    Text of an Integer in radix 2..36 (default 10).

    Raises:
        InvalidRadixError: radix outside [2, 36]
    """
    return _DEFAULT_ARITHMETIC.to_string(x, radix)


def to_number(x: Integer) -> Union[int, float]:
    return _DEFAULT_ARITHMETIC.to_number(x)


def add(x: Integer, y: Integer) -> Integer:
    return _DEFAULT_ARITHMETIC.add(x, y)


def subtract(x: Integer, y: Integer) -> Integer:
    return _DEFAULT_ARITHMETIC.subtract(x, y)


def multiply(x: Integer, y: Integer) -> Integer:
    return _DEFAULT_ARITHMETIC.multiply(x, y)


def divide(x: Integer, y: Integer) -> Integer:
    return _DEFAULT_ARITHMETIC.divide(x, y)


def remainder(x: Integer, y: Integer) -> Integer:
    return _DEFAULT_ARITHMETIC.remainder(x, y)


def exponentiate(x: Integer, y: Integer) -> Integer:
    return _DEFAULT_ARITHMETIC.exponentiate(x, y)


def unary_minus(x: Integer) -> Integer:
    return _DEFAULT_ARITHMETIC.unary_minus(x)


def compare(x: Integer, y: Integer) -> int:
    return _DEFAULT_ARITHMETIC.compare(x, y)


def less_than(x: Integer, y: Integer) -> bool:
    return _DEFAULT_ARITHMETIC.less_than(x, y)
