"""
BigInteger — Signed Arbitrary-Precision Integer

Immutable value (frozen dataclass) pairing a sign with a magnitude of float
digits. All operations here work on BigInteger operands only; the compact
int/BigInteger facade lives in ``exactint.core.domain.arithmetic``.

CRITICAL INVARIANTS:
1. sign is 0 (non-negative) or 1 (negative)
2. magnitude is a tuple of integer-valued floats in [0, BASE) without
   most-significant zero digits
3. Zero is always sign=0 with an empty magnitude (no negative zero)
4. Operations never mutate an operand; they return new values

SIGN RULES:
    a + b, a - b : sign of the operand with the larger magnitude
                   (subtraction negates b first)
    a * b, a / b : sign(a) XOR sign(b)
    a % b        : sign(a)  (truncating division)
"""

import math
from dataclasses import dataclass
from typing import Final, Optional, Sequence, Tuple, Union

from exactint.core.errors import NativeRangeError, UnsupportedExponentError
from exactint.core.logging_config import get_logger
from exactint.core.math.digit_vectors import (
    add_magnitudes,
    compare_magnitudes,
    is_unit,
    multiply_magnitudes,
    subtract_magnitudes,
)
from exactint.core.math.exact_primitives import BASE, BASE_INT, MAX_SAFE_INTEGER
from exactint.core.math.long_division import divide_magnitudes, divmod_magnitudes
from exactint.core.math.radix import (
    DEFAULT_RADIX,
    format_digits,
    parse_digits,
    split_literal,
    validate_radix,
)

logger = get_logger(__name__)


# =============================================================================
# VALUE TYPE
# =============================================================================


@dataclass(frozen=True, eq=False)
class BigInteger:
    """
    Signed integer of unbounded magnitude.

    Build values with the module constructors (from_number, from_string,
    from_int, from_digits) rather than the raw dataclass constructor, which
    does not re-check the invariants.
    """

    sign: int
    magnitude: Tuple[float, ...]

    @property
    def length(self) -> int:
        """Number of base-BASE digits (0 for zero)."""
        return len(self.magnitude)

    @property
    def is_zero(self) -> bool:
        return not self.magnitude

    @property
    def is_negative(self) -> bool:
        return self.sign == 1

    # ---- Python protocols ----

    def __str__(self) -> str:
        return to_string(self)

    def __repr__(self) -> str:
        return f"BigInteger('{to_string(self)}')"

    def __int__(self) -> int:
        return to_int(self)

    def __float__(self) -> float:
        return to_number(self)

    def __bool__(self) -> bool:
        return bool(self.magnitude)

    def __neg__(self) -> "BigInteger":
        return negate(self)

    def __abs__(self) -> "BigInteger":
        return _create(0, self.magnitude)

    def __hash__(self) -> int:
        return hash(to_int(self))

    def __eq__(self, other: object) -> bool:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return self.sign == other_big.sign and self.magnitude == other_big.magnitude

    def __lt__(self, other: object) -> bool:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return compare(self, other_big) < 0

    def __le__(self, other: object) -> bool:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return compare(self, other_big) <= 0

    def __gt__(self, other: object) -> bool:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return compare(self, other_big) > 0

    def __ge__(self, other: object) -> bool:
        other_big = _coerce(other)
        if other_big is None:
            return NotImplemented
        return compare(self, other_big) >= 0


def _create(sign: int, digits: Sequence[float]) -> BigInteger:
    """Wrap a normalized magnitude; zero always gets sign 0."""
    magnitude = tuple(digits)
    return BigInteger(sign if magnitude else 0, magnitude)


ZERO: Final[BigInteger] = BigInteger(0, ())
ONE: Final[BigInteger] = BigInteger(0, (1.0,))
TWO: Final[BigInteger] = BigInteger(0, (2.0,))


def _coerce(value: object) -> Optional[BigInteger]:
    """Exact view of a BigInteger or Python int for comparisons; None otherwise."""
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int):
        return from_int(value)
    return None


# =============================================================================
# CONSTRUCTION / CONVERSION
# =============================================================================


def from_number(n: Union[int, float]) -> BigInteger:
    """
    BigInteger from a native number.

    Args:
        n: int or float holding an exact integer with |n| <= MAX_SAFE_INTEGER

    Raises:
        NativeRangeError: NaN, infinity, fractional value or out of range
        TypeError: bool or non-numeric input

    Examples:
        >>> from_number(-5)
        BigInteger('-5')
    """
    if isinstance(n, bool) or not isinstance(n, (int, float)):
        raise TypeError(f"expected int or float, got {type(n).__name__}")

    if isinstance(n, float):
        if math.isnan(n) or math.isinf(n):
            raise NativeRangeError("number must be finite", n)
        if not n.is_integer():
            raise NativeRangeError("number must be an integer", n)

    if n > MAX_SAFE_INTEGER or n < -MAX_SAFE_INTEGER:
        raise NativeRangeError("number exceeds the exact integer range", n)

    if n == 0:
        return ZERO
    return BigInteger(1 if n < 0 else 0, (float(abs(n)),))


def from_string(text: str, radix: Optional[int] = None) -> BigInteger:
    """
    Parse ``[+|-] [0b|0o|0x] digits``.

    Args:
        text: literal
        radix: digit radix; None means 10 (any prefix honoured)

    Raises:
        MalformedLiteralError: empty literal, empty digit run, invalid character
        InvalidRadixError: radix outside [2, 36]

    Examples:
        >>> from_string("-ff", 16)
        BigInteger('-255')
        >>> from_string("0x10")
        BigInteger('16')
    """
    sign, start, effective_radix = split_literal(text, radix)
    return _create(sign, parse_digits(text, start, effective_radix))


def from_int(n: int) -> BigInteger:
    """Exact BigInteger from a Python int of any size."""
    if n == 0:
        return ZERO
    sign = 1 if n < 0 else 0
    n = abs(n)
    digits = []
    while n:
        n, digit = divmod(n, BASE_INT)
        digits.append(float(digit))
    return BigInteger(sign, tuple(digits))


def from_digits(sign: int, digits: Sequence[int]) -> BigInteger:
    """
    BigInteger from a sign and little-endian base-BASE digits, with checks.

    Raises:
        ValueError: sign not 0/1, digit outside [0, BASE), most-significant
            zero digit, or negative zero
    """
    if sign not in (0, 1):
        raise ValueError(f"sign must be 0 or 1, got {sign!r}")
    for digit in digits:
        if digit < 0 or digit >= BASE or digit != int(digit):
            raise ValueError(f"digit {digit!r} outside [0, {BASE_INT})")
    if digits and digits[-1] == 0:
        raise ValueError("most significant digit must not be zero")
    if not digits and sign != 0:
        raise ValueError("zero must be non-negative")
    return BigInteger(sign, tuple(float(d) for d in digits))


def to_int(a: BigInteger) -> int:
    """Exact Python int value."""
    n = 0
    for digit in reversed(a.magnitude):
        n = n * BASE_INT + int(digit)
    return -n if a.sign == 1 else n


def to_number(a: BigInteger) -> float:
    """
    Best-effort float value.

    Exact for one digit. For longer magnitudes only the two leading digits
    are combined; the second is nudged to odd-up when lower digits are
    non-zero, so the result is an approximation, not a correctly rounded value.
    Magnitudes beyond the float range give +-inf.
    """
    mag = a.magnitude
    if not mag:
        return 0.0
    if len(mag) == 1:
        return -mag[0] if a.sign == 1 else mag[0]

    x = mag[-1]
    y = mag[-2]
    i = len(mag) - 3
    while i >= 0 and mag[i] == 0:
        i -= 1
    if i >= 0 and y % 2 == 1:
        y += 1.0

    try:
        z = (x * BASE + y) * math.pow(BASE, len(mag) - 2)
    except OverflowError:
        z = math.inf
    return -z if a.sign == 1 else z


def to_string(a: BigInteger, radix: int = DEFAULT_RADIX) -> str:
    """
    Text in the given radix with a leading '-' for negatives.

    Raises:
        InvalidRadixError: radix outside [2, 36]
    """
    validate_radix(radix)
    text = format_digits(a.magnitude, radix)
    return "-" + text if a.sign == 1 else text


# =============================================================================
# COMPARISON
# =============================================================================


def compare(a: BigInteger, b: BigInteger) -> int:
    """
    Three-way comparison: sign first, then magnitude.

    Returns:
        -1, 0 or +1
    """
    c = compare_magnitudes(a.magnitude, b.magnitude) if a.sign == b.sign else 1
    return -c if a.sign == 1 else c


def less_than(a: BigInteger, b: BigInteger) -> bool:
    return compare(a, b) < 0


# =============================================================================
# ARITHMETIC
# =============================================================================


def _add_or_subtract(a: BigInteger, b: BigInteger, is_subtraction: bool) -> BigInteger:
    b_sign = 1 - b.sign if is_subtraction else b.sign

    z = compare_magnitudes(a.magnitude, b.magnitude)
    result_sign = b_sign if z < 0 else a.sign
    larger, smaller = (b.magnitude, a.magnitude) if z < 0 else (a.magnitude, b.magnitude)

    if not smaller:
        return _create(result_sign, larger)

    if a.sign != b_sign:
        return _create(result_sign, subtract_magnitudes(larger, smaller))
    return _create(result_sign, add_magnitudes(larger, smaller))


def add(a: BigInteger, b: BigInteger) -> BigInteger:
    return _add_or_subtract(a, b, False)


def subtract(a: BigInteger, b: BigInteger) -> BigInteger:
    return _add_or_subtract(a, b, True)


def multiply(a: BigInteger, b: BigInteger) -> BigInteger:
    return _create(a.sign ^ b.sign, multiply_magnitudes(a.magnitude, b.magnitude))


def divide(a: BigInteger, b: BigInteger) -> BigInteger:
    """
    Quotient truncated toward zero.

    Raises:
        DivisionByZeroError: if b is zero
    """
    return _create(a.sign ^ b.sign, divide_magnitudes(a.magnitude, b.magnitude, True))


def remainder(a: BigInteger, b: BigInteger) -> BigInteger:
    """
    Remainder of truncating division; takes the sign of a.

    Raises:
        DivisionByZeroError: if b is zero
    """
    return _create(a.sign, divide_magnitudes(a.magnitude, b.magnitude, False))


def divide_and_remainder(a: BigInteger, b: BigInteger) -> Tuple[BigInteger, BigInteger]:
    """
    (divide(a, b), remainder(a, b)) computed in one pass.

    Raises:
        DivisionByZeroError: if b is zero
    """
    quotient, rest = divmod_magnitudes(a.magnitude, b.magnitude)
    return _create(a.sign ^ b.sign, quotient), _create(a.sign, rest)


def negate(a: BigInteger) -> BigInteger:
    """Unary minus; zero stays non-negative."""
    if not a.magnitude:
        return a
    return BigInteger(1 - a.sign, a.magnitude)


def exponentiate(base: BigInteger, exponent: BigInteger) -> BigInteger:
    """
    base ** exponent by right-to-left binary exponentiation.

    An exponent above MAX_SAFE_INTEGER is only accepted for bases 0, 1 and -1,
    whose powers are known without computing them.

    Raises:
        UnsupportedExponentError: negative exponent, or huge exponent with |base| > 1

    Examples:
        >>> exponentiate(TWO, from_number(10))
        BigInteger('1024')
    """
    if exponent.sign == 1:
        raise UnsupportedExponentError(
            "exponent must be non-negative",
            {"exponent": to_string(exponent)},
        )

    if exponent.length > 1:
        if base.is_zero or is_unit(base.magnitude):
            logger.debug(
                "Huge exponent with trivial base",
                extra={"extra_info": {"exponent_digits": exponent.length}},
            )
            if base.sign == 1 and remainder(exponent, TWO).is_zero:
                return ONE
            return base
        raise UnsupportedExponentError(
            "exponent too large for a base other than 0, 1 or -1",
            {"base_digits": base.length, "exponent_digits": exponent.length},
        )

    n = int(exponent.magnitude[0]) if exponent.magnitude else 0

    accumulator = ONE
    if n > 0:
        x = base
        while n >= 2:
            t = n // 2
            if t * 2 != n:
                accumulator = multiply(accumulator, x)
            n = t
            x = multiply(x, x)
        accumulator = multiply(accumulator, x)
    return accumulator
