"""
Radix Conversion — Text ↔ Digit Vectors

Parsing and formatting batch several radix-r characters per base-BASE digit:
a "group" is the longest run of characters whose value always fits one digit
(group_radix = r ** group_length <= BASE).

Parsing:  each group is read with plain fixed-radix parsing and folded into
          the magnitude by Horner's rule in base group_radix.
Formatting: the magnitude is repeatedly divided by group_radix; the most
          significant group is rendered without padding, the others are
          zero-padded to group_length characters.

Literal syntax: [+|-] [0b|0o|0x] digits
- digits: 0-9 then letters (case-insensitive) up to the radix
- a prefix is honoured when parsing in radix 10, or when it names the
  requested radix (e.g. "0x" with radix 16)
"""

from typing import Dict, Final, List, Optional

from exactint.core.errors import InvalidRadixError, MalformedLiteralError
from exactint.core.math.digit_vectors import (
    Digits,
    divide_by_digit,
    multiply_add_digit,
)
from exactint.core.math.exact_primitives import BASE, fast_trunc

# =============================================================================
# CONSTANTS
# =============================================================================

MIN_RADIX: Final[int] = 2
MAX_RADIX: Final[int] = 36
DEFAULT_RADIX: Final[int] = 10

DIGIT_CHARS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

_CHAR_VALUES: Final[Dict[str, int]] = {
    **{ch: value for value, ch in enumerate(DIGIT_CHARS)},
    **{ch.upper(): value for value, ch in enumerate(DIGIT_CHARS) if ch.isalpha()},
}

_PREFIX_RADIX: Final[Dict[str, int]] = {"b": 2, "o": 8, "x": 16}


def _group_parameters(radix: int) -> tuple[int, float]:
    group_length = 0
    group_radix = 1.0
    limit = fast_trunc(BASE / radix)
    while group_radix <= limit:
        group_length += 1
        group_radix *= radix
    return group_length, group_radix


# (group_length, group_radix) per radix, computed once
_GROUPS: Final[Dict[int, tuple[int, float]]] = {
    radix: _group_parameters(radix) for radix in range(MIN_RADIX, MAX_RADIX + 1)
}


# =============================================================================
# VALIDATION
# =============================================================================


def validate_radix(radix: object) -> int:
    """
    Check that radix is an int in [2, 36].

    Raises:
        InvalidRadixError: otherwise (bool is rejected as well)
    """
    if isinstance(radix, bool) or not isinstance(radix, int):
        raise InvalidRadixError(radix)
    if radix < MIN_RADIX or radix > MAX_RADIX:
        raise InvalidRadixError(radix)
    return radix


def group_parameters(radix: int) -> tuple[int, float]:
    """
    Character batching for a radix.

    Returns:
        (group_length, group_radix) with group_radix = radix ** group_length <= BASE

    Examples:
        >>> group_parameters(10)
        (15, 1000000000000000.0)
        >>> group_parameters(2)
        (53, 9007199254740992.0)
    """
    return _GROUPS[validate_radix(radix)]


# =============================================================================
# PARSING
# =============================================================================


def split_literal(text: str, radix: Optional[int] = None) -> tuple[int, int, int]:
    """
    Strip sign and radix prefix from a literal.

    Args:
        text: literal text
        radix: requested radix (None → 10 with prefixes allowed)

    Returns:
        (sign, start of digits, effective radix); sign is 0 or 1

    Raises:
        MalformedLiteralError: empty literal or empty digit run
        InvalidRadixError: radix outside [2, 36]
    """
    if not isinstance(text, str):
        raise TypeError(f"literal must be str, got {type(text).__name__}")

    radix = DEFAULT_RADIX if radix is None else validate_radix(radix)

    if not text:
        raise MalformedLiteralError("empty literal", text=text)

    sign = 0
    start = 0
    if text[0] == "+":
        start = 1
    elif text[0] == "-":
        sign = 1
        start = 1

    if len(text) - start >= 2 and text[start] == "0":
        prefix_radix = _PREFIX_RADIX.get(text[start + 1].lower())
        if prefix_radix is not None and radix in (DEFAULT_RADIX, prefix_radix):
            radix = prefix_radix
            start += 2

    if start == len(text):
        raise MalformedLiteralError("empty digit sequence", text=text, position=start)

    return sign, start, radix


def parse_group(text: str, start: int, end: int, radix: int) -> float:
    """
    Parse text[start:end] as a radix-r number that fits one digit.

    Raises:
        MalformedLiteralError: on a character that is not a digit of the radix
    """
    n = 0.0
    for position in range(start, end):
        value = _CHAR_VALUES.get(text[position])
        if value is None or value >= radix:
            raise MalformedLiteralError(
                f"invalid digit {text[position]!r} for radix {radix}",
                text=text,
                position=position,
            )
        n = n * radix + value
    return n


def parse_digits(text: str, start: int, radix: int) -> List[float]:
    """
    Parse text[start:] into a magnitude.

    The first group takes the leftover characters so that every following
    group is exactly group_length long.

    Raises:
        MalformedLiteralError: empty digit run or invalid character
    """
    length = len(text) - start
    if length <= 0:
        raise MalformedLiteralError("empty digit sequence", text=text, position=start)

    group_length, group_radix = group_parameters(radix)
    size = (length - 1) // group_length + 1

    magnitude: List[float] = []
    end = start + length - (size - 1) * group_length
    while start < len(text):
        group = parse_group(text, start, end, radix)
        magnitude = multiply_add_digit(magnitude, group_radix, group)
        start = end
        end += group_length

    return magnitude


# =============================================================================
# FORMATTING
# =============================================================================


def format_digit(value: float, radix: int) -> str:
    """Render one digit (an integer-valued float) in the given radix, no padding."""
    n = int(value)
    if radix == 10:
        return str(n)
    if n == 0:
        return "0"
    chars = []
    while n:
        n, r = divmod(n, radix)
        chars.append(DIGIT_CHARS[r])
    return "".join(reversed(chars))


def format_digits(digits: Digits, radix: int = DEFAULT_RADIX) -> str:
    """
    Render a magnitude in the given radix (no sign, no leading zeros).

    Raises:
        InvalidRadixError: radix outside [2, 36]
    """
    group_length, group_radix = group_parameters(radix)

    if not digits:
        return "0"
    if len(digits) == 1:
        return format_digit(digits[0], radix)

    groups: List[float] = []
    remaining: List[float] = list(digits)
    while remaining:
        remaining, group = divide_by_digit(remaining, group_radix)
        groups.append(group)

    parts = [format_digit(groups[-1], radix)]
    for group in reversed(groups[:-1]):
        parts.append(format_digit(group, radix).rjust(group_length, "0"))
    return "".join(parts)
