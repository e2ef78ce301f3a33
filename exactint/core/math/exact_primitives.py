"""
Exact Primitives — Double-Width Multiply/Divide over binary64 digits

Digits are Python floats holding exact integers in [0, BASE). A product of
two digits needs up to 106 bits, so a single float multiply rounds. The
rounding error is recovered with the Veltkamp/Dekker split, which turns one
rounded product into an exact (lo, hi) digit pair.

CRITICAL INVARIANTS:
1. Every input digit, carry and returned digit is an integer-valued float in [0, BASE)
2. multiply_with_carry: lo + hi * BASE == a * b + carry, with no rounding
3. divide_with_carry: q * divisor + r == high * BASE + low, 0 <= r < divisor
4. No tolerance: a single misrounded digit corrupts the whole multi-digit result

REFERENCES:
    T. J. Dekker, "A floating-point technique for extending the available
    precision" (1971); Hida, Li, Bailey, "Library for double-double and
    quad-double arithmetic" (split constant 2^27 + 1 for binary64).
"""

from typing import Final

from exactint.core.errors import DivisionInvariantError


# =============================================================================
# NUMERIC LIMITS (computed once at import)
# =============================================================================


def _machine_epsilon() -> float:
    """Spacing of floats just above 1.0, found by halving until 1 + eps/2 rounds to 1."""
    epsilon = 2.0 / (9007199254740991 + 1)
    while 1.0 + epsilon / 2.0 != 1.0:
        epsilon /= 2.0
    return epsilon


def _split_constant(base: float) -> float:
    """Veltkamp split point: smallest power of two s >= 2^27 with s*s >= base, plus one."""
    s = 134217728.0
    while s * s < base:
        s *= 2.0
    return s + 1.0


EPSILON: Final[float] = _machine_epsilon()

# Radix of the digit representation (2^53 on binary64)
BASE: Final[float] = 2.0 / EPSILON

# Integer view of BASE, for conversions to and from Python int
BASE_INT: Final[int] = int(BASE)

# Knuth normalization threshold for the divisor's leading digit
HALF_BASE: Final[float] = BASE / 2.0

SPLIT: Final[float] = _split_constant(BASE)

# Largest integer n such that every integer in [-n, n] is an exact float
MAX_SAFE_INTEGER: Final[int] = BASE_INT - 1


# =============================================================================
# ERROR-FREE TRANSFORMATIONS
# =============================================================================


def fast_trunc(x: float) -> float:
    """
    Truncate a non-negative float below BASE to an integer-valued float.

    Adding and subtracting BASE forces rounding to an integer; the result is
    then corrected downwards if the rounding went up.

    Examples:
        >>> fast_trunc(2.5)
        2.0
        >>> fast_trunc(7.0)
        7.0
    """
    v = (x - BASE) + BASE
    return v - 1.0 if v > x else v


def product_error(a: float, b: float, product: float) -> float:
    """
    Exact value of ``a * b - product`` (Veltkamp/Dekker).

    Each factor is split into a high half of at most 26 significant bits and
    a low remainder, so all four partial products are exact.

    Args:
        a: first factor
        b: second factor
        product: approximation of a * b (usually the rounded float product)

    Returns:
        a * b - product, exactly
    """
    at = SPLIT * a
    ahi = at - (at - a)
    alo = a - ahi
    bt = SPLIT * b
    bhi = bt - (bt - b)
    blo = b - bhi
    return ((ahi * bhi - product) + ahi * blo + alo * bhi) + alo * blo


# =============================================================================
# DOUBLE-WIDTH MULTIPLY / DIVIDE
# =============================================================================


def multiply_with_carry(carry: float, a: float, b: float) -> tuple[float, float]:
    """
    Exact ``a * b + carry`` split into two base-BASE digits.

    Args:
        carry: digit in [0, BASE)
        a: digit in [0, BASE)
        b: digit in [0, BASE]; b == BASE is accepted (exact power-of-two product)

    Returns:
        (lo, hi) with lo + hi * BASE == a * b + carry and lo in [0, BASE)

    Examples:
        >>> multiply_with_carry(0.0, 3.0, 4.0)
        (12.0, 0.0)
        >>> multiply_with_carry(1.0, BASE - 1.0, BASE - 1.0)
        (2.0, 9007199254740990.0)
    """
    product = a * b
    error = product_error(a, b, product)

    hi = fast_trunc(product / BASE)
    lo = product - hi * BASE + error

    if lo < 0:
        lo += BASE
        hi -= 1.0

    lo += carry - BASE
    if lo < 0:
        lo += BASE
    else:
        hi += 1.0

    return lo, hi


def divide_with_carry(high: float, low: float, divisor: float) -> tuple[float, float]:
    """
    Exact ``divmod(high * BASE + low, divisor)`` for a single-digit divisor.

    One float division gives an estimate; the exact residual of the
    estimate (via product_error) corrects it by at most one in each step.

    Args:
        high: digit in [0, divisor)
        low: digit in [0, BASE)
        divisor: digit in (0, BASE]

    Returns:
        (quotient, remainder), quotient in [0, BASE), remainder in [0, divisor)

    Raises:
        DivisionInvariantError: if high >= divisor (quotient would not fit one digit)

    Examples:
        >>> divide_with_carry(0.0, 100.0, 7.0)
        (14.0, 2.0)
    """
    if high >= divisor:
        raise DivisionInvariantError(
            "double-width division requires high part below divisor",
            {"high": high, "low": low, "divisor": divisor},
        )

    p = high * BASE
    q = fast_trunc(p / divisor)

    r = 0.0 - product_error(q, divisor, p)
    if r < 0:
        q -= 1.0
        r += divisor

    r += low - divisor
    if r < 0:
        r += divisor
    else:
        q += 1.0

    y = fast_trunc(r / divisor)
    r -= y * divisor
    q += y
    return q, r
