"""
Long Division — Knuth Algorithm D over float digits

Normalized multi-digit division (TAOCP vol. 2, 4.3.1, Algorithm D; see also
Handbook of Applied Cryptography, 14.20).

Steps:
1. Degenerate cases: empty divisor → DivisionByZeroError, divisor 1 → shortcut
2. Normalization: scale both operands by lambda = trunc(BASE / (top + 1)) so the
   divisor's leading digit is >= BASE/2
3. For each quotient position (most significant first): estimate a trial digit
   from the two leading remainder digits, multiply-subtract, add back while
   the working remainder is negative (at most twice)
4. Leading zero digits of the divisor are skipped
5. Quotient digits are allocated at the first non-zero quotient digit
6. De-normalization: remainder divided back by lambda; any leftover is an
   internal consistency failure

Complexity: O(n * m).
"""

from typing import List, Optional

from exactint.core.errors import DivisionByZeroError, InternalConsistencyError
from exactint.core.logging_config import get_logger
from exactint.core.math.digit_vectors import (
    Digits,
    divide_by_digit,
    is_unit,
    strip_leading_zeros,
)
from exactint.core.math.exact_primitives import (
    BASE,
    HALF_BASE,
    divide_with_carry,
    fast_trunc,
    multiply_with_carry,
)

logger = get_logger(__name__)


def _scale(digits: List[float], factor: float) -> float:
    """Multiply digits by factor in place; returns the outgoing carry."""
    carry = 0.0
    for i, digit in enumerate(digits):
        digits[i], carry = multiply_with_carry(carry, digit, factor)
    return carry


def _knuth_divide(
    a: Digits,
    b: Digits,
    want_quotient: bool,
    want_remainder: bool,
) -> tuple[List[float], List[float]]:
    """
    Core of Algorithm D.

    Returns:
        (quotient, remainder); a part that was not requested is an empty list
    """
    if not want_quotient and not want_remainder:
        raise ValueError("at least one of quotient or remainder must be requested")

    if not b:
        raise DivisionByZeroError("divide" if want_quotient else "remainder")
    if not a:
        return [], []
    if is_unit(b):
        return (list(a) if want_quotient else []), []

    n = len(a)
    m = len(b)

    # One extra digit absorbs the normalization carry; the divisor gets a
    # zero guard digit so the multiply-subtract can read divisor[m]
    remainder = list(a) + [0.0]
    divisor = list(b) + [0.0]

    top = divisor[m - 1]

    lam = 1.0
    if m > 1:
        lam = fast_trunc(BASE / (top + 1.0))
        if lam > 1:
            _scale(remainder, lam)
            _scale(divisor, lam)
            top = divisor[m - 1]
        if top < HALF_BASE:
            raise InternalConsistencyError(
                "divisor normalization failed",
                {"top": top, "lambda": lam},
            )

    shift = max(n - m + 1, 0)

    quotient: Optional[List[float]] = None

    # Skip the low zero digits of the divisor (division by a power of BASE)
    last_non_zero = 0
    while divisor[last_non_zero] == 0:
        last_non_zero += 1

    for i in range(shift - 1, -1, -1):
        t = m + i
        q = BASE - 1.0
        if remainder[t] != top:
            q, _ = divide_with_carry(remainder[t], remainder[t - 1], top)

        # remainder[i..t] -= q * divisor
        ax = 0.0
        bx = 0.0
        for j in range(i + last_non_zero, t + 1):
            lo, bx = multiply_with_carry(bx, q, divisor[j - i])
            ax += remainder[j] - lo
            if ax < 0:
                remainder[j] = BASE + ax
                ax = -1.0
            else:
                remainder[j] = ax
                ax = 0.0

        # add back while the trial digit was too large
        while ax != 0:
            q -= 1.0
            c = 0.0
            for k in range(i + last_non_zero, t + 1):
                c += remainder[k] - BASE + divisor[k - i]
                if c < 0:
                    remainder[k] = BASE + c
                    c = 0.0
                else:
                    remainder[k] = c
                    c = 1.0
            ax += c

        if want_quotient and q != 0:
            if quotient is None:
                quotient = [0.0] * (i + 1)
            quotient[i] = q

    remainder_digits: List[float] = []
    if want_remainder:
        if lam > 1:
            remainder_digits, leftover = divide_by_digit(remainder, lam)
            if leftover != 0:
                logger.critical(
                    "Remainder de-normalization left a non-zero residue",
                    extra={"extra_info": {"lambda": lam, "leftover": leftover}},
                )
                raise InternalConsistencyError(
                    "remainder is not divisible by the normalization factor",
                    {"lambda": lam, "leftover": leftover},
                )
        else:
            remainder_digits = strip_leading_zeros(remainder)

    return (quotient or []), remainder_digits


def divide_magnitudes(a: Digits, b: Digits, is_division: bool = True) -> List[float]:
    """
    Truncated quotient or remainder of two magnitudes.

    Args:
        a: dividend magnitude
        b: divisor magnitude
        is_division: True → quotient, False → remainder

    Returns:
        quotient (len <= len(a) - len(b) + 1) or remainder (len <= len(b))

    Raises:
        DivisionByZeroError: if b is empty
    """
    quotient, remainder = _knuth_divide(a, b, is_division, not is_division)
    return quotient if is_division else remainder


def divmod_magnitudes(a: Digits, b: Digits) -> tuple[List[float], List[float]]:
    """
    Quotient and remainder in a single pass.

    Raises:
        DivisionByZeroError: if b is empty
    """
    return _knuth_divide(a, b, True, True)
