"""
Digit Vectors — Magnitude Arithmetic

A magnitude is a little-endian sequence of digits, each an integer-valued
float in [0, BASE). The empty sequence is zero.

Operations:
- compare_magnitudes: length first, then from the most significant digit
- add_magnitudes / subtract_magnitudes: ripple carry/borrow, |a| >= |b|
- multiply_magnitudes: schoolbook O(n*m) through multiply_with_carry
- multiply_add_digit / divide_by_digit: single-digit Horner steps

CRITICAL INVARIANTS:
1. Results carry no most-significant zero digits
2. Inputs are never mutated; every result is a fresh list
   (except the documented "times one" shortcut, which returns the operand)
3. Every intermediate sum stays within [-BASE, BASE] so float addition is exact
"""

from typing import List, Sequence

from exactint.core.math.exact_primitives import (
    BASE,
    divide_with_carry,
    multiply_with_carry,
)

Digits = Sequence[float]


# =============================================================================
# HELPERS
# =============================================================================


def strip_leading_zeros(digits: List[float]) -> List[float]:
    """Drop most-significant zero digits in place and return the list."""
    while digits and digits[-1] == 0:
        digits.pop()
    return digits


def is_unit(digits: Digits) -> bool:
    """True for the magnitude of 1."""
    return len(digits) == 1 and digits[0] == 1


# =============================================================================
# COMPARISON
# =============================================================================


def compare_magnitudes(a: Digits, b: Digits) -> int:
    """
    Three-way comparison of two magnitudes.

    Returns:
        -1 if a < b, 0 if a == b, +1 if a > b
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1

    return 0


# =============================================================================
# ADDITION / SUBTRACTION
# =============================================================================


def add_magnitudes(larger: Digits, smaller: Digits) -> List[float]:
    """
    Sum of two magnitudes, the first at least as long as the second.

    BASE is subtracted from each digit sum before adding the carry, so every
    partial value stays in [-BASE, BASE) and is exact.

    Args:
        larger: magnitude with len(larger) >= len(smaller)
        smaller: magnitude

    Returns:
        larger + smaller
    """
    if not smaller:
        return list(larger)

    result: List[float] = []
    c = 0.0
    for i, digit in enumerate(larger):
        other = smaller[i] if i < len(smaller) else 0.0
        c += digit + (other - BASE)
        if c < 0:
            result.append(BASE + c)
            c = 0.0
        else:
            result.append(c)
            c = 1.0

    if c != 0:
        result.append(c)
    return result


def subtract_magnitudes(larger: Digits, smaller: Digits) -> List[float]:
    """
    Difference of two magnitudes with |larger| >= |smaller|.

    When both have the same length, equal most-significant digits are skipped
    before the borrow pass.

    Args:
        larger: minuend, compare_magnitudes(larger, smaller) >= 0
        smaller: subtrahend

    Returns:
        larger - smaller (empty list for equal operands)
    """
    length = len(larger)
    if len(smaller) == length:
        while length > 0 and smaller[length - 1] == larger[length - 1]:
            length -= 1
    if length == 0:
        return []

    result: List[float] = []
    c = 0.0
    for i in range(length):
        other = smaller[i] if i < len(smaller) else 0.0
        c += larger[i] - other
        if c < 0:
            result.append(BASE + c)
            c = -1.0
        else:
            result.append(c)
            c = 0.0

    return strip_leading_zeros(result)


# =============================================================================
# MULTIPLICATION
# =============================================================================


def multiply_magnitudes(a: Digits, b: Digits) -> Digits:
    """
    Schoolbook product of two magnitudes.

    Zero digits of ``b`` are skipped (cheap multiplication by powers of BASE).
    When one operand is the magnitude of 1 the other operand is returned
    as is, without allocating a product.

    Returns:
        a * b
    """
    if not a or not b:
        return []
    if is_unit(a):
        return b
    if is_unit(b):
        return a

    result = [0.0] * (len(a) + len(b))
    for i, b_digit in enumerate(b):
        if b_digit == 0:
            continue
        c = 0.0
        for j, a_digit in enumerate(a):
            carry = 0.0
            c += result[j + i] - BASE
            if c >= 0:
                carry = 1.0
            else:
                c += BASE
            lo, hi = multiply_with_carry(c, a_digit, b_digit)
            result[j + i] = lo
            c = hi + carry
        result[len(a) + i] = c

    return strip_leading_zeros(result)


def multiply_add_digit(digits: Digits, factor: float, addend: float = 0.0) -> List[float]:
    """
    Horner step: ``digits * factor + addend`` for single-digit factor and addend.

    Args:
        digits: magnitude
        factor: digit in [0, BASE]
        addend: digit in [0, BASE)

    Returns:
        New magnitude (stripped)
    """
    result: List[float] = []
    carry = addend
    for digit in digits:
        lo, carry = multiply_with_carry(carry, digit, factor)
        result.append(lo)
    if carry != 0:
        result.append(carry)
    return strip_leading_zeros(result)


# =============================================================================
# SINGLE-DIGIT DIVISION
# =============================================================================


def divide_by_digit(digits: Digits, divisor: float) -> tuple[List[float], float]:
    """
    Long division of a magnitude by one digit.

    Args:
        digits: magnitude
        divisor: digit in (0, BASE]

    Returns:
        (quotient magnitude, remainder digit)
    """
    quotient = [0.0] * len(digits)
    remainder = 0.0
    for i in range(len(digits) - 1, -1, -1):
        quotient[i], remainder = divide_with_carry(remainder, digits[i], divisor)
    return strip_leading_zeros(quotient), remainder
