"""
Tests for Digit Vectors — Magnitude Arithmetic

Checked invariants:
1. compare_magnitudes orders by length, then from the top digit
2. add/subtract/multiply agree with Python int arithmetic
3. Results carry no most-significant zero digits
4. Operands are never mutated
5. Multiplication by the magnitude of 1 returns the other operand itself
"""

import random
from typing import List, Sequence

from exactint.core.math.digit_vectors import (
    add_magnitudes,
    compare_magnitudes,
    divide_by_digit,
    is_unit,
    multiply_add_digit,
    multiply_magnitudes,
    strip_leading_zeros,
    subtract_magnitudes,
)
from exactint.core.math.exact_primitives import BASE, BASE_INT

SEED = 0xD161
ROUNDS = 300


def digits_of(n: int) -> List[float]:
    digits = []
    while n:
        n, digit = divmod(n, BASE_INT)
        digits.append(float(digit))
    return digits


def value_of(digits: Sequence[float]) -> int:
    n = 0
    for digit in reversed(digits):
        n = n * BASE_INT + int(digit)
    return n


def assert_normalized(digits: Sequence[float]) -> None:
    assert not digits or digits[-1] != 0
    for digit in digits:
        assert digit == int(digit)
        assert 0 <= digit < BASE


def random_magnitude(rng: random.Random, max_digits: int = 8) -> int:
    bits = rng.randint(0, 53 * max_digits)
    return rng.getrandbits(bits) if bits else 0


# =============================================================================
# HELPERS
# =============================================================================


class TestHelpers:
    """strip_leading_zeros and is_unit."""

    def test_strip_leading_zeros(self) -> None:
        assert strip_leading_zeros([1.0, 0.0, 0.0]) == [1.0]
        assert strip_leading_zeros([0.0, 0.0]) == []
        assert strip_leading_zeros([0.0, 5.0]) == [0.0, 5.0]
        assert strip_leading_zeros([]) == []

    def test_is_unit(self) -> None:
        assert is_unit([1.0])
        assert is_unit((1.0,))
        assert not is_unit([])
        assert not is_unit([2.0])
        assert not is_unit([1.0, 1.0])


# =============================================================================
# COMPARISON
# =============================================================================


class TestCompareMagnitudes:
    """Three-way magnitude comparison."""

    def test_length_decides(self) -> None:
        assert compare_magnitudes([5.0], [0.0, 1.0]) == -1
        assert compare_magnitudes([0.0, 1.0], [BASE - 1]) == 1
        assert compare_magnitudes([], [1.0]) == -1

    def test_top_digit_decides(self) -> None:
        assert compare_magnitudes([9.0, 1.0], [0.0, 2.0]) == -1
        assert compare_magnitudes([0.0, 2.0], [9.0, 1.0]) == 1

    def test_equal(self) -> None:
        assert compare_magnitudes([], []) == 0
        assert compare_magnitudes([3.0, 4.0], (3.0, 4.0)) == 0

    def test_random_against_int(self) -> None:
        rng = random.Random(SEED)
        for _ in range(ROUNDS):
            a = random_magnitude(rng, 3)
            b = a if rng.random() < 0.2 else random_magnitude(rng, 3)
            expected = (a > b) - (a < b)
            assert compare_magnitudes(digits_of(a), digits_of(b)) == expected


# =============================================================================
# ADDITION / SUBTRACTION
# =============================================================================


class TestAddMagnitudes:
    """Ripple-carry addition."""

    def test_carry_out_of_top_digit(self) -> None:
        result = add_magnitudes([BASE - 1, BASE - 1], [1.0])
        assert result == [0.0, 0.0, 1.0]

    def test_add_zero(self) -> None:
        assert add_magnitudes([4.0, 2.0], []) == [4.0, 2.0]
        assert add_magnitudes([], []) == []

    def test_random_against_int(self) -> None:
        rng = random.Random(SEED)
        for _ in range(ROUNDS):
            a = random_magnitude(rng)
            b = random_magnitude(rng)
            larger, smaller = max(a, b), min(a, b)
            result = add_magnitudes(digits_of(larger), digits_of(smaller))
            assert_normalized(result)
            assert value_of(result) == a + b

    def test_operands_not_mutated(self) -> None:
        a = [BASE - 1, 3.0]
        b = [1.0]
        add_magnitudes(a, b)
        assert a == [BASE - 1, 3.0]
        assert b == [1.0]


class TestSubtractMagnitudes:
    """Ripple-borrow subtraction with |larger| >= |smaller|."""

    def test_equal_operands(self) -> None:
        assert subtract_magnitudes([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == []

    def test_equal_high_digits_skipped(self) -> None:
        assert subtract_magnitudes([5.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == [4.0]

    def test_borrow_through_zeros(self) -> None:
        result = subtract_magnitudes([0.0, 0.0, 1.0], [1.0])
        assert result == [BASE - 1, BASE - 1]

    def test_random_against_int(self) -> None:
        rng = random.Random(SEED)
        for _ in range(ROUNDS):
            a = random_magnitude(rng)
            b = random_magnitude(rng)
            larger, smaller = max(a, b), min(a, b)
            result = subtract_magnitudes(digits_of(larger), digits_of(smaller))
            assert_normalized(result)
            assert value_of(result) == larger - smaller


# =============================================================================
# MULTIPLICATION
# =============================================================================


class TestMultiplyMagnitudes:
    """Schoolbook multiplication."""

    def test_zero(self) -> None:
        assert multiply_magnitudes([], [3.0]) == []
        assert multiply_magnitudes([3.0], []) == []

    def test_unit_returns_other_operand(self) -> None:
        a = (7.0, 9.0)
        assert multiply_magnitudes(a, (1.0,)) is a
        assert multiply_magnitudes((1.0,), a) is a

    def test_maximal_digits(self) -> None:
        n = BASE_INT**3 - 1
        result = multiply_magnitudes(digits_of(n), digits_of(n))
        assert_normalized(result)
        assert value_of(result) == n * n

    def test_power_of_base_factor(self) -> None:
        """Zero digits of the second operand are skipped."""
        a = 123456789123456789123456789
        b = 5 * BASE_INT**4
        result = multiply_magnitudes(digits_of(a), digits_of(b))
        assert value_of(result) == a * b

    def test_random_against_int(self) -> None:
        rng = random.Random(SEED)
        for _ in range(ROUNDS):
            a = random_magnitude(rng, 6)
            b = random_magnitude(rng, 6)
            result = multiply_magnitudes(digits_of(a), digits_of(b))
            assert_normalized(result)
            assert value_of(result) == a * b

    def test_commutative(self) -> None:
        rng = random.Random(SEED + 1)
        for _ in range(50):
            a = digits_of(random_magnitude(rng, 5))
            b = digits_of(random_magnitude(rng, 5))
            assert list(multiply_magnitudes(a, b)) == list(multiply_magnitudes(b, a))


# =============================================================================
# SINGLE-DIGIT STEPS
# =============================================================================


class TestSingleDigitSteps:
    """multiply_add_digit and divide_by_digit."""

    def test_multiply_add_digit(self) -> None:
        rng = random.Random(SEED)
        for _ in range(ROUNDS):
            a = random_magnitude(rng, 5)
            factor = rng.getrandbits(53)
            addend = rng.getrandbits(53)
            result = multiply_add_digit(digits_of(a), float(factor), float(addend))
            assert_normalized(result)
            assert value_of(result) == a * factor + addend

    def test_multiply_add_digit_on_empty(self) -> None:
        assert multiply_add_digit([], 10.0, 7.0) == [7.0]
        assert multiply_add_digit([], 10.0, 0.0) == []

    def test_multiply_add_digit_by_base(self) -> None:
        assert multiply_add_digit([3.0], BASE, 4.0) == [4.0, 3.0]

    def test_divide_by_digit(self) -> None:
        rng = random.Random(SEED)
        for _ in range(ROUNDS):
            a = random_magnitude(rng, 5)
            divisor = rng.getrandbits(rng.randint(1, 53)) or 1
            quotient, rest = divide_by_digit(digits_of(a), float(divisor))
            assert_normalized(quotient)
            assert (value_of(quotient), int(rest)) == divmod(a, divisor)

    def test_divide_by_digit_zero_dividend(self) -> None:
        assert divide_by_digit([], 7.0) == ([], 0.0)
