"""
Core math modules for exactint

Exact multi-digit arithmetic over float digits: primitives, digit vectors,
long division and radix conversion.
"""

# Exact primitives
from exactint.core.math.exact_primitives import (
    BASE,
    BASE_INT,
    EPSILON,
    HALF_BASE,
    MAX_SAFE_INTEGER,
    SPLIT,
    divide_with_carry,
    fast_trunc,
    multiply_with_carry,
    product_error,
)

# Digit vectors
from exactint.core.math.digit_vectors import (
    Digits,
    add_magnitudes,
    compare_magnitudes,
    divide_by_digit,
    is_unit,
    multiply_add_digit,
    multiply_magnitudes,
    strip_leading_zeros,
    subtract_magnitudes,
)

# Long division
from exactint.core.math.long_division import (
    divide_magnitudes,
    divmod_magnitudes,
)

# Radix conversion
from exactint.core.math.radix import (
    DEFAULT_RADIX,
    DIGIT_CHARS,
    MAX_RADIX,
    MIN_RADIX,
    format_digit,
    format_digits,
    group_parameters,
    parse_digits,
    parse_group,
    split_literal,
    validate_radix,
)

__all__ = [
    # Exact primitives: Constants
    "BASE",
    "BASE_INT",
    "EPSILON",
    "HALF_BASE",
    "MAX_SAFE_INTEGER",
    "SPLIT",
    # Exact primitives: Functions
    "divide_with_carry",
    "fast_trunc",
    "multiply_with_carry",
    "product_error",
    # Digit vectors
    "Digits",
    "add_magnitudes",
    "compare_magnitudes",
    "divide_by_digit",
    "is_unit",
    "multiply_add_digit",
    "multiply_magnitudes",
    "strip_leading_zeros",
    "subtract_magnitudes",
    # Long division
    "divide_magnitudes",
    "divmod_magnitudes",
    # Radix conversion: Constants
    "DEFAULT_RADIX",
    "DIGIT_CHARS",
    "MAX_RADIX",
    "MIN_RADIX",
    # Radix conversion: Functions
    "format_digit",
    "format_digits",
    "group_parameters",
    "parse_digits",
    "parse_group",
    "split_literal",
    "validate_radix",
]
