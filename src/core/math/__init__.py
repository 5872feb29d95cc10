"""
Core math modules

Примитивы десятичной арифметики над модулями чисел (magnitude).
"""

# Digits (magnitude primitives)
from src.core.math.digits import (
    # Constants
    BASE,
    MAX_PRODUCT_ACCUMULATOR,
    # Normalization
    is_zero_magnitude,
    normalize,
    validate_digits,
    # Comparison
    compare_magnitude,
    less_than,
    # Arithmetic
    add_magnitude,
    multiply_digit,
    multiply_magnitude,
    subtract_magnitude,
)

# Division
from src.core.math.division import (
    DivisionByZeroError,
    DivisionMethod,
    divmod_magnitude,
)

__all__ = [
    # Digits — Constants
    "BASE",
    "MAX_PRODUCT_ACCUMULATOR",
    # Digits — Normalization
    "is_zero_magnitude",
    "normalize",
    "validate_digits",
    # Digits — Comparison
    "compare_magnitude",
    "less_than",
    # Digits — Arithmetic
    "add_magnitude",
    "multiply_digit",
    "multiply_magnitude",
    "subtract_magnitude",
    # Division — Types
    "DivisionMethod",
    # Division — Exceptions
    "DivisionByZeroError",
    # Division — Functions
    "divmod_magnitude",
]
