"""
Test harness helpers: seeded random arithmetic cases with a native-int oracle.
"""

from src.harness.random_cases import (
    DEFAULT_CASE_COUNT,
    DEFAULT_MAX_DIGITS,
    ArithmeticCase,
    CaseGeneratorConfig,
    Operation,
    expected_result,
    generate_cases,
    random_decimal_string,
    random_operand_pair,
)

__all__ = [
    "DEFAULT_CASE_COUNT",
    "DEFAULT_MAX_DIGITS",
    "ArithmeticCase",
    "CaseGeneratorConfig",
    "Operation",
    "expected_result",
    "generate_cases",
    "random_decimal_string",
    "random_operand_pair",
]
