"""
Domain value types.

Contains the BigInt value type and its serialized record form.
"""

from src.core.domain.bigint import (
    DEFAULT_CONFIG,
    INT64_MAX,
    INT64_MIN,
    BigInt,
    BigIntConfig,
    InvalidFormatError,
    add,
    compare,
    divide,
    equals,
    multiply,
    negate,
    parse_with_validation,
    remainder,
    subtract,
)
from src.core.domain.record import BigIntRecord

__all__ = [
    # Constants
    "INT64_MIN",
    "INT64_MAX",
    "DEFAULT_CONFIG",
    # BigInt
    "BigInt",
    "BigIntConfig",
    "InvalidFormatError",
    # Named operations
    "negate",
    "add",
    "subtract",
    "multiply",
    "divide",
    "remainder",
    "compare",
    "equals",
    "parse_with_validation",
    # Record model
    "BigIntRecord",
]
