"""
Contract Validation Module

Модуль для валидации JSON записей BigInt (contracts/schema/bigint_record.json).
"""

from .validators import (
    BigIntRecordValidator,
    ContractValidator,
    SchemaLoader,
    dump_bigint,
    load_bigint,
    validate_bigint_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntRecordValidator",
    # Functions
    "validate_bigint_record",
    "load_bigint",
    "dump_bigint",
]
