"""
JSON Schema Contract Validators

Модуль для валидации JSON записей BigInt согласно формальному JSON Schema
контракту. Использует библиотеку jsonschema для проверки соответствия данных
схеме; инварианты канонического представления (нет старших нулей, нет
отрицательного нуля) дополнительно проверяет модель BigIntRecord.

Схемы:
- bigint_record.json
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.domain.bigint import BigInt
from src.core.domain.record import BigIntRecord


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self):
        # Корень проекта (4 уровня вверх от этого файла)
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'bigint_record')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации (ValidationError)."""
        return self.validator.iter_errors(data)


class BigIntRecordValidator(ContractValidator):
    """Валидатор для bigint_record контракта."""

    def __init__(self):
        super().__init__("bigint_record")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_bigint_record(data: Dict[str, Any]) -> None:
    """
    Валидация bigint_record данных.

    Args:
        data: Данные для валидации

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    BigIntRecordValidator().validate(data)


def load_bigint(data: Dict[str, Any]) -> BigInt:
    """
    JSON запись → BigInt.

    Сначала схема (jsonschema), затем инварианты модели (pydantic).

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
        pydantic.ValidationError: Если нарушены инварианты представления
    """
    validate_bigint_record(data)
    return BigInt.from_record(BigIntRecord.model_validate(data))


def dump_bigint(value: BigInt) -> Dict[str, Any]:
    """BigInt → JSON запись (dict, соответствующий bigint_record.json)."""
    return value.to_record().model_dump()

