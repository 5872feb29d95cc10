"""
BigIntRecord — Сериализуемая форма BigInt

Immutable Pydantic модель {negative, digits}, соответствующая схеме
contracts/schema/bigint_record.json. Помимо схемы, модель проверяет
инварианты канонического представления:
- digits непустой, каждая цифра в [0, 9]
- нет старших нулей (кроме канонического нуля [0])
- ноль всегда положительный
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.math.digits import validate_digits


# =============================================================================
# RECORD MODEL
# =============================================================================


class BigIntRecord(BaseModel):
    """
    Сериализованное представление BigInt.

    digits хранятся младшей цифрой первой (least-significant first),
    как и во внутреннем представлении BigInt.

    Immutable модель (frozen=True).
    """

    negative: bool = Field(False, description="Знак (True = отрицательное)")
    digits: list[int] = Field(
        ...,
        min_length=1,
        description="Десятичные цифры, младшая первой",
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("digits")
    @classmethod
    def validate_digit_range(cls, v: list[int]) -> list[int]:
        """Каждая цифра в [0, 9]."""
        validate_digits(v)
        return v

    @field_validator("digits")
    @classmethod
    def validate_no_leading_zeros(cls, v: list[int]) -> list[int]:
        """Старшая цифра ненулевая (кроме [0])."""
        if len(v) > 1 and v[-1] == 0:
            raise ValueError("digits must not have leading (most-significant) zeros")
        return v

    @model_validator(mode="after")
    def validate_zero_is_positive(self) -> "BigIntRecord":
        """Отрицательный ноль запрещён."""
        if self.negative and self.digits == [0]:
            raise ValueError("zero must not be negative")
        return self

    def to_decimal_string(self) -> str:
        """
        Десятичная строка записи.

        Returns:
            '-' для отрицательных + цифры от старшей к младшей
        """
        text = "".join(str(d) for d in reversed(self.digits))
        return f"-{text}" if self.negative else text
