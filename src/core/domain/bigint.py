"""
BigInt — Знаковое целое произвольной точности

Представление: знак (negative) + десятичные цифры модуля, младшая первой.

Операции:
- Конструирование: BigInt() == 0, BigInt(int), BigInt(str), BigInt(BigInt)
- Унарные: -x, +x, abs(x), increment/decrement (prefix и postfix)
- Составное присваивание (мутирует получателя): +=, -=, *=, /=, %=
- Бинарные (не мутируют операнды): +, -, *, /, %, divmod()
- Сравнение: ==, !=, <, <=, >, >=
- Форматирование: str(), repr(), int(), to_record()

Деление (/) — целочисленное, с усечением к нулю. Остаток (%) имеет знак
делимого, так что a == (a / b) * b + (a % b).

Операторы — тонкие обёртки над именованными функциями модуля:
add, subtract, multiply, divide, remainder, negate, compare, equals.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. digits непустой, каждая цифра в [0, 9]
2. Нет старших нулей, кроме канонического нуля [0]
3. Ноль всегда положительный (нет отрицательного нуля)
4. Каждое значение владеет своим списком цифр (копии не разделяют буфер)
"""

import logging
from dataclasses import dataclass
from typing import Any, Final, Optional, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from src.core.domain.record import BigIntRecord
from src.core.math.digits import (
    BASE,
    add_magnitude,
    compare_magnitude,
    is_zero_magnitude,
    less_than,
    multiply_magnitude,
    normalize,
    subtract_magnitude,
)
from src.core.math.division import DivisionMethod, divmod_magnitude

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Границы нативного 64-битного знакового целого
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

_ASCII_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class BigIntConfig:
    """Конфигурация разбора и деления.

    Параметры:
    - division_method: алгоритм деления модулей
    - max_digits: максимум цифр во входной строке (None = без ограничения)
    """

    division_method: DivisionMethod = DivisionMethod.LONG
    max_digits: Optional[int] = None


DEFAULT_CONFIG: Final[BigIntConfig] = BigIntConfig()


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidFormatError(ValueError):
    """
    Строка не является десятичным целым.

    Возникает при разборе пустой строки, одиночного знака,
    нецифрового символа после знака или превышении max_digits.
    """
    pass


# =============================================================================
# PARSING
# =============================================================================


def _parse_decimal(text: str, config: BigIntConfig) -> tuple[bool, list[int]]:
    """Разбор десятичной строки в (negative, digits)."""
    if not text:
        logger.debug("rejected empty decimal string")
        raise InvalidFormatError("Empty string is not a valid integer")

    negative = text[0] == "-"
    start = 1 if text[0] in "+-" else 0

    if start == len(text):
        logger.debug("rejected lone sign %r", text)
        raise InvalidFormatError(f"Invalid number: {text!r} has no digits")

    body = text[start:]
    for ch in body:
        if ch not in _ASCII_DIGITS:
            logger.debug("rejected non-digit character %r", ch)
            raise InvalidFormatError(f"Invalid number: {text!r} contains {ch!r}")

    if config.max_digits is not None and len(body) > config.max_digits:
        raise InvalidFormatError(
            f"Invalid number: {len(body)} digits exceed max_digits={config.max_digits}"
        )

    # Справа налево: младшая цифра первой
    digits = [ord(ch) - ord("0") for ch in reversed(body)]
    normalize(digits)

    if is_zero_magnitude(digits):
        negative = False

    return negative, digits


# =============================================================================
# BIGINT
# =============================================================================


class BigInt:
    """Знаковое целое произвольной точности (десятичные цифры).

    Value-семантика: бинарные операторы возвращают новые значения,
    составные операторы (+=, -=, ...) заменяют буфер цифр получателя.
    Изменяемый тип, поэтому не хешируется.
    """

    __slots__ = ("_negative", "_digits")

    def __init__(
        self,
        value: Union[int, str, "BigInt", None] = None,
        config: Optional[BigIntConfig] = None,
    ):
        """
        Args:
            value: None (ноль), int, десятичная строка или BigInt (копия)
            config: конфигурация разбора строки

        Raises:
            InvalidFormatError: если строка не является десятичным целым
            TypeError: для неподдерживаемого типа value
        """
        self._negative = False
        self._digits = [0]

        if value is None:
            return

        if isinstance(value, BigInt):
            self._negative = value._negative
            self._digits = list(value._digits)
        elif isinstance(value, bool):
            raise TypeError("BigInt cannot be constructed from bool")
        elif isinstance(value, int):
            self._negative, self._digits = self._int_to_parts(value)
        elif isinstance(value, str):
            self._negative, self._digits = _parse_decimal(value, config or DEFAULT_CONFIG)
        else:
            raise TypeError(
                f"BigInt cannot be constructed from {type(value).__name__}"
            )

    # -------------------------------------------------------------------------
    # Alternative constructors
    # -------------------------------------------------------------------------

    @staticmethod
    def _int_to_parts(value: int) -> tuple[bool, list[int]]:
        negative = value < 0
        magnitude = abs(value)

        if magnitude == 0:
            return False, [0]

        digits: list[int] = []
        while magnitude != 0:
            digits.append(magnitude % BASE)
            magnitude //= BASE

        return negative, digits

    @classmethod
    def _from_parts(cls, negative: bool, digits: list[int]) -> "BigInt":
        """Сборка из готовых частей (digits передаётся во владение)."""
        result = cls()
        result._negative = negative
        result._digits = digits
        result._canonicalize()
        return result

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        """Конструирование из нативного целого."""
        return cls(value)

    @classmethod
    def from_string(cls, text: str, config: Optional[BigIntConfig] = None) -> "BigInt":
        """
        Разбор десятичной строки.

        Допускается ведущий '+' или '-'. Старшие нули удаляются,
        '-0' / '+0' / '-000' дают канонический ноль.

        Raises:
            InvalidFormatError: пустая строка, одиночный знак, нецифровой символ
        """
        if not isinstance(text, str):
            raise TypeError(f"from_string expects str, got {type(text).__name__}")
        return cls(text, config=config)

    @classmethod
    def from_record(cls, record: BigIntRecord) -> "BigInt":
        """Конструирование из BigIntRecord (инварианты уже проверены моделью)."""
        return cls._from_parts(record.negative, list(record.digits))

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def negative(self) -> bool:
        return self._negative

    @property
    def digits(self) -> tuple[int, ...]:
        """Цифры модуля, младшая первой (копия)."""
        return tuple(self._digits)

    def is_zero(self) -> bool:
        return is_zero_magnitude(self._digits)

    def copy(self) -> "BigInt":
        return BigInt(self)

    __copy__ = copy

    def _canonicalize(self) -> None:
        normalize(self._digits)
        if is_zero_magnitude(self._digits):
            self._negative = False

    # -------------------------------------------------------------------------
    # In-place arithmetic (замена буфера получателя)
    # -------------------------------------------------------------------------

    def _add_in_place(self, rhs: "BigInt") -> None:
        if self._negative == rhs._negative:
            self._digits = add_magnitude(self._digits, rhs._digits)
        elif less_than(self._digits, rhs._digits):
            # Знак у операнда с большим модулем
            self._digits = subtract_magnitude(rhs._digits, self._digits)
            self._negative = rhs._negative
        else:
            self._digits = subtract_magnitude(self._digits, rhs._digits)

        self._canonicalize()

    def _subtract_in_place(self, rhs: "BigInt") -> None:
        self._add_in_place(-rhs)

    def _multiply_in_place(self, rhs: "BigInt") -> None:
        self._negative = self._negative != rhs._negative
        self._digits = multiply_magnitude(self._digits, rhs._digits)
        self._canonicalize()

    def _divmod_parts(
        self, rhs: "BigInt", config: BigIntConfig
    ) -> tuple[list[int], list[int]]:
        return divmod_magnitude(self._digits, rhs._digits, method=config.division_method)

    def _divide_in_place(self, rhs: "BigInt", config: BigIntConfig) -> None:
        quotient, _ = self._divmod_parts(rhs, config)
        self._negative = self._negative != rhs._negative
        self._digits = quotient
        self._canonicalize()

    def _remainder_in_place(self, rhs: "BigInt", config: BigIntConfig) -> None:
        # Знак остатка совпадает со знаком делимого
        _, rem = self._divmod_parts(rhs, config)
        self._digits = rem
        self._canonicalize()

    # -------------------------------------------------------------------------
    # Increment / decrement
    # -------------------------------------------------------------------------

    def increment(self) -> "BigInt":
        """Prefix increment: мутирует и возвращает self."""
        self._add_in_place(_ONE)
        return self

    def decrement(self) -> "BigInt":
        """Prefix decrement: мутирует и возвращает self."""
        self._subtract_in_place(_ONE)
        return self

    def post_increment(self) -> "BigInt":
        """Postfix increment: мутирует self, возвращает снимок прежнего значения."""
        snapshot = self.copy()
        self._add_in_place(_ONE)
        return snapshot

    def post_decrement(self) -> "BigInt":
        """Postfix decrement: мутирует self, возвращает снимок прежнего значения."""
        snapshot = self.copy()
        self._subtract_in_place(_ONE)
        return snapshot

    # -------------------------------------------------------------------------
    # Unary operators
    # -------------------------------------------------------------------------

    def __neg__(self) -> "BigInt":
        return negate(self)

    def __pos__(self) -> "BigInt":
        return self.copy()

    def __abs__(self) -> "BigInt":
        return BigInt._from_parts(False, list(self._digits))

    # -------------------------------------------------------------------------
    # Binary operators
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return add(self, rhs)

    def __radd__(self, other: Any) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return add(lhs, self)

    def __sub__(self, other: Any) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return subtract(self, rhs)

    def __rsub__(self, other: Any) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return subtract(lhs, self)

    def __mul__(self, other: Any) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return multiply(self, rhs)

    def __rmul__(self, other: Any) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return multiply(lhs, self)

    def __truediv__(self, other: Any) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return divide(self, rhs)

    def __rtruediv__(self, other: Any) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return divide(lhs, self)

    def __mod__(self, other: Any) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return remainder(self, rhs)

    def __rmod__(self, other: Any) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return remainder(lhs, self)

    def __divmod__(self, other: Any) -> tuple["BigInt", "BigInt"]:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return divide(self, rhs), remainder(self, rhs)

    def __rdivmod__(self, other: Any) -> tuple["BigInt", "BigInt"]:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return divide(lhs, self), remainder(lhs, self)

    # -------------------------------------------------------------------------
    # Compound assignment (мутирует self)
    # -------------------------------------------------------------------------

    def __iadd__(self, other: Any) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        self._add_in_place(rhs)
        return self

    def __isub__(self, other: Any) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        self._subtract_in_place(rhs)
        return self

    def __imul__(self, other: Any) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        self._multiply_in_place(rhs)
        return self

    def __itruediv__(self, other: Any) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        self._divide_in_place(rhs, DEFAULT_CONFIG)
        return self

    def __imod__(self, other: Any) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        self._remainder_in_place(rhs, DEFAULT_CONFIG)
        return self

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def _less(self, rhs: "BigInt") -> bool:
        if self._negative != rhs._negative:
            return self._negative

        if self._negative:
            # Оба отрицательные: больший модуль — меньшее число
            return less_than(rhs._digits, self._digits)

        return less_than(self._digits, rhs._digits)

    def __eq__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return equals(self, rhs)

    def __ne__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return not equals(self, rhs)

    def __lt__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._less(rhs)

    def __le__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._less(rhs) or equals(self, rhs)

    def __gt__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return rhs._less(self)

    def __ge__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return not self._less(rhs)

    # Изменяемое значение с value-равенством
    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # Formatting & conversion
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """Десятичная строка: '-' для отрицательных, цифры от старшей к младшей."""
        text = "".join(str(d) for d in reversed(self._digits))
        return f"-{text}" if self._negative else text

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInt('{self.to_string()}')"

    def __int__(self) -> int:
        value = 0
        for d in reversed(self._digits):
            value = value * BASE + d
        return -value if self._negative else value

    def __bool__(self) -> bool:
        return not self.is_zero()

    def to_record(self) -> BigIntRecord:
        return BigIntRecord(negative=self._negative, digits=list(self._digits))

    # -------------------------------------------------------------------------
    # Pydantic integration
    # -------------------------------------------------------------------------

    @classmethod
    def _validate(cls, value: Any) -> "BigInt":
        if isinstance(value, BigInt):
            return value.copy()
        if isinstance(value, (int, str)) and not isinstance(value, bool):
            return cls(value)
        raise ValueError(f"Cannot interpret {type(value).__name__} as BigInt")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        """BigInt как тип поля Pydantic: вход int/str/BigInt, выход — десятичная строка."""
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


_ONE: Final[BigInt] = BigInt(1)


def _coerce(value: Any) -> Optional[BigInt]:
    """BigInt или нативный int → BigInt; иначе None (NotImplemented)."""
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInt(value)
    return None


# =============================================================================
# NAMED PURE FUNCTIONS
# =============================================================================


def negate(value: BigInt) -> BigInt:
    """
    Смена знака; ноль остаётся положительным нулём.

    Examples:
        >>> negate(BigInt(5))
        BigInt('-5')
        >>> negate(BigInt(0))
        BigInt('0')
    """
    result = value.copy()
    if not result.is_zero():
        result._negative = not result._negative
    return result


def add(lhs: BigInt, rhs: BigInt) -> BigInt:
    """
    Сумма lhs + rhs (операнды не мутируются).

    Одинаковые знаки → сложение модулей, знак сохраняется.
    Разные знаки → вычитание меньшего модуля из большего,
    знак операнда с большим модулем; равные модули → +0.

    Examples:
        >>> add(BigInt("123"), BigInt("-456"))
        BigInt('-333')
    """
    result = lhs.copy()
    result._add_in_place(rhs)
    return result


def subtract(lhs: BigInt, rhs: BigInt) -> BigInt:
    """Разность lhs - rhs, определена как lhs + (-rhs)."""
    result = lhs.copy()
    result._subtract_in_place(rhs)
    return result


def multiply(lhs: BigInt, rhs: BigInt) -> BigInt:
    """Произведение: знак = XOR знаков, модуль — умножение столбиком."""
    result = lhs.copy()
    result._multiply_in_place(rhs)
    return result


def divide(lhs: BigInt, rhs: BigInt, config: Optional[BigIntConfig] = None) -> BigInt:
    """
    Целочисленное деление с усечением к нулю.

    Args:
        lhs: Делимое
        rhs: Делитель
        config: Конфигурация (алгоритм деления)

    Returns:
        Частное: знак = XOR знаков, модуль = floor(|lhs| / |rhs|)

    Raises:
        DivisionByZeroError: Если rhs == 0

    Examples:
        >>> divide(BigInt(7), BigInt(2))
        BigInt('3')
        >>> divide(BigInt(-7), BigInt(2))
        BigInt('-3')
    """
    result = lhs.copy()
    result._divide_in_place(rhs, config or DEFAULT_CONFIG)
    return result


def remainder(lhs: BigInt, rhs: BigInt, config: Optional[BigIntConfig] = None) -> BigInt:
    """
    Остаток усечённого деления; знак совпадает со знаком делимого.

    lhs == divide(lhs, rhs) * rhs + remainder(lhs, rhs)

    Raises:
        DivisionByZeroError: Если rhs == 0

    Examples:
        >>> remainder(BigInt(-7), BigInt(2))
        BigInt('-1')
    """
    result = lhs.copy()
    result._remainder_in_place(rhs, config or DEFAULT_CONFIG)
    return result


def compare(lhs: BigInt, rhs: BigInt) -> int:
    """
    Трёхзначное сравнение.

    Returns:
        -1 если lhs < rhs, 0 если равны, +1 если lhs > rhs
    """
    if lhs._negative != rhs._negative:
        return -1 if lhs._negative else 1

    order = compare_magnitude(lhs._digits, rhs._digits)
    return -order if lhs._negative else order


def equals(lhs: BigInt, rhs: BigInt) -> bool:
    """Равенство: совпадают знак и цифры."""
    return lhs._negative == rhs._negative and lhs._digits == rhs._digits


def parse_with_validation(
    text: str, config: Optional[BigIntConfig] = None
) -> tuple[Optional[BigInt], Optional[str]]:
    """
    Разбор строки без exception.

    Returns:
        (value, None) при успехе или (None, сообщение об ошибке)

    Examples:
        >>> parse_with_validation("42")
        (BigInt('42'), None)
        >>> parse_with_validation("+")[0] is None
        True
    """
    try:
        return BigInt.from_string(text, config=config), None
    except InvalidFormatError as e:
        return None, str(e)
