"""
Random Cases — генератор случайных арифметических кейсов

Генерирует детерминированные (по seed) десятичные операнды и ожидаемые
результаты для проверки BigInt. Оракул — нативный int Python; деление
и остаток приводятся к семантике усечения к нулю.

Гарантии:
- Один и тот же seed → одинаковый набор кейсов
- Делитель для DIV/MOD никогда не равен нулю
- Операнды — корректные десятичные строки (опционально со знаком
  и старшими нулями)
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional, Sequence


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_CASE_COUNT: Final[int] = 200
DEFAULT_MAX_DIGITS: Final[int] = 40


# =============================================================================
# TYPES
# =============================================================================


class Operation(str, Enum):
    """Арифметическая операция кейса"""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"


@dataclass(frozen=True)
class ArithmeticCase:
    """Кейс: lhs <op> rhs == expected (все значения — десятичные строки)."""

    op: Operation
    lhs: str
    rhs: str
    expected: str


@dataclass(frozen=True)
class CaseGeneratorConfig:
    """Конфигурация генератора кейсов."""

    count: int = DEFAULT_CASE_COUNT
    max_digits: int = DEFAULT_MAX_DIGITS
    allow_sign: bool = True
    allow_leading_zeros: bool = False


# =============================================================================
# OPERANDS
# =============================================================================


def random_decimal_string(
    rng: random.Random,
    max_digits: int,
    allow_sign: bool = True,
    allow_leading_zeros: bool = False,
) -> str:
    """
    Случайная десятичная строка длиной 1..max_digits цифр.

    Args:
        rng: Источник случайности
        max_digits: Максимальное количество цифр (>= 1)
        allow_sign: Добавлять ли случайный '+'/'-'
        allow_leading_zeros: Разрешены ли старшие нули

    Returns:
        Десятичная строка, пригодная для BigInt.from_string

    Raises:
        ValueError: Если max_digits < 1
    """
    if max_digits < 1:
        raise ValueError(f"max_digits must be >= 1, got {max_digits}")

    length = rng.randint(1, max_digits)
    digits = [str(rng.randint(0, 9)) for _ in range(length)]

    if not allow_leading_zeros and length > 1 and digits[0] == "0":
        digits[0] = str(rng.randint(1, 9))

    sign = rng.choice(("", "", "+", "-")) if allow_sign else ""
    return sign + "".join(digits)


def random_operand_pair(
    rng: random.Random,
    max_digits: int,
    allow_sign: bool = True,
) -> tuple[str, str]:
    """Пара независимых случайных операндов."""
    return (
        random_decimal_string(rng, max_digits, allow_sign=allow_sign),
        random_decimal_string(rng, max_digits, allow_sign=allow_sign),
    )


# =============================================================================
# ORACLE
# =============================================================================


def _truncated_divmod(lhs: int, rhs: int) -> tuple[int, int]:
    """divmod с усечением к нулю (остаток со знаком делимого)."""
    quotient = abs(lhs) // abs(rhs)
    if (lhs < 0) != (rhs < 0):
        quotient = -quotient
    return quotient, lhs - quotient * rhs


def expected_result(op: Operation, lhs: str, rhs: str) -> str:
    """
    Ожидаемый результат операции (оракул на нативном int).

    Returns:
        Каноническая десятичная строка результата

    Raises:
        ZeroDivisionError: Если op — DIV/MOD и rhs == 0

    Examples:
        >>> expected_result(Operation.ADD, "123", "-456")
        '-333'
        >>> expected_result(Operation.DIV, "-7", "2")
        '-3'
        >>> expected_result(Operation.MOD, "-7", "2")
        '-1'
    """
    a = int(lhs)
    b = int(rhs)

    if op == Operation.ADD:
        return str(a + b)
    if op == Operation.SUB:
        return str(a - b)
    if op == Operation.MUL:
        return str(a * b)

    quotient, rem = _truncated_divmod(a, b)
    return str(quotient) if op == Operation.DIV else str(rem)


# =============================================================================
# GENERATION
# =============================================================================


def generate_cases(
    seed: int,
    count: Optional[int] = None,
    max_digits: Optional[int] = None,
    operations: Optional[Sequence[Operation]] = None,
    config: Optional[CaseGeneratorConfig] = None,
) -> list[ArithmeticCase]:
    """
    Детерминированная генерация арифметических кейсов.

    Args:
        seed: Seed генератора
        count: Количество кейсов (default: config.count)
        max_digits: Максимум цифр операнда (default: config.max_digits)
        operations: Допустимые операции (default: все)
        config: Конфигурация генератора

    Returns:
        Список ArithmeticCase длины count
    """
    config = config or CaseGeneratorConfig()
    count = config.count if count is None else count
    max_digits = config.max_digits if max_digits is None else max_digits
    ops = list(operations) if operations else list(Operation)

    rng = random.Random(seed)
    cases: list[ArithmeticCase] = []

    for _ in range(count):
        op = rng.choice(ops)
        lhs = random_decimal_string(
            rng, max_digits, config.allow_sign, config.allow_leading_zeros
        )
        rhs = random_decimal_string(
            rng, max_digits, config.allow_sign, config.allow_leading_zeros
        )

        # Делитель != 0
        while op in (Operation.DIV, Operation.MOD) and int(rhs) == 0:
            rhs = random_decimal_string(
                rng, max_digits, config.allow_sign, config.allow_leading_zeros
            )

        cases.append(ArithmeticCase(op=op, lhs=lhs, rhs=rhs, expected=expected_result(op, lhs, rhs)))

    return cases
