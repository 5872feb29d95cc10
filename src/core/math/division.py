"""
Division — Magnitude Division (schoolbook)

Деление модулей с остатком:
- Длинное деление столбиком (LONG): одна цифра частного на цифру делимого
- Повторное вычитание (REPEATED_SUBTRACTION): вычитание делителя до тех пор,
  пока остаток не станет меньше делителя

Оба алгоритма возвращают (quotient, remainder) с гарантией:
    a == q * b + r,  0 <= r < b

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на канонический ноль [0] → DivisionByZeroError, без частичного результата
2. |a| < |b| → ([0], a)
3. Результаты нормализованы, входы не мутируются
"""

import logging
from enum import Enum

from src.core.math.digits import (
    add_magnitude,
    is_zero_magnitude,
    less_than,
    multiply_digit,
    normalize,
    subtract_magnitude,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class DivisionMethod(str, Enum):
    """Алгоритм деления модулей"""

    LONG = "long"
    REPEATED_SUBTRACTION = "repeated_subtraction"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZeroError(ZeroDivisionError):
    """
    Делитель равен каноническому нулю.

    Пробрасывается вызывающему коду; частичный результат не формируется.
    """
    pass


# =============================================================================
# АЛГОРИТМЫ
# =============================================================================


def _divmod_long(dividend: list[int], divisor: list[int]) -> tuple[list[int], list[int]]:
    """Длинное деление: старшие цифры делимого приписываются к остатку."""
    quotient_msf: list[int] = []
    remainder = [0]

    for i in range(len(dividend) - 1, -1, -1):
        # remainder = remainder * 10 + dividend[i]
        remainder = normalize([dividend[i]] + remainder)

        # Наибольшая цифра q: divisor * q <= remainder (remainder < 10 * divisor)
        q_digit = 0
        if not less_than(remainder, divisor):
            q_digit = 9
            product = multiply_digit(divisor, q_digit)
            while less_than(remainder, product):
                q_digit -= 1
                product = multiply_digit(divisor, q_digit)
            remainder = subtract_magnitude(remainder, product)

        quotient_msf.append(q_digit)

    quotient_msf.reverse()
    return normalize(quotient_msf), remainder


def _divmod_repeated_subtraction(
    dividend: list[int], divisor: list[int]
) -> tuple[list[int], list[int]]:
    """Деление повторным вычитанием: O(a / b) шагов."""
    quotient = [0]
    remainder = list(dividend)

    while not less_than(remainder, divisor):
        remainder = subtract_magnitude(remainder, divisor)
        quotient = add_magnitude(quotient, [1])

    return quotient, remainder


# =============================================================================
# PUBLIC API
# =============================================================================


def divmod_magnitude(
    dividend: list[int],
    divisor: list[int],
    method: DivisionMethod = DivisionMethod.LONG,
) -> tuple[list[int], list[int]]:
    """
    Деление модулей с остатком.

    Args:
        dividend: Нормализованные цифры делимого (младшая первой)
        divisor: Нормализованные цифры делителя (младшая первой)
        method: Алгоритм деления (default: LONG)

    Returns:
        (quotient, remainder): новые нормализованные списки цифр

    Raises:
        DivisionByZeroError: Если divisor == [0]

    Examples:
        >>> divmod_magnitude([7], [2])
        ([3], [1])
        >>> divmod_magnitude([0, 0, 1], [1, 1])  # 100 / 11
        ([9], [1])
        >>> divmod_magnitude([5], [0, 1])
        ([0], [5])
    """
    if is_zero_magnitude(divisor):
        logger.debug("division by zero: dividend has %d digits", len(dividend))
        raise DivisionByZeroError("division by zero")

    if less_than(dividend, divisor):
        return [0], list(dividend)

    if method == DivisionMethod.REPEATED_SUBTRACTION:
        return _divmod_repeated_subtraction(dividend, divisor)

    return _divmod_long(dividend, divisor)
