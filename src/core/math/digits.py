"""
Digits — Magnitude Primitives (base 10)

Модуль содержит примитивы арифметики над модулями чисел (magnitude):
- Нормализация (удаление старших нулей)
- Сравнение модулей
- Сложение с переносом (carry)
- Вычитание с заёмом (borrow)
- Умножение столбиком (schoolbook)

Представление magnitude: list[int] цифр 0..9, младшая цифра первой
(least-significant first). Знак здесь не учитывается — этим занимается
BigInt (src.core.domain.bigint).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат любого примитива нормализован: непустой, без старших нулей
2. Ноль представлен единственным образом: [0]
3. Входные списки никогда не мутируются
4. Все операции детерминированы (O(n·m) в худшем случае)
"""

from typing import Final, Sequence

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления (только десятичная)
BASE: Final[int] = 10

# Верхняя граница аккумулятора в умножении: 9*9 + 9 + 9
MAX_PRODUCT_ACCUMULATOR: Final[int] = 99


# =============================================================================
# ВАЛИДАЦИЯ И НОРМАЛИЗАЦИЯ
# =============================================================================


def validate_digits(digits: Sequence[int]) -> None:
    """
    Валидация последовательности цифр.

    Args:
        digits: Цифры (младшая первой)

    Raises:
        ValueError: Если последовательность пустая или содержит не цифру
    """
    if len(digits) == 0:
        raise ValueError("digits must not be empty")

    for position, digit in enumerate(digits):
        if isinstance(digit, bool) or not isinstance(digit, int):
            raise ValueError(f"digit at position {position} must be int, got {digit!r}")
        if digit < 0 or digit >= BASE:
            raise ValueError(f"digit at position {position} must be in [0, 9], got {digit}")


def normalize(digits: list[int]) -> list[int]:
    """
    Удаление старших (most-significant) нулей на месте.

    Пустой список и список из одних нулей превращаются в [0].

    Args:
        digits: Цифры (младшая первой), изменяются на месте

    Returns:
        Тот же список после нормализации

    Examples:
        >>> normalize([3, 2, 1, 0, 0])
        [3, 2, 1]
        >>> normalize([0, 0, 0])
        [0]
        >>> normalize([])
        [0]
    """
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()

    if not digits:
        digits.append(0)

    return digits


def is_zero_magnitude(digits: Sequence[int]) -> bool:
    """
    Проверка на канонический ноль [0].

    Args:
        digits: Нормализованные цифры

    Returns:
        True если digits == [0]
    """
    return len(digits) == 1 and digits[0] == 0


# =============================================================================
# СРАВНЕНИЕ МОДУЛЕЙ
# =============================================================================


def compare_magnitude(lhs: Sequence[int], rhs: Sequence[int]) -> int:
    """
    Трёхзначное сравнение модулей (знак игнорируется).

    Более длинная (нормализованная) последовательность всегда больше.
    При равной длине цифры сравниваются от старшей к младшей,
    первая отличающаяся цифра решает.

    Args:
        lhs: Нормализованные цифры левого операнда
        rhs: Нормализованные цифры правого операнда

    Returns:
        -1 если |lhs| < |rhs|
         0 если |lhs| == |rhs|
        +1 если |lhs| > |rhs|

    Examples:
        >>> compare_magnitude([9], [0, 1])
        -1
        >>> compare_magnitude([1, 2, 3], [1, 2, 3])
        0
        >>> compare_magnitude([0, 0, 4], [9, 9, 3])
        1
    """
    if len(lhs) != len(rhs):
        return -1 if len(lhs) < len(rhs) else 1

    for i in range(len(lhs) - 1, -1, -1):
        if lhs[i] != rhs[i]:
            return -1 if lhs[i] < rhs[i] else 1

    return 0


def less_than(lhs: Sequence[int], rhs: Sequence[int]) -> bool:
    """
    Строгое сравнение модулей: |lhs| < |rhs|.

    Args:
        lhs: Нормализованные цифры левого операнда
        rhs: Нормализованные цифры правого операнда

    Returns:
        True если модуль lhs строго меньше модуля rhs
    """
    return compare_magnitude(lhs, rhs) < 0


# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add_magnitude(lhs: Sequence[int], rhs: Sequence[int]) -> list[int]:
    """
    Сложение модулей с переносом.

    sum = carry + lhs[i] + rhs[i]; digit = sum % 10; carry = sum // 10.
    Позиции за пределами короткого операнда дают только цифру длинного.
    Финальный ненулевой carry добавляет ещё одну цифру.

    Args:
        lhs: Цифры левого операнда (младшая первой)
        rhs: Цифры правого операнда (младшая первой)

    Returns:
        Новый нормализованный список цифр, длина <= max(len) + 1

    Examples:
        >>> add_magnitude([9, 9, 9], [9, 9, 9])  # 999 + 999 = 1998
        [8, 9, 9, 1]
        >>> add_magnitude([5], [0])
        [5]
    """
    # Длинный операнд всегда первый
    if len(lhs) < len(rhs):
        lhs, rhs = rhs, lhs

    result: list[int] = []
    carry = 0

    for i in range(len(lhs)):
        total = carry + lhs[i]
        if i < len(rhs):
            total += rhs[i]

        result.append(total % BASE)
        carry = total // BASE

    if carry != 0:
        result.append(carry)

    return normalize(result)


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def subtract_magnitude(big: Sequence[int], small: Sequence[int]) -> list[int]:
    """
    Вычитание модулей с заёмом: |big| - |small|.

    Требование: |big| >= |small|. Вызывающий код определяет порядок
    операндов через less_than и передаёт больший первым.

    diff = big[i] - borrow - small[i]; если diff < 0 → diff += 10, borrow = 1.
    Результат имеет длину big до нормализации.

    Args:
        big: Цифры большего по модулю операнда
        small: Цифры меньшего по модулю операнда

    Returns:
        Новый нормализованный список цифр

    Raises:
        ValueError: Если |big| < |small|

    Examples:
        >>> subtract_magnitude([0, 0, 1], [1])  # 100 - 1 = 99
        [9, 9]
        >>> subtract_magnitude([3, 2, 1], [3, 2, 1])
        [0]
    """
    if less_than(big, small):
        raise ValueError("subtract_magnitude requires |big| >= |small|")

    # Буфер длины big, затем нормализация
    result = [0] * len(big)
    borrow = 0

    for i in range(len(big)):
        diff = big[i] - borrow
        if i < len(small):
            diff -= small[i]

        if diff < 0:
            diff += BASE
            borrow = 1
        else:
            borrow = 0

        result[i] = diff

    return normalize(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_digit(digits: Sequence[int], digit: int) -> list[int]:
    """
    Умножение модуля на одну цифру.

    Args:
        digits: Цифры (младшая первой)
        digit: Множитель в [0, 9]

    Returns:
        Новый нормализованный список цифр

    Raises:
        ValueError: Если digit вне [0, 9]
    """
    if digit < 0 or digit >= BASE:
        raise ValueError(f"digit must be in [0, 9], got {digit}")

    if digit == 0 or is_zero_magnitude(digits):
        return [0]

    result: list[int] = []
    carry = 0

    for d in digits:
        total = d * digit + carry
        result.append(total % BASE)
        carry = total // BASE

    if carry != 0:
        result.append(carry)

    return normalize(result)


def multiply_magnitude(lhs: Sequence[int], rhs: Sequence[int]) -> list[int]:
    """
    Умножение модулей столбиком (schoolbook, O(n·m)).

    Буфер результата заранее выделен на len(lhs) + len(rhs) позиций
    (верхняя граница: 999 * 999 = 998001 → 6 цифр), затем нормализуется.

    Для каждой пары (lhs[i], rhs[j]):
        acc = lhs[i] * rhs[j] + partial[i + j] + carry
        partial[i + j] = acc % 10; carry = acc // 10
    acc никогда не превышает 99 (9*9 + 9 + 9).

    Args:
        lhs: Цифры левого операнда (младшая первой)
        rhs: Цифры правого операнда (младшая первой)

    Returns:
        Новый нормализованный список цифр

    Examples:
        >>> multiply_magnitude([9, 9, 9], [9, 9, 9])  # 998001
        [1, 0, 0, 8, 9, 9]
        >>> multiply_magnitude([0], [7, 3])
        [0]
    """
    if is_zero_magnitude(lhs) or is_zero_magnitude(rhs):
        return [0]

    result = [0] * (len(lhs) + len(rhs))

    # Порядок операндов в столбике не влияет на результат
    for i in range(len(lhs)):
        carry = 0

        for j in range(len(rhs)):
            acc = lhs[i] * rhs[j] + result[i + j] + carry
            result[i + j] = acc % BASE
            carry = acc // BASE

        # Позиция i + len(rhs) ещё не заполнена в этой строке
        result[i + len(rhs)] = carry

    return normalize(result)
