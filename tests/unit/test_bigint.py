"""
Тесты для BigInt — знаковое целое произвольной точности

Проверяет:
1. Конструирование (default, int, str, копия) и канонизацию нуля
2. InvalidFormatError для некорректных строк
3. Знаковые правила сложения, вычитания, умножения, деления, остатка
4. Increment/decrement (prefix и postfix)
5. Сравнения и порядок
6. Форматирование и конверсию
7. Неизменность операндов бинарных операторов
8. Смешанные операнды BigInt / int
"""

import copy

import pytest

from src.core.domain.bigint import (
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
from src.core.math.division import DivisionByZeroError, DivisionMethod


def assert_canonical(value: BigInt) -> None:
    """Инварианты представления."""
    digits = value.digits
    assert len(digits) >= 1
    assert all(0 <= d <= 9 for d in digits)
    assert len(digits) == 1 or digits[-1] != 0
    if digits == (0,):
        assert value.negative is False


# =============================================================================
# ТЕСТЫ КОНСТРУИРОВАНИЯ
# =============================================================================


class TestConstruction:
    """Тесты конструкторов"""

    def test_default_is_zero(self) -> None:
        """BigInt() — канонический ноль"""
        zero = BigInt()
        assert zero.negative is False
        assert zero.digits == (0,)

    def test_default_equals_zero_int(self) -> None:
        assert BigInt() == BigInt(0)

    def test_default_equals_zero_string(self) -> None:
        assert BigInt() == BigInt("0")

    def test_int_equals_string_positive(self) -> None:
        assert BigInt(123) == BigInt("123")

    def test_int_equals_string_negative(self) -> None:
        assert BigInt(-123) == BigInt("-123")

    def test_int_digits_least_significant_first(self) -> None:
        assert BigInt(1234).digits == (4, 3, 2, 1)
        assert BigInt(-1234).negative is True

    def test_int64_min(self) -> None:
        """INT64_MIN совпадает со своей строковой формой"""
        value = BigInt(INT64_MIN)
        assert value == BigInt(str(INT64_MIN))
        assert str(value) == "-9223372036854775808"

    def test_int64_max(self) -> None:
        assert str(BigInt(INT64_MAX)) == "9223372036854775807"

    def test_beyond_int64_range(self) -> None:
        """Нативные int вне 64-бит тоже принимаются"""
        assert str(BigInt(10**30)) == "1" + "0" * 30

    def test_from_int_alias(self) -> None:
        assert BigInt.from_int(-42) == BigInt("-42")

    def test_copy_constructor_is_independent(self) -> None:
        """Копия не разделяет буфер цифр"""
        original = BigInt(99)
        clone = BigInt(original)
        clone += 1
        assert original == BigInt(99)
        assert clone == BigInt(100)

    def test_copy_module(self) -> None:
        original = BigInt(-7)
        clone = copy.copy(original)
        clone.increment()
        assert original == -7
        assert clone == -6

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError, match="bool"):
            BigInt(True)

    def test_unsupported_type_rejected(self) -> None:
        with pytest.raises(TypeError, match="float"):
            BigInt(1.5)  # type: ignore[arg-type]

        with pytest.raises(TypeError):
            BigInt.from_string(123)  # type: ignore[arg-type]


class TestParsing:
    """Тесты разбора десятичных строк"""

    def test_plus_sign(self) -> None:
        assert BigInt("+123") == BigInt(123)

    def test_leading_zeros_stripped(self) -> None:
        assert BigInt("000123").digits == (3, 2, 1)
        assert str(BigInt("-000450")) == "-450"

    def test_zero_canonical_forms(self) -> None:
        """'-0' == '+0' == '0' == BigInt()"""
        forms = ["0", "-0", "+0", "-000", "+000", "0000"]
        for text in forms:
            value = BigInt(text)
            assert value == BigInt()
            assert value.negative is False
            assert value.digits == (0,)

    def test_negative_zero_formats_as_zero(self) -> None:
        assert str(BigInt("-000000000")) == "0"

    def test_empty_string_raises(self) -> None:
        with pytest.raises(InvalidFormatError, match="Empty string"):
            BigInt("")

    def test_lone_sign_raises(self) -> None:
        for text in ["+", "-"]:
            with pytest.raises(InvalidFormatError, match="no digits"):
                BigInt(text)

    def test_non_digit_raises(self) -> None:
        for text in ["12a3", "1 2", " 12", "12 ", "--1", "+-1", "1.0", "1e5", "0x10"]:
            with pytest.raises(InvalidFormatError):
                BigInt(text)

    def test_non_ascii_digit_raises(self) -> None:
        """Unicode-цифры не принимаются"""
        with pytest.raises(InvalidFormatError):
            BigInt("12٣")
        with pytest.raises(InvalidFormatError):
            BigInt("²")

    def test_invalid_format_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            BigInt("abc")

    def test_max_digits_config(self) -> None:
        """max_digits ограничивает длину входа"""
        config = BigIntConfig(max_digits=5)
        assert BigInt("-12345", config=config) == -12345

        with pytest.raises(InvalidFormatError, match="max_digits"):
            BigInt("123456", config=config)

    def test_format_round_trip_canonical(self) -> None:
        """format(parse(s)) == канонизированная s"""
        cases = {
            "123": "123",
            "+123": "123",
            "-123": "-123",
            "007": "7",
            "-007": "-7",
            "+0": "0",
            "85070591730234615865843651857942052864": "85070591730234615865843651857942052864",
        }
        for text, canonical in cases.items():
            assert str(BigInt(text)) == canonical

    def test_parse_with_validation(self) -> None:
        """Парный результат (value, error)"""
        value, error = parse_with_validation("-15")
        assert value == BigInt(-15)
        assert error is None

        value, error = parse_with_validation("12a3")
        assert value is None
        assert error is not None
        assert "12a3" in error


# =============================================================================
# ТЕСТЫ ОТРИЦАНИЯ
# =============================================================================


class TestNegation:
    """Тесты унарных операторов"""

    def test_negation_flips_sign(self) -> None:
        assert -BigInt(5) == BigInt(-5)
        assert -BigInt(-5) == BigInt(5)

    def test_negation_involutive(self) -> None:
        for value in [BigInt(0), BigInt(1), BigInt(-1), BigInt("123456789012345678901234567890")]:
            assert -(-value) == value

    def test_negating_zero_stays_positive(self) -> None:
        negated = -BigInt()
        assert negated.negative is False
        assert negated == BigInt()
        assert negate(BigInt(0)).negative is False

    def test_negation_does_not_mutate(self) -> None:
        value = BigInt(3)
        _ = -value
        assert value == 3

    def test_abs_and_pos(self) -> None:
        assert abs(BigInt(-12)) == 12
        assert abs(BigInt(12)) == 12
        value = BigInt(-4)
        plus = +value
        assert plus == value
        assert plus is not value


# =============================================================================
# ТЕСТЫ СЛОЖЕНИЯ И ВЫЧИТАНИЯ
# =============================================================================


class TestAddition:
    """Тесты знаковых правил сложения"""

    def test_scenario_mixed_signs(self) -> None:
        """123 + (-456) == -333"""
        assert BigInt("123") + BigInt("-456") == BigInt("-333")

    def test_both_positive(self) -> None:
        assert BigInt(999) + BigInt(1) == BigInt(1000)

    def test_both_negative(self) -> None:
        assert BigInt(-999) + BigInt(-1) == BigInt(-1000)

    def test_larger_negative_magnitude_wins(self) -> None:
        assert BigInt(5) + BigInt(-8) == BigInt(-3)
        assert BigInt(-5) + BigInt(8) == BigInt(3)

    def test_equal_magnitudes_give_positive_zero(self) -> None:
        """x + (-x) == +0"""
        for value in [BigInt(7), BigInt(-7), BigInt("-123456789123456789")]:
            result = value + (-value)
            assert result == BigInt()
            assert result.negative is False
            assert_canonical(result)

    def test_result_canonical(self) -> None:
        """1000 + (-999) = 1 без старших нулей"""
        result = BigInt(1000) + BigInt(-999)
        assert result.digits == (1,)
        assert_canonical(result)

    def test_named_add(self) -> None:
        assert add(BigInt(2), BigInt(3)) == 5

    def test_matches_native(self) -> None:
        values = [0, 1, -1, 9, -9, 10, -10, 999, -1000, 123456789, -987654321]
        for a in values:
            for b in values:
                result = BigInt(a) + BigInt(b)
                assert int(result) == a + b
                assert_canonical(result)


class TestSubtraction:
    """Тесты вычитания (a - b == a + (-b))"""

    def test_simple(self) -> None:
        assert BigInt(10) - BigInt(3) == 7
        assert BigInt(3) - BigInt(10) == -7

    def test_subtract_negative(self) -> None:
        assert BigInt(3) - BigInt(-10) == 13
        assert BigInt(-3) - BigInt(-10) == 7

    def test_self_subtraction_is_zero(self) -> None:
        value = BigInt("-5000")
        value -= value
        assert value == 0
        assert value.negative is False

    def test_subtract_zero(self) -> None:
        assert BigInt(-4) - BigInt(0) == -4

    def test_named_subtract(self) -> None:
        assert subtract(BigInt(1), BigInt(2)) == -1

    def test_matches_native(self) -> None:
        values = [0, 1, -1, 10, -10, 100, -101, 4096, -65535]
        for a in values:
            for b in values:
                assert int(BigInt(a) - BigInt(b)) == a - b


# =============================================================================
# ТЕСТЫ УМНОЖЕНИЯ
# =============================================================================


class TestMultiplication:
    """Тесты знаковых правил умножения"""

    def test_scenario_int64_min_squared(self) -> None:
        """INT64_MIN * INT64_MIN"""
        value = BigInt(str(INT64_MIN))
        assert value * value == BigInt("85070591730234615865843651857942052864")

    def test_sign_xor(self) -> None:
        assert BigInt(-3) * BigInt(4) == -12
        assert BigInt(3) * BigInt(-4) == -12
        assert BigInt(-3) * BigInt(-4) == 12

    def test_zero_product_is_positive(self) -> None:
        """-5 * 0 == +0"""
        result = BigInt(-5) * BigInt(0)
        assert result == 0
        assert result.negative is False
        assert_canonical(result)

    def test_named_multiply(self) -> None:
        assert multiply(BigInt(12), BigInt(12)) == 144

    def test_large_product(self) -> None:
        a = 123456789012345678901234567890
        b = -987654321098765432109876543210
        assert int(BigInt(a) * BigInt(b)) == a * b


# =============================================================================
# ТЕСТЫ ДЕЛЕНИЯ И ОСТАТКА
# =============================================================================


class TestDivision:
    """Тесты деления с усечением к нулю"""

    def test_scenario_truncation(self) -> None:
        """7 / 2 == 3"""
        assert BigInt("7") / BigInt("2") == BigInt("3")

    def test_truncates_toward_zero(self) -> None:
        assert BigInt(-7) / BigInt(2) == -3
        assert BigInt(7) / BigInt(-2) == -3
        assert BigInt(-7) / BigInt(-2) == 3

    def test_small_by_large_is_zero(self) -> None:
        result = BigInt(-3) / BigInt(10)
        assert result == 0
        assert result.negative is False

    def test_division_by_zero_raises(self) -> None:
        with pytest.raises(DivisionByZeroError):
            BigInt(5) / BigInt(0)

        with pytest.raises(DivisionByZeroError):
            BigInt(5) / BigInt("-0")

        with pytest.raises(ZeroDivisionError):
            divide(BigInt(0), BigInt(0))

    def test_division_by_zero_leaves_receiver_unchanged(self) -> None:
        """Нет частичного результата"""
        value = BigInt(-42)
        with pytest.raises(DivisionByZeroError):
            value /= 0
        assert value == -42

    def test_repeated_subtraction_config(self) -> None:
        config = BigIntConfig(division_method=DivisionMethod.REPEATED_SUBTRACTION)
        assert divide(BigInt(-1000), BigInt(7), config=config) == -142
        assert remainder(BigInt(-1000), BigInt(7), config=config) == -6

    def test_matches_native_truncation(self) -> None:
        """Совпадает с нативным усечённым делением в диапазоне int64"""
        values = [1, -1, 2, -2, 3, 7, -7, 10, -13, 100, 12345, -99999, INT64_MAX, INT64_MIN]
        for a in values + [0]:
            for b in values:
                expected = abs(a) // abs(b)
                if (a < 0) != (b < 0):
                    expected = -expected
                assert int(BigInt(a) / BigInt(b)) == expected


class TestRemainder:
    """Тесты остатка (знак делимого)"""

    def test_sign_follows_dividend(self) -> None:
        assert BigInt(7) % BigInt(2) == 1
        assert BigInt(-7) % BigInt(2) == -1
        assert BigInt(7) % BigInt(-2) == 1
        assert BigInt(-7) % BigInt(-2) == -1

    def test_zero_remainder_is_positive(self) -> None:
        result = BigInt(-8) % BigInt(2)
        assert result == 0
        assert result.negative is False

    def test_reconstruction(self) -> None:
        """a == (a / b) * b + (a % b)"""
        values = [0, 1, -1, 5, -5, 17, -17, 1000, -1001, 123456789, -98765]
        for a in values:
            for b in values:
                if b == 0:
                    continue
                x, y = BigInt(a), BigInt(b)
                assert (x / y) * y + (x % y) == x

    def test_divmod_builtin(self) -> None:
        q, r = divmod(BigInt(-17), BigInt(5))
        assert q == -3
        assert r == -2

    def test_remainder_by_zero_raises(self) -> None:
        with pytest.raises(DivisionByZeroError):
            BigInt(1) % BigInt(0)
        with pytest.raises(DivisionByZeroError):
            remainder(BigInt(1), BigInt(0))


# =============================================================================
# ТЕСТЫ СОСТАВНОГО ПРИСВАИВАНИЯ
# =============================================================================


class TestCompoundAssignment:
    """Составные операторы мутируют получателя"""

    def test_iadd_mutates_in_place(self) -> None:
        value = BigInt(1)
        alias = value
        value += BigInt(2)
        assert value is alias
        assert alias == 3

    def test_all_compound_operators(self) -> None:
        value = BigInt(10)
        value -= 15
        assert value == -5
        value *= -6
        assert value == 30
        value /= 4
        assert value == 7
        value %= 4
        assert value == 3

    def test_self_addition(self) -> None:
        value = BigInt(-21)
        value += value
        assert value == -42


# =============================================================================
# ТЕСТЫ INCREMENT / DECREMENT
# =============================================================================


class TestIncrementDecrement:
    """Тесты prefix/postfix increment и decrement"""

    def test_prefix_increment_returns_new_value(self) -> None:
        value = BigInt(9)
        result = value.increment()
        assert result is value
        assert value == 10

    def test_postfix_increment_returns_snapshot(self) -> None:
        value = BigInt(9)
        snapshot = value.post_increment()
        assert snapshot == 9
        assert value == 10
        assert snapshot is not value

    def test_prefix_decrement(self) -> None:
        value = BigInt(0)
        assert value.decrement() == -1
        assert value == -1

    def test_postfix_decrement_returns_snapshot(self) -> None:
        value = BigInt(1)
        snapshot = value.post_decrement()
        assert snapshot == 1
        assert value == 0
        assert value.negative is False

    def test_crossing_zero(self) -> None:
        """-1 → 0 → 1 без отрицательного нуля"""
        value = BigInt(-1)
        value.increment()
        assert value == 0
        assert value.negative is False
        value.increment()
        assert value == 1

    def test_carry_on_increment(self) -> None:
        value = BigInt("999999999999999999999")
        value.increment()
        assert str(value) == "1" + "0" * 21


# =============================================================================
# ТЕСТЫ СРАВНЕНИЯ
# =============================================================================


class TestComparison:
    """Тесты операторов сравнения"""

    def test_equality(self) -> None:
        assert BigInt(5) == BigInt("5")
        assert BigInt(5) != BigInt(-5)
        assert equals(BigInt(-0), BigInt("+0"))

    def test_negative_smaller_than_positive(self) -> None:
        assert BigInt(-1000) < BigInt(1)
        assert not BigInt(1) < BigInt(-1000)

    def test_both_negative_reversed_order(self) -> None:
        """Больший модуль среди отрицательных — меньшее число"""
        assert BigInt(-100) < BigInt(-99)
        assert not BigInt(-99) < BigInt(-100)

    def test_both_positive_magnitude_order(self) -> None:
        assert BigInt(99) < BigInt(100)
        assert BigInt(100) > BigInt(99)

    def test_derived_operators(self) -> None:
        a, b = BigInt(3), BigInt(3)
        assert a <= b
        assert a >= b
        assert not a < b
        assert not a > b
        assert BigInt(2) <= BigInt(3)
        assert BigInt(4) >= BigInt(3)

    def test_three_way_compare(self) -> None:
        assert compare(BigInt(-5), BigInt(3)) == -1
        assert compare(BigInt(3), BigInt(-5)) == 1
        assert compare(BigInt(-5), BigInt(-3)) == -1
        assert compare(BigInt(12), BigInt(12)) == 0

    def test_ordering_matches_native(self) -> None:
        values = [-1001, -1000, -99, -1, 0, 1, 9, 10, 1000, 1001]
        for a in values:
            for b in values:
                x, y = BigInt(a), BigInt(b)
                assert (x < y) == (a < b)
                assert (x <= y) == (a <= b)
                assert (x > y) == (a > b)
                assert (x >= y) == (a >= b)
                assert (x == y) == (a == b)
                assert (x != y) == (a != b)

    def test_sorting(self) -> None:
        values = [BigInt(3), BigInt(-10), BigInt(0), BigInt("-2"), BigInt(100)]
        assert [int(v) for v in sorted(values)] == [-10, -2, 0, 3, 100]

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(BigInt(1))


# =============================================================================
# ТЕСТЫ СМЕШАННЫХ ОПЕРАНДОВ
# =============================================================================


class TestMixedOperands:
    """BigInt и нативный int"""

    def test_int_on_right(self) -> None:
        assert BigInt(5) + 3 == 8
        assert BigInt(5) - 8 == -3
        assert BigInt(5) * -2 == -10
        assert BigInt(7) / 2 == 3
        assert BigInt(7) % 2 == 1

    def test_int_on_left(self) -> None:
        assert 3 + BigInt(5) == 8
        assert 3 - BigInt(5) == -2
        assert -2 * BigInt(5) == -10
        assert 7 / BigInt(2) == 3
        assert -7 % BigInt(2) == -1

    def test_comparison_with_int(self) -> None:
        assert BigInt(5) > 4
        assert 4 < BigInt(5)
        assert BigInt(5) == 5
        assert 5 == BigInt(5)

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            BigInt(5) + 1.5  # type: ignore[operator]
        with pytest.raises(TypeError):
            BigInt(5) + "1"  # type: ignore[operator]
        assert (BigInt(5) == "5") is False


# =============================================================================
# ТЕСТЫ ФОРМАТИРОВАНИЯ
# =============================================================================


class TestFormatting:
    """Тесты str/repr/int/bool"""

    def test_str(self) -> None:
        assert str(BigInt(-120)) == "-120"
        assert BigInt(120).to_string() == "120"
        assert str(BigInt()) == "0"

    def test_repr(self) -> None:
        assert repr(BigInt(-7)) == "BigInt('-7')"

    def test_int_conversion(self) -> None:
        assert int(BigInt("-85070591730234615865843651857942052864")) == -(2**126)

    def test_bool(self) -> None:
        assert not BigInt()
        assert BigInt(-1)
        assert BigInt(1)


# =============================================================================
# ТЕСТЫ НЕИЗМЕННОСТИ ОПЕРАНДОВ
# =============================================================================


class TestOperandsNotMutated:
    """Бинарные операторы не мутируют операнды"""

    def test_binary_operators(self) -> None:
        a, b = BigInt("-123456789"), BigInt("98765")
        results = [a + b, a - b, a * b, a / b, a % b, divmod(a, b)]
        assert len(results) == 6
        assert a == BigInt("-123456789")
        assert b == BigInt("98765")
        assert_canonical(a)
        assert_canonical(b)

    def test_named_functions(self) -> None:
        a, b = BigInt(40), BigInt(-6)
        for fn in (add, subtract, multiply, divide, remainder):
            fn(a, b)
        assert a == 40
        assert b == -6

    def test_digits_accessor_is_copy(self) -> None:
        value = BigInt(12)
        digits = value.digits
        assert isinstance(digits, tuple)
        assert value.digits == (2, 1)
