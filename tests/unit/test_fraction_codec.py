"""
Тесты для Fraction Codec — конверсия дробной части

Проверяемые инварианты:
1. fraction_digits всегда возвращает ровно FRACTION_DIGITS символов
2. Цифры получаются усечением, не округлением
3. Завершающие нули сохраняются
4. fraction_value остаётся в [0, 1)
"""

import math

import pytest

from src.core.domain import DigitOutOfRange, UnknownSymbol
from src.core.math.fraction_codec import (
    FRACTION_DIGITS,
    LARGEST_FRACTION,
    fraction_digits,
    fraction_value,
)


# =============================================================================
# ТЕСТЫ: fraction_value
# =============================================================================


class TestFractionValue:
    """Тесты декодирования дробной части."""

    def test_exact_binary_fractions(self):
        """Дроби, точно представимые в double."""
        assert fraction_value("5", 10) == 0.5
        assert fraction_value("25", 10) == 0.25
        assert fraction_value("1", 2) == 0.5
        assert fraction_value("11", 2) == 0.75
        assert fraction_value("8", 16) == 0.5
        assert fraction_value("c", 16) == 0.75

    def test_empty_digits(self):
        """Пустая дробная часть даёт 0.0."""
        assert fraction_value("", 10) == 0.0

    def test_trailing_zeros(self):
        """Завершающие нули не меняют значение."""
        assert fraction_value("5000", 10) == 0.5

    def test_inexact_fraction_close(self):
        """Неточные дроби совпадают с ожидаемым с точностью double."""
        assert math.isclose(fraction_value("1", 3), 1 / 3)
        assert math.isclose(fraction_value("z", 36), 35 / 36)

    def test_result_below_one(self):
        """Длинная запись из максимальных цифр остаётся < 1.0."""
        value = fraction_value("z" * 30, 36)
        assert 0.9999 < value < 1.0

    def test_digit_out_of_range(self):
        """Цифра >= radix → DigitOutOfRange в strict-режиме."""
        with pytest.raises(DigitOutOfRange):
            fraction_value("9", 8)

    def test_digit_out_of_range_permissive(self):
        """strict=False: цифра >= radix учитывается как есть."""
        assert fraction_value("19", 8, strict=False) == 1 / 8 + 9 / 64
        assert fraction_value("4", 2, strict=False) == LARGEST_FRACTION

    def test_unknown_symbol(self):
        """Символ вне алфавита → UnknownSymbol."""
        with pytest.raises(UnknownSymbol):
            fraction_value("5.5", 10)

    def test_invalid_radix(self):
        """radix < 2 → ValueError."""
        with pytest.raises(ValueError, match="radix"):
            fraction_value("0", 1)


# =============================================================================
# ТЕСТЫ: fraction_digits
# =============================================================================


class TestFractionDigits:
    """Тесты кодирования дробной части."""

    def test_precision_is_five(self):
        """Фиксированная точность — 5 цифр."""
        assert FRACTION_DIGITS == 5

    def test_half(self):
        """0.5 в разных системах."""
        assert fraction_digits(0.5, 2) == "10000"
        assert fraction_digits(0.5, 10) == "50000"
        assert fraction_digits(0.5, 16) == "80000"

    def test_zero(self):
        """0.0 даёт пять нулей."""
        assert fraction_digits(0.0, 2) == "00000"
        assert fraction_digits(0.0, 36) == "00000"

    def test_truncation_not_rounding(self):
        """Цифры усекаются: 2/3 в десятичной → 66666, не 66667."""
        assert fraction_digits(2 / 3, 10) == "66666"

    def test_binary_tenth(self):
        """0.1 в двоичной: 0.000110011..."""
        assert fraction_digits(0.1, 2) == "00011"

    def test_fixed_length_all_radixes(self):
        """Длина результата всегда FRACTION_DIGITS."""
        for radix in range(2, 37):
            for value in (0.0, 0.123, 0.5, 0.999, LARGEST_FRACTION):
                assert len(fraction_digits(value, radix)) == FRACTION_DIGITS

    def test_largest_fraction(self):
        """Значение, близкое к 1.0, не порождает цифру == radix."""
        assert fraction_digits(LARGEST_FRACTION, 10) == "99999"
        assert fraction_digits(LARGEST_FRACTION, 2) == "11111"

    def test_value_outside_unit_interval(self):
        """value вне [0, 1) → ValueError."""
        with pytest.raises(ValueError, match=r"\[0, 1\)"):
            fraction_digits(1.0, 10)

        with pytest.raises(ValueError):
            fraction_digits(-0.1, 10)

        with pytest.raises(ValueError):
            fraction_digits(float("nan"), 10)

    def test_invalid_radix(self):
        """radix < 2 → ValueError."""
        with pytest.raises(ValueError, match="radix"):
            fraction_digits(0.5, 1)
