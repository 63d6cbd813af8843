"""
Integer Codec — Конверсия целой части: digit-string ⇄ int

Десятичное промежуточное представление целой части — Python int.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат to_decimal_integer никогда не превышает max_value
   (иначе IntegerOverflow, без молчаливого wrap-around)
2. from_decimal_integer(0, r) == символ нуля для любого r >= 2
3. to_decimal_integer(from_decimal_integer(v, r), r) == v
4. Старшая цифра результата from_decimal_integer всегда < radix,
   лишних ведущих нулей не возникает

ФОРМУЛЫ:
    value = Σ digit_i × radix^(n-1-i),  i ∈ [0, n)
    (вычисляется схемой Горнера: acc = acc × radix + digit_i)
"""

from typing import Final

from src.core.domain.alphabet import DEFAULT_ALPHABET_MODEL, Alphabet
from src.core.domain.errors import DigitOutOfRange, IntegerOverflow


# =============================================================================
# OVERFLOW POLICY
# =============================================================================

# Предел целой части: знаковое 64-битное машинное слово
MAX_INTEGER_VALUE: Final[int] = 2**63 - 1


# =============================================================================
# DECODE: digit-string → int
# =============================================================================


def to_decimal_integer(
    digits: str,
    radix: int,
    alphabet: Alphabet = DEFAULT_ALPHABET_MODEL,
    *,
    max_value: int = MAX_INTEGER_VALUE,
    strict: bool = True,
) -> int:
    """
    Значение big-endian записи digits в системе radix.

    Args:
        digits: символы целой части (старший разряд первым)
        radix: основание системы счисления (>= 1)
        alphabet: алфавит цифр
        max_value: верхний предел результата (overflow policy)
        strict: если True, цифра со значением >= radix отвергается

    Returns:
        Неотрицательное целое. Пустая запись даёт 0.

    Raises:
        UnknownSymbol: символ отсутствует в алфавите
        DigitOutOfRange: strict=True и значение цифры >= radix
        IntegerOverflow: результат превышает max_value
        ValueError: radix < 1

    Examples:
        >>> to_decimal_integer("ff", 16)
        255
        >>> to_decimal_integer("1010", 2)
        10
    """
    if radix < 1:
        raise ValueError(f"radix must be >= 1, got {radix}")

    total = 0
    for symbol in digits:
        value = alphabet.value_of(symbol)
        if strict and value >= radix:
            raise DigitOutOfRange(
                f"The digit {symbol!r} (value {value}) is not valid in radix {radix}."
            )
        total = total * radix + value
        # Горнер монотонен, проверка на каждом шаге ограничивает размер int
        if total > max_value:
            raise IntegerOverflow(
                f"The integer part {digits!r} in radix {radix} exceeds the limit {max_value}."
            )
    return total


# =============================================================================
# ENCODE: int → digit-string
# =============================================================================


def from_decimal_integer(
    value: int,
    radix: int,
    alphabet: Alphabet = DEFAULT_ALPHABET_MODEL,
) -> str:
    """
    Запись неотрицательного целого в системе radix (повторное деление).

    Остатки собираются от младшего разряда к старшему, цикл выполняется
    минимум один раз и завершается, когда частное становится < radix.
    Ненулевое финальное частное добавляется старшей цифрой.

    Args:
        value: неотрицательное целое
        radix: основание (>= 2)
        alphabet: алфавит цифр

    Returns:
        Big-endian запись; для 0 — один символ нуля.

    Raises:
        ValueError: value < 0 или radix < 2
        ValueOutOfAlphabet: radix больше длины алфавита

    Examples:
        >>> from_decimal_integer(255, 16)
        'ff'
        >>> from_decimal_integer(0, 2)
        '0'
    """
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    if radix < 2:
        raise ValueError(f"radix must be >= 2 for positional encoding, got {radix}")

    symbols = []
    dividend = value
    while True:
        symbols.append(alphabet.symbol_of(dividend % radix))
        dividend //= radix
        if dividend < radix:
            break
    if dividend != 0:
        symbols.append(alphabet.symbol_of(dividend))
    return "".join(reversed(symbols))
