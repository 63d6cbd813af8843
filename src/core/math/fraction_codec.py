"""
Fraction Codec — Конверсия дробной части: digit-string ⇄ float

Десятичное промежуточное представление дробной части — IEEE-754 double
в [0, 1). Ошибки округления double принимаются как есть.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. fraction_digits всегда возвращает ровно FRACTION_DIGITS символов
2. Каждая цифра получается усечением (не округлением)
3. Остаток на каждом шаге: multiplier - trunc(multiplier) (прямое вычитание)
4. Завершающие нули не удаляются

ФОРМУЛЫ:
    fraction = Σ digit_i / radix^(i+1),  i ∈ [0, n)
    digit_k = trunc(rem_k × radix),  rem_{k+1} = rem_k × radix - digit_k
"""

import logging
import math
from typing import Final

from src.core.domain.alphabet import DEFAULT_ALPHABET_MODEL, Alphabet
from src.core.domain.errors import DigitOutOfRange

logger = logging.getLogger(__name__)


# =============================================================================
# PRECISION
# =============================================================================

# Фиксированное количество цифр дробной части результата
FRACTION_DIGITS: Final[int] = 5

# Наибольший double < 1.0
LARGEST_FRACTION: Final[float] = math.nextafter(1.0, 0.0)


# =============================================================================
# DECODE: digit-string → float
# =============================================================================


def fraction_value(
    digits: str,
    radix: int,
    alphabet: Alphabet = DEFAULT_ALPHABET_MODEL,
    *,
    strict: bool = True,
) -> float:
    """
    Значение дробной части digits в системе radix.

    Цифры читаются слева направо (старший дробный разряд первым).
    Накопленная сумма, округлившаяся до 1.0, прижимается к LARGEST_FRACTION,
    чтобы результат оставался в [0, 1).

    Raises:
        UnknownSymbol: символ отсутствует в алфавите
        DigitOutOfRange: strict=True и значение цифры >= radix
        ValueError: radix < 2

    Examples:
        >>> fraction_value("5", 10)
        0.5
        >>> fraction_value("", 10)
        0.0
    """
    if radix < 2:
        raise ValueError(f"radix must be >= 2 for fractional values, got {radix}")

    total = 0.0
    for position, symbol in enumerate(digits, start=1):
        value = alphabet.value_of(symbol)
        if strict and value >= radix:
            raise DigitOutOfRange(
                f"The digit {symbol!r} (value {value}) is not valid in radix {radix}."
            )
        total += value / radix**position

    if total >= 1.0:
        logger.debug("Fraction %r in radix %d rounded up to 1.0, clamped", digits, radix)
        total = LARGEST_FRACTION
    return total


# =============================================================================
# ENCODE: float → digit-string
# =============================================================================


def fraction_digits(
    value: float,
    radix: int,
    alphabet: Alphabet = DEFAULT_ALPHABET_MODEL,
) -> str:
    """
    Ровно FRACTION_DIGITS цифр дробной части value в системе radix.

    Args:
        value: дробное значение в [0, 1)
        radix: основание (>= 2)
        alphabet: алфавит цифр

    Raises:
        ValueError: value вне [0, 1) (включая NaN) или radix < 2

    Examples:
        >>> fraction_digits(0.5, 2)
        '10000'
        >>> fraction_digits(0.0, 16)
        '00000'
    """
    if not 0.0 <= value < 1.0:
        raise ValueError(f"value must be in [0, 1), got {value}")
    if radix < 2:
        raise ValueError(f"radix must be >= 2 for fractional values, got {radix}")

    symbols = []
    remainder = value
    for _ in range(FRACTION_DIGITS):
        multiplier = remainder * radix
        # Произведение может округлиться до radix при remainder -> 1
        digit = min(int(multiplier), radix - 1)
        symbols.append(alphabet.symbol_of(digit))
        remainder = multiplier - digit
    return "".join(symbols)
