"""
Unary — Вырожденная система счисления radix 1 (tally)

Значение tally-записи — количество символов, идентичность символов
не учитывается. Запись значения — повторение TALLY_SYMBOL.
"""

from typing import Final

from src.core.domain.errors import IntegerOverflow
from src.core.math.integer_codec import MAX_INTEGER_VALUE


# Символ tally-записи
TALLY_SYMBOL: Final[str] = "1"

# Предел длины tally-строки совпадает с пределом целой части
MAX_TALLY_LENGTH: Final[int] = MAX_INTEGER_VALUE


def tally_count(integer_part: str) -> int:
    """Значение tally-записи: количество символов."""
    return len(integer_part)


def tally_string(count: int, *, max_length: int = MAX_TALLY_LENGTH) -> str:
    """
    Tally-запись значения count.

    count <= 0 даёт пустую строку.

    Raises:
        IntegerOverflow: count > max_length
    """
    if count > max_length:
        raise IntegerOverflow(
            f"The tally length {count} exceeds the limit {max_length}."
        )
    return TALLY_SYMBOL * max(0, count)
