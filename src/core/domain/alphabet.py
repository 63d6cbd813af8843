"""
Alphabet & RadixRange — Алфавит цифр и допустимый диапазон систем счисления

Immutable Pydantic модели:
- Alphabet: упорядоченный набор уникальных символов, символ на позиции i
  обозначает цифру со значением i
- RadixRange: пара (min_radix, max_radix), min_radix >= 1

По умолчанию: radix 1..36, алфавит "0".."9" затем "a".."z".
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.domain.errors import UnknownSymbol, ValueOutOfAlphabet


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_ALPHABET: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

DEFAULT_MIN_RADIX: Final[int] = 1
DEFAULT_MAX_RADIX: Final[int] = 36

# Вырожденная система счисления (tally / unary)
UNARY_RADIX: Final[int] = 1

# Разделитель целой и дробной части, не может быть символом алфавита
RADIX_POINT: Final[str] = "."


# =============================================================================
# ALPHABET
# =============================================================================


class Alphabet(BaseModel):
    """
    Алфавит цифр.

    Инварианты:
    - не пустой
    - каждый символ — ровно один character
    - символы уникальны
    - не содержит RADIX_POINT
    """

    symbols: str = Field(..., min_length=1, description="Символы в порядке значений цифр")

    model_config = {"frozen": True}

    @field_validator("symbols")
    @classmethod
    def validate_symbols(cls, v: str) -> str:
        """Проверка уникальности символов и отсутствия разделителя."""
        if RADIX_POINT in v:
            raise ValueError(f"Alphabet must not contain the radix point {RADIX_POINT!r}")
        if len(set(v)) != len(v):
            duplicates = sorted({symbol for symbol in v if v.count(symbol) > 1})
            raise ValueError(f"Alphabet symbols must be unique, duplicates: {duplicates}")
        return v

    def __len__(self) -> int:
        return len(self.symbols)

    def value_of(self, symbol: str) -> int:
        """
        Значение цифры по символу.

        Args:
            symbol: один символ

        Returns:
            Позиция символа в алфавите (с нуля)

        Raises:
            UnknownSymbol: если символ отсутствует в алфавите
        """
        index = self.symbols.find(symbol) if len(symbol) == 1 else -1
        if index < 0:
            raise UnknownSymbol(f"The alphabet doesn't contain member: {symbol!r}.")
        return index

    def symbol_of(self, value: int) -> str:
        """
        Символ по значению цифры.

        Raises:
            ValueOutOfAlphabet: если value < 0 или value >= len(alphabet)
        """
        if 0 <= value < len(self.symbols):
            return self.symbols[value]
        raise ValueOutOfAlphabet(
            f"The value is out of the alphabet range: {value} not in [0, {len(self.symbols)})."
        )


# =============================================================================
# RADIX RANGE
# =============================================================================


class RadixRange(BaseModel):
    """Допустимый диапазон radix (включительно с обеих сторон)."""

    min_radix: int = Field(DEFAULT_MIN_RADIX, ge=1, description="Минимальный radix")
    max_radix: int = Field(DEFAULT_MAX_RADIX, ge=1, description="Максимальный radix")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_order(self) -> "RadixRange":
        if self.min_radix > self.max_radix:
            raise ValueError(
                f"The minimum radix is greater than the maximum radix: "
                f"{self.min_radix} > {self.max_radix}."
            )
        return self

    def __contains__(self, radix: int) -> bool:
        return self.min_radix <= radix <= self.max_radix


DEFAULT_ALPHABET_MODEL: Final[Alphabet] = Alphabet(symbols=DEFAULT_ALPHABET)
