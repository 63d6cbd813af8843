"""Converter — конверсия числа между позиционными системами счисления

Единственный компонент ядра. Владеет алфавитом и диапазоном radix,
конфигурируется один раз и далее используется read-only.

Маршрутизация convert:
- radix 1 с любой стороны → tally-конверсия (только целая часть)
- запись без разделителя → integer codec в обе стороны
- запись с разделителем → integer codec + fraction codec, склейка через "."

Десятичное промежуточное представление: int для целой части,
float в [0, 1) для дробной.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import ValidationError

from src.core.domain.alphabet import (
    DEFAULT_ALPHABET,
    DEFAULT_MAX_RADIX,
    DEFAULT_MIN_RADIX,
    RADIX_POINT,
    UNARY_RADIX,
    Alphabet,
    RadixRange,
)
from src.core.domain.errors import InvalidConfiguration, RadixOutOfRange
from src.core.domain.numeral import Numeral
from src.core.math.fraction_codec import fraction_digits, fraction_value
from src.core.math.integer_codec import (
    MAX_INTEGER_VALUE,
    from_decimal_integer,
    to_decimal_integer,
)
from src.core.math.unary import MAX_TALLY_LENGTH, tally_count, tally_string

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class ConversionMode(str, Enum):
    """Путь, по которому прошла конверсия."""

    UNARY = "unary"
    INTEGER = "integer"
    FRACTIONAL = "fractional"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ConversionResult:
    """Результат конверсии с промежуточными значениями."""

    text: str
    mode: ConversionMode

    # Десятичное промежуточное представление
    integer_value: int
    fraction_value: Optional[float]

    source_radix: int
    target_radix: int


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConverterConfig:
    """Конфигурация Converter.

    По умолчанию: radix 1..36 над алфавитом "0".."9" "a".."z".
    """

    min_radix: int = DEFAULT_MIN_RADIX
    max_radix: int = DEFAULT_MAX_RADIX
    alphabet: str = DEFAULT_ALPHABET

    # Overflow policy для целой части
    max_integer_value: int = MAX_INTEGER_VALUE
    max_tally_length: int = MAX_TALLY_LENGTH

    # Отвергать цифры со значением >= radix исходного числа
    strict_digits: bool = True


# =============================================================================
# CONVERTER
# =============================================================================


class Converter:
    """Конвертер чисел между системами счисления.

    Порядок проверок convert:
    1. Оба radix в [min_radix, max_radix]
    2. radix 1 с любой стороны → tally-путь
    3. Разбор записи, конверсия целой и (опционально) дробной части
    """

    def __init__(self, config: ConverterConfig | None = None):
        """Инициализация конвертера.

        Args:
            config: конфигурация (опционально, используется default)

        Raises:
            InvalidConfiguration: алфавит и диапазон radix несовместимы
        """
        self.config = config or ConverterConfig()
        self._validate_config(self.config)
        try:
            self.alphabet = Alphabet(symbols=self.config.alphabet)
            self.radix_range = RadixRange(
                min_radix=self.config.min_radix,
                max_radix=self.config.max_radix,
            )
        except ValidationError as e:
            raise InvalidConfiguration(f"Invalid converter configuration: {e}") from e

    @classmethod
    def from_range(
        cls,
        min_radix: int,
        max_radix: int,
        alphabet: str = DEFAULT_ALPHABET,
    ) -> "Converter":
        """Конвертер над alphabet с диапазоном radix [min_radix, max_radix].

        Raises:
            InvalidConfiguration: алфавит и диапазон radix несовместимы
        """
        return cls(ConverterConfig(min_radix=min_radix, max_radix=max_radix, alphabet=alphabet))

    @staticmethod
    def _validate_config(config: ConverterConfig) -> None:
        if config.max_radix > len(config.alphabet):
            raise InvalidConfiguration(
                f"The maximum radix is greater than the length of the alphabet: "
                f"{config.max_radix} > {len(config.alphabet)}."
            )
        if config.min_radix > config.max_radix:
            raise InvalidConfiguration(
                f"The minimum radix is greater than the maximum radix: "
                f"{config.min_radix} > {config.max_radix}."
            )
        if config.min_radix < 1:
            raise InvalidConfiguration(
                f"The minimum radix must be at least 1, got {config.min_radix}."
            )

    @property
    def min_radix(self) -> int:
        return self.radix_range.min_radix

    @property
    def max_radix(self) -> int:
        return self.radix_range.max_radix

    # -------------------------------------------------------------------------
    # Validation & digit mapping
    # -------------------------------------------------------------------------

    def require_radix_in_range(self, radix: int) -> None:
        """Raises RadixOutOfRange, если radix вне [min_radix, max_radix]."""
        if radix < self.min_radix:
            raise RadixOutOfRange(
                f"The radix is less than the minimum radix: {radix} < {self.min_radix}."
            )
        if radix > self.max_radix:
            raise RadixOutOfRange(
                f"The radix is greater than the maximum radix: {radix} > {self.max_radix}."
            )

    def value_of(self, symbol: str) -> int:
        return self.alphabet.value_of(symbol)

    def symbol_of(self, value: int) -> str:
        return self.alphabet.symbol_of(value)

    # -------------------------------------------------------------------------
    # Codecs bound to this configuration
    # -------------------------------------------------------------------------

    def to_decimal_integer(self, digits: str, radix: int) -> int:
        return to_decimal_integer(
            digits,
            radix,
            self.alphabet,
            max_value=self.config.max_integer_value,
            strict=self.config.strict_digits,
        )

    def from_decimal_integer(self, value: int, radix: int) -> str:
        return from_decimal_integer(value, radix, self.alphabet)

    def fraction_value(self, digits: str, radix: int) -> float:
        return fraction_value(digits, radix, self.alphabet, strict=self.config.strict_digits)

    def fraction_digits(self, value: float, radix: int) -> str:
        return fraction_digits(value, radix, self.alphabet)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def convert(self, source: str, source_radix: int, target_radix: int) -> str:
        """Конверсия записи source из source_radix в target_radix.

        Raises:
            RadixOutOfRange: radix вне диапазона
            UnknownSymbol, DigitOutOfRange, IntegerOverflow: некорректная запись
        """
        return self.convert_detailed(source, source_radix, target_radix).text

    def convert_detailed(
        self,
        source: str,
        source_radix: int,
        target_radix: int,
    ) -> ConversionResult:
        """Конверсия с промежуточными значениями (см. convert)."""
        self.require_radix_in_range(source_radix)
        self.require_radix_in_range(target_radix)

        if UNARY_RADIX in (source_radix, target_radix):
            return self._convert_unary(source, source_radix, target_radix)

        numeral = Numeral.parse(source)
        integer = self.to_decimal_integer(numeral.integer_part, source_radix)
        converted_integer = self.from_decimal_integer(integer, target_radix)

        if not numeral.has_fraction:
            logger.debug("Integer conversion %r: %d -> %d", source, source_radix, target_radix)
            return ConversionResult(
                text=converted_integer,
                mode=ConversionMode.INTEGER,
                integer_value=integer,
                fraction_value=None,
                source_radix=source_radix,
                target_radix=target_radix,
            )

        fraction = self.fraction_value(numeral.fractional_part, source_radix)
        converted_fraction = self.fraction_digits(fraction, target_radix)
        logger.debug("Fractional conversion %r: %d -> %d", source, source_radix, target_radix)
        return ConversionResult(
            text=f"{converted_integer}{RADIX_POINT}{converted_fraction}",
            mode=ConversionMode.FRACTIONAL,
            integer_value=integer,
            fraction_value=fraction,
            source_radix=source_radix,
            target_radix=target_radix,
        )

    def convert_unary(self, source: str, source_radix: int, target_radix: int) -> str:
        """Tally-конверсия: обрабатывается только целая часть, дробная отбрасывается."""
        return self._convert_unary(source, source_radix, target_radix).text

    def _convert_unary(
        self,
        source: str,
        source_radix: int,
        target_radix: int,
    ) -> ConversionResult:
        numeral = Numeral.parse(source)
        if numeral.has_fraction:
            logger.debug("Unary conversion drops fractional part of %r", source)

        if source_radix == UNARY_RADIX:
            integer = tally_count(numeral.integer_part)
        else:
            integer = self.to_decimal_integer(numeral.integer_part, source_radix)

        if target_radix == UNARY_RADIX:
            text = tally_string(integer, max_length=self.config.max_tally_length)
        else:
            text = self.from_decimal_integer(integer, target_radix)

        return ConversionResult(
            text=text,
            mode=ConversionMode.UNARY,
            integer_value=integer,
            fraction_value=None,
            source_radix=source_radix,
            target_radix=target_radix,
        )
