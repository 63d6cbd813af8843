"""
Domain models and value objects.

Contains the digit alphabet, the radix range, the parsed numeral and the
conversion error hierarchy.
"""

from src.core.domain.alphabet import (
    DEFAULT_ALPHABET,
    DEFAULT_ALPHABET_MODEL,
    DEFAULT_MAX_RADIX,
    DEFAULT_MIN_RADIX,
    RADIX_POINT,
    UNARY_RADIX,
    Alphabet,
    RadixRange,
)
from src.core.domain.errors import (
    ConversionError,
    DigitOutOfRange,
    IntegerOverflow,
    InvalidConfiguration,
    MalformedInput,
    RadixOutOfRange,
    UnknownSymbol,
    ValueOutOfAlphabet,
)
from src.core.domain.numeral import Numeral

__all__ = [
    # Alphabet module
    "DEFAULT_ALPHABET",
    "DEFAULT_ALPHABET_MODEL",
    "DEFAULT_MIN_RADIX",
    "DEFAULT_MAX_RADIX",
    "RADIX_POINT",
    "UNARY_RADIX",
    "Alphabet",
    "RadixRange",
    # Numeral model
    "Numeral",
    # Errors
    "ConversionError",
    "InvalidConfiguration",
    "RadixOutOfRange",
    "UnknownSymbol",
    "ValueOutOfAlphabet",
    "DigitOutOfRange",
    "IntegerOverflow",
    "MalformedInput",
]
