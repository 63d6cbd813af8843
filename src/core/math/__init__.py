"""
Core math modules для конвертера

Численные алгоритмы конверсии целой, дробной и tally-записи.
"""

# Integer Codec
from src.core.math.integer_codec import (
    MAX_INTEGER_VALUE,
    from_decimal_integer,
    to_decimal_integer,
)

# Fraction Codec
from src.core.math.fraction_codec import (
    FRACTION_DIGITS,
    LARGEST_FRACTION,
    fraction_digits,
    fraction_value,
)

# Unary (tally)
from src.core.math.unary import (
    MAX_TALLY_LENGTH,
    TALLY_SYMBOL,
    tally_count,
    tally_string,
)

__all__ = [
    # Integer Codec
    "MAX_INTEGER_VALUE",
    "from_decimal_integer",
    "to_decimal_integer",
    # Fraction Codec
    "FRACTION_DIGITS",
    "LARGEST_FRACTION",
    "fraction_digits",
    "fraction_value",
    # Unary
    "MAX_TALLY_LENGTH",
    "TALLY_SYMBOL",
    "tally_count",
    "tally_string",
]
