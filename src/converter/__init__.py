"""
Converter — конверсия чисел между позиционными системами счисления.
"""

from .converter import ConversionMode, ConversionResult, Converter, ConverterConfig

__all__ = [
    "Converter",
    "ConverterConfig",
    "ConversionMode",
    "ConversionResult",
]
