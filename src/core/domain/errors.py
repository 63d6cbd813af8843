"""
Errors — Иерархия ошибок конвертации

Все ошибки терминальные (non-retryable): ядро поднимает исключение на первом
нарушенном предусловии и не производит частичного вывода.

Иерархия:
    ConversionError (ValueError)
    ├── InvalidConfiguration  — некорректная настройка Converter
    ├── RadixOutOfRange       — radix вне [min_radix, max_radix]
    ├── UnknownSymbol         — символ отсутствует в алфавите
    ├── ValueOutOfAlphabet    — значение цифры >= длины алфавита
    ├── DigitOutOfRange       — значение цифры >= radix исходного числа
    ├── IntegerOverflow       — целая часть превышает допустимый предел
    └── MalformedInput        — входные строки не прошли контракт (boundary)
"""


class ConversionError(ValueError):
    """Базовая ошибка конвертации числа между системами счисления."""

    pass


class InvalidConfiguration(ConversionError):
    """
    Некорректная конфигурация Converter.

    Возникает, если max_radix больше длины алфавита, min_radix больше
    max_radix, min_radix < 1 или алфавит содержит повторяющиеся символы.
    """

    pass


class RadixOutOfRange(ConversionError):
    """Radix вне допустимого диапазона [min_radix, max_radix]."""

    pass


class UnknownSymbol(ConversionError):
    """Символ числа отсутствует в алфавите."""

    pass


class ValueOutOfAlphabet(ConversionError):
    """
    Значение цифры не имеет символа в алфавите (value < 0 или value >= len).

    При корректной конфигурации не должно возникать: это нарушение инварианта.
    """

    pass


class DigitOutOfRange(ConversionError):
    """Символ известен алфавиту, но его значение >= radix исходного числа."""

    pass


class IntegerOverflow(ConversionError):
    """Целое значение (или длина tally-строки) превышает допустимый предел."""

    pass


class MalformedInput(ConversionError):
    """Вход не прошёл проверку количества строк или грамматики (boundary-level)."""

    pass
