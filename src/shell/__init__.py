"""
Shell — CLI граница: чтение трёх строк, валидация, печать результата или "error".
"""

from .main import ERROR_TOKEN, EXIT_ERROR, EXIT_OK, main, read_lines, run
from .request import INPUT_LINE_COUNT, ConversionRequest, parse_request

__all__ = [
    "ERROR_TOKEN",
    "EXIT_OK",
    "EXIT_ERROR",
    "INPUT_LINE_COUNT",
    "ConversionRequest",
    "parse_request",
    "read_lines",
    "run",
    "main",
]
