"""Shell — CLI граница конвертера.

Читает три строки из stdin (source radix, numeral, target radix),
проверяет их контрактом и печатает результат конверсии.
Любая ошибка (вход или ядро) сворачивается в единственный токен "error";
конкретная причина пишется в лог на уровне DEBUG.

Без флагов и переменных окружения.
"""

import logging
import sys
from typing import Final, List, TextIO

from src.converter import Converter
from src.core.domain.errors import ConversionError
from src.shell.request import INPUT_LINE_COUNT, parse_request

logger = logging.getLogger(__name__)


ERROR_TOKEN: Final[str] = "error"

EXIT_OK: Final[int] = 0
EXIT_ERROR: Final[int] = 1


def read_lines(stream: TextIO, count: int = INPUT_LINE_COUNT) -> List[str]:
    """Не более count строк из stream, без завершающих \\r\\n."""
    lines: List[str] = []
    for line in stream:
        lines.append(line.rstrip("\r\n"))
        if len(lines) == count:
            break
    return lines


def run(stdin: TextIO, stdout: TextIO, converter: Converter | None = None) -> int:
    """Один запуск конверсии.

    Returns:
        Код выхода: EXIT_OK или EXIT_ERROR
    """
    converter = converter or Converter()
    try:
        request = parse_request(read_lines(stdin))
        result = converter.convert(request.numeral, request.source_radix, request.target_radix)
    except ConversionError as e:
        logger.debug("Conversion rejected (%s): %s", type(e).__name__, e)
        print(ERROR_TOKEN, file=stdout)
        return EXIT_ERROR

    print(result, file=stdout)
    return EXIT_OK


def main() -> None:
    sys.exit(run(sys.stdin, sys.stdout))


if __name__ == "__main__":
    main()
