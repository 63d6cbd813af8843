"""
ConversionRequest — Провалидированный запрос конверсии

Три строки входа (source radix, numeral, target radix) проверяются
контрактом conversion_input и превращаются в immutable Pydantic модель.
"""

from typing import Final, List

from pydantic import BaseModel, Field

from src.core.contracts import find_conversion_input_violation
from src.core.domain.errors import MalformedInput


# Количество строк одного запроса
INPUT_LINE_COUNT: Final[int] = 3


class ConversionRequest(BaseModel):
    """Запрос конверсии, прошедший грамматическую проверку."""

    source_radix: int = Field(..., ge=1, description="Исходный radix")
    numeral: str = Field(..., min_length=1, description="Запись числа")
    target_radix: int = Field(..., ge=1, description="Целевой radix")

    model_config = {"frozen": True}


def parse_request(lines: List[str]) -> ConversionRequest:
    """
    Разбор трёх строк входа.

    Args:
        lines: строки без завершающих переводов строки

    Returns:
        ConversionRequest

    Raises:
        MalformedInput: строк меньше трёх или строка не соответствует грамматике
    """
    if len(lines) < INPUT_LINE_COUNT:
        raise MalformedInput(
            f"Expected {INPUT_LINE_COUNT} input lines, got {len(lines)}."
        )

    source_radix, numeral, target_radix = lines[:INPUT_LINE_COUNT]
    data = {
        "source_radix": source_radix,
        "numeral": numeral,
        "target_radix": target_radix,
    }
    violation = find_conversion_input_violation(data)
    if violation is not None:
        raise MalformedInput(f"Malformed {violation.field}: {violation.message}")

    return ConversionRequest(
        source_radix=int(source_radix),
        numeral=numeral,
        target_radix=int(target_radix),
    )
