"""
Numeral — Число в позиционной записи, разделённое на целую и дробную части
"""

from typing import Optional

from pydantic import BaseModel, Field

from src.core.domain.alphabet import RADIX_POINT


class Numeral(BaseModel):
    """
    Разобранная запись числа.

    fractional_part:
    - None, если в записи нет разделителя
    - "" для записи вида "10." (дробная часть пустая, значение 0)
    """

    integer_part: str = Field(..., description="Символы целой части (big-endian)")
    fractional_part: Optional[str] = Field(None, description="Символы дробной части")

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, text: str) -> "Numeral":
        """Разбор записи по первому разделителю."""
        integer_part, separator, fractional_part = text.partition(RADIX_POINT)
        return cls(
            integer_part=integer_part,
            fractional_part=fractional_part if separator else None,
        )

    @property
    def has_fraction(self) -> bool:
        return self.fractional_part is not None

    def __str__(self) -> str:
        if self.fractional_part is None:
            return self.integer_part
        return f"{self.integer_part}{RADIX_POINT}{self.fractional_part}"
