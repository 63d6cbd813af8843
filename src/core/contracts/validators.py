"""
JSON Schema Contract Validators

Модуль для валидации входных данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (package data, src/core/contracts/schema/):
- conversion_input.json (три строки запроса: source radix, numeral, target radix)

Нарушение контракта сводится к ContractViolation: имя поля запроса и
сообщение jsonschema. Для отсутствующего поля имя берётся из required.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match


# Каталог схем внутри пакета
SCHEMA_DIR: Path = Path(__file__).parent / "schema"

# Имя поля для нарушений, не привязанных к полю запроса
WHOLE_INPUT_FIELD = "input"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает схемы, установленные вместе с пакетом (SCHEMA_DIR).
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'conversion_input')

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# VIOLATIONS
# =============================================================================


@dataclass(frozen=True)
class ContractViolation:
    """Первое нарушение контракта: поле запроса и сообщение."""

    field: str
    message: str

    @classmethod
    def from_error(cls, error: ValidationError) -> "ContractViolation":
        return cls(field=violated_field(error), message=error.message)


def violated_field(error: ValidationError) -> str:
    """
    Имя поля, на котором сработала ошибка jsonschema.

    - ошибка значения поля → путь до поля ("numeral")
    - required → первое отсутствующее поле в порядке схемы
    - additionalProperties → первое лишнее поле
    - иначе → WHOLE_INPUT_FIELD
    """
    if error.absolute_path:
        return ".".join(str(part) for part in error.absolute_path)

    instance = error.instance
    if not isinstance(instance, dict):
        return WHOLE_INPUT_FIELD

    if error.validator == "required":
        for name in error.validator_value:
            if name not in instance:
                return name
    elif error.validator == "additionalProperties":
        known = error.schema.get("properties", {})
        for name in instance:
            if name not in known:
                return str(name)

    return WHOLE_INPUT_FIELD


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидация данных против одной именованной JSON Schema."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def find_violation(self, data: Dict[str, Any]) -> Optional[ContractViolation]:
        """
        Наиболее релевантное нарушение (jsonschema best_match) или None.

        Не бросает исключений: данные, прошедшие контракт, дают None.
        """
        error = best_match(self.iter_errors(data))
        if error is None:
            return None
        return ContractViolation.from_error(error)


class ConversionInputValidator(ContractValidator):
    """Валидатор для conversion_input контракта."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("conversion_input", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_conversion_input(data: Dict[str, Any]) -> None:
    """
    Валидация трёх строк запроса конверсии.

    Args:
        data: {"source_radix": ..., "numeral": ..., "target_radix": ...}

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ConversionInputValidator().validate(data)


def find_conversion_input_violation(data: Dict[str, Any]) -> Optional[ContractViolation]:
    """Нарушение conversion_input с именем поля, или None для валидного запроса."""
    return ConversionInputValidator().find_violation(data)
