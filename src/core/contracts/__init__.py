"""
Contract Validation Module

Модуль для валидации JSON контрактов входных данных конвертера.
"""

from .validators import (
    SCHEMA_DIR,
    WHOLE_INPUT_FIELD,
    ContractValidator,
    ContractViolation,
    ConversionInputValidator,
    SchemaLoader,
    find_conversion_input_violation,
    validate_conversion_input,
    violated_field,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "WHOLE_INPUT_FIELD",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ContractViolation",
    "ConversionInputValidator",
    # Functions
    "validate_conversion_input",
    "find_conversion_input_violation",
    "violated_field",
]
