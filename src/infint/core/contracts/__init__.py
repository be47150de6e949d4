"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных значений InfInt.
"""

from .validators import (
    ContractValidator,
    InfIntModelValidator,
    InfIntTextValidator,
    SchemaLoader,
    validate_infint_model,
    validate_infint_text,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "InfIntTextValidator",
    "InfIntModelValidator",
    # Functions
    "validate_infint_text",
    "validate_infint_model",
]
