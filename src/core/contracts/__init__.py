"""
Contract Validation Module

Модуль для валидации JSON контрактов vinculum-кодека.
"""

from .validators import (
    ContractValidator,
    ConversionResultValidator,
    SchemaLoader,
    get_schema_loader,
    validate_conversion_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConversionResultValidator",
    # Functions
    "get_schema_loader",
    "validate_conversion_result",
]
