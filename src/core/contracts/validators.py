"""
JSON Schema Contract Validators

Валидация документов, которые CLI печатает в режиме --json, против
формального JSON Schema контракта (Draft 2020-12, библиотека jsonschema).

Схемы поставляются внутри пакета (src/core/contracts/schema/) и читаются
через importlib.resources, поэтому доступны и после установки wheel.

Схемы:
- conversion_result.json (ConversionResult)
"""

import json
from importlib import resources
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator

# Пакет, внутри которого лежит каталог schema/
SCHEMA_PACKAGE = "src.core.contracts"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema из ресурсов пакета.

    Каждая схема читается и проходит meta-validation один раз, далее
    отдаётся из кэша.
    """

    def __init__(self, package: str = SCHEMA_PACKAGE):
        self._schema_dir = resources.files(package) / "schema"
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени без расширения (например, 'conversion_result').

        Raises:
            FileNotFoundError: Если схема отсутствует в пакете
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        resource = self._schema_dir / f"{schema_name}.json"
        if not resource.is_file():
            raise FileNotFoundError(f"Schema not found in {SCHEMA_PACKAGE}: {schema_name}.json")

        schema = json.loads(resource.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER: Optional[SchemaLoader] = None


def get_schema_loader() -> SchemaLoader:
    """Общий загрузчик, создаётся при первом обращении."""
    global _SCHEMA_LOADER
    if _SCHEMA_LOADER is None:
        _SCHEMA_LOADER = SchemaLoader()
    return _SCHEMA_LOADER


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор документа против одной схемы.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = get_schema_loader().load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: первое найденное нарушение контракта
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Все нарушения контракта, без exception."""
        return self.validator.iter_errors(data)


class ConversionResultValidator(ContractValidator):
    """Контракт conversion_result: вывод CLI в режиме --json."""

    def __init__(self):
        super().__init__("conversion_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_conversion_result(data: Dict[str, Any]) -> None:
    """
    Валидация одного ConversionResult документа.

    Raises:
        jsonschema.ValidationError: Если документ не соответствует схеме
    """
    ConversionResultValidator().validate(data)
