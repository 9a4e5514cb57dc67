"""
JSON Schema Contract Validators

Модуль для валидации сериализованных записей последовательностей
согласно формальному JSON Schema контракту.
Использует библиотеку jsonschema для проверки соответствия данных схеме.

Схемы:
- sequence_record: {"sequence": "AAZ", "ordinal": 51, "length": 3}

Схема хранится в модуле (без файлового I/O) и проверяется meta-валидацией
при загрузке.
"""

from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator

from src.core.sequence import ValidationError as SequenceValidationError
from src.core.sequence import to_ordinal


# =============================================================================
# SCHEMAS
# =============================================================================


SEQUENCE_RECORD_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "sequence_record.json",
    "title": "SequenceRecord",
    "type": "object",
    "properties": {
        "sequence": {"type": "string", "pattern": "^[A-Z]+$"},
        "ordinal": {"type": "integer", "minimum": 0},
        "length": {"type": "integer", "minimum": 1},
    },
    "required": ["sequence", "ordinal", "length"],
    "additionalProperties": False,
}


# =============================================================================
# SCHEMA REGISTRY
# =============================================================================


class SchemaRegistry:
    """
    Реестр JSON Schema контрактов.

    Каждая схема проходит meta-валидацию при регистрации.
    """

    def __init__(self):
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def register(self, schema_name: str, schema: Dict[str, Any]) -> None:
        """
        Регистрация схемы.

        Raises:
            ValueError: Если схема не является валидной JSON Schema
        """
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema {schema_name}: {e}")

        self._schemas[schema_name] = schema

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Получение зарегистрированной схемы.

        Raises:
            KeyError: Если схема не зарегистрирована
        """
        if schema_name not in self._schemas:
            raise KeyError(f"Schema not registered: {schema_name}")
        return self._schemas[schema_name]


# Глобальный реестр
_SCHEMA_REGISTRY = SchemaRegistry()
_SCHEMA_REGISTRY.register("sequence_record", SEQUENCE_RECORD_SCHEMA)


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_REGISTRY.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class SequenceRecordValidator(ContractValidator):
    """Валидатор для sequence_record контракта."""

    def __init__(self):
        super().__init__("sequence_record")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_sequence_record(data: Dict[str, Any]) -> None:
    """
    Валидация sequence_record: схема + согласованность полей.

    Args:
        data: Данные для валидации

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
        src.core.sequence.ValidationError: Если ordinal/length не соответствуют sequence
    """
    SequenceRecordValidator().validate(data)

    sequence = data["sequence"]

    expected_ordinal = to_ordinal(sequence)
    if data["ordinal"] != expected_ordinal:
        raise SequenceValidationError(
            f"ordinal {data['ordinal']} does not match sequence {sequence!r} "
            f"(expected {expected_ordinal})"
        )

    if data["length"] != len(sequence):
        raise SequenceValidationError(
            f"length {data['length']} does not match sequence {sequence!r} "
            f"(expected {len(sequence)})"
        )
