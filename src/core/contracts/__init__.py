"""
Contract Validation Module

Модуль для валидации JSON контрактов alphaseq.
"""

from .validators import (
    SEQUENCE_RECORD_SCHEMA,
    ContractValidator,
    SchemaRegistry,
    SequenceRecordValidator,
    validate_sequence_record,
)

__all__ = [
    # Schemas
    "SEQUENCE_RECORD_SCHEMA",
    # Classes
    "SchemaRegistry",
    "ContractValidator",
    "SequenceRecordValidator",
    # Functions
    "validate_sequence_record",
]
