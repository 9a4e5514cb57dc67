"""
AlphaSequence — value object для последовательности A-Z

Immutable Pydantic модель поверх Sequence Codec. Вся арифметика делегируется
в src.core.sequence, модель не дублирует логику.

Порядок сравнения (<, <=, >, >=) — лексикографический, как у get_minimum/get_maximum.
Для порядка счёта используйте .ordinal.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.core.sequence import (
    compare_sequences,
    from_ordinal,
    get_first,
    get_last,
    next_sequence,
    previous_sequence,
    to_ordinal,
    validate_sequence,
)


class AlphaSequence(BaseModel):
    """
    Последовательность A-Z (биективная 26-ричная запись ordinal).

    Immutable модель (frozen=True): next()/previous() возвращают новый экземпляр.
    """

    value: str = Field(..., min_length=1, description="Последовательность A-Z (например, 'AAZ')")

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        """Только заглавные латинские буквы A-Z"""
        return validate_sequence(v, "value")

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "AlphaSequence":
        """Последовательность по ordinal (0 → 'A', 26 → 'AA')."""
        return cls(value=from_ordinal(ordinal))

    @classmethod
    def first(cls, length: int) -> "AlphaSequence":
        """Первая последовательность длины length ('A' * length)."""
        return cls(value=get_first(length))

    @classmethod
    def last(cls, length: int) -> "AlphaSequence":
        """Последняя последовательность длины length ('Z' * length)."""
        return cls(value=get_last(length))

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def ordinal(self) -> int:
        return to_ordinal(self.value)

    @property
    def length(self) -> int:
        return len(self.value)

    # -------------------------------------------------------------------------
    # Шаги
    # -------------------------------------------------------------------------

    def next(self) -> "AlphaSequence":
        """Следующая последовательность ('ZZ' → 'AAA')."""
        return AlphaSequence(value=next_sequence(self.value))

    def previous(self) -> "AlphaSequence":
        """
        Предыдущая последовательность ('AAA' → 'ZZ').

        Raises:
            DomainError: Для 'A'
        """
        return AlphaSequence(value=previous_sequence(self.value))

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def to_record(self) -> dict[str, Any]:
        """
        Запись для контракта sequence_record.

        Returns:
            {"sequence": str, "ordinal": int, "length": int}
        """
        return {
            "sequence": self.value,
            "ordinal": self.ordinal,
            "length": self.length,
        }

    # -------------------------------------------------------------------------
    # Лексикографический порядок
    # -------------------------------------------------------------------------

    def _compare(self, other: Any) -> int:
        if not isinstance(other, AlphaSequence):
            return NotImplemented
        return compare_sequences(self.value, other.value)

    def __lt__(self, other: Any) -> bool:
        result = self._compare(other)
        return result if result is NotImplemented else result < 0

    def __le__(self, other: Any) -> bool:
        result = self._compare(other)
        return result if result is NotImplemented else result <= 0

    def __gt__(self, other: Any) -> bool:
        result = self._compare(other)
        return result if result is NotImplemented else result > 0

    def __ge__(self, other: Any) -> bool:
        result = self._compare(other)
        return result if result is NotImplemented else result >= 0

    def __str__(self) -> str:
        return self.value
