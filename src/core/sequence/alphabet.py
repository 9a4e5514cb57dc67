"""
Alphabet — алфавит, ошибки и единое правило валидации последовательностей

Sequence — непустая строка над алфавитом A..Z, трактуемая как число в
биективной 26-ричной системе (без цифры "ноль"):
    A=0, B=1, ..., Z=25, AA=26, AB=27, ..., AZ=51, BA=52, ...

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая публичная операция валидирует входную последовательность ДО любой логики
2. Последовательности неизменяемы: операции возвращают новые строки
3. Невалидный вход → ValidationError, выход за домен → DomainError
"""

import string
from typing import Any, Final

# =============================================================================
# АЛФАВИТ
# =============================================================================

# Количество "цифр" в биективной системе
ALPHABET_SIZE: Final[int] = 26

# Младшая и старшая цифры
FIRST_LETTER: Final[str] = "A"
LAST_LETTER: Final[str] = "Z"

# Полный алфавит в порядке возрастания
ALPHABET: Final[str] = string.ascii_uppercase

_FIRST_CODE: Final[int] = ord(FIRST_LETTER)
_LAST_CODE: Final[int] = ord(LAST_LETTER)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ValidationError(ValueError):
    """
    Невалидный аргумент операции.

    Возникает, если:
    - последовательность None, пустая или не str
    - последовательность содержит символы вне A-Z
    - длина < 1 или ordinal < 0
    """
    pass


class DomainError(ValueError):
    """
    Результат операции не существует в домене последовательностей.

    Например, у "A" нет предыдущей последовательности.
    """
    pass


class SequenceInvariantViolation(RuntimeError):
    """Внутреннее нарушение инварианта (недостижимая ветка алгоритма)."""
    pass


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_letter(char: str) -> bool:
    """Проверка, что символ лежит в диапазоне A-Z."""
    return len(char) == 1 and _FIRST_CODE <= ord(char) <= _LAST_CODE


def is_valid_sequence(value: Any) -> bool:
    """
    Проверка, является ли значение валидной последовательностью.

    Args:
        value: Проверяемое значение (любого типа)

    Returns:
        True если value — непустая str из символов A-Z

    Examples:
        >>> is_valid_sequence("AAZ")
        True
        >>> is_valid_sequence("")
        False
        >>> is_valid_sequence("abc")
        False
    """
    if not isinstance(value, str) or not value:
        return False
    return all(is_letter(c) for c in value)


def validate_sequence(value: Any, name: str = "sequence") -> str:
    """
    Валидация последовательности.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        ValidationError: Если value None/пустая/не str или содержит символы вне A-Z
    """
    if value is None or (isinstance(value, str) and not value):
        raise ValidationError(f"{name} cannot be null or empty")

    if not isinstance(value, str):
        raise ValidationError(f"{name} must be a str, got {type(value).__name__}")

    if not is_valid_sequence(value):
        raise ValidationError(f"{name} must contain only uppercase letters A-Z, got {value!r}")

    return value


def validate_length(length: Any, name: str = "length") -> int:
    """
    Валидация длины последовательности (int >= 1).

    Raises:
        ValidationError: Если length не int или length <= 0
    """
    # bool — подкласс int, но длиной не является
    if isinstance(length, bool) or not isinstance(length, int):
        raise ValidationError(f"{name} must be an int, got {type(length).__name__}")

    if length <= 0:
        raise ValidationError(f"{name} must be greater than 0, got {length}")

    return length


def validate_ordinal(ordinal: Any, name: str = "ordinal") -> int:
    """
    Валидация ordinal (int >= 0).

    Raises:
        ValidationError: Если ordinal не int или ordinal < 0
    """
    if isinstance(ordinal, bool) or not isinstance(ordinal, int):
        raise ValidationError(f"{name} must be an int, got {type(ordinal).__name__}")

    if ordinal < 0:
        raise ValidationError(f"{name} must be non-negative, got {ordinal}")

    return ordinal
