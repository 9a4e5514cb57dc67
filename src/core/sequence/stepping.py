"""
Stepping — переход к следующей/предыдущей последовательности

Последовательность работает как одометр: справа налево, цифры A (младшая) .. Z (старшая).

- next: Z → A с переносом влево; если перенос прошёл через все позиции,
  длина растёт на 1 ("ZZZ" → "AAAA")
- previous: A → Z с заёмом слева; минимальная последовательность длины n
  ("A" * n) переходит в "Z" * (n - 1); у "A" предыдущей нет (DomainError)

ИНВАРИАНТЫ:
    previous_sequence(next_sequence(s)) == s          для всех s
    next_sequence(previous_sequence(s)) == s          для всех s != "A"
"""

import logging

from src.core.sequence.alphabet import (
    FIRST_LETTER,
    LAST_LETTER,
    DomainError,
    SequenceInvariantViolation,
    validate_sequence,
)

logger = logging.getLogger(__name__)


def next_sequence(sequence: str) -> str:
    """
    Следующая последовательность в порядке счёта.

    Args:
        sequence: Текущая последовательность (A-Z, непустая)

    Returns:
        Следующая последовательность

    Raises:
        ValidationError: Если sequence невалидна

    Examples:
        >>> next_sequence("AAA")
        'AAB'
        >>> next_sequence("AAZ")
        'ABA'
        >>> next_sequence("ZZZ")
        'AAAA'
    """
    validate_sequence(sequence)

    chars = list(sequence)

    for i in range(len(chars) - 1, -1, -1):
        if chars[i] < LAST_LETTER:
            chars[i] = chr(ord(chars[i]) + 1)
            return "".join(chars)
        # Z → A, перенос влево
        chars[i] = FIRST_LETTER

    # Все позиции были Z: растём на старшую цифру
    return FIRST_LETTER * (len(sequence) + 1)


def previous_sequence(sequence: str) -> str:
    """
    Предыдущая последовательность в порядке счёта.

    Args:
        sequence: Текущая последовательность (A-Z, непустая)

    Returns:
        Предыдущая последовательность

    Raises:
        ValidationError: Если sequence невалидна
        DomainError: Если sequence == "A" (предыдущей не существует)
        SequenceInvariantViolation: Недостижимое состояние алгоритма

    Examples:
        >>> previous_sequence("AAB")
        'AAA'
        >>> previous_sequence("ABA")
        'AAZ'
        >>> previous_sequence("AAAA")
        'ZZZ'
    """
    validate_sequence(sequence)

    if all(c == FIRST_LETTER for c in sequence):
        if len(sequence) == 1:
            raise DomainError(f"Cannot get previous of {FIRST_LETTER!r}")
        return LAST_LETTER * (len(sequence) - 1)

    chars = list(sequence)

    for i in range(len(chars) - 1, -1, -1):
        if chars[i] > FIRST_LETTER:
            chars[i] = chr(ord(chars[i]) - 1)
            return "".join(chars)
        # A → Z, заём слева
        chars[i] = LAST_LETTER

    # Хотя бы один символ > A гарантирован проверкой выше
    logger.error("previous_sequence reached unreachable state for %r", sequence)
    raise SequenceInvariantViolation(f"Unexpected state in previous_sequence for {sequence!r}")
