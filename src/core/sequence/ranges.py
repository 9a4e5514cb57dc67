"""
Ranges — диапазоны и смещения в порядке счёта (по ordinal)

В отличие от ordering, здесь порядок — порядок счёта:
    "Z" → "AA" → "AB" → ...
"""

from typing import Iterator

from src.core.sequence.alphabet import DomainError, ValidationError
from src.core.sequence.ordinal import from_ordinal, to_ordinal
from src.core.sequence.stepping import next_sequence


def sequence_distance(a: str, b: str) -> int:
    """
    Знаковое расстояние от a до b в порядке счёта.

    Examples:
        >>> sequence_distance("Z", "AA")
        1
        >>> sequence_distance("AB", "A")
        -27
    """
    return to_ordinal(b) - to_ordinal(a)


def iter_sequences(start: str, end: str) -> Iterator[str]:
    """
    Все последовательности от start до end включительно.

    Args:
        start: Первая последовательность диапазона
        end: Последняя последовательность диапазона

    Yields:
        Последовательности в порядке счёта

    Raises:
        ValidationError: Если start/end невалидны или start идёт после end
    """
    # Валидация выполняется до первого next(), а не лениво
    count = sequence_distance(start, end)
    if count < 0:
        raise ValidationError(f"start {start!r} must not come after end {end!r}")

    return _walk(start, count + 1)


def _walk(start: str, count: int) -> Iterator[str]:
    current = start
    for _ in range(count - 1):
        yield current
        current = next_sequence(current)
    yield current


def advance_sequence(sequence: str, steps: int) -> str:
    """
    Последовательность на steps позиций дальше (steps < 0 — назад).

    Raises:
        ValidationError: Если sequence невалидна или steps не int
        DomainError: Если результат раньше "A"

    Examples:
        >>> advance_sequence("AZ", 1)
        'BA'
        >>> advance_sequence("AA", -1)
        'Z'
    """
    if isinstance(steps, bool) or not isinstance(steps, int):
        raise ValidationError(f"steps must be an int, got {type(steps).__name__}")

    target = to_ordinal(sequence) + steps
    if target < 0:
        raise DomainError(f"Cannot advance {sequence!r} by {steps}: result precedes 'A'")

    return from_ordinal(target)
