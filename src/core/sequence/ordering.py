"""
Ordering — лексикографический порядок и граничные последовательности

ВАЖНО: сравнение строго лексикографическое (посимвольно по codepoint),
а НЕ по ordinal. Префикс меньше своего продолжения:
    "AA" < "AAA",  но  "B" > "AAA"  (хотя ordinal("B") < ordinal("AAA"))
"""

from src.core.sequence.alphabet import (
    FIRST_LETTER,
    LAST_LETTER,
    validate_length,
    validate_sequence,
)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_sequences(a: str, b: str) -> int:
    """
    Лексикографическое сравнение двух последовательностей.

    Returns:
        -1 если a < b
         0 если a == b
        +1 если a > b

    Raises:
        ValidationError: Если a или b невалидна
    """
    validate_sequence(a, "a")
    validate_sequence(b, "b")

    if a < b:
        return -1
    elif a > b:
        return 1
    else:
        return 0


def get_minimum(a: str, b: str) -> str:
    """
    Лексикографически меньшая из двух последовательностей.

    При равенстве возвращается a.

    Examples:
        >>> get_minimum("ABC", "ABD")
        'ABC'
        >>> get_minimum("AA", "AAA")
        'AA'
    """
    return a if compare_sequences(a, b) <= 0 else b


def get_maximum(a: str, b: str) -> str:
    """
    Лексикографически большая из двух последовательностей.

    При равенстве возвращается b.

    Examples:
        >>> get_maximum("ABC", "ABD")
        'ABD'
    """
    return a if compare_sequences(a, b) > 0 else b


# =============================================================================
# ГРАНИЧНЫЕ ПОСЛЕДОВАТЕЛЬНОСТИ
# =============================================================================


def get_first(length: int) -> str:
    """
    Первая последовательность заданной длины ("A" * length).

    Raises:
        ValidationError: Если length <= 0

    Examples:
        >>> get_first(3)
        'AAA'
    """
    validate_length(length)
    return FIRST_LETTER * length


def get_last(length: int) -> str:
    """
    Последняя последовательность заданной длины ("Z" * length).

    Raises:
        ValidationError: Если length <= 0

    Examples:
        >>> get_last(3)
        'ZZZ'
    """
    validate_length(length)
    return LAST_LETTER * length
