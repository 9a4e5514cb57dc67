"""
Ordinal — конверсия Sequence ⟷ Ordinal (биективная 26-ричная система)

ФОРМУЛЫ:
    to_ordinal(s)   = (Σ (s_i - 'A' + 1) * 26^(n-1-i)) - 1
    from_ordinal(n) = извлечение цифр: prepend('A' + n % 26); n = n // 26 - 1; пока n >= 0

Границы длин: ordinal 26 → "AA", 702 → "AAA", 18278 → "AAAA", ...

Python int не ограничен по разрядности, переполнения нет.
"""

from src.core.sequence.alphabet import (
    ALPHABET,
    ALPHABET_SIZE,
    FIRST_LETTER,
    validate_ordinal,
    validate_sequence,
)


def to_ordinal(sequence: str) -> int:
    """
    Ordinal последовательности (0-based).

    Args:
        sequence: Последовательность A-Z

    Returns:
        Неотрицательный ordinal

    Raises:
        ValidationError: Если sequence невалидна

    Examples:
        >>> to_ordinal("A")
        0
        >>> to_ordinal("Z")
        25
        >>> to_ordinal("AA")
        26
    """
    validate_sequence(sequence)

    result = 0
    for char in sequence:
        result = result * ALPHABET_SIZE + (ord(char) - ord(FIRST_LETTER) + 1)

    return result - 1


def from_ordinal(ordinal: int) -> str:
    """
    Последовательность по ordinal (0-based).

    Args:
        ordinal: Неотрицательный ordinal

    Returns:
        Последовательность A-Z

    Raises:
        ValidationError: Если ordinal < 0

    Examples:
        >>> from_ordinal(0)
        'A'
        >>> from_ordinal(25)
        'Z'
        >>> from_ordinal(26)
        'AA'
    """
    validate_ordinal(ordinal)

    if ordinal < ALPHABET_SIZE:
        return ALPHABET[ordinal]

    digits = []
    n = ordinal
    while n >= 0:
        digits.append(ALPHABET[n % ALPHABET_SIZE])
        n = n // ALPHABET_SIZE - 1

    return "".join(reversed(digits))
