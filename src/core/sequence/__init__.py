"""
Sequence Codec для alphaseq

Биективная 26-ричная арифметика над строками A-Z: шаг вперёд/назад,
лексикографический порядок, граничные последовательности и конверсия в ordinal.
"""

# Alphabet
from src.core.sequence.alphabet import (
    # Constants
    ALPHABET,
    ALPHABET_SIZE,
    FIRST_LETTER,
    LAST_LETTER,
    # Exceptions
    DomainError,
    SequenceInvariantViolation,
    ValidationError,
    # Validation
    is_letter,
    is_valid_sequence,
    validate_length,
    validate_ordinal,
    validate_sequence,
)

# Stepping
from src.core.sequence.stepping import (
    next_sequence,
    previous_sequence,
)

# Ordering
from src.core.sequence.ordering import (
    compare_sequences,
    get_first,
    get_last,
    get_maximum,
    get_minimum,
)

# Ordinal
from src.core.sequence.ordinal import (
    from_ordinal,
    to_ordinal,
)

# Ranges
from src.core.sequence.ranges import (
    advance_sequence,
    iter_sequences,
    sequence_distance,
)

__all__ = [
    # Alphabet — Constants
    "ALPHABET",
    "ALPHABET_SIZE",
    "FIRST_LETTER",
    "LAST_LETTER",
    # Alphabet — Exceptions
    "DomainError",
    "SequenceInvariantViolation",
    "ValidationError",
    # Alphabet — Validation
    "is_letter",
    "is_valid_sequence",
    "validate_length",
    "validate_ordinal",
    "validate_sequence",
    # Stepping
    "next_sequence",
    "previous_sequence",
    # Ordering
    "compare_sequences",
    "get_first",
    "get_last",
    "get_maximum",
    "get_minimum",
    # Ordinal
    "from_ordinal",
    "to_ordinal",
    # Ranges
    "advance_sequence",
    "iter_sequences",
    "sequence_distance",
]
