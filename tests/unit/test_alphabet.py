"""
Тесты для Alphabet — алфавит, ошибки и валидация

Проверяет:
1. Константы алфавита
2. is_valid_sequence / validate_sequence
3. validate_length / validate_ordinal
4. Иерархию исключений
"""

import pytest

from src.core.sequence.alphabet import (
    ALPHABET,
    ALPHABET_SIZE,
    FIRST_LETTER,
    LAST_LETTER,
    DomainError,
    SequenceInvariantViolation,
    ValidationError,
    is_letter,
    is_valid_sequence,
    validate_length,
    validate_ordinal,
    validate_sequence,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================


class TestAlphabetConstants:
    """Тесты констант алфавита"""

    def test_alphabet_size(self) -> None:
        """26 букв от A до Z"""
        assert ALPHABET_SIZE == 26
        assert len(ALPHABET) == ALPHABET_SIZE

    def test_boundaries(self) -> None:
        """Первая и последняя буквы"""
        assert FIRST_LETTER == "A"
        assert LAST_LETTER == "Z"
        assert ALPHABET[0] == FIRST_LETTER
        assert ALPHABET[-1] == LAST_LETTER


class TestExceptions:
    """Иерархия исключений"""

    def test_validation_error_is_value_error(self) -> None:
        assert issubclass(ValidationError, ValueError)

    def test_domain_error_is_value_error(self) -> None:
        assert issubclass(DomainError, ValueError)

    def test_errors_are_distinct(self) -> None:
        """ValidationError и DomainError не пересекаются"""
        assert not issubclass(ValidationError, DomainError)
        assert not issubclass(DomainError, ValidationError)

    def test_invariant_violation_is_not_value_error(self) -> None:
        """Нарушение инварианта — фатальная ошибка, не ошибка входа"""
        assert issubclass(SequenceInvariantViolation, RuntimeError)
        assert not issubclass(SequenceInvariantViolation, ValueError)


# =============================================================================
# ВАЛИДАЦИЯ ПОСЛЕДОВАТЕЛЬНОСТЕЙ
# =============================================================================


class TestIsLetter:
    """Тесты для is_letter"""

    def test_every_uppercase_letter(self) -> None:
        for char in ALPHABET:
            assert is_letter(char)

    def test_neighbours_of_range(self) -> None:
        """Символы сразу до 'A' и сразу после 'Z' не проходят"""
        assert not is_letter("@")
        assert not is_letter("[")

    def test_lowercase_and_non_ascii(self) -> None:
        assert not is_letter("a")
        assert not is_letter("z")
        assert not is_letter("Ä")
        assert not is_letter("1")


class TestIsValidSequence:
    """Тесты для is_valid_sequence"""

    def test_valid_sequences(self) -> None:
        assert is_valid_sequence("A")
        assert is_valid_sequence("Z")
        assert is_valid_sequence("AAZ")
        assert is_valid_sequence("HELLOWORLD")

    def test_empty_and_none(self) -> None:
        assert not is_valid_sequence("")
        assert not is_valid_sequence(None)

    def test_out_of_range_characters(self) -> None:
        assert not is_valid_sequence("abc")
        assert not is_valid_sequence("AbC")
        assert not is_valid_sequence("A B")
        assert not is_valid_sequence("A1")
        assert not is_valid_sequence("AA\n")

    def test_non_str(self) -> None:
        assert not is_valid_sequence(123)
        assert not is_valid_sequence(b"ABC")
        assert not is_valid_sequence(["A", "B"])


class TestValidateSequence:
    """Тесты для validate_sequence"""

    def test_returns_value_unchanged(self) -> None:
        value = "ABZ"
        assert validate_sequence(value) is value

    def test_empty_raises(self) -> None:
        with pytest.raises(ValidationError, match="cannot be null or empty"):
            validate_sequence("")

    def test_none_raises(self) -> None:
        with pytest.raises(ValidationError, match="cannot be null or empty"):
            validate_sequence(None)

    def test_non_str_raises(self) -> None:
        with pytest.raises(ValidationError, match="must be a str"):
            validate_sequence(42)

    def test_lowercase_raises(self) -> None:
        with pytest.raises(ValidationError, match="only uppercase letters A-Z"):
            validate_sequence("abc")

    def test_name_in_message(self) -> None:
        """Имя параметра попадает в сообщение об ошибке"""
        with pytest.raises(ValidationError, match="^first"):
            validate_sequence("a1", "first")


# =============================================================================
# ВАЛИДАЦИЯ ДЛИНЫ И ORDINAL
# =============================================================================


class TestValidateLength:
    """Тесты для validate_length"""

    def test_positive_lengths(self) -> None:
        assert validate_length(1) == 1
        assert validate_length(100) == 100

    def test_zero_and_negative_raise(self) -> None:
        with pytest.raises(ValidationError, match="greater than 0"):
            validate_length(0)

        with pytest.raises(ValidationError, match="greater than 0"):
            validate_length(-3)

    def test_non_int_raises(self) -> None:
        with pytest.raises(ValidationError, match="must be an int"):
            validate_length(2.0)

        with pytest.raises(ValidationError, match="must be an int"):
            validate_length(True)


class TestValidateOrdinal:
    """Тесты для validate_ordinal"""

    def test_non_negative_ordinals(self) -> None:
        assert validate_ordinal(0) == 0
        assert validate_ordinal(10**30) == 10**30

    def test_negative_raises(self) -> None:
        with pytest.raises(ValidationError, match="non-negative"):
            validate_ordinal(-1)

    def test_non_int_raises(self) -> None:
        with pytest.raises(ValidationError, match="must be an int"):
            validate_ordinal("26")

        with pytest.raises(ValidationError, match="must be an int"):
            validate_ordinal(False)
