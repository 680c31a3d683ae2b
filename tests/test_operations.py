"""Tests for the operations layer."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from cipherbench.core.exceptions import InvalidKeyError, InvalidTextError, TextTooLongError
from cipherbench.models.schemas import CipherRecord, CipherType, Direction
from cipherbench.services.operations import CipherOperations


class TestCipherOperations:
    """Test suite for CipherOperations."""

    @pytest.fixture
    def operations(self):
        return CipherOperations(max_text_length=50)

    def test_builds_record(self, operations):
        result = operations.run(CipherType.CAESAR, Direction.ENCRYPT, " Attack ", " 3 ")

        assert isinstance(result.record, CipherRecord)
        assert result.record.original_text == "Attack"
        assert result.record.result_text == "Dwwdfn"
        assert result.record.key == "3"
        assert result.record.cipher_type == CipherType.CAESAR
        assert result.record.direction == Direction.ENCRYPT
        assert result.record.timestamp.tzinfo is not None
        assert "Caesar" in result.explanation

    def test_record_is_immutable(self, operations):
        record = operations.run(CipherType.CAESAR, Direction.ENCRYPT, "abc", 1).record

        with pytest.raises(PydanticValidationError):
            record.result_text = "changed"

    def test_decrypt_direction(self, operations):
        result = operations.run(
            CipherType.TRANSPOSITION, Direction.DECRYPT, "CATTTANADAKW", "ZEBRA"
        )

        assert result.record.result_text == "ATTACKATDAWN"
        assert "row by row" in result.explanation

    def test_blank_text(self, operations):
        with pytest.raises(InvalidTextError):
            operations.run(CipherType.CAESAR, Direction.ENCRYPT, " \t\n", "3")

    def test_blank_key(self, operations):
        with pytest.raises(InvalidKeyError):
            operations.run(CipherType.PLAYFAIR, Direction.ENCRYPT, "HELLO", "  ")

    def test_text_too_long(self, operations):
        with pytest.raises(TextTooLongError):
            operations.run(CipherType.CAESAR, Direction.ENCRYPT, "A" * 51, "3")

    def test_engine_key_errors_propagate(self, operations):
        with pytest.raises(InvalidKeyError) as exc_info:
            operations.run(CipherType.RAIL_FENCE, Direction.ENCRYPT, "HELLO", "1")

        assert exc_info.value.details["cipher"] == "rail_fence"
