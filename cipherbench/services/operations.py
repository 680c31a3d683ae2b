import logging
from dataclasses import dataclass

from cipherbench.core.exceptions import InvalidKeyError, InvalidTextError, TextTooLongError
from cipherbench.models.schemas import CipherRecord, CipherType, Direction
from cipherbench.services.engines.base import Key
from cipherbench.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)


@dataclass
class OperationResult:
    """A finished operation plus the engine's explanation of it."""

    record: CipherRecord
    explanation: str


class CipherOperations:
    """
    Runs keyed encrypt/decrypt operations.

    Validates the raw form input (non-blank text and key, length limit),
    dispatches to the registered engine and wraps the result in a
    CipherRecord ready for the history store.
    """

    def __init__(
        self,
        registry: EngineRegistry | None = None,
        max_text_length: int = 100_000,
    ):
        self.registry = registry or EngineRegistry()
        self.max_text_length = max_text_length

    def run(
        self,
        cipher_type: CipherType,
        direction: Direction,
        text: str,
        key: Key,
    ) -> OperationResult:
        """
        Apply one cipher in one direction.

        Args:
            cipher_type: Which cipher to use
            direction: Encrypt or decrypt
            text: Raw input text; surrounding whitespace is trimmed
            key: Raw key as typed by the user

        Returns:
            OperationResult with the record and an explanation

        Raises:
            ValidationError: On blank or oversized input, or a bad key
            EngineError: If the cipher is unknown or fails internally
        """
        text = text.strip()
        if not text:
            raise InvalidTextError("Text to process must not be empty")
        if len(text) > self.max_text_length:
            raise TextTooLongError(len(text), self.max_text_length)

        if isinstance(key, str):
            key = key.strip()
            if not key:
                raise InvalidKeyError(cipher_type.value, "Key must not be empty", key)

        engine = self.registry.require_engine(cipher_type)

        try:
            result = engine.transform(text, key, direction)
        except InvalidKeyError as e:
            logger.warning(
                "Rejected %s %s: %s", cipher_type.value, direction.value, e.message
            )
            raise

        logger.info(
            "%s %s: %d chars in, %d chars out",
            cipher_type.value,
            direction.value,
            len(text),
            len(result),
        )

        record = CipherRecord(
            original_text=text,
            result_text=result,
            key=str(key),
            cipher_type=cipher_type,
            direction=direction,
        )
        return OperationResult(
            record=record,
            explanation=engine.explain(text, result, key, direction),
        )
