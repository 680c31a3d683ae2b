from typing import Any


class CipherbenchError(Exception):
    """Base exception for all cipherbench errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CipherbenchError):
    """Raised when input validation fails."""

    pass


class InvalidKeyError(ValidationError):
    """Raised when a key does not fit the selected cipher."""

    def __init__(self, cipher: str, message: str, key: Any = None):
        super().__init__(message, {"cipher": cipher, "key": key})
        self.cipher = cipher


class InvalidTextError(ValidationError):
    """Raised when the text to transform is unusable."""

    pass


class TextTooLongError(ValidationError):
    """Raised when text exceeds maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Text length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class EngineError(CipherbenchError):
    """Base exception for cipher engine errors."""

    pass


class EngineNotFoundError(EngineError):
    """Raised when requested cipher engine is not found."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )


class CharacterNotFoundError(EngineError):
    """Raised when a letter is missing from a Playfair key square."""

    def __init__(self, char: str):
        super().__init__(
            f"Character '{char}' not found in key square",
            {"character": char},
        )
        self.char = char


class ExplanationError(CipherbenchError):
    """Raised when an explanation cannot be produced."""

    pass


class ExplanationUnavailableError(ExplanationError):
    """Raised when no explanation backend is configured."""

    def __init__(self) -> None:
        super().__init__("Explanations are disabled: GEMINI_API_KEY is not set")
