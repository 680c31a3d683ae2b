from collections.abc import Iterator

from cipherbench.core.exceptions import InvalidKeyError
from cipherbench.models.schemas import CipherFamily, CipherType, Direction, KeyKind
from cipherbench.services.engines.base import CipherEngine, Key
from cipherbench.services.engines.registry import EngineRegistry
from cipherbench.services.engines.text import parse_integer_key

CIPHER = CipherType.RAIL_FENCE.value

# Placeholder for a fence cell that will receive a ciphertext character
_MARK = object()


def _parse_rails(rails: int | str) -> int:
    count = parse_integer_key(rails, CIPHER)
    if count < 2:
        raise InvalidKeyError(CIPHER, "Rail Fence needs at least 2 rails", rails)
    return count


def zigzag_rows(length: int, rails: int) -> Iterator[int]:
    """
    Yield the rail visited by each position of a zigzag walk.

    The walk starts on rail 0 moving down and turns around on the
    first and last rail.
    """
    rail = 0
    direction = 1  # 1 = down, -1 = up

    for _ in range(length):
        yield rail

        # Change direction at top or bottom
        if rail == 0:
            direction = 1
        elif rail == rails - 1:
            direction = -1

        rail += direction


def rail_fence_encrypt(text: str, rails: int | str) -> str:
    """
    Write text in a zigzag across the rails and read the rails top to bottom.

    Every character takes part, including spaces and punctuation.

    Raises:
        InvalidKeyError: If rails is not an integer of at least 2
    """
    rails = _parse_rails(rails)

    fence: list[list[str]] = [[] for _ in range(rails)]
    for char, rail in zip(text, zigzag_rows(len(text), rails)):
        fence[rail].append(char)

    return "".join("".join(row) for row in fence)


def rail_fence_decrypt(cipher_text: str, rails: int | str) -> str:
    """
    Undo rail_fence_encrypt.

    Uses a rails x len(cipher_text) grid: the zigzag cells are marked
    first, the marks are then filled rail by rail from the ciphertext, and
    a final zigzag walk reads the plaintext back in order.

    Raises:
        InvalidKeyError: If rails is not an integer of at least 2
    """
    rails = _parse_rails(rails)
    if not cipher_text:
        return ""

    n = len(cipher_text)
    fence: list[list[object]] = [[None] * n for _ in range(rails)]

    for col, rail in enumerate(zigzag_rows(n, rails)):
        fence[rail][col] = _MARK

    # Exactly n cells are marked, one per column, so every mark gets a character
    chars = iter(cipher_text)
    for row in fence:
        for col, cell in enumerate(row):
            if cell is _MARK:
                row[col] = next(chars)

    return "".join(
        str(fence[rail][col]) for col, rail in enumerate(zigzag_rows(n, rails))
    )


@EngineRegistry.register
class RailFenceEngine(CipherEngine):
    """
    Rail Fence cipher engine.

    The Rail Fence cipher writes the plaintext in a zigzag pattern across
    a number of "rails" (rows), then reads off each rail in order to
    produce the ciphertext.

    Example with 3 rails:
    Plaintext: WEAREDISCOVERED

    W . . . E . . . C . . . R . .
    . E . R . D . S . O . E . E .
    . . A . . . I . . . V . . . D

    Read off rows: WECR + ERDSOEE + AIVD
    """

    name = "Rail Fence Cipher"
    cipher_type = CipherType.RAIL_FENCE
    cipher_family = CipherFamily.TRANSPOSITION
    description = (
        "A transposition cipher that writes plaintext in a zigzag pattern "
        "across multiple 'rails' (rows), then reads each rail in sequence. "
        "The number of rails is the key."
    )
    key_kind = KeyKind.INTEGER
    key_hint = "Number of rails, an integer of at least 2"

    def encrypt(self, plaintext: str, key: Key) -> str:
        """Encrypt using the specified number of rails."""
        return rail_fence_encrypt(plaintext, key)

    def decrypt(self, ciphertext: str, key: Key) -> str:
        """Decrypt with a known number of rails."""
        return rail_fence_decrypt(ciphertext, key)

    def validate_key(self, key: Key) -> bool:
        """Validate that key is a valid number of rails."""
        try:
            _parse_rails(key)
            return True
        except InvalidKeyError:
            return False

    def explain(
        self,
        source: str,
        result: str,
        key: Key,
        direction: Direction,
    ) -> str:
        """Generate human-readable explanation."""
        rails = _parse_rails(key)

        if direction == Direction.ENCRYPT:
            return (
                f"Rail Fence cipher with {rails} rails. "
                f"The text was written in a zigzag pattern across {rails} rows, "
                f"then each row was read in sequence to form the ciphertext."
            )
        return (
            f"Rail Fence cipher with {rails} rails. "
            f"The ciphertext was cut into {rails} rows sized by the zigzag "
            f"pattern, then the zigzag was walked again to read the plaintext."
        )
