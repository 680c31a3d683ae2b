import string

from cipherbench.core.exceptions import InvalidKeyError
from cipherbench.models.schemas import CipherFamily, CipherType, Direction, KeyKind
from cipherbench.services.engines.base import CipherEngine, Key
from cipherbench.services.engines.registry import EngineRegistry
from cipherbench.services.engines.text import parse_integer_key

CIPHER = CipherType.CAESAR.value


def caesar(text: str, shift: int | str, direction: Direction) -> str:
    """
    Shift every ASCII letter by a fixed amount, keeping its case.

    Any integer shift is accepted and normalized into 0-25. Non-letters
    (digits, punctuation, whitespace, accented letters) are left as is.

    Raises:
        InvalidKeyError: If shift is not an integer
    """
    shift = parse_integer_key(shift, CIPHER)
    normalized = shift % 26
    if direction == Direction.DECRYPT:
        normalized = (26 - normalized) % 26

    result = []
    for char in text:
        if char in string.ascii_uppercase:
            base = ord("A")
        elif char in string.ascii_lowercase:
            base = ord("a")
        else:
            result.append(char)
            continue
        result.append(chr((ord(char) - base + normalized) % 26 + base))

    return "".join(result)


@EngineRegistry.register
class CaesarEngine(CipherEngine):
    """
    Caesar cipher engine.

    The Caesar cipher is a simple substitution cipher that shifts each letter
    by a fixed amount. With only 26 distinct keys it offers no real secrecy.
    """

    name = "Caesar Cipher"
    cipher_type = CipherType.CAESAR
    cipher_family = CipherFamily.MONOALPHABETIC
    description = (
        "A substitution cipher where each letter is shifted by a fixed amount. "
        "Named after Julius Caesar who used it for military communications."
    )
    key_kind = KeyKind.INTEGER
    key_hint = "Any integer shift, e.g. 3 (negative and large values wrap)"

    def encrypt(self, plaintext: str, key: Key) -> str:
        """Encrypt plaintext with the given shift."""
        return caesar(plaintext, key, Direction.ENCRYPT)

    def decrypt(self, ciphertext: str, key: Key) -> str:
        """Decrypt by shifting in reverse."""
        return caesar(ciphertext, key, Direction.DECRYPT)

    def validate_key(self, key: Key) -> bool:
        """Any integer is a valid shift."""
        try:
            parse_integer_key(key, CIPHER)
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
        shift = parse_integer_key(key, CIPHER) % 26
        way = "forward" if direction == Direction.ENCRYPT else "back"

        return (
            f"Caesar cipher with shift of {shift}. "
            f"Each letter was shifted {way} {shift} positions in the alphabet. "
            f"For example, the first character '{source[0] if source else 'N/A'}' "
            f"becomes '{result[0] if result else 'N/A'}'."
        )
