"""Key and text helpers shared by the cipher engines."""
import re

from cipherbench.core.exceptions import InvalidKeyError

_NON_LATIN = re.compile(r"[^A-Z]")
_INTEGER = re.compile(r"[+-]?\d+")


def sanitize_letters(text: str, fold_j: bool = False) -> str:
    """
    Reduce text to upper-case Latin letters.

    Args:
        text: Raw text or key
        fold_j: Replace J with I (Playfair's 25-letter alphabet)

    Returns:
        Only the letters A-Z, upper-cased
    """
    text = text.upper()
    if fold_j:
        text = text.replace("J", "I")
    return _NON_LATIN.sub("", text)


def parse_integer_key(key: str | int, cipher: str) -> int:
    """
    Parse an integer key.

    Accepts ints and base-10 integer strings (surrounding whitespace is
    ignored). Anything else raises InvalidKeyError.
    """
    if isinstance(key, bool):
        raise InvalidKeyError(cipher, "Key must be an integer", key)
    if isinstance(key, int):
        return key
    if isinstance(key, str) and _INTEGER.fullmatch(key.strip()):
        return int(key.strip())
    raise InvalidKeyError(cipher, "Key must be an integer", key)


def parse_word_key(key: str | int, cipher: str, fold_j: bool = False) -> str:
    """Sanitize a keyword, raising InvalidKeyError if no letters remain."""
    if not isinstance(key, str):
        raise InvalidKeyError(cipher, "Key must be a word of Latin letters", key)
    sanitized = sanitize_letters(key, fold_j=fold_j)
    if not sanitized:
        raise InvalidKeyError(
            cipher, "Key must contain at least one Latin letter", key
        )
    return sanitized
