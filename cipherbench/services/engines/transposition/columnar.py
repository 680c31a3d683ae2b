import math

from cipherbench.core.exceptions import InvalidKeyError
from cipherbench.models.schemas import CipherFamily, CipherType, Direction, KeyKind
from cipherbench.services.engines.base import CipherEngine, Key
from cipherbench.services.engines.registry import EngineRegistry
from cipherbench.services.engines.text import parse_word_key

CIPHER = CipherType.TRANSPOSITION.value


def column_order(key: str) -> list[int]:
    """
    Column indices in reading order for a keyword.

    Letters are sorted alphabetically; repeated letters keep their
    left-to-right order.

    Raises:
        InvalidKeyError: If the key has no Latin letters
    """
    keyword = parse_word_key(key, CIPHER)
    ranked = sorted(enumerate(keyword), key=lambda x: (x[1], x[0]))
    return [index for index, _ in ranked]


def transposition_encrypt(text: str, key: str) -> str:
    """
    Write text row by row under the keyword and read columns in key order.

    The last row is left short rather than padded, so the ciphertext has
    exactly the length of the plaintext.

    Raises:
        InvalidKeyError: If the key has no Latin letters
    """
    order = column_order(key)
    num_cols = len(order)
    num_rows = math.ceil(len(text) / num_cols)

    grid: list[list[str | None]] = [[None] * num_cols for _ in range(num_rows)]
    for i, char in enumerate(text):
        grid[i // num_cols][i % num_cols] = char

    result = []
    for col in order:
        for row in grid:
            if row[col] is not None:
                result.append(row[col])

    return "".join(result)


def transposition_decrypt(cipher_text: str, key: str) -> str:
    """
    Undo transposition_encrypt.

    With ``full_cols = len % num_cols``, columns left of ``full_cols`` in
    the original key hold ``num_rows`` characters and the rest one fewer
    (all columns are full when the text fills the grid exactly).

    Raises:
        InvalidKeyError: If the key has no Latin letters
    """
    order = column_order(key)
    num_cols = len(order)
    length = len(cipher_text)
    num_rows = math.ceil(length / num_cols)
    full_cols = length % num_cols

    grid: list[list[str | None]] = [[None] * num_cols for _ in range(num_rows)]

    idx = 0
    for col in order:
        col_len = num_rows if full_cols == 0 or col < full_cols else num_rows - 1
        for row in range(col_len):
            grid[row][col] = cipher_text[idx]
            idx += 1

    return "".join(char for row in grid for char in row if char is not None)


@EngineRegistry.register
class ColumnarEngine(CipherEngine):
    """
    Columnar Transposition cipher engine.

    The plaintext is written into a grid row by row, then the columns
    are read out in an order determined by a keyword.

    Example with keyword "ZEBRA" (reading order A, B, E, R, Z):

    Key:    Z E B R A
    Order:  5 3 2 4 1
            ─────────
            A T T A C
            K A T D A
            W N

    Read columns in sorted order: CA, TT, TAN, AD, AKW
    """

    name = "Columnar Transposition Cipher"
    cipher_type = CipherType.TRANSPOSITION
    cipher_family = CipherFamily.TRANSPOSITION
    description = (
        "A transposition cipher where plaintext is written into a grid "
        "by rows, then read out by columns in an order determined by "
        "a keyword. The keyword's alphabetical order determines column sequence."
    )
    key_kind = KeyKind.WORD
    key_hint = "A keyword; only its Latin letters are used, e.g. ZEBRA"

    def encrypt(self, plaintext: str, key: Key) -> str:
        """Encrypt using the keyword."""
        return transposition_encrypt(plaintext, key)

    def decrypt(self, ciphertext: str, key: Key) -> str:
        """Decrypt with a known keyword."""
        return transposition_decrypt(ciphertext, key)

    def validate_key(self, key: Key) -> bool:
        """Validate that key has at least one Latin letter."""
        try:
            parse_word_key(key, CIPHER)
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
        keyword = parse_word_key(key, CIPHER)
        order = " ".join(keyword[i] for i in column_order(keyword))

        if direction == Direction.ENCRYPT:
            return (
                f"Columnar transposition with keyword '{keyword}'. "
                f"The text was written in rows of {len(keyword)} characters, "
                f"then the columns were read in the order {order}."
            )
        return (
            f"Columnar transposition with keyword '{keyword}'. "
            f"The ciphertext was written back into columns in the order {order}, "
            f"then the grid was read row by row to recover the plaintext."
        )
