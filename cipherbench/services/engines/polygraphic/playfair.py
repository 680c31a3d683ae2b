from dataclasses import dataclass, field

from cipherbench.core.exceptions import CharacterNotFoundError, InvalidKeyError
from cipherbench.models.schemas import CipherFamily, CipherType, Direction, KeyKind
from cipherbench.services.engines.base import CipherEngine, Key
from cipherbench.services.engines.registry import EngineRegistry
from cipherbench.services.engines.text import sanitize_letters

CIPHER = CipherType.PLAYFAIR.value

ALPHABET = "ABCDEFGHIKLMNOPQRSTUVWXYZ"  # 25 letters, I=J
FILLER = "X"
SIZE = 5


@dataclass(frozen=True)
class PlayfairMatrix:
    """
    A 5x5 Playfair key square.

    Built once per call from a keyword; ``positions`` maps every letter to
    its (row, col) so lookups do not scan the grid.
    """

    rows: tuple[tuple[str, ...], ...]
    positions: dict[str, tuple[int, int]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        positions = {
            letter: (r, c)
            for r, row in enumerate(self.rows)
            for c, letter in enumerate(row)
        }
        object.__setattr__(self, "positions", positions)

    def position(self, letter: str) -> tuple[int, int]:
        """Find the row and column of a letter in the square."""
        try:
            return self.positions[letter]
        except KeyError:
            raise CharacterNotFoundError(letter) from None

    def at(self, row: int, col: int) -> str:
        """Letter at (row, col), wrapping both coordinates."""
        return self.rows[row % SIZE][col % SIZE]

    def as_lists(self) -> list[list[str]]:
        return [list(row) for row in self.rows]


def build_playfair_matrix(key: str) -> PlayfairMatrix:
    """
    Build the 5x5 key square for a keyword.

    The sanitized keyword (J folded into I) is followed by the 25-letter
    alphabet, duplicates are dropped keeping the first occurrence, and the
    letters are laid out row by row. Keys without letters give the plain
    alphabet square.

    Raises:
        InvalidKeyError: If nothing is left after sanitizing
    """
    letters = sanitize_letters(key + ALPHABET, fold_j=True)
    if not letters:
        raise InvalidKeyError(CIPHER, "Playfair key is malformed", key)

    # dict keeps insertion order, so this dedupes by first occurrence
    unique = list(dict.fromkeys(letters))
    return PlayfairMatrix(
        rows=tuple(tuple(unique[i * SIZE:(i + 1) * SIZE]) for i in range(SIZE))
    )


def prepare_playfair_text(text: str) -> str:
    """
    Prepare text for Playfair encryption.

    - Convert to uppercase, replace J with I, drop non-letters
    - Insert X between two equal letters that would share a digraph
    - Pad with X if the length is odd

    Raises:
        InvalidKeyError: If the text contains no letters
    """
    letters = sanitize_letters(text, fold_j=True)
    if not letters:
        raise InvalidKeyError(
            CIPHER, "Playfair needs at least one letter to encrypt", text
        )

    prepared: list[str] = []
    for i, char in enumerate(letters):
        prepared.append(char)
        # An odd length means char opens a digraph; it may not be doubled
        if len(prepared) % 2 == 1 and i + 1 < len(letters) and letters[i + 1] == char:
            prepared.append(FILLER)

    if len(prepared) % 2 == 1:
        prepared.append(FILLER)

    return "".join(prepared)


def playfair(text: str, key: str, direction: Direction) -> str:
    """
    Encrypt or decrypt text with the Playfair cipher.

    Decryption only sanitizes its input; filler letters added during
    encryption stay in the decrypted output.

    Raises:
        InvalidKeyError: If the text has no letters, or if decrypt input
            has an odd number of letters
        CharacterNotFoundError: If a letter is missing from the key square
    """
    matrix = build_playfair_matrix(key)

    if direction == Direction.ENCRYPT:
        prepared = prepare_playfair_text(text)
        shift = 1
    else:
        prepared = sanitize_letters(text, fold_j=True)
        if not prepared:
            raise InvalidKeyError(
                CIPHER, "Playfair needs at least one letter to decrypt", text
            )
        if len(prepared) % 2 != 0:
            raise InvalidKeyError(
                CIPHER,
                "Playfair decryption needs an even number of letters",
                text,
            )
        shift = SIZE - 1

    result = []
    for i in range(0, len(prepared), 2):
        row_a, col_a = matrix.position(prepared[i])
        row_b, col_b = matrix.position(prepared[i + 1])

        if row_a == row_b:
            # Same row: right on encrypt, left on decrypt
            result.append(matrix.at(row_a, col_a + shift))
            result.append(matrix.at(row_b, col_b + shift))
        elif col_a == col_b:
            # Same column: down on encrypt, up on decrypt
            result.append(matrix.at(row_a + shift, col_a))
            result.append(matrix.at(row_b + shift, col_b))
        else:
            # Rectangle: swap columns
            result.append(matrix.at(row_a, col_b))
            result.append(matrix.at(row_b, col_a))

    return "".join(result)


@EngineRegistry.register
class PlayfairEngine(CipherEngine):
    """
    Playfair cipher engine.

    The Playfair cipher encrypts digraphs (pairs of letters) using a 5x5 key square.
    The alphabet is reduced to 25 letters (I and J are combined).

    Rules for encryption:
    1. Same row: replace each letter with the one to its right
    2. Same column: replace each letter with the one below
    3. Rectangle: swap corners horizontally

    Double letters are separated by an 'X' (e.g., "BALLOON" -> "BA LX LO ON").
    """

    name = "Playfair Cipher"
    cipher_type = CipherType.PLAYFAIR
    cipher_family = CipherFamily.POLYGRAPHIC
    description = (
        "A digraph substitution cipher using a 5x5 key square. "
        "Pairs of letters are encrypted together based on their positions "
        "in the square. I and J are treated as the same letter."
    )
    key_kind = KeyKind.WORD
    key_hint = "A keyword; J counts as I, e.g. PLAYFAIREXAMPLE"

    def encrypt(self, plaintext: str, key: Key) -> str:
        """Encrypt using the keyword."""
        return playfair(plaintext, self._parse_key(key), Direction.ENCRYPT)

    def decrypt(self, ciphertext: str, key: Key) -> str:
        """Decrypt with a known keyword."""
        return playfair(ciphertext, self._parse_key(key), Direction.DECRYPT)

    def validate_key(self, key: Key) -> bool:
        """Validate that key contains at least one letter."""
        try:
            self._parse_key(key)
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
        key_str = self._parse_key(key)
        square = build_playfair_matrix(key_str)

        # Show first two rows of the key square
        square_preview = " ".join(square.rows[0]) + "\n" + " ".join(square.rows[1])
        way = "encrypted" if direction == Direction.ENCRYPT else "decrypted"

        return (
            f"Playfair cipher with keyword '{key_str}'. "
            f"5x5 key square (first 2 rows):\n{square_preview}\n"
            f"Letters were {way} in pairs using row/column rules."
        )

    def _parse_key(self, key: Key) -> str:
        """Keys must carry at least one letter; the square does the rest."""
        if not isinstance(key, str) or not sanitize_letters(key, fold_j=True):
            raise InvalidKeyError(CIPHER, "Playfair key must be a word of letters", key)
        return key
