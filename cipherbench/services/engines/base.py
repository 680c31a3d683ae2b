from abc import ABC, abstractmethod

from cipherbench.models.schemas import CipherFamily, CipherType, Direction, KeyKind

Key = str | int


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    Each engine wraps a pair of pure cipher functions and provides:
    - encrypt() / decrypt(): Apply the cipher with a known key
    - transform(): Dispatch on a Direction
    - validate_key(): Check a key without transforming anything
    - explain(): Generate a short human-readable explanation
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str
    key_kind: KeyKind
    key_hint: str

    @abstractmethod
    def encrypt(self, plaintext: str, key: Key) -> str:
        """
        Encrypt plaintext with the given key.

        Args:
            plaintext: The plaintext to encrypt
            key: The encryption key

        Returns:
            Ciphertext

        Raises:
            InvalidKeyError: If the key does not fit this cipher
        """
        pass

    @abstractmethod
    def decrypt(self, ciphertext: str, key: Key) -> str:
        """
        Decrypt ciphertext with the given key.

        Args:
            ciphertext: The ciphertext to decrypt
            key: The decryption key

        Returns:
            Plaintext

        Raises:
            InvalidKeyError: If the key does not fit this cipher
        """
        pass

    @abstractmethod
    def validate_key(self, key: Key) -> bool:
        """
        Validate that a key is valid for this cipher.

        Args:
            key: The key to validate

        Returns:
            True if key is valid
        """
        pass

    @abstractmethod
    def explain(
        self,
        source: str,
        result: str,
        key: Key,
        direction: Direction,
    ) -> str:
        """
        Generate human-readable explanation of an operation.

        Args:
            source: The text that was transformed
            result: The transformed text
            key: The key used
            direction: Whether the text was encrypted or decrypted

        Returns:
            Explanation string
        """
        pass

    def transform(self, text: str, key: Key, direction: Direction) -> str:
        """Apply the cipher in the requested direction."""
        if direction == Direction.ENCRYPT:
            return self.encrypt(text, key)
        return self.decrypt(text, key)
