"""Monoalphabetic cipher engines."""

from cipherbench.services.engines.monoalphabetic.caesar import CaesarEngine, caesar

__all__ = [
    "CaesarEngine",
    "caesar",
]
