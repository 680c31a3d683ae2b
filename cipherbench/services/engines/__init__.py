"""Classical cipher engines and their pure encrypt/decrypt functions."""

from cipherbench.services.engines.monoalphabetic import CaesarEngine, caesar
from cipherbench.services.engines.polygraphic import (
    PlayfairEngine,
    PlayfairMatrix,
    build_playfair_matrix,
    playfair,
)
from cipherbench.services.engines.registry import EngineRegistry
from cipherbench.services.engines.transposition import (
    ColumnarEngine,
    RailFenceEngine,
    rail_fence_decrypt,
    rail_fence_encrypt,
    transposition_decrypt,
    transposition_encrypt,
)

__all__ = [
    "EngineRegistry",
    "CaesarEngine",
    "RailFenceEngine",
    "ColumnarEngine",
    "PlayfairEngine",
    "PlayfairMatrix",
    "caesar",
    "rail_fence_encrypt",
    "rail_fence_decrypt",
    "transposition_encrypt",
    "transposition_decrypt",
    "build_playfair_matrix",
    "playfair",
]
