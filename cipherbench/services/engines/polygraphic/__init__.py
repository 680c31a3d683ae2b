"""Polygraphic cipher engines."""

from cipherbench.services.engines.polygraphic.playfair import (
    PlayfairEngine,
    PlayfairMatrix,
    build_playfair_matrix,
    playfair,
)

__all__ = [
    "PlayfairEngine",
    "PlayfairMatrix",
    "build_playfair_matrix",
    "playfair",
]
