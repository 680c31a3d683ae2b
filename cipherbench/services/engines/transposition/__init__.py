"""Transposition cipher engines."""

from cipherbench.services.engines.transposition.columnar import (
    ColumnarEngine,
    transposition_decrypt,
    transposition_encrypt,
)
from cipherbench.services.engines.transposition.rail_fence import (
    RailFenceEngine,
    rail_fence_decrypt,
    rail_fence_encrypt,
)

__all__ = [
    "RailFenceEngine",
    "ColumnarEngine",
    "rail_fence_encrypt",
    "rail_fence_decrypt",
    "transposition_encrypt",
    "transposition_decrypt",
]
