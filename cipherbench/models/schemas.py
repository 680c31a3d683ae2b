from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    MONOALPHABETIC = "monoalphabetic"
    TRANSPOSITION = "transposition"
    POLYGRAPHIC = "polygraphic"


class CipherType(str, Enum):
    """Specific cipher types."""

    CAESAR = "caesar"
    RAIL_FENCE = "rail_fence"
    TRANSPOSITION = "transposition"
    PLAYFAIR = "playfair"


class Direction(str, Enum):
    """Which way a cipher is applied."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class KeyKind(str, Enum):
    """Shape of key a cipher accepts."""

    INTEGER = "integer"
    WORD = "word"


# ============================================================================
# Records
# ============================================================================


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CipherRecord(BaseModel):
    """Immutable snapshot of one finished cipher operation."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    original_text: str
    result_text: str
    key: str
    cipher_type: CipherType
    direction: Direction
    timestamp: datetime = Field(default_factory=_utcnow)


# ============================================================================
# Request Schemas
# ============================================================================


class TransformRequest(BaseModel):
    """Request schema for /encrypt and /decrypt endpoints."""

    # Length is checked against settings.max_text_length by CipherOperations
    text: str = Field(min_length=1)
    key: str | int
    cipher_type: CipherType


class ExplainRequest(BaseModel):
    """Request schema for /explain endpoint."""

    original_text: str
    result_text: str
    key: str
    cipher_type: CipherType
    direction: Direction


# ============================================================================
# Response Schemas
# ============================================================================


class TransformResponse(BaseModel):
    """Response schema for /encrypt and /decrypt endpoints."""

    record: CipherRecord
    explanation: str


class HistoryItem(BaseModel):
    """Single persisted history entry."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    original_text: str
    result_text: str
    key: str
    cipher_type: CipherType
    direction: Direction
    created_at: datetime


class HistoryResponse(BaseModel):
    """Response schema for GET /history."""

    items: list[HistoryItem]
    total: int


class ClearHistoryResponse(BaseModel):
    """Response schema for DELETE /history."""

    deleted: int


class PlayfairMatrixResponse(BaseModel):
    """Response schema for /playfair/matrix endpoint."""

    key: str
    rows: list[list[str]]


class ExplainResponse(BaseModel):
    """Response schema for /explain endpoint."""

    explanation: str
    model: str


class CipherInfo(BaseModel):
    """Description of one registered cipher."""

    cipher_type: CipherType
    cipher_family: CipherFamily
    name: str
    description: str
    key_kind: KeyKind
    key_hint: str


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
