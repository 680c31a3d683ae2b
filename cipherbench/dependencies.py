from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cipherbench.core.config import Settings, get_settings
from cipherbench.db.session import get_db_session
from cipherbench.services.ai.gemini_client import GeminiClient
from cipherbench.services.history import HistoryStore
from cipherbench.services.operations import CipherOperations


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Database session dependency
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session."""
    async with get_db_session() as session:
        yield session

DbSessionDep = Annotated[AsyncSession, Depends(get_db)]


def get_history_store(db: DbSessionDep, settings: SettingsDep) -> HistoryStore:
    """History store bound to the request's session."""
    return HistoryStore(db, limit=settings.history_limit)

HistoryDep = Annotated[HistoryStore, Depends(get_history_store)]


def get_operations(settings: SettingsDep) -> CipherOperations:
    """Cipher operations limited by the configured text length."""
    return CipherOperations(max_text_length=settings.max_text_length)

OperationsDep = Annotated[CipherOperations, Depends(get_operations)]


async def get_gemini_client(settings: SettingsDep) -> AsyncGenerator[GeminiClient, None]:
    """Gemini client that is closed after the request."""
    client = GeminiClient(settings.gemini_api_key, settings.gemini_model)
    try:
        yield client
    finally:
        await client.close()

GeminiDep = Annotated[GeminiClient, Depends(get_gemini_client)]
