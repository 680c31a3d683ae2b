import logging

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from cipherbench.models.database import CipherOperation
from cipherbench.models.schemas import CipherRecord

logger = logging.getLogger(__name__)


class HistoryStore:
    """
    Keeps the most recent cipher operations.

    Only the newest ``limit`` rows survive; older ones are pruned each time
    a new operation is recorded.
    """

    def __init__(self, session: AsyncSession, limit: int = 10):
        self.session = session
        self.limit = limit

    async def record(self, record: CipherRecord) -> CipherOperation:
        """
        Persist one operation and prune anything beyond the limit.

        Args:
            record: The finished operation

        Returns:
            The stored row
        """
        operation = CipherOperation(
            original_text=record.original_text,
            result_text=record.result_text,
            key=record.key,
            cipher_type=record.cipher_type.value,
            direction=record.direction.value,
            created_at=record.timestamp,
        )
        self.session.add(operation)
        await self.session.flush()

        pruned = await self._prune()
        if pruned:
            logger.debug("Pruned %d old history entries", pruned)

        return operation

    async def recent(self, limit: int | None = None) -> list[CipherOperation]:
        """Newest operations first."""
        query = (
            select(CipherOperation)
            .order_by(CipherOperation.id.desc())
            .limit(min(limit or self.limit, self.limit))
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(CipherOperation)
        )
        return result.scalar() or 0

    async def clear(self) -> int:
        """Delete every stored operation and return how many were removed."""
        result = await self.session.execute(delete(CipherOperation))
        deleted = result.rowcount or 0
        logger.info("Cleared %d history entries", deleted)
        return deleted

    async def _prune(self) -> int:
        keep = (
            select(CipherOperation.id)
            .order_by(CipherOperation.id.desc())
            .limit(self.limit)
        )
        result = await self.session.execute(
            delete(CipherOperation)
            .where(CipherOperation.id.not_in(keep))
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0
