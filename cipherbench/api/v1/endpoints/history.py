from fastapi import APIRouter, Query

from cipherbench.dependencies import HistoryDep
from cipherbench.models.schemas import ClearHistoryResponse, HistoryItem, HistoryResponse

router = APIRouter()


@router.get(
    "",
    response_model=HistoryResponse,
    summary="Get recent operations",
    description=(
        "Retrieve the most recent cipher operations, newest first. "
        "Limits above the stored history size return the whole history."
    ),
)
async def get_history(
    history: HistoryDep,
    limit: int | None = Query(None, ge=1, description="Maximum number of items"),
) -> HistoryResponse:
    """
    Get the recent-operations history.

    The store keeps at most ``history_limit`` entries, so larger limits
    are capped.
    """
    operations = await history.recent(limit)
    total = await history.count()

    return HistoryResponse(
        items=[HistoryItem.model_validate(op) for op in operations],
        total=total,
    )


@router.delete(
    "",
    response_model=ClearHistoryResponse,
    summary="Clear history",
    description="Delete every stored operation.",
)
async def clear_history(history: HistoryDep) -> ClearHistoryResponse:
    """Delete the whole history."""
    deleted = await history.clear()
    return ClearHistoryResponse(deleted=deleted)
