from fastapi import APIRouter, Query

from cipherbench.api.v1.errors import to_http_exception
from cipherbench.core.exceptions import CipherbenchError
from cipherbench.models.schemas import ErrorResponse, PlayfairMatrixResponse
from cipherbench.services.engines.polygraphic.playfair import build_playfair_matrix

router = APIRouter()


@router.get(
    "/matrix",
    response_model=PlayfairMatrixResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid key"},
    },
    summary="Build a Playfair key square",
    description="Return the 5x5 Playfair key square for a keyword, for display.",
)
async def get_playfair_matrix(
    key: str = Query("", max_length=1_000, description="Playfair keyword"),
) -> PlayfairMatrixResponse:
    """Build the key square; a key without letters gives the plain alphabet."""
    try:
        matrix = build_playfair_matrix(key)
    except CipherbenchError as e:
        raise to_http_exception(e)

    return PlayfairMatrixResponse(key=key, rows=matrix.as_lists())
