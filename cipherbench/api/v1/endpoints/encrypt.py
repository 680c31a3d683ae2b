from fastapi import APIRouter

from cipherbench.api.v1.errors import to_http_exception
from cipherbench.core.exceptions import CipherbenchError
from cipherbench.dependencies import HistoryDep, OperationsDep
from cipherbench.models.schemas import (
    Direction,
    ErrorResponse,
    TransformRequest,
    TransformResponse,
)

router = APIRouter()


@router.post(
    "",
    response_model=TransformResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid text or key"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Encrypt plaintext",
    description="Encrypt text with a classical cipher and a known key.",
)
async def encrypt_plaintext(
    request: TransformRequest,
    operations: OperationsDep,
    history: HistoryDep,
) -> TransformResponse:
    """
    Encrypt text with the selected cipher.

    The operation is added to the recent-operations history.
    """
    try:
        result = operations.run(
            request.cipher_type, Direction.ENCRYPT, request.text, request.key
        )
    except CipherbenchError as e:
        raise to_http_exception(e)

    await history.record(result.record)

    return TransformResponse(record=result.record, explanation=result.explanation)
