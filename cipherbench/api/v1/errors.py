from fastapi import HTTPException, status

from cipherbench.core.exceptions import (
    CipherbenchError,
    EngineNotFoundError,
    ExplanationError,
    ExplanationUnavailableError,
    ValidationError,
)


def to_http_exception(error: CipherbenchError) -> HTTPException:
    """Map a cipherbench error onto the HTTP status the API reports."""
    if isinstance(error, ValidationError):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, EngineNotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, ExplanationUnavailableError):
        code = status.HTTP_503_SERVICE_UNAVAILABLE
    elif isinstance(error, ExplanationError):
        code = status.HTTP_502_BAD_GATEWAY
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR

    return HTTPException(status_code=code, detail=error.message)
