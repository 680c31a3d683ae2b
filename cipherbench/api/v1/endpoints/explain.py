from fastapi import APIRouter, HTTPException, status

from cipherbench.api.v1.errors import to_http_exception
from cipherbench.core.exceptions import CipherbenchError
from cipherbench.dependencies import GeminiDep
from cipherbench.models.schemas import (
    CipherRecord,
    ErrorResponse,
    ExplainRequest,
    ExplainResponse,
)

router = APIRouter()


@router.post(
    "",
    response_model=ExplainResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Incomplete operation"},
        502: {"model": ErrorResponse, "description": "Gemini request failed"},
        503: {"model": ErrorResponse, "description": "Explanations disabled"},
    },
    summary="Explain an operation",
    description="Ask Gemini for a short technical explanation of a finished operation.",
)
async def explain_operation(
    request: ExplainRequest,
    gemini: GeminiDep,
) -> ExplainResponse:
    """
    Explain how a finished operation produced its result.

    The result, the original text and the key must all be present.
    """
    for field, message in (
        ("result_text", "Encrypt or decrypt something before asking for an explanation"),
        ("original_text", "Original text must not be empty"),
        ("key", "Key must not be empty"),
    ):
        if not getattr(request, field).strip():
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)

    record = CipherRecord(**request.model_dump())

    try:
        explanation = await gemini.explain_operation(record)
    except CipherbenchError as e:
        raise to_http_exception(e)

    return ExplainResponse(explanation=explanation, model=gemini.model)
