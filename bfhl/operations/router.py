"""FastAPI router for the operations endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from bfhl.ai import AnswerProvider
from bfhl.config import Settings
from bfhl.dependencies import get_answer_provider, get_app_settings

from .exceptions import MalformedBodyError
from .schemas import EnvelopeResponse
from .service import execute_operation
from .validator import validate_request


router = APIRouter(tags=["operations"])


@router.post("/bfhl", response_model=EnvelopeResponse)
async def bfhl_endpoint(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
    provider: Annotated[AnswerProvider, Depends(get_answer_provider)],
) -> JSONResponse:
    """Run the single operation named in the request body.
    
    The body is read raw so that any JSON value reaches the validator and
    gets the envelope error instead of a framework 422.
    
    Args:
        request: Incoming request.
        settings: Application settings.
        provider: Answer provider for the ``AI`` operation.
        
    Returns:
        Success envelope with the operation result.
    """
    try:
        body = await request.json()
    except (ValueError, UnicodeDecodeError):
        # JSONDecodeError is a ValueError, as is the int digit limit
        raise MalformedBodyError()

    operation_request = validate_request(
        body,
        max_fibonacci_terms=settings.MAX_FIBONACCI_TERMS,
        max_prime_value=settings.MAX_PRIME_VALUE,
    )
    data = await execute_operation(operation_request, provider)

    envelope = EnvelopeResponse.success(official_email=settings.OFFICIAL_EMAIL, data=data)
    return JSONResponse(status_code=200, content=envelope.to_content())
