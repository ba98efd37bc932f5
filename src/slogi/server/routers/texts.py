"""REST API endpoints for syllabifying text."""

import logging

from fastapi import APIRouter, HTTPException, Request

from slogi.language import format_text
from slogi.providers import ProviderError
from slogi.server.protocol import WordInfo
from slogi.server.routers.schemas import (
    FormattedTextResponse,
    ProcessedTextResponse,
    TextRequest,
)

router = APIRouter(prefix="/api/texts", tags=["texts"])

logger = logging.getLogger(__name__)


@router.post("/format")
async def format_endpoint(request: TextRequest) -> FormattedTextResponse:
    """Uppercase and hyphenate text with the built-in heuristic.

    Parameters
    ----------
    request : TextRequest
        The text to format

    Returns
    -------
    FormattedTextResponse
        The hyphenated text with original whitespace

    """
    return FormattedTextResponse(text=format_text(request.text))


@router.post("/process")
async def process_endpoint(
    request: TextRequest, http_request: Request
) -> ProcessedTextResponse:
    """Split text into words and syllables using the configured provider.

    Parameters
    ----------
    request : TextRequest
        The text to process
    http_request : Request
        Incoming request, used to reach the application's provider

    Returns
    -------
    ProcessedTextResponse
        Words with their syllables in reading order

    Raises
    ------
    HTTPException
        502 if the provider fails

    """
    provider = http_request.app.state.context.provider
    try:
        processed_text = await provider(request.text)
    except ProviderError as e:
        logger.error("Syllabification failed: %s", e)
        raise HTTPException(status_code=502, detail=str(e)) from e

    return ProcessedTextResponse(
        words=[WordInfo.model_validate(word) for word in processed_text]
    )
