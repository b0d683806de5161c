"""Health check and Gemini diagnostic endpoints."""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from deycook.api.dependencies import get_gemini_service
from deycook.config import Settings, get_settings
from deycook.services.gemini_service import GeminiService
from deycook.utils.exceptions import UpstreamError

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])

PING_SAMPLE_CHARS = 40


@router.get("/health")
async def health_check() -> Dict[str, bool]:
    """Health check endpoint."""
    return {"ok": True}


@router.get("/ping")
async def ping_gemini(
    settings: Settings = Depends(get_settings),
    gemini_service: GeminiService = Depends(get_gemini_service),
) -> Any:
    """
    Verify the Gemini key and model with a one-word prompt.

    Returns a canned response in mock mode.
    """
    if settings.use_mock:
        return {"ok": True, "model": "mock", "sample": "Pong!"}

    try:
        sample = await gemini_service.ping()
    except UpstreamError as e:
        content: Dict[str, Any] = {"ok": False, "error": e.message}
        if e.details:
            content["details"] = e.details
        return JSONResponse(status_code=e.status_code, content=content)

    return {"ok": True, "model": gemini_service.model_id, "sample": sample[:PING_SAMPLE_CHARS]}
