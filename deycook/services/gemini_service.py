"""
Gemini LLM client for recipe generation.

One call per ``generate()``; structured calls request
``application/json`` output constrained by a response schema. Retry policy
lives in the caller.
"""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from typing import Any, Dict, Optional

import httpx
from google import genai
from google.genai import errors, types

from deycook.config import Settings
from deycook.utils.exceptions import UpstreamError
from deycook.utils.gemini_helpers import extract_candidate_text, upstream_error_details

logger = logging.getLogger(__name__)

PING_PROMPT = "ping"


@lru_cache(maxsize=4)
def get_genai_client(api_key: Optional[str], timeout_ms: int) -> genai.Client:
    """Process-wide SDK client, shared by every request using the same key."""
    return genai.Client(api_key=api_key, http_options=types.HttpOptions(timeout=timeout_ms))


class GeminiService:
    """Service for interacting with Gemini API."""

    def __init__(self, settings: Settings, client: Optional[genai.Client] = None) -> None:
        self.settings = settings
        self.model_id = settings.model_id
        self._client = client

    @property
    def client(self) -> genai.Client:
        """Get or create Gemini client (lazy initialization)."""
        if self._client is None:
            self._client = get_genai_client(
                self.settings.gemini_api_key, int(self.settings.gemini_timeout * 1000)
            )
        return self._client

    async def generate(
        self,
        *,
        prompt: str,
        system_instruction: Optional[str] = None,
        structured: bool = False,
        response_schema: Optional[Dict[str, Any]] = None,
        temperature: Optional[float] = None,
    ) -> str:
        """
        Send one generation request and return the raw text of the first candidate.

        Raises:
            UpstreamError: On a non-success status, timeout or transport failure
        """
        config_kwargs: Dict[str, Any] = {
            "system_instruction": system_instruction,
            "temperature": self.settings.gemini_temperature if temperature is None else temperature,
        }
        if structured:
            config_kwargs["response_mime_type"] = "application/json"
            config_kwargs["response_schema"] = response_schema
        config = types.GenerateContentConfig(**config_kwargs)

        logger.info(
            "Calling Gemini",
            extra={"model": self.model_id, "structured": structured, "prompt_chars": len(prompt)},
        )

        try:
            response = await asyncio.wait_for(
                self.client.aio.models.generate_content(
                    model=self.model_id,
                    contents=prompt,
                    config=config,
                ),
                timeout=self.settings.gemini_timeout,
            )
        except errors.APIError as e:
            logger.error(
                f"Gemini API error: {e.code} {e.message}",
                extra={"status_code": e.code, "structured": structured},
            )
            raise UpstreamError(
                e.message or e.status or "Gemini API error",
                status_code=e.code,
                details=upstream_error_details(e.details),
            ) from e
        except asyncio.TimeoutError as e:
            logger.error(f"Gemini call timed out after {self.settings.gemini_timeout}s")
            raise UpstreamError("Gemini request timed out", status_code=504) from e
        except httpx.HTTPError as e:
            logger.error(f"Gemini transport error: {str(e)}", exc_info=True)
            raise UpstreamError(f"Gemini request failed: {str(e)}", status_code=502) from e

        text = extract_candidate_text(response)
        logger.debug("Gemini raw response:\n%s", text)
        return text

    async def ping(self) -> str:
        """Send a trivial prompt to verify credentials and model access."""
        return await self.generate(prompt=PING_PROMPT, temperature=0.2)
