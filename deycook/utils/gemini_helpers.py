"""Shared helpers for Gemini responses and errors."""

from typing import Any, Optional


def _get(obj: Any, name: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def extract_candidate_text(response: Any) -> str:
    """
    Concatenate the text parts of the first candidate.

    Works with google-genai response objects and with the raw REST dict shape.
    Returns "" when there is no candidate or no text part.
    """
    candidates = _get(response, "candidates") or []
    if not candidates:
        return ""

    content = _get(candidates[0], "content")
    parts = _get(content, "parts") or []
    return "".join(
        text for text in (_get(part, "text") for part in parts) if isinstance(text, str)
    )


def upstream_error_details(response_json: Any) -> Optional[Any]:
    """Pull ``error.details`` out of a Gemini error body, if present."""
    if not isinstance(response_json, dict):
        return None
    error = response_json.get("error", response_json)
    if isinstance(error, dict):
        return error.get("details")
    return None
