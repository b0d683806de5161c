"""Normalization of parsed model output into a RecipePayload."""

import logging
import math
import re
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from deycook.models.recipe import (
    REFUSAL_TITLE,
    RecipeIngredient,
    RecipePayload,
    VideoContext,
    refusal_payload,
)
from deycook.utils.titles import usable_video_title

logger = logging.getLogger(__name__)

DEFAULT_SERVINGS = 2
DEFAULT_TITLE = "Your Recipe"
DEFAULT_ADAPTATION_NOTE = (
    "Recipe adapted using a YouTube tutorial; minor ingredient adjustments may have been applied."
)

# "1.", "2)", "3 -", "-", "•", "Step 4:" (possibly repeated)
_LEADING_MARKERS = re.compile(
    r"^(?:\s*(?:step\s*\d+\s*[:.)\-]?|\d+\s*[.):\-](?=\s|$)|[-*•·]))+",
    re.IGNORECASE,
)
_FIRST_INT = re.compile(r"\d+")


def strip_step_marker(step: str) -> str:
    """Remove leading enumeration markers and bullets from a step."""
    return _LEADING_MARKERS.sub("", step).strip()


def build_recipe_payload(
    data: Dict[str, Any],
    *,
    include_video: bool = False,
    video: Optional[VideoContext] = None,
) -> RecipePayload:
    """
    Build the outgoing payload from parsed model JSON.

    Handles:
    - Wrapped responses (e.g. ``{"recipe": {...}}``)
    - Servings as int/float/str -> int
    - Ingredients as objects or plain strings
    - Steps with leading numbers/bullets, or as one multi-line string
    - Video overlay, default adaptation note and video title override

    A payload without any usable step is replaced by the refusal payload.
    """
    data = _unwrap(data)

    steps = _normalize_steps(data.get("steps"))
    if not steps:
        logger.warning("Model response has no usable steps; returning refusal payload")
        return refusal_payload(include_video)

    title = _as_text(data.get("title")) or DEFAULT_TITLE
    servings = _normalize_servings(data.get("servings"))
    is_refusal = title == REFUSAL_TITLE and servings == 0

    payload: Dict[str, Any] = {
        "title": title,
        "summary": _as_text(data.get("summary")),
        "time": _as_text(data.get("time")) or "-",
        "servings": servings,
        "ingredients": _normalize_ingredients(data.get("ingredients")),
        "steps": steps,
        "extrasMentioned": _normalize_strings(data.get("extrasMentioned")),
        "adaptationNote": _as_text(data.get("adaptationNote")) or None,
        "includeVideo": bool(include_video),
    }

    if video is not None and not is_refusal:
        payload["video"] = video
        if include_video and not payload["adaptationNote"]:
            payload["adaptationNote"] = DEFAULT_ADAPTATION_NOTE
        cleaned = usable_video_title(video.title)
        if cleaned:
            payload["title"] = cleaned

    try:
        return RecipePayload(**payload)
    except ValidationError as e:
        logger.warning(f"Normalized recipe failed validation: {e}")
        return refusal_payload(include_video)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _unwrap(data: Dict[str, Any]) -> Dict[str, Any]:
    if len(data) == 1:
        key, inner = next(iter(data.items()))
        if isinstance(inner, dict) and "recipe" in key.lower():
            logger.info(f"Unwrapping nested JSON response from key: {key}")
            return inner
    return data


def _as_text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value).strip()


def _normalize_servings(servings: Any) -> int:
    if isinstance(servings, bool):
        return DEFAULT_SERVINGS
    if isinstance(servings, float) and not math.isfinite(servings):
        return DEFAULT_SERVINGS
    if isinstance(servings, (int, float)):
        return max(int(servings), 0)
    if isinstance(servings, str):
        match = _FIRST_INT.search(servings)
        if match:
            return int(match.group(0))
    return DEFAULT_SERVINGS


def _normalize_ingredients(ingredients: Any) -> List[RecipeIngredient]:
    if isinstance(ingredients, str):
        ingredients = ingredients.splitlines()
    if not isinstance(ingredients, list):
        return []

    normalized: List[RecipeIngredient] = []
    for item in ingredients:
        if isinstance(item, dict):
            name = _as_text(item.get("name") or item.get("ingredient") or item.get("item"))
            quantity = _as_text(item.get("quantity") or item.get("amount")) or None
        else:
            name = strip_step_marker(_as_text(item))
            quantity = None
        if name:
            normalized.append(RecipeIngredient(name=name, quantity=quantity))
    return normalized


def _normalize_steps(steps: Any) -> List[str]:
    if isinstance(steps, str):
        steps = steps.splitlines()
    if not isinstance(steps, list):
        return []

    normalized = []
    for step in steps:
        if isinstance(step, dict):
            step = step.get("text") or step.get("instruction") or ""
        text = strip_step_marker(_as_text(step))
        if text:
            normalized.append(text)
    return normalized


def _normalize_strings(values: Any) -> List[str]:
    if not isinstance(values, list):
        return []
    return [text for text in (_as_text(v) for v in values) if text]
