"""Pydantic models."""

from deycook.models.recipe import (
    RecipeIngredient,
    RecipePayload,
    VideoContext,
    refusal_payload,
)
from deycook.models.send import SafeIngredient, SafeRecipe, WebhookPayload

__all__ = [
    "RecipeIngredient",
    "RecipePayload",
    "SafeIngredient",
    "SafeRecipe",
    "VideoContext",
    "WebhookPayload",
    "refusal_payload",
]
