"""Shared API dependencies."""

from fastapi import Depends

from deycook.config import Settings, get_settings
from deycook.services.gemini_service import GeminiService
from deycook.services.recipe_generator import RecipeGenerator
from deycook.services.video_service import VideoService
from deycook.services.webhook_service import WebhookService


def get_gemini_service(settings: Settings = Depends(get_settings)) -> GeminiService:
    """Get Gemini client service instance."""
    return GeminiService(settings)


def get_video_service(settings: Settings = Depends(get_settings)) -> VideoService:
    """Get video lookup service instance."""
    return VideoService(settings)


def get_recipe_generator(
    settings: Settings = Depends(get_settings),
    gemini_service: GeminiService = Depends(get_gemini_service),
    video_service: VideoService = Depends(get_video_service),
) -> RecipeGenerator:
    """Get recipe generation service instance."""
    return RecipeGenerator(settings, gemini_service=gemini_service, video_service=video_service)


def get_webhook_service(settings: Settings = Depends(get_settings)) -> WebhookService:
    """Get email relay service instance."""
    return WebhookService(settings)
