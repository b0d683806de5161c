"""Recipe generation pipeline: validate, prompt, call Gemini, parse, normalize."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from deycook.config import Settings
from deycook.models.recipe import RecipePayload, VideoContext
from deycook.services.gemini_service import GeminiService
from deycook.services.mock_recipe import build_mock_recipe
from deycook.services.prompt_builder import RESPONSE_SCHEMA, PromptBuilder
from deycook.services.video_service import VideoService
from deycook.utils.exceptions import InvalidModelResponse, UpstreamError
from deycook.utils.ingredients import normalize_ingredients
from deycook.utils.json_parsing import parse_model_json
from deycook.utils.recipe_normalization import build_recipe_payload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationRequest:
    ingredients: Tuple[str, ...]
    include_video: bool = False

    @classmethod
    def from_body(cls, body: Any) -> "GenerationRequest":
        """
        Build a request from a raw JSON body.

        Raises:
            InvalidInput: If the body carries no usable ingredient
        """
        ingredients = normalize_ingredients(body)
        include_video = bool(body.get("includeVideo")) if isinstance(body, dict) else False
        return cls(ingredients=tuple(ingredients), include_video=include_video)


class RecipeGenerator:
    """Orchestrates one recipe generation per request."""

    def __init__(
        self,
        settings: Settings,
        gemini_service: Optional[GeminiService] = None,
        video_service: Optional[VideoService] = None,
        prompt_builder: Optional[PromptBuilder] = None,
    ) -> None:
        self.settings = settings
        self.gemini_service = gemini_service or GeminiService(settings)
        self.video_service = video_service or VideoService(settings)
        self.prompt_builder = prompt_builder or PromptBuilder(settings)

    async def generate(self, body: Any) -> RecipePayload:
        """
        Generate a recipe from a raw request body.

        Raises:
            InvalidInput: Empty ingredient list (400)
            UpstreamError: Gemini failed on both the structured and fallback call
            InvalidModelResponse: Model text could not be parsed as JSON (502)
        """
        request = GenerationRequest.from_body(body)
        ingredients = list(request.ingredients)

        if self.settings.use_mock:
            logger.info("Mock mode: returning local recipe", extra={"ingredient_count": len(ingredients)})
            return build_mock_recipe(ingredients, request.include_video)

        logger.info(
            "Generating recipe",
            extra={"ingredient_count": len(ingredients), "include_video": request.include_video},
        )

        video: Optional[VideoContext] = None
        if request.include_video:
            video = await self.video_service.find_video(ingredients)

        system_instruction = self.prompt_builder.system_instruction()
        user_prompt = self.prompt_builder.user_prompt(ingredients, request.include_video, video)

        text = await self._generate_text(system_instruction, user_prompt)

        result = parse_model_json(text)
        if not result.parsed:
            logger.error("Gemini returned unparseable output", extra={"raw_chars": len(result.raw)})
            raise InvalidModelResponse(raw=result.raw)

        return build_recipe_payload(result.data, include_video=request.include_video, video=video)

    async def _generate_text(self, system_instruction: str, user_prompt: str) -> str:
        try:
            return await self.gemini_service.generate(
                prompt=user_prompt,
                system_instruction=system_instruction,
                structured=True,
                response_schema=RESPONSE_SCHEMA,
            )
        except UpstreamError as e:
            logger.warning(
                f"Structured output failed, falling back to plain JSON prompt: {e.status_code} {e.message}"
            )

        return await self.gemini_service.generate(
            prompt=self.prompt_builder.fallback_prompt(user_prompt),
            system_instruction=system_instruction,
            structured=False,
        )
