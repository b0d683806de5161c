"""Recipe generation endpoint."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from deycook.api.dependencies import get_recipe_generator
from deycook.middleware.rate_limit import rate_limit_dependency
from deycook.models.recipe import RecipePayload
from deycook.services.recipe_generator import RecipeGenerator

logger = logging.getLogger(__name__)
router = APIRouter(tags=["recipes"])


async def read_json_body(request: Request) -> Any:
    """Parsed JSON body, or ``{}`` when the body is empty or not JSON."""
    try:
        return await request.json()
    except ValueError:
        return {}


@router.post("/recipe", response_model=RecipePayload, response_model_exclude_none=True)
async def generate_recipe(
    request: Request,
    _: None = Depends(rate_limit_dependency),
    recipe_generator: RecipeGenerator = Depends(get_recipe_generator),
) -> RecipePayload:
    """
    Generate a recipe from user ingredients.

    - **ingredients**: array of strings, or one string separated by commas/newlines/etc.
    - **includeVideo**: use a matching YouTube tutorial as style guidance
    """
    body = await read_json_body(request)

    logger.info(
        "Route /recipe called",
        extra={
            "request_id": getattr(request.state, "request_id", None),
            "route": "/recipe",
            "params": {"include_video": bool(body.get("includeVideo")) if isinstance(body, dict) else False},
        },
    )

    return await recipe_generator.generate(body)
