"""Recipe Pydantic models."""

from typing import List, Optional

from pydantic import BaseModel, Field


class VideoContext(BaseModel):
    """Metadata of the tutorial video used to guide generation."""

    id: str = Field(..., description="YouTube video ID")
    title: str = Field("", description="Raw video title")
    channel: str = Field("", description="Channel name")
    description: str = Field("", max_length=800, description="Video description, truncated")
    url: str = Field(..., description="Watch URL")


class RecipeIngredient(BaseModel):
    """Single ingredient with an optional kitchen quantity."""

    name: str = Field(..., description="Ingredient name")
    quantity: Optional[str] = Field(None, description="Quantity in common kitchen units (e.g., '200 g', '1 tbsp')")


class RecipePayload(BaseModel):
    """Recipe returned by POST /recipe."""

    title: str = Field(..., description="Dish title")
    summary: str = Field("", description="Short description of the dish")
    time: str = Field("-", description="Estimated total time")
    servings: int = Field(2, description="Number of servings (0 for the refusal payload)")
    ingredients: List[RecipeIngredient] = Field(default_factory=list)
    steps: List[str] = Field(..., min_length=1, description="Instructions, without leading numbers or bullets")
    extrasMentioned: List[str] = Field(default_factory=list, description="Items added beyond the user's list")
    adaptationNote: Optional[str] = Field(None, description="How the recipe deviates from the guiding video")
    video: Optional[VideoContext] = None
    includeVideo: bool = False

    model_config = {
        "json_schema_extra": {
            "example": {
                "title": "Caprese Salad",
                "summary": "Fresh, bright and creamy with a peppery finish.",
                "time": "10 minutes",
                "servings": 2,
                "ingredients": [
                    {"name": "tomato", "quantity": "2 large"},
                    {"name": "mozzarella", "quantity": "125 g"},
                    {"name": "basil", "quantity": "8 leaves"},
                    {"name": "olive oil", "quantity": "1 tbsp"},
                ],
                "steps": [
                    "Slice the tomatoes and mozzarella into 1 cm rounds.",
                    "Alternate on a plate with basil, drizzle with oil and season.",
                ],
                "extrasMentioned": ["olive oil"],
                "includeVideo": False,
            }
        }
    }


REFUSAL_TITLE = "Invalid ingredients"
REFUSAL_SUMMARY = "No valid ingredients detected. Please provide real food ingredients."
REFUSAL_STEP = "No recipe can be made with the provided inputs."


def refusal_payload(include_video: bool = False) -> RecipePayload:
    """The minimal payload returned when no real recipe can be produced."""
    return RecipePayload(
        title=REFUSAL_TITLE,
        summary=REFUSAL_SUMMARY,
        time="-",
        servings=0,
        ingredients=[],
        steps=[REFUSAL_STEP],
        extrasMentioned=[],
        includeVideo=include_video,
    )
