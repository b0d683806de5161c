"""Email relay Pydantic models."""

from typing import List

from pydantic import BaseModel, Field


class SafeIngredient(BaseModel):
    """Ingredient coerced to plain strings for email rendering."""

    name: str = ""
    quantity: str = ""


class SafeRecipe(BaseModel):
    """Recipe fields coerced to safe string forms."""

    title: str = "Your Recipe"
    summary: str = ""
    time: str = "-"
    servings: str = "2"
    ingredients: List[SafeIngredient] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)


class WebhookPayload(BaseModel):
    """Body posted to the outbound email webhook."""

    email: str
    recipe: SafeRecipe
    htmlBody: str
    subject: str
