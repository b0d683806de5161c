"""Input validation utilities."""

import re
from typing import Any, Dict, List

from deycook.utils.exceptions import ValidationError

_EMAIL = re.compile(r".+@.+\..+")


def validate_email(email: Any) -> str:
    """
    Validate an email address.

    Args:
        email: Raw value from the request body

    Returns:
        Trimmed email string

    Raises:
        ValidationError: If the value is not a well-formed address
    """
    email_str = str(email or "").strip()
    if not _EMAIL.search(email_str):
        raise ValidationError("A valid email is required")
    return email_str


def validate_recipe_for_send(recipe: Any) -> Dict[str, Any]:
    """
    Validate a recipe submitted for email delivery.

    Raises:
        ValidationError: If the recipe is missing or has no steps
    """
    if not isinstance(recipe, dict):
        raise ValidationError("Recipe is required")

    steps: List[Any] = recipe.get("steps") if isinstance(recipe.get("steps"), list) else []
    if not steps:
        raise ValidationError("Recipe is required")

    return recipe
