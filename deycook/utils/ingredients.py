"""Ingredient list normalization for incoming request bodies."""

import re
from typing import Any, List

from deycook.utils.exceptions import InvalidInput

# newline, comma, semicolon, pipe, middle dot, bullet, em dash, en dash, tab
INGREDIENT_DELIMITERS = re.compile(r"\n|,|;|\||·|•|—|–|\t")


def split_ingredients(text: str) -> List[str]:
    """Split a free-form ingredient string on any recognized delimiter."""
    return INGREDIENT_DELIMITERS.split(text)


def normalize_ingredients(body: Any) -> List[str]:
    """
    Extract a clean ingredient list from a request body of unknown shape.

    Accepts ``{"ingredients": [...]}``, ``{"ingredients": "a, b\\nc"}`` or a
    bare JSON array as the whole body.

    Raises:
        InvalidInput: If no non-blank ingredient remains
    """
    ingredients = body.get("ingredients") if isinstance(body, dict) else None

    if isinstance(ingredients, (list, tuple)):
        items = list(ingredients)
    elif isinstance(ingredients, str):
        items = split_ingredients(ingredients)
    elif isinstance(body, (list, tuple)):
        items = list(body)
    else:
        items = []

    cleaned = [str("" if item is None else item).strip() for item in items]
    cleaned = [item for item in cleaned if item]

    if not cleaned:
        raise InvalidInput(received=body)

    return cleaned
