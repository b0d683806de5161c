"""Deterministic recipe used when no Gemini key is configured."""

from typing import List

from deycook.models.recipe import RecipeIngredient, RecipePayload

MOCK_PANTRY = [
    RecipeIngredient(name="olive oil", quantity="1 tbsp"),
    RecipeIngredient(name="salt", quantity="to taste"),
    RecipeIngredient(name="black pepper", quantity="to taste"),
    RecipeIngredient(name="fresh herbs", quantity="few sprigs"),
]


def build_mock_recipe(ingredients: List[str], include_video: bool = False) -> RecipePayload:
    """Synthesize a recipe locally from the ingredient list."""
    first = ingredients[0]
    title = f"{first[:1].upper()}{first[1:]}-style {'fusion ' if len(ingredients) > 1 else ''}recipe"
    joined = ", ".join(ingredients)

    return RecipePayload(
        title=title,
        summary=f"A refined, minimalist dish featuring {joined} with balanced seasoning and clean presentation.",
        time="20 minutes",
        servings=2,
        ingredients=[RecipeIngredient(name=name, quantity="to taste") for name in ingredients]
        + [item.model_copy() for item in MOCK_PANTRY],
        steps=[
            "Prep all ingredients and set out your cookware.",
            f"Season {joined} lightly with salt and pepper.",
            "Cook over medium heat with a touch of olive oil until aromatic and tender.",
            "Adjust seasoning, plate neatly, garnish with herbs, and serve warm.",
        ],
        extrasMentioned=["salt", "pepper", "olive oil", "herbs"],
        includeVideo=include_video,
    )
