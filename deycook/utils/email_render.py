"""HTML email body for a recipe."""

from html import escape

from deycook.models.send import SafeRecipe
from deycook.utils.recipe_normalization import strip_step_marker


def render_recipe_email(recipe: SafeRecipe, brand_name: str) -> str:
    """Render the recipe as inline-styled HTML for the relay email."""
    brand = escape(brand_name)

    ingredients_html = ""
    if recipe.ingredients:
        items = "".join(
            f"<li>{escape(i.name)}{f' — {escape(i.quantity)}' if i.quantity else ''}</li>"
            for i in recipe.ingredients
        )
        ingredients_html = f'<h3 style="margin:16px 0 6px 0">Ingredients</h3><ul>{items}</ul>'

    steps_html = "".join(f"<li>{escape(strip_step_marker(step))}</li>" for step in recipe.steps)

    return f"""
<div style="font-family:Inter,system-ui,Segoe UI,Arial,sans-serif;color:#111">
  <div style="font-weight:600;font-size:14px;margin-bottom:10px">{brand}</div>
  <h2 style="margin:0 0 8px 0">{escape(recipe.title)}</h2>
  <div style="color:#555;margin-bottom:8px">{escape(recipe.time)} • Serves {escape(recipe.servings)}</div>
  <p style="margin:0 0 12px 0">{escape(recipe.summary)}</p>
  {ingredients_html}
  <h3 style="margin:16px 0 6px 0">Steps</h3>
  <ol>{steps_html}</ol>
  <p style="margin-top:16px;color:#666">Sent via {brand}</p>
</div>
""".strip()


def email_subject(recipe: SafeRecipe, brand_name: str) -> str:
    return f"Your {brand_name} Recipe: {recipe.title}"
