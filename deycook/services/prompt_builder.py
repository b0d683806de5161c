"""Prompt construction for recipe generation."""

import json
from typing import Any, Dict, List, Optional

from deycook.config import Settings
from deycook.models.recipe import REFUSAL_STEP, REFUSAL_SUMMARY, REFUSAL_TITLE, VideoContext

# Fewer valid ingredients than this (after typo correction) gets the refusal object
MIN_VALID_INGREDIENTS = 2

REFUSAL_OBJECT: Dict[str, Any] = {
    "title": REFUSAL_TITLE,
    "summary": REFUSAL_SUMMARY,
    "time": "-",
    "servings": 0,
    "ingredients": [],
    "steps": [REFUSAL_STEP],
    "extrasMentioned": [],
}

RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "summary": {"type": "string"},
        "time": {"type": "string"},
        "servings": {"type": "integer"},
        "ingredients": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "quantity": {"type": "string"},
                },
                "required": ["name"],
            },
        },
        "steps": {"type": "array", "items": {"type": "string"}},
        "extrasMentioned": {"type": "array", "items": {"type": "string"}},
        "adaptationNote": {"type": "string"},
    },
    "required": ["title", "summary", "time", "servings", "ingredients", "steps"],
}

FALLBACK_EXAMPLE: Dict[str, Any] = {
    "title": "",
    "summary": "",
    "time": "",
    "servings": 2,
    "ingredients": [{"name": "", "quantity": ""}],
    "steps": ["..."],
    "extrasMentioned": ["..."],
}


class PromptBuilder:
    """Builds the system instruction and user prompts sent to Gemini."""

    def __init__(self, settings: Settings) -> None:
        self.max_pantry_extras = settings.max_pantry_extras
        self.max_video_extras = settings.max_video_extras

    def system_instruction(self) -> str:
        refusal = json.dumps(REFUSAL_OBJECT, ensure_ascii=False, separators=(",", ":"))
        return f"""
You are a professional 5-star chef AI.
Return ONLY JSON (no markdown, no commentary).

Goal and order:
1) Provide a concise, refined description of the dish that will be made (summary). Include flavor profile, texture, key techniques, and presentation.
2) Then list the ingredients with practical kitchen quantities and sizes.
3) Then provide clear and detailed step-by-step instructions.

Validation & normalization:
- Correct obvious typos in ingredient names (e.g., "tomto" -> "tomato").
- Ignore non-food/random words (e.g., people names like "Dey Dey").
- If after correction fewer than {MIN_VALID_INGREDIENTS} valid ingredients remain, do not generate a recipe. Return this minimal object instead:
  {refusal}

Rules:
- Use all ingredients provided by the user.
- Use only the provided ingredients as the core. If additions are needed, allow a maximum of {self.max_pantry_extras} very common pantry items (e.g. salt, pepper, oil, stock, herbs). Do not introduce uncommon or luxury extras.
- Every item you add must appear in extrasMentioned AND in ingredients with a quantity.
- Fields to produce: title, summary, time, servings, ingredients (array of {{ name, quantity }}), steps (array of strings), extrasMentioned (array of strings).
- Do NOT prefix steps with numbers or bullets; the client will number them.
- Keep tone concise and refined.
""".strip()

    def user_prompt(
        self,
        ingredients: List[str],
        include_video: bool = False,
        video: Optional[VideoContext] = None,
    ) -> str:
        user_list = "\n".join(f"- {item}" for item in ingredients)
        lines = [f"Ingredients:\n{user_list}"]

        if include_video:
            lines.append(
                "User requested video-guided recipe generation "
                "(may add or omit some items to align with tutorial)."
            )

        lines.append(
            f"""
Constraints:
- Correct obvious typos in ingredient names and ignore non-food/random words.
- If fewer than {MIN_VALID_INGREDIENTS} valid ingredients remain after correction, produce the minimal refusal object specified in the system instructions.
- Output JSON ONLY with fields: title (string), summary (string), time (string), servings (number), ingredients (array of {{ name, quantity? }}), steps (string[]), extrasMentioned (string[]), adaptationNote (string optional).
- Ingredients: include the provided items; add at most {self.max_pantry_extras} common pantry items only if needed. Provide quantities in common kitchen units (g, ml, tsp, tbsp, cups, pieces).
- Servings: default to 2 if unspecified.
- Time: realistic estimate.
- Steps: clear instructions as an array of strings (do NOT include leading numbers or bullets; the client will number them).
""".strip()
        )

        if include_video and video is not None:
            lines.append(self._video_context(video))

        return "\n\n".join(lines)

    def fallback_prompt(self, user_prompt: str) -> str:
        example = json.dumps(FALLBACK_EXAMPLE, ensure_ascii=False, separators=(",", ":"))
        return f"{user_prompt}\n\nReturn ONLY a valid JSON object with these fields: {example}"

    def _video_context(self, video: VideoContext) -> str:
        return f'''
A relevant YouTube cooking tutorial was found. Use it as authoritative style guidance.
VIDEO TITLE: {video.title}
CHANNEL: {video.channel}
VIDEO DESCRIPTION (may contain extra or missing ingredients, adapt intelligently):
"""{video.description}"""
Adjust steps to reflect professional best practice while respecting the user's ingredient list primarily.
If the video introduces additional common ingredients that substantially improve the dish, you MAY add up to {self.max_video_extras} of them, listing them ALSO inside extrasMentioned.
If any of the user's ingredients are absent from the video but still compatible, incorporate them logically.
Provide a short adaptationNote explaining deviations from the video.
'''.strip()
