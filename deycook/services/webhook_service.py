"""Email delivery of a recipe through an outbound webhook (e.g. Zapier Catch Hook)."""

import logging
from typing import Any, Dict, Optional

import httpx

from deycook.config import Settings
from deycook.models.send import SafeIngredient, SafeRecipe, WebhookPayload
from deycook.utils.email_render import email_subject, render_recipe_email
from deycook.utils.exceptions import ConfigurationError, WebhookError
from deycook.utils.validators import validate_email, validate_recipe_for_send

logger = logging.getLogger(__name__)


def build_safe_recipe(recipe: Dict[str, Any]) -> SafeRecipe:
    """Coerce client-supplied recipe fields to plain strings."""
    ingredients = recipe.get("ingredients")
    safe_ingredients = []
    if isinstance(ingredients, list):
        for item in ingredients:
            item = item if isinstance(item, dict) else {}
            name = item.get("name")
            quantity = item.get("quantity")
            safe_ingredients.append(
                SafeIngredient(
                    name=str(name) if name is not None else "",
                    quantity=str(quantity) if quantity else "",
                )
            )

    servings = recipe.get("servings")
    return SafeRecipe(
        title=str(recipe.get("title") or "Your Recipe"),
        summary=str(recipe.get("summary") or ""),
        time=str(recipe.get("time") or "-"),
        servings=str(2 if servings is None else servings),
        ingredients=safe_ingredients,
        steps=[str(step) for step in recipe["steps"]],
    )


class WebhookService:
    """Posts rendered recipes to the configured webhook."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.webhook_url = settings.zapier_webhook_url
        self.brand_name = settings.brand_name
        self.timeout = settings.http_timeout
        self._transport = transport

    def build_payload(self, email: str, recipe: Dict[str, Any]) -> WebhookPayload:
        safe_recipe = build_safe_recipe(recipe)
        return WebhookPayload(
            email=email,
            recipe=safe_recipe,
            htmlBody=render_recipe_email(safe_recipe, self.brand_name),
            subject=email_subject(safe_recipe, self.brand_name),
        )

    async def send_recipe(self, body: Any) -> None:
        """
        Validate the request and relay the recipe email.

        Raises:
            ValidationError: Invalid email or recipe without steps (400)
            ConfigurationError: No webhook URL configured (500)
            WebhookError: The webhook call failed or returned non-2xx
        """
        body = body if isinstance(body, dict) else {}
        email = validate_email(body.get("email"))
        recipe = validate_recipe_for_send(body.get("recipe"))

        if not self.webhook_url:
            raise ConfigurationError("Missing ZAPIER_WEBHOOK_URL")

        payload = self.build_payload(email, recipe)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.webhook_url, json=payload.model_dump())
        except httpx.HTTPError as e:
            logger.error(f"Webhook request failed: {str(e)}", exc_info=True)
            raise WebhookError("Failed to send via webhook", status_code=500) from e

        try:
            out = response.json()
        except ValueError:
            out = None

        if not response.is_success:
            message = out.get("message") if isinstance(out, dict) else None
            logger.warning(
                "Webhook returned non-success status",
                extra={"status_code": response.status_code},
            )
            raise WebhookError(message or "Webhook failed", status_code=response.status_code, details=out)

        logger.info("Recipe email relayed", extra={"recipe_title": payload.recipe.title})
