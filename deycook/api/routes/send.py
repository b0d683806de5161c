"""Recipe email relay endpoint."""

import logging
from typing import Dict

from fastapi import APIRouter, Depends, Request

from deycook.api.dependencies import get_webhook_service
from deycook.api.routes.recipes import read_json_body
from deycook.middleware.rate_limit import rate_limit_dependency
from deycook.services.webhook_service import WebhookService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["send"])


@router.post("/send")
async def send_recipe(
    request: Request,
    _: None = Depends(rate_limit_dependency),
    webhook_service: WebhookService = Depends(get_webhook_service),
) -> Dict[str, bool]:
    """
    Email a recipe through the configured webhook.

    - **email**: recipient address
    - **recipe**: a recipe as returned by POST /recipe (must have steps)
    """
    body = await read_json_body(request)

    logger.info(
        "Route /send called",
        extra={"request_id": getattr(request.state, "request_id", None), "route": "/send"},
    )

    await webhook_service.send_recipe(body)
    return {"ok": True}
