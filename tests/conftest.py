"""Pytest configuration and fixtures."""

from typing import Any, Dict, List, Optional, Union

import httpx
import pytest
from fastapi.testclient import TestClient

from deycook.api.dependencies import get_gemini_service, get_video_service, get_webhook_service
from deycook.config import Settings
from deycook.main import create_app
from deycook.services.video_service import VideoService
from deycook.services.webhook_service import WebhookService

WEBHOOK_URL = "https://hooks.example.com/catch/123"

_ENV_VARS = (
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "MOCK_MODE",
    "MODEL_ID",
    "YOUTUBE_API_KEY",
    "ZAPIER_WEBHOOK_URL",
    "BRAND_NAME",
)


class FakeGeminiService:
    """Stands in for GeminiService; replays queued texts or raises queued errors."""

    model_id = "gemini-test"

    def __init__(self, responses: Optional[List[Union[str, Exception]]] = None) -> None:
        self.responses = list(responses or [])
        self.calls: List[Dict[str, Any]] = []

    async def generate(self, **kwargs: Any) -> str:
        self.calls.append(kwargs)
        if not self.responses:
            raise AssertionError("unexpected Gemini call")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    async def ping(self) -> str:
        return await self.generate(prompt="ping", temperature=0.2)


def failing_transport() -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError(f"unexpected outbound request to {request.url}")

    return httpx.MockTransport(handler)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer credentials out of the tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_settings() -> Settings:
    return Settings(_env_file=None, gemini_api_key=None, zapier_webhook_url=WEBHOOK_URL)


@pytest.fixture
def live_settings() -> Settings:
    return Settings(
        _env_file=None,
        gemini_api_key="test-gemini-key",
        youtube_api_key="test-youtube-key",
        zapier_webhook_url=WEBHOOK_URL,
    )


@pytest.fixture
def sample_recipe() -> Dict[str, Any]:
    return {
        "title": "Tomato Basil Bruschetta",
        "summary": "Crisp bread topped with bright tomatoes and fragrant basil.",
        "time": "15 minutes",
        "servings": 2,
        "ingredients": [
            {"name": "tomato", "quantity": "2 medium"},
            {"name": "basil", "quantity": "6 leaves"},
            {"name": "olive oil", "quantity": "1 tbsp"},
        ],
        "steps": ["Dice the tomatoes.", "Toss with basil and oil.", "Spoon onto toasted bread."],
        "extrasMentioned": ["olive oil"],
    }


@pytest.fixture
def make_client():
    """Build a TestClient with the given settings and fake collaborators."""

    def _make(
        settings: Settings,
        gemini: Optional[FakeGeminiService] = None,
        video_transport: Optional[httpx.MockTransport] = None,
        webhook_transport: Optional[httpx.MockTransport] = None,
    ) -> TestClient:
        app = create_app(settings)
        app.dependency_overrides[get_gemini_service] = lambda: gemini or FakeGeminiService()
        app.dependency_overrides[get_video_service] = lambda: VideoService(
            settings, transport=video_transport or failing_transport()
        )
        app.dependency_overrides[get_webhook_service] = lambda: WebhookService(
            settings, transport=webhook_transport or failing_transport()
        )
        return TestClient(app)

    return _make
