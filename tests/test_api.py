"""Tests for the HTTP endpoints."""

import json

import httpx
import pytest

from deycook.middleware.rate_limit import limiter
from deycook.utils.exceptions import PERMISSION_HINT, UpstreamError

from tests.conftest import FakeGeminiService

MODEL_RECIPE = {
    "title": "Garlic Pasta",
    "summary": "Silky pasta with golden garlic.",
    "time": "25 minutes",
    "servings": "4 people",
    "ingredients": [{"name": "pasta", "quantity": "200 g"}, {"name": "garlic", "quantity": "3 cloves"}],
    "steps": ["1. Boil the pasta.", "2) Fry the garlic.", "Step 3: Toss together."],
    "extrasMentioned": [],
}


@pytest.fixture(autouse=True)
def reset_rate_limit():
    limiter.reset()
    yield
    limiter.reset()


def test_root(make_client, mock_settings):
    response = make_client(mock_settings).get("/")
    assert response.status_code == 200
    assert response.json()["name"] == "DeyCook API"


@pytest.mark.parametrize("path", ["/health", "/api/health"])
def test_health(make_client, mock_settings, path):
    response = make_client(mock_settings).get(path)
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_request_id_header_is_echoed(make_client, mock_settings):
    response = make_client(mock_settings).get("/health", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"


@pytest.mark.parametrize("path", ["/recipe", "/api/recipe"])
def test_recipe_in_mock_mode(make_client, mock_settings, path):
    response = make_client(mock_settings).post(path, json={"ingredients": "egg, spinach"})

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Egg-style fusion recipe"
    assert data["servings"] == 2
    assert len(data["steps"]) == 4
    assert data["includeVideo"] is False
    assert "video" not in data
    assert "adaptationNote" not in data


@pytest.mark.parametrize(
    "body",
    [{"ingredients": " , ;\n"}, {"ingredients": []}, {}, None],
)
def test_recipe_rejects_empty_ingredients(make_client, mock_settings, body):
    response = make_client(mock_settings).post("/recipe", json=body)

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "ingredients is required as array or comma/newline string"
    assert "received" in data
    assert "request_id" in data


def test_recipe_rejects_non_json_body(make_client, mock_settings):
    response = make_client(mock_settings).post(
        "/recipe", content=b"egg, spinach", headers={"Content-Type": "text/plain"}
    )
    assert response.status_code == 400
    assert response.json()["received"] == {}


def test_recipe_with_gemini(make_client, live_settings):
    gemini = FakeGeminiService([json.dumps({"recipe": MODEL_RECIPE})])
    response = make_client(live_settings, gemini=gemini).post(
        "/recipe", json={"ingredients": ["pasta", "garlic"]}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Garlic Pasta"
    assert data["servings"] == 4
    assert data["steps"] == ["Boil the pasta.", "Fry the garlic.", "Toss together."]
    assert gemini.calls[0]["structured"] is True


def test_recipe_with_video(make_client, live_settings):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "items": [
                    {
                        "id": {"videoId": "vid42"},
                        "snippet": {
                            "title": "Garlic Butter Spaghetti",
                            "channelTitle": "Home Chef",
                            "description": "Buttery, garlicky noodles.",
                        },
                    }
                ]
            },
        )

    gemini = FakeGeminiService([json.dumps(MODEL_RECIPE)])
    client = make_client(live_settings, gemini=gemini, video_transport=httpx.MockTransport(handler))
    response = client.post("/recipe", json={"ingredients": ["pasta", "garlic"], "includeVideo": True})

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Garlic Butter Spaghetti"
    assert data["includeVideo"] is True
    assert data["video"]["url"] == "https://www.youtube.com/watch?v=vid42"
    assert data["video"]["channel"] == "Home Chef"
    assert data["adaptationNote"]
    assert "Garlic Butter Spaghetti" in gemini.calls[0]["prompt"]


def test_recipe_unparseable_model_output(make_client, live_settings):
    gemini = FakeGeminiService(["Sorry, I cannot help with that."])
    response = make_client(live_settings, gemini=gemini).post("/recipe", json={"ingredients": ["egg"]})

    assert response.status_code == 502
    assert response.json()["error"] == "Invalid model response"
    assert response.json()["raw"] == "Sorry, I cannot help with that."


def test_recipe_permission_error_carries_hint(make_client, live_settings):
    details = [
        {
            "@type": "type.googleapis.com/google.rpc.Help",
            "links": [{"description": "Enable the API", "url": "https://console.example.com"}],
        }
    ]
    gemini = FakeGeminiService(
        [
            UpstreamError("Permission denied", status_code=403, details=details),
            UpstreamError("Permission denied", status_code=403, details=details),
        ]
    )
    response = make_client(live_settings, gemini=gemini).post("/recipe", json={"ingredients": ["egg"]})

    assert response.status_code == 403
    data = response.json()
    assert data["error"] == "Permission denied"
    assert data["hint"] == PERMISSION_HINT
    assert data["help"] == details[0]["links"]
    assert len(gemini.calls) == 2


def test_ping_in_mock_mode(make_client, mock_settings):
    response = make_client(mock_settings).get("/ping")
    assert response.status_code == 200
    assert response.json() == {"ok": True, "model": "mock", "sample": "Pong!"}


def test_ping_with_gemini(make_client, live_settings):
    gemini = FakeGeminiService(["Pong! " + "x" * 100])
    response = make_client(live_settings, gemini=gemini).get("/ping")

    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["model"] == "gemini-test"
    assert len(data["sample"]) == 40


def test_ping_failure(make_client, live_settings):
    gemini = FakeGeminiService([UpstreamError("API key not valid", status_code=400, details=[{"reason": "x"}])])
    response = make_client(live_settings, gemini=gemini).get("/ping")

    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "API key not valid", "details": [{"reason": "x"}]}


def test_send_rejects_invalid_email(make_client, mock_settings, sample_recipe):
    response = make_client(mock_settings).post("/send", json={"email": "nope", "recipe": sample_recipe})
    assert response.status_code == 400
    assert response.json()["error"] == "A valid email is required"


def test_send_relays_recipe(make_client, mock_settings, sample_recipe):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(json.loads(request.content))
        return httpx.Response(200, json={"status": "success"})

    client = make_client(mock_settings, webhook_transport=httpx.MockTransport(handler))
    response = client.post("/api/send", json={"email": "cook@example.com", "recipe": sample_recipe})

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert calls[0]["email"] == "cook@example.com"


def test_send_without_webhook_url(make_client, mock_settings, sample_recipe):
    settings = mock_settings.model_copy(update={"zapier_webhook_url": None})
    response = make_client(settings).post("/send", json={"email": "cook@example.com", "recipe": sample_recipe})

    assert response.status_code == 500
    assert response.json()["error"] == "Missing ZAPIER_WEBHOOK_URL"
