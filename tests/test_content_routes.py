import pytest
from fastapi.testclient import TestClient

from content_creator.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_text_types(client, auth_headers):
    response = client.get("/api/text-types", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {
        "text_types": ["creative", "professional", "casual", "academic"],
        "default": "creative",
    }


def test_invalid_api_key_is_rejected(client):
    response = client.post(
        "/api/analyze-prompt",
        json={"prompt": "Build a mobile app"},
        headers={"Authorization": "Bearer wrong-key"},
    )
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid API Key"


def test_analyze_prompt(client, auth_headers):
    response = client.post("/api/analyze-prompt", json={"prompt": "Build a mobile app"}, headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["tokens"] == ["build", "mobile", "app"]
    assert body["analysis"] == {
        "topic": "build",
        "category": "technology",
        "keywords": ["build", "mobile"],
        "complexity": "low",
        "tone": "neutral",
    }


def test_generate_text(client, auth_headers):
    response = client.post(
        "/api/generate-text",
        json={"prompt": "Build a mobile app", "text_type": "professional"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["text_type"] == "professional"
    assert "Build a mobile app" in body["text"]
    assert body["text"].startswith("🔧 **Professional Technical Analysis:")
    assert body["html"].count("<br>") == body["text"].count("\n")


def test_generate_text_defaults_to_creative(client, auth_headers):
    response = client.post("/api/generate-text", json={"prompt": "A cozy garden"}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["text_type"] == "creative"


def test_blank_prompt_is_rejected(client, auth_headers):
    response = client.post("/api/generate-text", json={"prompt": "   "}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "Please enter a description for your text"


def test_unknown_text_type_is_rejected(client, auth_headers):
    response = client.post(
        "/api/generate-text",
        json={"prompt": "Build a mobile app", "text_type": "poetic"},
        headers=auth_headers,
    )
    assert response.status_code == 422


def test_generated_html_escapes_prompt_markup(client, auth_headers):
    response = client.post(
        "/api/generate-text",
        json={"prompt": "<script>alert(1)</script> app", "text_type": "casual"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert "&lt;script&gt;" in body["html"]
    assert "<script>" not in body["html"]
