"""Tests for settings API endpoints."""

import pytest

from pennywise.ai.client import reset_completion_provider
from pennywise.config import settings


@pytest.fixture(autouse=True)
def restore_ai_settings():
    saved = (settings.ai_provider, settings.ai_model, settings.ai_max_tokens, settings.ai_temperature)
    yield
    (settings.ai_provider, settings.ai_model, settings.ai_max_tokens, settings.ai_temperature) = saved
    reset_completion_provider()


class TestSettingsAPI:
    """Test AI settings endpoints."""

    def test_get_settings(self, client):
        response = client.get("/api/v1/settings")
        assert response.status_code == 200
        data = response.json()
        ids = [p["id"] for p in data["available_providers"]]
        assert ids[0] == "mock"
        assert "groq" in ids
        assert data["ai"]["provider"] == settings.ai_provider

    def test_update_ai_settings(self, client):
        response = client.patch("/api/v1/settings/ai", json={"provider": "Groq", "max_tokens": 400})
        assert response.status_code == 200
        data = response.json()
        assert data["provider"] == "groq"
        assert data["max_tokens"] == 400

    def test_update_unknown_provider(self, client):
        response = client.patch("/api/v1/settings/ai", json={"provider": "skynet"})
        assert response.status_code == 400

    def test_ai_connection_with_mock(self, client):
        settings.ai_provider = "mock"
        reset_completion_provider()

        response = client.post("/api/v1/settings/ai/test")
        assert response.status_code == 200
        assert response.json()["provider"] == "mock"
