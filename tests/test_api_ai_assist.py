# =============================================================================
# tests/test_api_ai_assist.py - AI Assist Endpoint Tests
# =============================================================================
# Tests for /api/ai-assist with the OpenAI client mocked out, plus the
# health endpoints.
# =============================================================================

from unittest.mock import MagicMock, patch

import pytest

from app.config import settings


@pytest.fixture
def ai_request():
    return {
        "vendorType": "caterer",
        "clientName": "Emma Wilson",
        "eventDate": "2099-06-14",
        "eventVenue": "Rosewood Manor",
        "servicePackage": "Three-course plated dinner for 120 guests",
        "amount": 9800,
        "vendorName": "Golden Fork Catering",
    }


class TestGenerate:
    """Tests for POST /api/ai-assist."""

    def test_requires_login(self, client, ai_request):
        assert client.post("/api/ai-assist", json=ai_request).status_code == 401

    def test_fallback_without_api_key(self, auth_client, ai_request):
        response = auth_client.post("/api/ai-assist", json=ai_request)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["isFallback"] is True
        assert body["content"].startswith("WEDDING CATERING CONTRACT")
        assert "Golden Fork Catering" in body["content"]
        assert "$9,800.00" in body["content"]
        assert "error" not in body

    def test_uses_model_when_configured(self, auth_client, ai_request, monkeypatch):
        monkeypatch.setattr(settings, "OPENROUTER_API_KEY", "sk-or-test")
        completion = MagicMock()
        completion.choices = [MagicMock(message=MagicMock(content="GENERATED CATERING CONTRACT"))]

        with patch("agents.contract_writer.OpenAI") as mock_openai:
            mock_openai.return_value.chat.completions.create.return_value = completion
            response = auth_client.post("/api/ai-assist", json=ai_request)

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "content": "GENERATED CATERING CONTRACT",
            "isFallback": False,
        }

    def test_model_failure_falls_back(self, auth_client, ai_request, monkeypatch):
        monkeypatch.setattr(settings, "OPENROUTER_API_KEY", "sk-or-test")

        with patch("agents.contract_writer.OpenAI") as mock_openai:
            mock_openai.return_value.chat.completions.create.side_effect = RuntimeError("timeout")
            response = auth_client.post("/api/ai-assist", json=ai_request)

        assert response.status_code == 200
        assert response.json()["isFallback"] is True

    def test_validation_failure(self, auth_client, ai_request):
        del ai_request["clientName"]
        ai_request["amount"] = 0

        response = auth_client.post("/api/ai-assist", json=ai_request)

        assert response.status_code == 400
        body = response.json()
        assert body["detail"] == "Validation failed: Client name is required, Valid amount is required"
        assert body["details"]["errors"] == ["Client name is required", "Valid amount is required"]

    def test_non_numeric_amount(self, auth_client, ai_request):
        ai_request["amount"] = "abc"

        response = auth_client.post("/api/ai-assist", json=ai_request)

        assert response.status_code == 400
        assert response.json()["detail"] == "Validation failed: Valid amount is required"

    def test_unknown_vendor_type(self, auth_client, ai_request):
        ai_request["vendorType"] = "dj"

        response = auth_client.post("/api/ai-assist", json=ai_request)

        assert response.status_code == 400
        assert response.json()["detail"] == (
            "Validation failed: Vendor type must be one of: photographer, caterer, florist"
        )

    def test_numeric_string_amount(self, auth_client, ai_request):
        ai_request["amount"] = "9800"

        response = auth_client.post("/api/ai-assist", json=ai_request)

        assert response.status_code == 200
        assert "$9,800.00" in response.json()["content"]


class TestStatus:
    """Tests for GET /api/ai-assist."""

    def test_status_without_key(self, auth_client):
        response = auth_client.get("/api/ai-assist")

        assert response.status_code == 200
        assert response.json() == {
            "status": "AI Assist API is running",
            "hasApiKey": False,
            "model": "anthropic/claude-3-haiku",
        }

    def test_status_with_key(self, auth_client, monkeypatch):
        monkeypatch.setattr(settings, "OPENROUTER_API_KEY", "sk-or-test")
        assert auth_client.get("/api/ai-assist").json()["hasApiKey"] is True


class TestHealth:
    """Tests for the health endpoints."""

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_ready(self, client):
        body = client.get("/api/health/ready").json()

        assert body["status"] == "ready"
        assert body["checks"]["storage"] == "healthy"
        assert body["checks"]["ai"] == "fallback templates only"

    def test_ready_with_corrupt_data(self, client, store):
        store.path_for("contracts").write_text("oops")

        body = client.get("/api/health/ready").json()
        assert body["status"] == "degraded"
        assert body["checks"]["storage"].startswith("unhealthy")

    def test_live(self, client):
        assert client.get("/api/health/live").json()["status"] == "alive"

    def test_root(self, client):
        assert client.get("/").json()["health"] == "/api/health"
