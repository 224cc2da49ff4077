# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up test environment variables before any imports
# - Points the JSON store at a fresh temp directory for every test
# - Provides logged-in API clients and signature images
# =============================================================================

import base64
import io
import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SECRET_KEY", "test-secret-key-0123456789")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("CORS_ORIGINS", "http://localhost:3000")

import pytest
from fastapi.testclient import TestClient
from PIL import Image, ImageDraw

from app.config import settings
from app.main import app
from lib.json_store import JsonStore
from lib.seed_data import DEFAULT_COLLECTIONS

PHOTOGRAPHER = {"email": "photographer@example.com", "password": "password123"}
CATERER = {"email": "caterer@example.com", "password": "password123"}


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def store(tmp_path, monkeypatch):
    """Fresh seeded data directory; AI key unset unless a test sets it."""
    monkeypatch.setattr(settings, "OPENROUTER_API_KEY", None)
    return JsonStore.configure(tmp_path / "data", seeds=DEFAULT_COLLECTIONS)


@pytest.fixture
def client():
    """Unauthenticated API client."""
    with TestClient(app) as test_client:
        yield test_client


def _login(test_client: TestClient, credentials: dict) -> None:
    response = test_client.post("/api/auth/login", json=credentials)
    assert response.status_code == 200, response.text


@pytest.fixture
def auth_client():
    """API client logged in as the demo photographer."""
    with TestClient(app) as test_client:
        _login(test_client, PHOTOGRAPHER)
        yield test_client


@pytest.fixture
def other_vendor_client():
    """API client logged in as the demo caterer."""
    with TestClient(app) as test_client:
        _login(test_client, CATERER)
        yield test_client


@pytest.fixture
def contract_form():
    """Valid camelCase contract form as sent by the web client."""
    return {
        "clientName": "Emma Wilson",
        "eventDate": "2099-06-14",
        "eventVenue": "Rosewood Manor",
        "servicePackage": "Full day coverage, 2 photographers",
        "amount": 4500,
        "content": "<h1>WEDDING PHOTOGRAPHY CONTRACT</h1><p>Terms &amp; conditions apply.</p>",
    }


def make_signature_data_url(width: int = 800, height: int = 200, ink: bool = True, fmt: str = "PNG") -> str:
    """Canvas-like signature: transparent background with a dark stroke."""
    mode = "RGBA" if fmt == "PNG" else "RGB"
    background = (0, 0, 0, 0) if mode == "RGBA" else (255, 255, 255)
    image = Image.new(mode, (width, height), background)
    if ink:
        draw = ImageDraw.Draw(image)
        draw.line([(10, height - 20), (width // 2, 20), (width - 10, height // 2)], fill="black", width=6)

    buf = io.BytesIO()
    image.save(buf, format=fmt)
    subtype = "png" if fmt == "PNG" else "jpeg"
    return f"data:image/{subtype};base64," + base64.b64encode(buf.getvalue()).decode("ascii")


@pytest.fixture
def signature_factory():
    """The make_signature_data_url helper, for tests that need custom sizes."""
    return make_signature_data_url


@pytest.fixture
def drawn_signature():
    return make_signature_data_url()


@pytest.fixture
def blank_signature():
    return make_signature_data_url(ink=False)
