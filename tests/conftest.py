"""
Test configuration and fixtures for Chromalens tests.
"""
import pytest
from fastapi.testclient import TestClient

from main import app
from app.utils.metrics import reset_metrics as reset_global_metrics
from app.services.personalization import get_personalization


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def reset_metrics():
    """Reset metrics before each test."""
    reset_global_metrics()


@pytest.fixture(autouse=True)
def reset_personalization():
    """Forget tracked color usage before each test."""
    get_personalization().reset()
