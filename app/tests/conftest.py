import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.api.deps import get_url_service
from app.services.shortener import URLService


BASE_URL = "http://localhost:3000"
FROZEN_TIME = 1700000000


@pytest.fixture
def url_service():
    """Creates a fresh, empty engine for each test."""
    return URLService(BASE_URL, clock=lambda: FROZEN_TIME)


@pytest.fixture
def client(url_service):
    """Creates a test client whose routes talk to the per-test engine."""
    app.dependency_overrides[get_url_service] = lambda: url_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_urls():
    """Provides sample URLs for testing."""
    return [
        "https://example.com/test1",
        "https://google.com/search?q=test",
        "http://github.com/user/repo",
    ]
