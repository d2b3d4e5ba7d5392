import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.shortener import URLShortenerService, get_url_shortener_service


TEST_BASE_URL = "https://sho.rt"


class FixedRandomSource:
    """Returns the same draw every time."""

    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def next_double(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def base_url():
    return TEST_BASE_URL


@pytest.fixture
def fixed_source():
    """Factory for random sources pinned to one draw."""
    return FixedRandomSource


@pytest.fixture
def random_source():
    return FixedRandomSource(0.5)


@pytest.fixture
def service(random_source):
    return URLShortenerService(random_source, TEST_BASE_URL)


@pytest.fixture
def client(service):
    """Creates a test client with the shortener service overridden."""
    app.dependency_overrides[get_url_shortener_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_urls():
    """Provides sample URLs for testing."""
    return [
        "https://example.com/a/b/c",
        "https://google.com/search?q=test",
        "",
        "not even a url",
        "https://例え.jp/パス?q=ü",
    ]
