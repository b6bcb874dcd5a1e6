import httpx
import pytest
from httpx import ASGITransport

META_URL = "https://sheets.test/meta.csv"
EVENTS_URL = "https://sheets.test/events.csv"
HOTELS_URL = "https://sheets.test/hotels.csv"
GUESTS_URL = "https://sheets.test/guests.csv"


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")
    monkeypatch.setenv("META_CSV_URL", META_URL)
    monkeypatch.setenv("EVENTS_CSV_URL", EVENTS_URL)
    monkeypatch.setenv("HOTELS_CSV_URL", HOTELS_URL)
    monkeypatch.setenv("GUESTS_CSV_URL", GUESTS_URL)


@pytest.fixture
async def client(mock_env):
    from app.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
