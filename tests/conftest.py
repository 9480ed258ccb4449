import httpx
import pytest
from httpx import ASGITransport


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("VAPI_API_KEY", "test-key")
    monkeypatch.setenv("VAPI_ASSISTANT_ID", "test-assistant-id")
    monkeypatch.setenv("VAPI_PHONE_NUMBER_ID", "test-phone-id")
    monkeypatch.delenv("VAPI_BASE_URL", raising=False)


@pytest.fixture
async def client(mock_env):
    from app.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
