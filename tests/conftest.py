"""Shared fixtures: a fake webhook and an in-process app client."""

import json

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app.config import get_settings
from app.main import app
from app.services.webhook_service import get_http_client


class FakeWebhook:
    """Records every request and answers with a configurable outcome."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.error: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json={"ok": self.status_code < 300})

    @property
    def bodies(self) -> list[dict]:
        return [json.loads(request.content) for request in self.requests]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def webhook():
    return FakeWebhook()


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
async def client(webhook):
    async def fake_http_client():
        async with webhook.client() as c:
            yield c

    app.dependency_overrides[get_http_client] = fake_http_client
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as c:
        yield c
    app.dependency_overrides.clear()
