"""Shared fixtures: a fake AI gateway behind httpx.MockTransport."""

import httpx
import pytest
from fastapi.testclient import TestClient

from sqlrelay import nl2sql
from sqlrelay.config import API_KEY_ENV
from sqlrelay.main import app


def completion(content: str) -> dict:
    """Minimal chat-completion body as returned by the gateway."""
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


class FakeGateway:
    """Records outgoing requests and answers with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.response = httpx.Response(200, json=completion("SELECT 1;"))

    def reply(self, status_code: int, **kwargs) -> None:
        self.response = httpx.Response(status_code, **kwargs)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response


@pytest.fixture
def api_key(monkeypatch: pytest.MonkeyPatch) -> str:
    monkeypatch.setenv(API_KEY_ENV, "test-key")
    return "test-key"


@pytest.fixture
def no_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(API_KEY_ENV, raising=False)


@pytest.fixture
def gateway(monkeypatch: pytest.MonkeyPatch) -> FakeGateway:
    fake = FakeGateway()
    monkeypatch.setattr(
        nl2sql,
        "build_client",
        lambda: httpx.AsyncClient(transport=httpx.MockTransport(fake.handler)),
    )
    return fake


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
