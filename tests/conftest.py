import json
import os

import httpx
import pytest

# Keep tests deterministic regardless of a local .env file.
os.environ["GOOGLE_PHOTOS_BASE_URL"] = "https://photoslibrary.googleapis.com/v1"
os.environ["API_PREFIX"] = "/api/googlephotos"
os.environ["CORS_ORIGINS"] = "http://localhost:3000"
os.environ["LOG_JSON"] = "false"

from fastapi.testclient import TestClient  # noqa: E402

from photos_relay.main import app  # noqa: E402


class FakeGoogle:
    """Records outbound requests and answers them from a queue, in order."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response | Exception] = []

    def reply(self, status_code: int = 200, *, text: str | None = None, json_body=None) -> None:
        if json_body is not None:
            self._responses.append(httpx.Response(status_code, json=json_body))
        else:
            self._responses.append(httpx.Response(status_code, text=text or ""))

    def fail(self, exc: Exception) -> None:
        self._responses.append(exc)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"unexpected outbound call: {request.method} {request.url}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def json_body(self, index: int) -> dict:
        return json.loads(self.requests[index].content)


@pytest.fixture
def google(monkeypatch) -> FakeGoogle:
    fake = FakeGoogle()
    monkeypatch.setattr(
        "photos_relay.adapter.client.http._new_client",
        lambda: httpx.AsyncClient(transport=httpx.MockTransport(fake.handle)),
    )
    return fake


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
