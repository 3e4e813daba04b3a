import asyncio
import httpx
import pytest
from fastapi.testclient import TestClient
from api.index import app
from api.config import Settings
from api.dependencies import get_settings, get_http_client


def gemini_body(*texts):
    """Build a generateContent response whose first candidate holds the given text parts."""
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": t} for t in texts]}}]}


class FakeGemini:
    """Stands in for the Gemini API; records every request it receives."""

    def __init__(self):
        self.requests = []
        self.reply(200, json=gemini_body('{"text":"T","reference":"R"}'))

    def reply(self, status_code=200, json=None, content=None):
        def respond(request):
            if json is not None:
                return httpx.Response(status_code, json=json)
            return httpx.Response(status_code, content=content or b"")
        self._respond = respond

    def raise_error(self, exc_type):
        def respond(request):
            raise exc_type("simulated failure", request=request)
        self._respond = respond

    def stall(self, seconds):
        async def respond(request):
            await asyncio.sleep(seconds)
            return httpx.Response(200, json=gemini_body('{"text":"late","reference":"R"}'))
        self._respond = respond

    def __call__(self, request):
        self.requests.append(request)
        return self._respond(request)


@pytest.fixture
def gemini():
    return FakeGemini()


@pytest.fixture
def make_client(gemini):
    """Return a factory for TestClients wired to the fake Gemini with a chosen API key."""

    def _make(api_key="test-key", **overrides):
        test_settings = Settings(_env_file=None, gemini_api_key=api_key, **overrides)

        async def _http_client():
            async with httpx.AsyncClient(transport=httpx.MockTransport(gemini)) as client:
                yield client

        app.dependency_overrides[get_settings] = lambda: test_settings
        app.dependency_overrides[get_http_client] = _http_client
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client):
    return make_client()
