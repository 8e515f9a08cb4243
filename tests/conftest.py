"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - gemini_config: Configuration pointing at a fake Gemini host
    - fake_gemini: Programmable fake of the generateContent endpoint
    - gemini_client: GeminiClient wired to the fake
    - relay_app: FastAPI app whose relay uses the fake
    - async_client: HTTPX client for API testing
    - png_bytes: A tiny valid PNG
"""

import base64
import json
from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from gemini_chat.api.app import create_app
from gemini_chat.exchange.client import GeminiClient, get_gemini_client
from gemini_chat.exchange.config import GeminiConfig

PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
)


def success_payload(text: str) -> dict[str, Any]:
    """Build a well-formed generateContent success body."""
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": text}]},
                "finishReason": "STOP",
            }
        ]
    }


class FakeGemini:
    """Fake generateContent endpoint backed by ``httpx.MockTransport``.

    Responds with ``status_code`` and ``body`` (JSON when a dict, raw
    otherwise) and records every request it receives.
    """

    def __init__(self) -> None:
        self.status_code = 200
        self.body: Any = success_payload("Hello from Gemini")
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def reply_with(self, status_code: int, body: Any) -> None:
        self.status_code = status_code
        self.body = body

    @property
    def last_json(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, content=self.body)


@pytest.fixture
def png_bytes() -> bytes:
    """Return a 1x1 PNG image."""
    return base64.b64decode(PNG_BASE64)


@pytest.fixture
def gemini_config() -> GeminiConfig:
    """Return configuration pointing at a fake host with a test key."""
    return GeminiConfig(
        api_key="test-key-1234567890",
        api_base="https://gemini.test/v1beta",
        model_name="gemini-test",
        timeout=5.0,
    )


@pytest.fixture
def fake_gemini() -> FakeGemini:
    return FakeGemini()


@pytest.fixture
def gemini_client(gemini_config: GeminiConfig, fake_gemini: FakeGemini) -> GeminiClient:
    return GeminiClient(config=gemini_config, transport=fake_gemini.transport)


@pytest.fixture
def relay_app(gemini_client: GeminiClient) -> FastAPI:
    """Create the relay app with its Gemini client replaced by the fake."""
    application = create_app()
    application.dependency_overrides[get_gemini_client] = lambda: gemini_client
    return application


@pytest.fixture
async def async_client(relay_app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=relay_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
