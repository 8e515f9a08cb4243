"""Gemini API client used by the relay and as a direct widget backend.

Each call opens its own ``httpx.AsyncClient`` so concurrent requests share
no state. Failures are raised as ``ExchangeError`` subclasses; nothing is
retried.
"""

import logging
from typing import Any, Protocol

import httpx

from gemini_chat.exchange.config import GeminiConfig, get_gemini_config
from gemini_chat.exchange.errors import ProtocolError, UpstreamError
from gemini_chat.exchange.protocol import build_request, extract_error_message, extract_reply
from gemini_chat.models.gemini import GenerateContentRequest
from gemini_chat.models.schemas import ImageContent

logger = logging.getLogger(__name__)


class ExchangeBackend(Protocol):
    """Anything that can turn a prompt and optional image into a reply."""

    async def exchange(self, message: str, image: ImageContent | None = None) -> str: ...


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


class GeminiClient:
    """Single-shot ``generateContent`` caller.

    Wraps the REST endpoint with:
    - Fixed generation parameters from configuration
    - Status passthrough for upstream failures
    - Strict reply extraction
    """

    def __init__(
        self,
        config: GeminiConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional configuration. Loads from environment if not provided.
            transport: Optional httpx transport, used to fake the API in tests.
        """
        self._config = config or get_gemini_config()
        self._transport = transport

    @property
    def config(self) -> GeminiConfig:
        return self._config

    async def exchange(self, message: str, image: ImageContent | None = None) -> str:
        """Send one prompt (and optional image) and return the reply text.

        Args:
            message: Prompt text.
            image: Optional inline image.

        Returns:
            The first candidate's first text part.

        Raises:
            ConfigurationError: If no API key is configured.
            UpstreamError: If the API answers with a non-success status.
            ProtocolError: If the success response carries no text.
        """
        request = build_request(message, image, self._config.generation)
        return await self.generate(request)

    async def generate(self, request: GenerateContentRequest) -> str:
        """Post a prepared request and extract the reply."""
        api_key = self._config.require_api_key()

        async with httpx.AsyncClient(
            timeout=self._config.timeout, transport=self._transport
        ) as client:
            response = await client.post(
                self._config.endpoint_url,
                params={"key": api_key},
                json=request.to_payload(),
            )

        if not response.is_success:
            message = extract_error_message(_json_or_none(response), response.status_code)
            logger.error(f"Gemini API error: {message}")
            raise UpstreamError(response.status_code, message)

        payload = _json_or_none(response)
        try:
            return extract_reply(payload)
        except ProtocolError:
            logger.error(f"Unexpected API response format: {payload!r}")
            raise


# Module-level singleton instance
_gemini_client: GeminiClient | None = None


def get_gemini_client() -> GeminiClient:
    """Get or create the global Gemini client.

    Returns:
        The GeminiClient instance.
    """
    global _gemini_client
    if _gemini_client is None:
        _gemini_client = GeminiClient()
    return _gemini_client
