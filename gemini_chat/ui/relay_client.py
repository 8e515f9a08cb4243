"""Widget backend that goes through the relay's ``POST /api/chat``."""

import os

import httpx

from gemini_chat.exchange.config import DEFAULT_TIMEOUT, get_gemini_config
from gemini_chat.exchange.errors import ProtocolError, UpstreamError
from gemini_chat.models.schemas import ImageContent, RelayRequest

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")


class RelayClient:
    """Exchange backend posting to the relay endpoint.

    Args:
        base_url: Relay base URL. Defaults to ``API_BASE_URL``.
        transport: Optional httpx transport (e.g. ASGI transport in tests).
        timeout: Request timeout in seconds (None waits indefinitely).
    """

    def __init__(
        self,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = DEFAULT_TIMEOUT,
    ) -> None:
        self._base_url = (base_url or API_BASE_URL).rstrip("/")
        self._transport = transport
        self._timeout = timeout

    @classmethod
    def from_env(
        cls,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "RelayClient":
        """Client that waits as long as the relay does (``GEMINI_TIMEOUT``)."""
        return cls(base_url=base_url, transport=transport, timeout=get_gemini_config().timeout)

    async def exchange(self, message: str, image: ImageContent | None = None) -> str:
        """Relay one prompt and return the reply text.

        Raises:
            UpstreamError: The relay answered with an error envelope.
            ProtocolError: The relay answered 2xx without a reply.
            httpx.RequestError: The relay could not be reached.
        """
        body = RelayRequest(message=message, image=image).model_dump(exclude_none=True)

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            response = await client.post(f"{self._base_url}/api/chat", json=body)

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if not response.is_success:
            raise UpstreamError(response.status_code, data.get("error"))

        reply = data.get("reply")
        if not isinstance(reply, str) or not reply:
            raise ProtocolError("No response from Gemini")
        return reply
