"""Message/attachment exchange with the Gemini generative API.

Responsibilities:
    - Environment-driven configuration of the upstream endpoint
    - Image attachment validation and base64 encoding
    - Request construction and reply extraction
    - The outbound HTTP call and its error taxonomy

Shared by the relay endpoint and the widget controller.
"""

from gemini_chat.exchange.client import ExchangeBackend, GeminiClient, get_gemini_client
from gemini_chat.exchange.config import GeminiConfig, get_gemini_config
from gemini_chat.exchange.errors import (
    AttachmentValidationError,
    ConfigurationError,
    ExchangeError,
    MissingInputError,
    ProtocolError,
    UnexpectedError,
    UpstreamError,
)

__all__ = [
    "AttachmentValidationError",
    "ConfigurationError",
    "ExchangeBackend",
    "ExchangeError",
    "GeminiClient",
    "GeminiConfig",
    "MissingInputError",
    "ProtocolError",
    "UnexpectedError",
    "UpstreamError",
    "get_gemini_client",
    "get_gemini_config",
]
