"""Error taxonomy for the message/attachment exchange.

Every failure in the exchange is an ``ExchangeError`` carrying a
human-readable message and the HTTP status the relay answers with.
"""

from fastapi import status


class ExchangeError(Exception):
    """Base class for all exchange failures.

    Attributes:
        message: Text shown to the user or returned in the error envelope.
        status_code: HTTP status the relay responds with.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class AttachmentValidationError(ExchangeError):
    """Raised when an image attachment has the wrong type or size."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Please select an image file"


class MissingInputError(ExchangeError):
    """Raised when the relay receives an empty message."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Message is required"


class ConfigurationError(ExchangeError):
    """Raised when the upstream credential is not configured."""

    default_message = "API key not configured. Please set GEMINI_API_KEY in .env file"


class UpstreamError(ExchangeError):
    """Raised when the generative API answers with a non-success status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"API error: {status_code}")


class ProtocolError(ExchangeError):
    """Raised when a success response does not carry a reply."""

    default_message = "Unexpected response format from API"


class UnexpectedError(ExchangeError):
    """Catch-all for faults that are not part of the exchange contract."""
