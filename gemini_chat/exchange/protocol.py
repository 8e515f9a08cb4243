"""Request construction and response parsing for ``generateContent``."""

from typing import Any

from gemini_chat.exchange.errors import ProtocolError
from gemini_chat.models.gemini import (
    Content,
    GenerateContentRequest,
    GenerationConfig,
    InlineData,
    Part,
)
from gemini_chat.models.schemas import ImageContent


def build_request(
    message: str | None,
    image: ImageContent | None = None,
    generation: GenerationConfig | None = None,
) -> GenerateContentRequest:
    """Build a single-turn request from optional text and an optional image.

    The image part, when present, comes before the text part.

    Args:
        message: Prompt text.
        image: Optional inline image.
        generation: Optional sampling parameters.

    Returns:
        The request model, ready for ``to_payload()``.
    """
    parts: list[Part] = []
    if image is not None:
        parts.append(Part(inline_data=InlineData(mime_type=image.mime_type, data=image.data)))
    if message:
        parts.append(Part(text=message))

    return GenerateContentRequest(contents=[Content(parts=parts)], generation_config=generation)


def extract_reply(payload: Any) -> str:
    """Return ``candidates[0].content.parts[0].text`` unmodified.

    Raises:
        ProtocolError: If the path is missing or the text is empty.
    """
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        text = None

    if not isinstance(text, str) or not text:
        raise ProtocolError()
    return text


def extract_error_message(payload: Any, status_code: int) -> str:
    """Return ``error.message`` from an error body, or a generic message."""
    try:
        message = payload["error"]["message"]
    except (KeyError, TypeError):
        message = None

    if isinstance(message, str) and message:
        return message
    return f"API error: {status_code}"
