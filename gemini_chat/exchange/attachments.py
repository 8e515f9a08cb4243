"""Image attachment validation and encoding.

Checks type and size before an image is staged or relayed, and converts
between raw bytes and base64 payloads.
"""

import base64
import binascii

from gemini_chat.exchange.errors import AttachmentValidationError
from gemini_chat.models.schemas import ImageContent

# Constants
MAX_IMAGE_SIZE = 20 * 1024 * 1024  # 20MB


def validate_image(mime_type: str | None, size: int) -> None:
    """Validate an image before it is encoded or forwarded.

    Args:
        mime_type: Declared MIME type of the file.
        size: Size of the raw bytes.

    Raises:
        AttachmentValidationError: If the type is not ``image/*`` or the file
            exceeds 20MB.
    """
    if not mime_type or not mime_type.startswith("image/"):
        raise AttachmentValidationError("Please select an image file")

    if size > MAX_IMAGE_SIZE:
        raise AttachmentValidationError("File size must be less than 20MB")


def encode_image(content: bytes, mime_type: str) -> ImageContent:
    """Validate raw image bytes and encode them as base64.

    Args:
        content: Raw image bytes.
        mime_type: Declared MIME type.

    Returns:
        ImageContent with the base64 payload.

    Raises:
        AttachmentValidationError: If validation fails.
    """
    validate_image(mime_type, len(content))
    return ImageContent(mime_type=mime_type, data=base64.b64encode(content).decode("ascii"))


def decode_image(image: ImageContent) -> bytes:
    """Decode and validate an inline image received by the relay.

    Args:
        image: Image as sent by the widget.

    Returns:
        The decoded bytes.

    Raises:
        AttachmentValidationError: If the payload is not base64, not an image
            or too large.
    """
    try:
        content = base64.b64decode(image.data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise AttachmentValidationError("Image data is not valid base64") from e

    validate_image(image.mime_type, len(content))
    return content
