"""Pydantic models for the relay API, the Gemini wire format and the widget.

Models:
    - RelayRequest / RelayReply / ErrorEnvelope: relay endpoint payloads
    - ImageContent: base64 image shared by the widget and the relay
    - GenerateContentRequest: outbound Gemini request body
    - ChatMessage / PendingAttachment / UploadedFile: widget transcript state
"""

from gemini_chat.models.gemini import (
    Content,
    GenerateContentRequest,
    GenerationConfig,
    InlineData,
    Part,
)
from gemini_chat.models.schemas import ErrorEnvelope, ImageContent, RelayReply, RelayRequest
from gemini_chat.models.transcript import (
    ChatMessage,
    MessageKind,
    PendingAttachment,
    Role,
    UploadedFile,
)

__all__ = [
    "ChatMessage",
    "Content",
    "ErrorEnvelope",
    "GenerateContentRequest",
    "GenerationConfig",
    "ImageContent",
    "InlineData",
    "MessageKind",
    "Part",
    "PendingAttachment",
    "RelayReply",
    "RelayRequest",
    "Role",
    "UploadedFile",
]
