"""Widget-side data model: transcript messages and staged attachments."""

import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from gemini_chat.models.schemas import ImageContent


class Role(str, Enum):
    """Who authored a transcript message."""

    USER = "user"
    BOT = "bot"


class MessageKind(str, Enum):
    """How a transcript message is rendered."""

    TEXT = "text"
    PREVIEW = "preview"
    THINKING = "thinking"
    ERROR = "error"


class ChatMessage(BaseModel):
    """A single message in the widget transcript.

    Messages are rendered, never persisted.

    Attributes:
        id: Identifier used to remove the message from the view.
        role: Author of the message.
        kind: Rendering variant (plain, attachment preview, placeholder, error).
        text: Optional text content.
        image: Optional image content.
        filename: Name of the attached file, shown on previews.
        time: Display timestamp.
    """

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    role: Role
    kind: MessageKind = MessageKind.TEXT
    text: str | None = None
    image: ImageContent | None = None
    filename: str | None = None
    time: str = Field(default_factory=lambda: datetime.now().strftime("%I:%M %p"))


class UploadedFile(BaseModel):
    """A file handed over by the file picker."""

    name: str
    mime_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)


class PendingAttachment(BaseModel):
    """The single image staged for the next send.

    Attributes:
        name: Original file name.
        size: Raw size in bytes.
        image: Encoded image content.
        preview_id: Id of the preview message shown in the transcript.
    """

    name: str
    size: int = Field(ge=0)
    image: ImageContent
    preview_id: str
