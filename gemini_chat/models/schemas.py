from pydantic import BaseModel, Field


class ImageContent(BaseModel):
    """A base64-encoded image and its MIME type.

    Attributes:
        mime_type: MIME type such as ``image/png``.
        data: Base64 payload without the data URL prefix.
    """

    mime_type: str = Field(..., description="Image MIME type, e.g. image/png")
    data: str = Field(..., description="Base64-encoded image bytes")

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


class RelayRequest(BaseModel):
    """Request payload for the relay endpoint.

    ``message`` is optional at the schema level so that a missing or blank
    message is answered with the relay's own 400 envelope instead of a
    validation error.

    Attributes:
        message: User's prompt.
        image: Optional inline image sent alongside the prompt.
    """

    message: str | None = None
    image: ImageContent | None = None


class RelayReply(BaseModel):
    """Successful relay response."""

    reply: str


class ErrorEnvelope(BaseModel):
    """Error body returned by the relay for every failure."""

    error: str
