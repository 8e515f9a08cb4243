"""Widget exchange controller.

Owns the transcript and the staged attachment, and drives each send through
``user message -> thinking placeholder -> reply or error``. Rendering goes
through a ``ChatView`` so the controller runs without a browser.
"""

import logging
from typing import Protocol

import httpx

from gemini_chat.exchange.attachments import encode_image
from gemini_chat.exchange.client import ExchangeBackend
from gemini_chat.exchange.errors import AttachmentValidationError, ExchangeError
from gemini_chat.models.transcript import (
    ChatMessage,
    MessageKind,
    PendingAttachment,
    Role,
    UploadedFile,
)

logger = logging.getLogger(__name__)

IMAGE_ONLY_PROMPT = "What is in this image?"
ERROR_PREFIX = "Sorry, I encountered an error: "


class ChatView(Protocol):
    """Rendering surface driven by the controller."""

    def render(self, message: ChatMessage) -> None: ...

    def discard(self, message_id: str) -> None: ...

    def scroll_to_bottom(self) -> None: ...

    def notify_invalid(self, text: str) -> None: ...

    def reset_file_input(self) -> None: ...


def describe_failure(error: Exception) -> str:
    """Text interpolated into the error bubble for a failed exchange."""
    if isinstance(error, ExchangeError):
        return error.message
    if isinstance(error, httpx.RequestError):
        return f"Connection failed: {error}"
    return str(error) or type(error).__name__


class ExchangeController:
    """Chat state for one widget instance.

    Sends are independent: each owns its own thinking placeholder and
    several may be in flight at once.
    """

    def __init__(self, backend: ExchangeBackend, view: ChatView | None = None) -> None:
        self.backend = backend
        self.view = view
        self.transcript: list[ChatMessage] = []
        self.attachment: PendingAttachment | None = None

    # === Transcript ===

    def _append(self, message: ChatMessage) -> ChatMessage:
        self.transcript.append(message)
        if self.view is not None:
            self.view.render(message)
            self.view.scroll_to_bottom()
        return message

    def _remove(self, message_id: str) -> None:
        self.transcript = [m for m in self.transcript if m.id != message_id]
        if self.view is not None:
            self.view.discard(message_id)

    def _reset_file_input(self) -> None:
        if self.view is not None:
            self.view.reset_file_input()

    # === Attachments ===

    def stage_attachment(self, file: UploadedFile) -> bool:
        """Validate, encode and preview an image for the next send.

        Replaces any previously staged image. Validation failures are shown
        through the view and never raised.

        Returns:
            True if the image was staged.
        """
        try:
            image = encode_image(file.content, file.mime_type)
        except AttachmentValidationError as e:
            logger.info(f"Rejected attachment {file.name}: {e.message}")
            if self.view is not None:
                self.view.notify_invalid(e.message)
            self._reset_file_input()
            return False
        except Exception as e:
            logger.error(f"Error processing file {file.name}: {e}")
            if self.view is not None:
                self.view.notify_invalid("Error processing file. Please try again.")
            self._reset_file_input()
            return False

        if self.attachment is not None:
            self._remove(self.attachment.preview_id)

        preview = self._append(
            ChatMessage(
                role=Role.USER,
                kind=MessageKind.PREVIEW,
                image=image,
                filename=file.name,
            )
        )
        self.attachment = PendingAttachment(
            name=file.name, size=file.size, image=image, preview_id=preview.id
        )
        # Finished uploads count toward the picker's max-files limit.
        self._reset_file_input()
        return True

    def reject_attachment(self) -> None:
        """Report a pick the file picker refused before uploading it."""
        logger.info("File picker rejected a selection")
        if self.view is not None:
            self.view.notify_invalid(AttachmentValidationError.default_message)
        self._reset_file_input()

    def remove_attachment(self) -> None:
        """Clear the staged image and its preview. Safe to call repeatedly."""
        if self.attachment is not None:
            self._remove(self.attachment.preview_id)
            self.attachment = None
        self._reset_file_input()

    # === Sending ===

    async def send_message(self, text: str | None) -> ChatMessage | None:
        """Send text and/or the staged image and render the outcome.

        Does nothing when there is neither text nor an attachment. Never
        raises on exchange failure: errors become a bot error message.

        Args:
            text: Raw input text.

        Returns:
            The bot reply or error message, or None if nothing was sent.
        """
        message = (text or "").strip()
        attachment = self.attachment
        if not message and attachment is None:
            logger.debug("Ignoring send without text or attachment")
            return None

        image = attachment.image if attachment is not None else None
        if attachment is not None:
            self.remove_attachment()

        self._append(ChatMessage(role=Role.USER, text=message or None, image=image))
        thinking = self._append(ChatMessage(role=Role.BOT, kind=MessageKind.THINKING))

        try:
            reply = await self.backend.exchange(message or IMAGE_ONLY_PROMPT, image)
        except Exception as e:
            logger.error(f"Exchange failed: {e}")
            outcome = ChatMessage(
                role=Role.BOT,
                kind=MessageKind.ERROR,
                text=f"{ERROR_PREFIX}{describe_failure(e)}",
            )
        else:
            outcome = ChatMessage(role=Role.BOT, text=reply)
        finally:
            self._remove(thinking.id)

        return self._append(outcome)
