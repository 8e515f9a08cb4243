"""Relay endpoint forwarding chat messages to the Gemini API.

Stateless: every request validates its input, makes one outbound call and
relays the first text candidate or a normalized error.
"""

import logging

from fastapi import APIRouter, Depends, status

from gemini_chat.exchange.attachments import decode_image
from gemini_chat.exchange.client import GeminiClient, get_gemini_client
from gemini_chat.exchange.errors import ExchangeError, MissingInputError, UnexpectedError
from gemini_chat.models.schemas import ErrorEnvelope, RelayReply, RelayRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])


@router.post(
    "/chat",
    response_model=RelayReply,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorEnvelope},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorEnvelope},
    },
)
async def relay_chat(
    payload: RelayRequest,
    client: GeminiClient = Depends(get_gemini_client),
) -> RelayReply:
    """Forward a message to the generative API and relay the reply.

    Args:
        payload: Message and optional inline image.
        client: Gemini client (overridable for tests).

    Returns:
        RelayReply with the extracted reply text.

    Raises:
        400: Empty message or invalid image.
        500: Missing API key, unexpected response shape or internal error.
        Upstream status: The Gemini API rejected the request.
    """
    message = (payload.message or "").strip()
    if not message:
        raise MissingInputError()

    if payload.image is not None:
        decode_image(payload.image)

    try:
        reply = await client.exchange(message, payload.image)
    except ExchangeError:
        raise
    except Exception as e:
        logger.exception(f"Relay failed: {e}")
        raise UnexpectedError() from e

    return RelayReply(reply=reply)
