"""Chat widget: exchange controller plus a thin NiceGUI presentation layer.

Responsibilities:
    - Transcript state and the per-send thinking placeholder
    - Image attachment staging with preview and removal
    - Relay calls through ``POST /api/chat``

The NiceGUI page only renders what ``ExchangeController`` tells it to.
"""

from gemini_chat.ui.controller import ChatView, ExchangeController
from gemini_chat.ui.relay_client import RelayClient

__all__ = ["ChatView", "ExchangeController", "RelayClient"]
