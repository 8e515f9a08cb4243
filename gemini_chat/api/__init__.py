"""FastAPI endpoints for the Gemini chat relay.

Endpoints:
    - GET /health: Service health status
    - POST /api/chat: Relay a message (and optional image) to the Gemini API
"""

from gemini_chat.api.app import app, create_app

__all__ = ["app", "create_app"]
