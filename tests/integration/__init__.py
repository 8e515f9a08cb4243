"""Integration tests for components working together as a system.

Coverage:
    - POST /api/chat through the real FastAPI app
    - Widget controller talking to the relay over ASGI transport

The Gemini API itself is replaced by httpx.MockTransport.
"""
