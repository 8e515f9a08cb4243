"""Gemini Chat - chat widget and stateless relay for the Gemini generative API.

Combines FastAPI for the relay endpoint, httpx for the outbound call,
NiceGUI for the widget, and Pydantic for data validation.

Components:
    - api: Relay endpoint and error envelopes
    - exchange: Request construction, reply parsing, attachments, errors
    - ui: Exchange controller and NiceGUI page
    - models: Relay, wire and transcript schemas
"""

__version__ = "0.1.0"
