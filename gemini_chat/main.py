"""Main application entry point.

Runs the FastAPI relay with the NiceGUI chat widget mounted on it, or the
relay alone. Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def _serve(app) -> None:
    import uvicorn

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_integrated() -> None:
    """Run the relay with the NiceGUI widget mounted on the same server.

    FastAPI handles /api/chat, NiceGUI handles the page at /.
    """
    from nicegui import ui

    from gemini_chat.api.app import create_app
    from gemini_chat.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title="Chatbot",
        favicon="🤖",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "gemini-chat-secret"),
    )

    logger.info(f"Chat widget available at http://localhost:{os.getenv('PORT', '8000')}/")
    _serve(app)


def run_relay() -> None:
    """Run only the relay API, for widgets hosted elsewhere."""
    from gemini_chat.api.app import create_app

    logger.info(f"Relay available at http://localhost:{os.getenv('PORT', '8000')}/api/chat")
    _serve(create_app())


def main() -> None:
    """Application entry point.

    Set RUN_MODE=relay to serve the API without the widget.
    Default is integrated mode.
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting Gemini chat in {mode} mode")

    if mode == "relay":
        run_relay()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
