"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
error envelopes and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gemini_chat.api.chat import router as chat_router
from gemini_chat.exchange.config import get_gemini_config
from gemini_chat.exchange.errors import ExchangeError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Logs whether the upstream credential is configured on startup.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    config = get_gemini_config()
    logger.info("Starting Gemini chat relay...")
    if config.api_key:
        logger.info(f"Gemini API configured (Model: {config.model_name})")
        logger.info(f"API Key: {config.masked_api_key}")
    else:
        logger.warning("GEMINI_API_KEY not set; /api/chat will answer 500 until it is")
    yield
    logger.info("Shutting down Gemini chat relay...")


async def exchange_error_handler(request: Request, exc: ExchangeError) -> JSONResponse:
    """Render an exchange failure as the ``{"error": ...}`` envelope."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed request bodies with the same envelope."""
    errors = exc.errors()
    detail = errors[0]["msg"] if errors else "malformed body"
    return JSONResponse(status_code=422, content={"error": f"Invalid request: {detail}"})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Gemini Chat Relay",
        description=(
            "Stateless relay between the chat widget and the Gemini generative API. "
            "Accepts a text message with an optional inline image and returns the "
            "first text candidate or a normalized error."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    application.add_exception_handler(ExchangeError, exchange_error_handler)
    application.add_exception_handler(RequestValidationError, validation_error_handler)

    application.include_router(chat_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "gemini-chat-relay"}

    return application


app = create_app()
