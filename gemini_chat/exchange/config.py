"""Relay configuration with environment variable loading.

Pydantic-based configuration for the Gemini ``generateContent`` call.
The API key is allowed to be empty here: a missing key is reported per
request as a configuration error rather than failing at startup.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from gemini_chat.exchange.errors import ConfigurationError
from gemini_chat.models.gemini import GenerationConfig

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TIMEOUT = 120.0


def _timeout_from_env() -> float | None:
    """Read ``GEMINI_TIMEOUT``; ``0`` or ``none`` disable the timeout."""
    raw = os.getenv("GEMINI_TIMEOUT", "").strip().lower()
    if not raw:
        return DEFAULT_TIMEOUT
    if raw in ("0", "none"):
        return None
    return float(raw)


class GeminiConfig(BaseModel):
    """Configuration for calls to the Gemini API.

    Attributes:
        api_key: Gemini API key (empty when unconfigured).
        api_base: Versioned API base URL.
        model_name: Model identifier used in the endpoint path.
        timeout: Seconds before the outbound call is abandoned (None disables).
        generation: Fixed sampling parameters sent with every request.
    """

    model_config = ConfigDict(validate_default=True)

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", ""),
        description="API key for the Gemini API",
    )
    api_base: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_BASE") or DEFAULT_API_BASE,
        description="Versioned base URL of the Gemini REST API",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL") or DEFAULT_MODEL,
        description="Model to use",
    )
    timeout: float | None = Field(
        default_factory=_timeout_from_env,
        description="Outbound request timeout in seconds",
    )
    generation: GenerationConfig = Field(default_factory=GenerationConfig)

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Strip surrounding whitespace so a blank key counts as unset."""
        return v.strip()

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        """Reject non-positive timeouts; None disables the timeout."""
        if v is not None and v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @field_validator("api_base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def endpoint_url(self) -> str:
        return f"{self.api_base}/models/{self.model_name}:generateContent"

    @property
    def masked_api_key(self) -> str:
        """API key safe for logs: first 8 and last 4 characters only."""
        if len(self.api_key) <= 12:
            return "*" * len(self.api_key)
        return f"{self.api_key[:8]}...{self.api_key[-4:]}"

    def require_api_key(self) -> str:
        """Return the API key.

        Raises:
            ConfigurationError: If no key is configured.
        """
        if not self.api_key:
            raise ConfigurationError()
        return self.api_key


def get_gemini_config() -> GeminiConfig:
    """Create Gemini configuration from environment.

    Returns:
        Configured GeminiConfig instance.
    """
    return GeminiConfig()
