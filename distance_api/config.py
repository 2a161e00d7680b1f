"""Process-wide settings, read from the environment once at startup."""
from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

# PM Connect office postcode
DEFAULT_DESTINATION = "B31 2UQ"

DEFAULT_RATE_LIMIT_REQUESTS = 60
DEFAULT_RATE_LIMIT_WINDOW = 60


class Settings(BaseModel):
    """Immutable configuration passed into the handler and app."""

    model_config = ConfigDict(frozen=True)

    google_api_key: str = ""
    destination: str = DEFAULT_DESTINATION
    environment: str = "development"
    cors_origins: tuple[str, ...] = ("http://localhost:3000",)
    rate_limit_requests: int = DEFAULT_RATE_LIMIT_REQUESTS
    rate_limit_window: int = DEFAULT_RATE_LIMIT_WINDOW

    @property
    def maps_configured(self) -> bool:
        return bool(self.google_api_key)

    @property
    def is_production(self) -> bool:
        return self.environment not in ("development", "preview")


def _cors_origins(is_production: bool) -> tuple[str, ...]:
    cors_raw = os.getenv("CORS_ORIGINS")
    if cors_raw:
        return tuple(o.strip() for o in cors_raw.split(",") if o.strip())
    if is_production:
        logger.warning(
            "CORS_ORIGINS not set in production, defaulting to restrictive policy. "
            "Set CORS_ORIGINS=https://yourdomain.com in environment."
        )
        return ()
    return ("http://localhost:3000",)


def load_settings() -> Settings:
    """Build Settings from environment variables.

    A missing GOOGLE_API is not an error here: every request then fails
    client construction and answers 500.
    """
    environment = os.getenv("ENVIRONMENT") or os.getenv("VERCEL_ENV") or "development"
    is_production = environment not in ("development", "preview")

    return Settings(
        google_api_key=os.getenv("GOOGLE_API", ""),
        destination=os.getenv("DESTINATION_ADDRESS") or DEFAULT_DESTINATION,
        environment=environment,
        cors_origins=_cors_origins(is_production),
        rate_limit_requests=int(os.getenv("RATE_LIMIT_REQUESTS", DEFAULT_RATE_LIMIT_REQUESTS)),
        rate_limit_window=int(os.getenv("RATE_LIMIT_WINDOW", DEFAULT_RATE_LIMIT_WINDOW)),
    )
