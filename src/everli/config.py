"""Settings for the Everli client, read from the environment or a .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.everli.com"
DEFAULT_TRACK_FROM = "it-header"


class ConfigurationError(Exception):
    """Raised when the client is built without usable credentials."""


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="EVERLI_", env_file=".env", extra="ignore"
    )

    email: str = ""
    password: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    track_from: str = DEFAULT_TRACK_FROM


def require_credentials(email: str | None, password: str | None) -> None:
    """Fail unless both email and password are non-empty."""
    if not email or not password:
        raise ConfigurationError("You must specify at least an email and a password")
