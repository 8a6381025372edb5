"""Client configuration via pydantic-settings (.env, .env.local + env vars)."""

import sys
from pathlib import Path

from loguru import logger
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError
from .models import BASE_URL, DEFAULT_TIMEOUT


class FreesoundConfig(BaseSettings):
    """All client configuration with layered resolution:
    .env file < .env.local file < environment variables < constructor kwargs.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        extra="ignore",
    )

    # -- Credentials --
    freesound_api_key: str = ""

    # -- Transport --
    freesound_base_url: str = BASE_URL
    freesound_timeout: float = DEFAULT_TIMEOUT

    # -- Logging --
    log_level: str = "INFO"
    log_dir: Path | None = None

    @field_validator("freesound_api_key", mode="before")
    @classmethod
    def _strip_api_key(cls, value: object) -> object:
        # Keys pasted into dotenv files often carry stray quotes or whitespace
        if isinstance(value, str):
            return value.strip(" \t\n\r\"'")
        return value

    def setup_logging(self) -> None:
        """Configure loguru for the client."""
        logger.remove()  # Remove default stderr handler

        log_format = (
            "{time:YYYY-MM-DDTHH:mm:ssZ} | {level:<8} | "
            "{extra[component]:<10} | {message}"
        )

        def _default_extra(record):
            record["extra"].setdefault("component", "")
            return True

        logger.add(
            sys.stderr,
            format=log_format,
            level=self.log_level.upper(),
            filter=_default_extra,
        )

        if self.log_dir is None:
            return

        self.log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(self.log_dir / "freesound.log"),
            format=log_format,
            level="DEBUG",
            rotation="10 MB",
            retention="30 days",
            filter=_default_extra,
        )


def resolve_api_key(explicit: str | None, config: FreesoundConfig) -> str:
    """Pick the API key: explicit argument first, then FREESOUND_API_KEY.

    Raises ConfigError if neither source yields a non-empty key, or if the
    key cannot be sent in an HTTP header (non-ASCII).
    """
    key = explicit or config.freesound_api_key
    if not key:
        raise ConfigError(
            "No Freesound credential available. Provide an API key via the "
            "constructor or the FREESOUND_API_KEY environment variable."
        )
    if not key.isascii():
        raise ConfigError("Freesound API key must contain only ASCII characters")
    return key
