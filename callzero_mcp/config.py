from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://callzero.ai"
API_KEY_PREFIX = "callzero_"


class Settings(BaseSettings):
    """
    Central configuration for the CallZero MCP server.

    All values are loaded from environment variables with `CALLZERO_` prefix.
    You can also use a `.env` file in the working directory during development.
    """

    model_config = SettingsConfigDict(
        env_prefix="CALLZERO_",
        env_file=".env",
        extra="ignore",
    )

    api_key: str
    # Optional override for development (e.g. http://localhost:3000)
    api_url: Optional[str] = None
    request_timeout: float = 30.0
    log_level: str = "INFO"

    @field_validator("api_key")
    @classmethod
    def _check_api_key_prefix(cls, value: str) -> str:
        if not value.startswith(API_KEY_PREFIX):
            raise ValueError(f'Invalid API key format. Must start with "{API_KEY_PREFIX}"')
        return value

    @field_validator("request_timeout")
    @classmethod
    def _check_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("request_timeout must be positive")
        return value

    @property
    def base_url(self) -> str:
        return self.api_url or DEFAULT_API_URL


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache settings from environment."""
    return Settings()  # type: ignore[call-arg]


def configure_logging(level: str = "INFO") -> None:
    # stdout carries the MCP protocol, so everything goes to stderr.
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
