"""Client settings using Pydantic. No side effects at import time."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    ARXIV_API_URL,
    DEFAULT_MAX_RETRY_DELAY,
    DEFAULT_MIN_REQUEST_INTERVAL,
    DEFAULT_PAGE_SIZE,
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_RETRY_DELAY,
    DEFAULT_RETRY_MULTIPLIER,
    DEFAULT_TIMEOUT,
    DEFAULT_TOTAL_LIMIT,
    DEFAULT_USER_AGENT,
    MAX_PAGE_SIZE,
)


class Settings(BaseSettings):
    """Client settings with validation.

    Settings are loaded from ARXIV_* environment variables and the .env file.
    No side effects at class definition time - .env is loaded only when
    Settings() is instantiated.
    """

    model_config = SettingsConfigDict(
        env_prefix="ARXIV_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars
    )

    # === API ===
    base_url: str = ARXIV_API_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: Annotated[float, Field(gt=0)] = DEFAULT_TIMEOUT

    # === Pagination ===
    page_size: Annotated[int, Field(gt=0, le=MAX_PAGE_SIZE)] = DEFAULT_PAGE_SIZE
    total_limit: Annotated[int, Field(ge=0)] = DEFAULT_TOTAL_LIMIT

    # === Rate Limits ===
    # Negative disables throttling; zero falls back to the default
    min_request_interval: float = Field(
        default=DEFAULT_MIN_REQUEST_INTERVAL,
        description="Minimum seconds between two requests from one client",
    )

    # === Retry ===
    retry_attempts: Annotated[int, Field(ge=1)] = DEFAULT_RETRY_ATTEMPTS
    retry_delay: Annotated[float, Field(ge=0)] = DEFAULT_RETRY_DELAY
    retry_multiplier: Annotated[float, Field(ge=1)] = DEFAULT_RETRY_MULTIPLIER
    max_retry_delay: Annotated[float, Field(gt=0)] = DEFAULT_MAX_RETRY_DELAY

    @property
    def throttling_enabled(self) -> bool:
        """Check if requests are spaced out at all."""
        return self.min_request_interval >= 0


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    This is the recommended way to access settings to avoid
    repeated .env file parsing.
    """
    return Settings()
