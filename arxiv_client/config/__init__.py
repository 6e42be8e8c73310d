"""Configuration module for the arXiv client."""

from .settings import Settings, get_settings
from .constants import (
    # API
    ARXIV_API_URL,
    DEFAULT_USER_AGENT,
    DEFAULT_TIMEOUT,
    # Pagination
    DEFAULT_PAGE_SIZE,
    DEFAULT_TOTAL_LIMIT,
    MAX_PAGE_SIZE,
    # Rate limit
    DEFAULT_MIN_REQUEST_INTERVAL,
    # Retry
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_RETRY_DELAY,
)

__all__ = [
    "Settings",
    "get_settings",
    "ARXIV_API_URL",
    "DEFAULT_USER_AGENT",
    "DEFAULT_TIMEOUT",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_TOTAL_LIMIT",
    "MAX_PAGE_SIZE",
    "DEFAULT_MIN_REQUEST_INTERVAL",
    "DEFAULT_RETRY_ATTEMPTS",
    "DEFAULT_RETRY_DELAY",
]
