"""Construction-time options for ArxivClient."""

from __future__ import annotations

from dataclasses import dataclass, replace

from ..core.errors import InvalidQueryError
from ..resilience.retry import RetryPolicy
from .constants import (
    ARXIV_API_URL,
    DEFAULT_MIN_REQUEST_INTERVAL,
    DEFAULT_PAGE_SIZE,
    DEFAULT_TIMEOUT,
    DEFAULT_TOTAL_LIMIT,
    DEFAULT_USER_AGENT,
    MAX_PAGE_SIZE,
)
from .settings import Settings


@dataclass(frozen=True)
class ClientOptions:
    """Client configuration.

    Unspecified (None) or zero values fall back to the documented defaults
    through `with_defaults()`. A negative `min_request_interval` disables
    throttling. Negative sizes, limits or timeouts and page sizes above
    MAX_PAGE_SIZE raise InvalidQueryError at construction.

    Attributes:
        page_size: Results requested per page
        total_limit: Cap on results per iterator (0 = unlimited)
        min_request_interval: Seconds between two requests of this client
        retry_policy: Retry behavior for each request
        user_agent: User-Agent header sent to arXiv
        timeout: Per-request timeout in seconds
        base_url: API endpoint
    """

    page_size: int | None = None
    total_limit: int | None = None
    min_request_interval: float | None = None
    retry_policy: RetryPolicy | None = None
    user_agent: str | None = None
    timeout: float | None = None
    base_url: str | None = None

    def __post_init__(self) -> None:
        if self.page_size is not None and not 0 <= self.page_size <= MAX_PAGE_SIZE:
            raise InvalidQueryError(
                f"page_size must be between 0 and {MAX_PAGE_SIZE}, got {self.page_size}",
                field="page_size",
            )
        if self.total_limit is not None and self.total_limit < 0:
            raise InvalidQueryError(
                f"total_limit must be non-negative, got {self.total_limit}",
                field="total_limit",
            )
        if self.timeout is not None and self.timeout < 0:
            raise InvalidQueryError(
                f"timeout must be non-negative, got {self.timeout}",
                field="timeout",
            )

    def with_defaults(self) -> ClientOptions:
        """Return a copy with every unset value replaced by its default."""
        return replace(
            self,
            page_size=self.page_size or DEFAULT_PAGE_SIZE,
            total_limit=self.total_limit or DEFAULT_TOTAL_LIMIT,
            min_request_interval=self.min_request_interval or DEFAULT_MIN_REQUEST_INTERVAL,
            retry_policy=self.retry_policy or RetryPolicy(),
            user_agent=self.user_agent or DEFAULT_USER_AGENT,
            timeout=self.timeout or DEFAULT_TIMEOUT,
            base_url=self.base_url or ARXIV_API_URL,
        )

    @property
    def effective_interval(self) -> float:
        """Interval handed to the rate limiter (0 when throttling is disabled)."""
        interval = self.with_defaults().min_request_interval or 0.0
        return max(0.0, interval)

    @classmethod
    def from_settings(cls, settings: Settings) -> ClientOptions:
        return cls(
            page_size=settings.page_size,
            total_limit=settings.total_limit,
            min_request_interval=settings.min_request_interval,
            retry_policy=RetryPolicy(
                max_attempts=settings.retry_attempts,
                delay=settings.retry_delay,
                multiplier=settings.retry_multiplier,
                max_delay=settings.max_retry_delay,
            ),
            user_agent=settings.user_agent,
            timeout=settings.timeout,
            base_url=settings.base_url,
        ).with_defaults()
