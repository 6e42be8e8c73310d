"""Error hierarchy for the arXiv client.

All client errors inherit from ArxivError.
Use the `is_retryable` property to decide whether an error may be re-attempted.
Classification is carried by the error itself; the retry layer never guesses.
"""

from __future__ import annotations

from typing import Any

import httpx


class ArxivError(Exception):
    """Base error for all client failures.

    Attributes:
        message: Error description
        query: Search expression or id list of the failing request (if any)
        status_code: HTTP status of the failing response (if any)
        attempts: Number of attempts made before giving up (set by the retry layer)
    """

    def __init__(
        self,
        message: str,
        *,
        query: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.message = message
        self.query = query
        self.status_code = status_code
        self.attempts: int | None = None
        super().__init__(message)

    @property
    def is_retryable(self) -> bool:
        """Whether this error can be retried."""
        return False

    @property
    def kind(self) -> str:
        """Short machine-friendly name of the failure kind."""
        return "unknown"

    def to_dict(self) -> dict[str, Any]:
        """Serialize for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "kind": self.kind,
            "message": str(self),
            "query": self.query,
            "status_code": self.status_code,
            "attempts": self.attempts,
            "is_retryable": self.is_retryable,
        }


class OperationCancelledError(ArxivError):
    """The caller's cancel token fired during a wait or a request.

    Distinct from both retryable and fatal transport failures.
    """

    def __init__(self, message: str = "Operation cancelled", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)

    @property
    def kind(self) -> str:
        return "cancelled"


class TransportError(ArxivError):
    """Failure while talking to the remote API."""

    @property
    def kind(self) -> str:
        return "transport"


class RateLimitError(TransportError):
    """Server-side throttling (HTTP 429 or 503).

    This is retryable, optionally after `retry_after` seconds.
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        retry_after: float | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.retry_after = retry_after

    @property
    def is_retryable(self) -> bool:
        return True

    @property
    def kind(self) -> str:
        return "rate_limit"

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        d["retry_after"] = self.retry_after
        return d


class RequestTimeoutError(TransportError):
    """Request timed out.

    This is retryable - the server might be temporarily slow.
    """

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        timeout_seconds: float | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.timeout_seconds = timeout_seconds

    @property
    def is_retryable(self) -> bool:
        return True

    @property
    def kind(self) -> str:
        return "timeout"

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        d["timeout_seconds"] = self.timeout_seconds
        return d


class NetworkError(TransportError):
    """Network connectivity error or transient server failure (5xx).

    This is retryable - might be a temporary network issue.
    """

    def __init__(self, message: str = "Network error", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)

    @property
    def is_retryable(self) -> bool:
        return True

    @property
    def kind(self) -> str:
        return "network"


class ParseError(TransportError):
    """The response body is not a readable Atom feed.

    This is NOT retryable - the same bytes will not parse next time.
    """

    def __init__(self, message: str = "Malformed response", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)

    @property
    def kind(self) -> str:
        return "parsing"


class UnexpectedStatusError(TransportError):
    """The API answered with a status the client does not handle.

    This is NOT retryable.
    """

    def __init__(self, message: str = "Unexpected status", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)

    @property
    def kind(self) -> str:
        return "unexpected_status"


class InvalidQueryError(ArxivError):
    """The query cannot be sent as-is (or arXiv rejected it).

    This is NOT retryable - the query itself must change.
    """

    def __init__(
        self,
        message: str = "Invalid query",
        *,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.field = field

    @property
    def kind(self) -> str:
        return "invalid_query"

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        d["field"] = self.field
        return d


class NotFoundError(ArxivError):
    """No paper exists for the requested identifier.

    This is NOT retryable - the data simply doesn't exist.
    """

    def __init__(
        self,
        message: str = "Paper not found",
        *,
        paper_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.paper_id = paper_id

    @property
    def kind(self) -> str:
        return "not_found"

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        d["paper_id"] = self.paper_id
        return d


def classify_exception(error: Exception, query: str | None = None) -> ArxivError:
    """Classify a generic exception into an ArxivError.

    Args:
        error: The exception to classify
        query: Query expression for context

    Returns:
        Appropriate ArxivError subclass
    """
    if isinstance(error, ArxivError):
        return error

    if isinstance(error, httpx.TimeoutException):
        return RequestTimeoutError(f"Request timed out: {error}", query=query)

    if isinstance(error, httpx.TransportError):
        return NetworkError(f"Failed to make request: {error}", query=query)

    error_str = str(error).lower()

    # Rate limit indicators
    rate_limit_indicators = ["429", "rate limit", "too many requests", "throttl"]
    if any(indicator in error_str for indicator in rate_limit_indicators):
        return RateLimitError(str(error), query=query)

    # Timeout indicators
    timeout_indicators = ["timeout", "timed out", "deadline exceeded"]
    if any(indicator in error_str for indicator in timeout_indicators):
        return RequestTimeoutError(str(error), query=query)

    # Network indicators
    network_indicators = [
        "connection",
        "network",
        "unreachable",
        "refused",
        "reset",
        "broken pipe",
    ]
    if any(indicator in error_str for indicator in network_indicators):
        return NetworkError(str(error), query=query)

    return ArxivError(str(error), query=query)
