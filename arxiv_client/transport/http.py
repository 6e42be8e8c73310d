"""HTTP transport for the arXiv export API.

Performs exactly one request per call and classifies every failure.
Rate limiting and retries are applied by the client around this call.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol

import httpx

from ..config.constants import (
    ARXIV_API_URL,
    DEFAULT_SORT_BY,
    DEFAULT_SORT_ORDER,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
)
from ..core.errors import (
    ArxivError,
    NetworkError,
    OperationCancelledError,
    RateLimitError,
    RequestTimeoutError,
    UnexpectedStatusError,
    classify_exception,
)
from ..core.types import Query, RequestWindow, SearchResults
from ..observability.logger import get_logger
from ..resilience.cancellation import CancelToken
from .parser import parse_feed

logger = get_logger(__name__)

DATE_FORMAT = "%Y%m%d"


class Transport(Protocol):
    """Anything that can fetch one page of results."""

    def perform_request(
        self,
        query: Query,
        window: RequestWindow,
        cancel_token: CancelToken | None = None,
    ) -> SearchResults: ...


def build_date_range_filter(
    date_from: datetime | None,
    date_to: datetime | None,
) -> str:
    """Build a submittedDate range term; `*` marks an open side."""
    if date_from is None and date_to is None:
        return ""
    lower = date_from.strftime(DATE_FORMAT) if date_from else "*"
    upper = date_to.strftime(DATE_FORMAT) if date_to else "*"
    return f"submittedDate:[{lower} TO {upper}]"


def build_search_expression(query: Query) -> str:
    """Search expression with the date range folded in."""
    expression = query.search_query.strip()
    date_filter = build_date_range_filter(query.submitted_date_from, query.submitted_date_to)
    if not date_filter:
        return expression
    if expression:
        return f"({expression}) AND {date_filter}"
    return date_filter


def build_query_params(query: Query, window: RequestWindow | None = None) -> dict[str, Any]:
    """Build URL parameters for one page request.

    Args:
        query: Query to send
        window: Page to request (defaults to query.start / query.max_results)

    Returns:
        Parameter dict for httpx
    """
    params: dict[str, Any] = {}

    if query.id_list:
        params["id_list"] = ",".join(query.id_list)
    else:
        expression = build_search_expression(query)
        if expression:
            params["search_query"] = expression

    start = window.offset if window else query.start
    if start > 0:
        params["start"] = start

    params["max_results"] = window.size if window else query.max_results
    params["sortBy"] = query.sort_by or DEFAULT_SORT_BY
    params["sortOrder"] = query.sort_order or DEFAULT_SORT_ORDER

    return params


def parse_retry_after(value: str | None) -> float | None:
    """Seconds from a Retry-After header (delta-seconds form only)."""
    if not value:
        return None
    try:
        seconds = float(value.strip())
    except ValueError:
        return None
    return seconds if seconds >= 0 else None


def status_error(response: httpx.Response, query: str | None = None) -> ArxivError:
    """Map a non-200 response to the error taxonomy."""
    status = response.status_code

    if status in (429, 503):
        return RateLimitError(
            f"Rate limit exceeded, status {status}",
            retry_after=parse_retry_after(response.headers.get("Retry-After")),
            query=query,
            status_code=status,
        )

    if 500 <= status < 600:
        return NetworkError(f"Server error, status {status}", query=query, status_code=status)

    return UnexpectedStatusError(
        f"Unexpected status code {status}", query=query, status_code=status
    )


class HttpTransport:
    """Transport backed by a synchronous httpx.Client.

    Usage:
        with HttpTransport(user_agent="my-app/1.0") as transport:
            results = transport.perform_request(query, RequestWindow(0, 100))
    """

    def __init__(
        self,
        base_url: str = ARXIV_API_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout
        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=timeout)

    def close(self) -> None:
        """Close the HTTP client (only if this transport created it)."""
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _effective_timeout(self, cancel_token: CancelToken | None) -> float:
        if cancel_token is None:
            return self.timeout
        remaining = cancel_token.remaining()
        if remaining is None:
            return self.timeout
        if remaining <= 0:
            raise OperationCancelledError("Deadline passed before request")
        return min(self.timeout, remaining)

    def perform_request(
        self,
        query: Query,
        window: RequestWindow,
        cancel_token: CancelToken | None = None,
    ) -> SearchResults:
        """Fetch one page.

        Raises:
            OperationCancelledError: If the token fired before or during the call
            RateLimitError, NetworkError, RequestTimeoutError: Retryable failures
            UnexpectedStatusError, ParseError, InvalidQueryError: Fatal failures
        """
        if cancel_token is not None:
            cancel_token.raise_if_cancelled("Cancelled before request")

        described = query.describe
        timeout = self._effective_timeout(cancel_token)
        params = build_query_params(query, window)

        logger.debug(
            "GET arXiv API",
            extra={"start": window.offset, "max_results": window.size},
        )

        try:
            response = self.client.get(
                self.base_url,
                params=params,
                headers={"User-Agent": self.user_agent},
                timeout=timeout,
            )
        except httpx.TimeoutException as e:
            if cancel_token is not None and cancel_token.cancelled:
                raise OperationCancelledError("Cancelled during request") from e
            raise RequestTimeoutError(
                f"Request timed out after {timeout:.1f}s",
                timeout_seconds=timeout,
                query=described,
            ) from e
        except httpx.HTTPError as e:
            raise classify_exception(e, query=described) from e

        # httpx cannot abort mid-flight; drop late results instead
        if cancel_token is not None and cancel_token.cancelled:
            raise OperationCancelledError("Cancelled during request")

        if response.status_code != 200:
            raise status_error(response, query=described)

        try:
            return parse_feed(response.content)
        except ArxivError as e:
            if e.query is None:
                e.query = described
            e.status_code = e.status_code or response.status_code
            raise
