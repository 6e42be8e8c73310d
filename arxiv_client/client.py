"""arXiv API client.

Entry point that wires the shared rate limiter, retry executor, metrics
and transport into direct calls and lazy iterators.

Usage:
    from arxiv_client import ArxivClient, ClientOptions

    with ArxivClient(ClientOptions(page_size=100)) as client:
        results = client.search(Query(search_query="cat:cs.AI"))
        paper = client.get_by_id("2301.12345")

        for paper in client.new_query().author("Hinton").limit(50).iterator():
            print(paper.title)
"""

from __future__ import annotations

import time
from typing import Any

from .config.options import ClientOptions
from .core.errors import (
    ArxivError,
    InvalidQueryError,
    NotFoundError,
    classify_exception,
)
from .core.types import Paper, Query, RequestWindow, SearchResults
from .observability.logger import get_logger, log_context
from .observability.metrics import ClientMetrics
from .pagination.fetcher import Fetcher
from .pagination.iterator import PaperIterator
from .query.builder import QueryBuilder
from .resilience.cancellation import CancelToken
from .resilience.rate_limiter import RateLimiter
from .resilience.retry import RetryExecutor
from .transport.http import HttpTransport, Transport

logger = get_logger(__name__)


class ArxivClient:
    """Client for the arXiv export API.

    One instance models one upstream rate budget: its RateLimiter, retry
    executor and metrics are shared by every direct call and iterator it
    creates, from any thread.

    Args:
        options: Client configuration (defaults fill unset values)
        transport: Custom transport (defaults to HttpTransport)
        rate_limiter: Custom rate limiter (defaults to one built from options)
    """

    def __init__(
        self,
        options: ClientOptions | None = None,
        *,
        transport: Transport | None = None,
        rate_limiter: RateLimiter | None = None,
    ) -> None:
        self.options = (options or ClientOptions()).with_defaults()
        self.metrics = ClientMetrics()
        self.rate_limiter = rate_limiter or RateLimiter(
            min_interval=self.options.effective_interval
        )
        self.retry = RetryExecutor(
            policy=self.options.retry_policy,  # type: ignore[arg-type]
            metrics=self.metrics,
        )

        self._owns_transport = transport is None
        self.transport: Transport = transport or HttpTransport(
            base_url=self.options.base_url,  # type: ignore[arg-type]
            user_agent=self.options.user_agent,  # type: ignore[arg-type]
            timeout=self.options.timeout,  # type: ignore[arg-type]
        )

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Release the HTTP client if this client created it."""
        if self._owns_transport and isinstance(self.transport, HttpTransport):
            self.transport.close()

    def __enter__(self) -> ArxivClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    @property
    def page_size(self) -> int:
        return self.options.page_size  # type: ignore[return-value]

    @property
    def total_limit(self) -> int:
        return self.options.total_limit  # type: ignore[return-value]

    # =========================================================================
    # Requests
    # =========================================================================

    def _attempt(
        self,
        query: Query,
        window: RequestWindow,
        cancel_token: CancelToken | None,
    ) -> SearchResults:
        """One rate-limited transport call."""
        waited = self.rate_limiter.acquire(cancel_token)
        self.metrics.record_rate_limit_wait(waited)
        self.metrics.record_attempt()

        started = time.perf_counter()
        try:
            results = self.transport.perform_request(query, window, cancel_token)
        except ArxivError:
            raise
        except Exception as e:
            raise classify_exception(e, query=query.describe) from e

        latency_ms = (time.perf_counter() - started) * 1000
        self.metrics.record_request(latency_ms, items=len(results.papers))
        return results

    def _request(
        self,
        query: Query,
        window: RequestWindow,
        cancel_token: CancelToken | None = None,
    ) -> SearchResults:
        """Rate-limited, retried page request."""
        return self.retry.execute(
            lambda: self._attempt(query, window, cancel_token),
            cancel_token,
        )

    def search(self, query: Query, cancel_token: CancelToken | None = None) -> SearchResults:
        """Fetch one page of results at `query.start`.

        Raises:
            InvalidQueryError: If the query cannot be sent
            ArxivError: Transport failures after retries
        """
        if query is None:
            raise InvalidQueryError("query cannot be None")
        query.validate()

        window = RequestWindow(
            offset=query.start,
            size=query.max_results or self.page_size,
        )
        with log_context(query=query.describe, offset=window.offset):
            results = self._request(query, window, cancel_token)
            logger.debug(
                f"Search returned {len(results)} papers",
                extra={"total_results": results.total_results},
            )
        return results

    def get_by_id(self, paper_id: str, cancel_token: CancelToken | None = None) -> Paper:
        """Fetch a single paper by arXiv id.

        Raises:
            InvalidQueryError: If the id is empty
            NotFoundError: If arXiv returns no entry for the id
        """
        paper_id = (paper_id or "").strip()
        if not paper_id:
            raise InvalidQueryError("id cannot be empty", field="id_list")

        results = self.search(Query(id_list=[paper_id], max_results=1), cancel_token)
        if not results.papers:
            raise NotFoundError(
                f"paper with ID {paper_id} not found",
                paper_id=paper_id,
                query=f"id_list={paper_id}",
            )
        return results.papers[0]

    # =========================================================================
    # Queries and iteration
    # =========================================================================

    def new_query(self) -> QueryBuilder:
        """Fluent builder bound to this client."""
        return QueryBuilder(self, max_results=self.page_size, limit=self.total_limit)

    def iterator(
        self,
        query: Query,
        cancel_token: CancelToken | None = None,
        *,
        query_error: ArxivError | None = None,
    ) -> PaperIterator:
        """Lazy iterator over every result of `query`.

        The query's own `max_results` and `limit` win over the client's
        page size and total limit when set.
        """
        page_size = query.max_results if query.max_results > 0 else self.page_size
        total_limit = query.limit if query.limit > 0 else self.total_limit

        return PaperIterator(
            query,
            Fetcher(self._request, cancel_token),
            page_size=page_size,
            total_limit=total_limit,
            query_error=query_error,
        )

    def __repr__(self) -> str:
        return (
            f"ArxivClient(page_size={self.page_size}, "
            f"min_interval={self.rate_limiter.min_interval}s)"
        )
