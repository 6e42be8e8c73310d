"""Page fetcher: one request per window, bound to a cancellation scope."""

from __future__ import annotations

from typing import Callable

from ..core.errors import ArxivError
from ..core.types import FetchOutcome, Query, RequestWindow, SearchResults
from ..observability.logger import get_logger
from ..resilience.cancellation import CancelToken

logger = get_logger(__name__)

# (query, window, cancel_token) -> page; rate limited and retried by the caller
RequestFunc = Callable[[Query, RequestWindow, CancelToken | None], SearchResults]


class Fetcher:
    """Turns request failures into FetchOutcome values.

    The request function is supplied by the client and already applies the
    rate limiter and retry executor; the fetcher only binds a cancel token
    and never raises ArxivError.
    """

    def __init__(self, request: RequestFunc, cancel_token: CancelToken | None = None) -> None:
        self._request = request
        self.cancel_token = cancel_token

    def fetch(self, query: Query, window: RequestWindow) -> FetchOutcome:
        try:
            query.validate()
            results = self._request(query, window, self.cancel_token)
        except ArxivError as e:
            logger.debug(
                f"Fetch failed: {e}",
                extra={"error_type": type(e).__name__, "offset": window.offset},
            )
            return FetchOutcome.failure(e, window)

        return FetchOutcome.from_results(results, window)

    def with_cancel_token(self, cancel_token: CancelToken | None) -> Fetcher:
        """Same request function under a different cancellation scope."""
        return Fetcher(self._request, cancel_token)
