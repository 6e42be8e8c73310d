"""Lazy paper iterator.

Composes the paginator, the fetcher and the state machine into a pull-based
cursor. Each `poll_next()` call performs at most one page request.

Usage:
    iterator = client.iterator(query)

    # Pull one at a time
    paper = iterator.poll_next()

    # Or as a lazy sequence; stopping early triggers no further requests
    for paper in itertools.islice(iterator, 20):
        print(paper.title)

    if iterator.error:
        ...
"""

from __future__ import annotations

import uuid
from itertools import islice
from typing import Callable

from ..core.errors import ArxivError
from ..core.types import FetchOutcome, Paper, Query, RequestWindow
from ..observability.logger import get_logger, log_context
from ..resilience.cancellation import CancelToken
from .fetcher import Fetcher
from .paginator import Paginator
from .state import (
    FetchCompleted,
    FetchStarted,
    ItemConsumed,
    IterationPhase,
    IterationState,
    IterationStateMachine,
    MarkExhausted,
)

logger = get_logger(__name__)


class PaperIterator:
    """Resumable, cancellable traversal of all papers matching a query.

    Not safe for concurrent use; create one iterator per consumer.
    Iteration is not restartable without an explicit `reset()`.

    Args:
        query: The query to traverse; `query.start` is the first offset
        fetcher: Fetcher bound to the client's request function
        page_size: Results per request
        total_limit: Cap on yielded papers (0 = unlimited)
        query_error: Error to report on the first poll instead of fetching
            (used for queries that failed to build)
    """

    def __init__(
        self,
        query: Query,
        fetcher: Fetcher,
        page_size: int,
        total_limit: int = 0,
        query_error: ArxivError | None = None,
    ) -> None:
        self.query = query
        self._fetcher = fetcher
        self._paginator = Paginator(
            page_size=page_size,
            total_limit=total_limit,
            initial_offset=max(0, query.start),
        )
        self._machine = IterationStateMachine()
        self._query_error = query_error
        self._correlation_id = uuid.uuid4().hex[:8]

    # =========================================================================
    # Introspection
    # =========================================================================

    @property
    def state(self) -> IterationState:
        return self._machine.state

    @property
    def phase(self) -> IterationPhase:
        return self._machine.phase

    @property
    def total_consumed(self) -> int:
        return self._machine.state.total_consumed

    @property
    def total_available(self) -> int | None:
        """Server-reported match count.

        None until the first fetch completes, and also when the server
        reported no total (a feed without totalResults, or 0).
        """
        return self._machine.state.total_available or None

    @property
    def current_page(self) -> int:
        return self._machine.state.page_index

    @property
    def error(self) -> ArxivError | None:
        return self._machine.state.error

    @property
    def page_size(self) -> int:
        return self._paginator.page_size

    @property
    def total_limit(self) -> int:
        return self._paginator.total_limit

    @property
    def cancel_token(self) -> CancelToken | None:
        return self._fetcher.cancel_token

    # =========================================================================
    # Core
    # =========================================================================

    def poll_next(self) -> Paper | None:
        """Return the next paper, or None when there are no more.

        Raises:
            ArxivError: The failure that stopped iteration, on this and every
                later poll until `reset()`
        """
        state = self._machine.state

        if state.phase == IterationPhase.FAILED:
            raise state.error  # type: ignore[misc]
        if state.phase == IterationPhase.EXHAUSTED:
            return None

        if state.has_buffered_item:
            return self._consume()

        window = self._paginator.next_window(state)
        if window is None:
            self._machine.transition(MarkExhausted())
            return None

        self._fetch_page(window)

        state = self._machine.state
        if state.phase == IterationPhase.FAILED:
            raise state.error  # type: ignore[misc]
        if state.phase == IterationPhase.EXHAUSTED:
            return None
        return self._consume()

    def _consume(self) -> Paper | None:
        state = self._machine.state
        limit = self._paginator.total_limit
        if limit > 0 and state.total_consumed >= limit:
            self._machine.transition(MarkExhausted())
            return None

        paper = state.items[state.cursor]
        self._machine.transition(ItemConsumed())
        return paper

    def _fetch_page(self, window: RequestWindow) -> None:
        state = self._machine.transition(FetchStarted())
        page = state.page_index + 1

        with log_context(
            query=self.query.describe,
            page=page,
            offset=window.offset,
            correlation_id=self._correlation_id,
        ):
            if self._query_error is not None:
                outcome = FetchOutcome.failure(self._query_error, window)
            else:
                logger.info(f"Fetching page {page}", extra={"size": window.size})
                outcome = self._fetcher.fetch(self.query, window)

            if outcome.error is not None:
                logger.warning(
                    f"Iteration failed: {outcome.error}",
                    extra={"error_type": type(outcome.error).__name__},
                )

        self._machine.transition(FetchCompleted(outcome))

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def reset(self) -> None:
        """Return to the initial phase; the next poll starts from the first page."""
        self._machine.reset()

    def with_cancel_token(self, cancel_token: CancelToken | None) -> PaperIterator:
        """Fresh iterator over the same query under a new cancellation scope."""
        return PaperIterator(
            self.query,
            self._fetcher.with_cancel_token(cancel_token),
            page_size=self._paginator.page_size,
            total_limit=self._paginator.total_limit,
            query_error=self._query_error,
        )

    # =========================================================================
    # Lazy sequence view
    # =========================================================================

    def __iter__(self) -> PaperIterator:
        return self

    def __next__(self) -> Paper:
        # Failures end the sequence; they stay available through `error`
        try:
            paper = self.poll_next()
        except ArxivError:
            raise StopIteration from None
        if paper is None:
            raise StopIteration
        return paper

    def collect(self, n: int | None = None) -> list[Paper]:
        """Collect up to `n` papers (all remaining when None).

        Raises:
            ArxivError: If iteration stopped on a failure
        """
        papers = list(self if n is None else islice(self, n))
        if self.error is not None:
            raise self.error
        return papers

    def for_each(self, fn: Callable[[Paper], None]) -> int:
        """Call `fn` for every remaining paper.

        Returns:
            Number of papers processed

        Raises:
            ArxivError: If iteration stopped on a failure
        """
        count = 0
        for paper in self:
            fn(paper)
            count += 1
        if self.error is not None:
            raise self.error
        return count

    def __repr__(self) -> str:
        return (
            f"PaperIterator(query={self.query.describe!r}, phase={self.phase.value}, "
            f"consumed={self.total_consumed}, page={self.current_page})"
        )
