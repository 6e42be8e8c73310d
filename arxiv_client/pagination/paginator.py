"""Window arithmetic for paginated requests.

Pure functions over explicit inputs; no I/O and no mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..core.types import FetchOutcome, RequestWindow

if TYPE_CHECKING:
    from .state import IterationState


def next_offset(prior: FetchOutcome | None, initial_offset: int = 0) -> int:
    """Offset of the page following `prior` (or `initial_offset` for the first page)."""
    if prior is None:
        return initial_offset
    return prior.start_offset + len(prior.items)


def next_page_size(total_consumed: int, page_size: int, total_limit: int = 0) -> int:
    """Page size for the next request, clamped to the remaining limit budget."""
    if total_limit > 0:
        remaining = total_limit - total_consumed
        if remaining < page_size:
            return max(0, remaining)
    return page_size


def might_have_more(
    prior: FetchOutcome | None,
    total_consumed: int,
    total_limit: int = 0,
) -> bool:
    """Decide whether another fetch could return data.

    Args:
        prior: Outcome of the last fetch (None before the first one)
        total_consumed: Items yielded so far
        total_limit: Cap on yielded items (0 = unlimited)

    Returns:
        False when the limit is reached, the server-reported total is covered,
        or the last page came back short; True otherwise (including before
        the first fetch, when nothing is known yet)
    """
    if total_limit > 0 and total_consumed >= total_limit:
        return False

    if prior is None:
        return True

    if prior.total_available > 0 and prior.end_offset >= prior.total_available:
        return False

    # A short page means the server ran out even if totalResults is unreliable
    if len(prior.items) < prior.requested_size:
        return False

    return True


@dataclass(frozen=True)
class Paginator:
    """Window planner for one query.

    Attributes:
        page_size: Configured results per request
        total_limit: Cap on results for the whole traversal (0 = unlimited)
        initial_offset: Offset of the first window
    """

    page_size: int
    total_limit: int = 0
    initial_offset: int = 0

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ValueError(f"page_size must be positive, got {self.page_size}")
        if self.total_limit < 0:
            raise ValueError(f"total_limit must be non-negative, got {self.total_limit}")

    def might_have_more(self, state: IterationState) -> bool:
        return might_have_more(state.last_window, state.total_consumed, self.total_limit)

    def next_window(self, state: IterationState) -> RequestWindow | None:
        """Window to request next, or None when no more data can exist."""
        if not self.might_have_more(state):
            return None

        size = next_page_size(state.total_consumed, self.page_size, self.total_limit)
        if size <= 0:
            return None

        return RequestWindow(
            offset=next_offset(state.last_window, self.initial_offset),
            size=size,
        )
