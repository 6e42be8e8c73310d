"""Tests for arxiv_client/pagination/paginator.py (pure functions)."""

import pytest

from arxiv_client.core.types import FetchOutcome
from arxiv_client.pagination.paginator import (
    Paginator,
    might_have_more,
    next_offset,
    next_page_size,
)
from arxiv_client.pagination.state import IterationPhase, IterationState

from .fixtures.stub_transport import make_paper


def outcome(start: int, count: int, requested: int = 10, total: int = 0) -> FetchOutcome:
    return FetchOutcome(
        items=tuple(make_paper(i) for i in range(start, start + count)),
        start_offset=start,
        total_available=total,
        requested_size=requested,
    )


class TestNextOffset:
    def test_first_page_starts_at_zero(self):
        assert next_offset(None) == 0

    def test_first_page_honors_initial_offset(self):
        assert next_offset(None, initial_offset=40) == 40

    def test_follows_prior_page(self):
        assert next_offset(outcome(20, 10)) == 30

    def test_short_prior_page(self):
        assert next_offset(outcome(20, 3)) == 23


class TestNextPageSize:
    def test_unlimited(self):
        assert next_page_size(1000, page_size=50) == 50

    def test_clamped_to_remaining_budget(self):
        assert next_page_size(40, page_size=50, total_limit=45) == 5

    def test_not_clamped_when_budget_is_larger(self):
        assert next_page_size(0, page_size=50, total_limit=200) == 50

    def test_budget_spent(self):
        assert next_page_size(45, page_size=50, total_limit=45) == 0


class TestMightHaveMore:
    def test_unknown_before_first_fetch(self):
        assert might_have_more(None, 0) is True

    def test_limit_reached(self):
        assert might_have_more(None, 10, total_limit=10) is False
        assert might_have_more(outcome(0, 10), 10, total_limit=10) is False

    def test_total_available_covered(self):
        assert might_have_more(outcome(90, 10, total=100), 100) is False

    def test_total_available_not_covered(self):
        assert might_have_more(outcome(80, 10, total=100), 90) is True

    def test_short_page_signals_exhaustion(self):
        """Fewer items than requested ends the traversal even if the total lies."""
        assert might_have_more(outcome(0, 7, requested=10, total=1000), 7) is False

    def test_full_page_with_unknown_total(self):
        assert might_have_more(outcome(0, 10, requested=10, total=0), 10) is True


class TestPaginator:
    def test_first_window(self):
        paginator = Paginator(page_size=25, initial_offset=5)
        window = paginator.next_window(IterationState())
        assert (window.offset, window.size) == (5, 25)

    def test_following_window_clamped(self):
        paginator = Paginator(page_size=25, total_limit=30)
        state = IterationState(
            phase=IterationPhase.READY,
            cursor=25,
            total_consumed=25,
            last_window=outcome(0, 25, requested=25),
        )

        window = paginator.next_window(state)

        assert (window.offset, window.size) == (25, 5)

    def test_no_window_when_exhausted(self):
        paginator = Paginator(page_size=10)
        state = IterationState(
            phase=IterationPhase.READY,
            cursor=4,
            total_consumed=4,
            last_window=outcome(0, 4),
        )
        assert paginator.next_window(state) is None

    def test_invalid_configuration(self):
        with pytest.raises(ValueError):
            Paginator(page_size=0)
        with pytest.raises(ValueError):
            Paginator(page_size=10, total_limit=-1)
