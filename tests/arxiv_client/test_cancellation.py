"""Tests for arxiv_client/resilience/cancellation.py."""

import threading
import time

import pytest

from arxiv_client.core.errors import OperationCancelledError
from arxiv_client.resilience.cancellation import CancelToken


class TestCancelToken:
    """Tests for CancelToken."""

    def test_starts_uncancelled(self):
        token = CancelToken()
        assert token.cancelled is False
        assert token.remaining() is None

    def test_cancel_is_idempotent(self):
        token = CancelToken()
        token.cancel()
        token.cancel()
        assert token.cancelled is True

    def test_wait_full_duration(self):
        token = CancelToken()
        start = time.monotonic()
        assert token.wait(0.05) is False
        assert time.monotonic() - start >= 0.04

    def test_wait_wakes_on_cancel(self):
        """Cancelling from another thread interrupts a long wait."""
        token = CancelToken()
        threading.Timer(0.05, token.cancel).start()

        start = time.monotonic()
        assert token.wait(10) is True
        assert time.monotonic() - start < 2

    def test_deadline_expires(self):
        token = CancelToken(timeout=0.05)
        assert token.cancelled is False
        assert token.remaining() is not None

        assert token.wait(10) is True
        assert token.cancelled is True
        assert token.remaining() == 0.0

    def test_zero_wait_reports_state(self):
        token = CancelToken()
        assert token.wait(0) is False
        token.cancel()
        assert token.wait(0) is True

    def test_raise_if_cancelled(self):
        token = CancelToken()
        token.raise_if_cancelled()

        token.cancel()
        with pytest.raises(OperationCancelledError):
            token.raise_if_cancelled()

    def test_deadline_property(self):
        assert CancelToken().deadline is None

        before = time.monotonic()
        token = CancelToken(timeout=5)
        assert token.deadline >= before + 5
