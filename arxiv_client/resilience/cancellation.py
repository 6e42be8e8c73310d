"""Cooperative cancellation.

A CancelToken is passed down the call chain (iterator, fetcher, retry,
rate limiter, transport) and checked at every point that can block.

Usage:
    token = CancelToken(timeout=30)

    # From another thread
    token.cancel()

    # At a suspension point
    if token.wait(1.5):
        raise OperationCancelledError()
"""

from __future__ import annotations

import threading
import time

from ..core.errors import OperationCancelledError


class CancelToken:
    """Cancellation flag with an optional deadline.

    Safe to cancel from any thread. Waiting on the token is an
    interruptible sleep that returns early once the token fires.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._event = threading.Event()
        self._deadline: float | None = None
        if timeout is not None:
            self._deadline = time.monotonic() + max(0.0, timeout)

    def cancel(self) -> None:
        """Fire the token. Idempotent."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        if self._event.is_set():
            return True
        if self._deadline is not None and time.monotonic() >= self._deadline:
            self._event.set()
            return True
        return False

    @property
    def deadline(self) -> float | None:
        """Monotonic deadline, or None when the token has no timeout."""
        return self._deadline

    def remaining(self) -> float | None:
        """Seconds left before the deadline (None when there is no deadline)."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def wait(self, seconds: float) -> bool:
        """Sleep for up to `seconds`, waking early on cancellation.

        Returns:
            True if the token is cancelled, False if the full wait elapsed
        """
        if seconds <= 0:
            return self.cancelled

        remaining = self.remaining()
        if remaining is not None and remaining < seconds:
            # The deadline lands inside the wait
            self._event.wait(remaining)
            return self.cancelled

        self._event.wait(seconds)
        return self.cancelled

    def raise_if_cancelled(self, message: str = "Operation cancelled") -> None:
        """Raise OperationCancelledError if the token has fired."""
        if self.cancelled:
            raise OperationCancelledError(message)

    def __repr__(self) -> str:
        return f"CancelToken(cancelled={self.cancelled}, remaining={self.remaining()})"
