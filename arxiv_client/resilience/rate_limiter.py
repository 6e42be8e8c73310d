"""Minimum-interval rate limiter.

Spaces outbound requests from one client at least `min_interval` seconds
apart, across every thread that shares the client:
- Each acquire reserves the next free start slot under a lock
- The wait happens outside the lock, so callers never block each other
  longer than their own slot requires
- Waiting is interruptible through a CancelToken
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import Callable

from ..core.errors import OperationCancelledError
from ..observability.logger import get_logger
from .cancellation import CancelToken

logger = get_logger(__name__)


@dataclass
class RateLimiter:
    """Start-time based rate limiter shared by all callers of one client.

    Usage:
        limiter = RateLimiter(min_interval=3.0)

        # Acquire before every request attempt
        limiter.acquire(cancel_token)
        make_request()

    The recorded timestamp is the reserved start time of the most recent
    request, not its completion time. Two concurrent callers therefore end
    up `min_interval` apart from each other's start, never both immediate.
    A reserved slot stays taken even when the caller's wait is cancelled;
    later callers queue behind it.
    """

    # Configuration
    min_interval: float = 1.0  # seconds; <= 0 disables throttling
    clock: Callable[[], float] = time.monotonic

    # State
    _last_request: float | None = field(default=None, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    @property
    def enabled(self) -> bool:
        return self.min_interval > 0

    def reserve(self) -> float:
        """Reserve the next request slot.

        Returns:
            Seconds the caller must wait before its slot starts (0 if none)
        """
        if not self.enabled:
            return 0.0

        with self._lock:
            now = self.clock()
            if self._last_request is None:
                slot = now
            else:
                slot = max(now, self._last_request + self.min_interval)
            self._last_request = slot
            return slot - now

    def acquire(self, cancel_token: CancelToken | None = None) -> float:
        """Block until this caller may issue a request.

        Args:
            cancel_token: Token that interrupts the wait

        Returns:
            Wait time in seconds (0 if no wait needed)

        Raises:
            OperationCancelledError: If the token fires before or during the wait
        """
        if cancel_token is not None and cancel_token.cancelled:
            raise OperationCancelledError("Cancelled before rate limit acquire")

        wait_time = self.reserve()
        if wait_time <= 0:
            return 0.0

        logger.debug(
            f"Rate limit: waiting {wait_time:.2f}s",
            extra={"min_interval": self.min_interval},
        )

        if cancel_token is None:
            time.sleep(wait_time)
        elif cancel_token.wait(wait_time):
            raise OperationCancelledError("Cancelled while waiting for rate limit")

        return wait_time

    def time_until_ready(self) -> float:
        """Seconds until a new request could start without waiting (approximate)."""
        if not self.enabled:
            return 0.0
        with self._lock:
            if self._last_request is None:
                return 0.0
            return max(0.0, self._last_request + self.min_interval - self.clock())

    def reset(self) -> None:
        """Forget the last request time."""
        with self._lock:
            self._last_request = None
