"""Retry executor for single request operations.

Provides bounded retries driven by the error's own classification:
- Fatal errors propagate on the first occurrence
- Retryable errors are re-attempted up to `max_attempts` in total
- The first retry is immediate, later retries wait `delay` (optionally
  growing by `multiplier`, capped at `max_delay`)
- Every wait is interruptible through a CancelToken
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, TypeVar

from ..config.constants import (
    DEFAULT_MAX_RETRY_DELAY,
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_RETRY_DELAY,
    DEFAULT_RETRY_MULTIPLIER,
)
from ..core.errors import ArxivError, OperationCancelledError, RateLimitError
from ..observability.logger import get_logger, log_context
from ..observability.metrics import ClientMetrics
from .cancellation import CancelToken

T = TypeVar("T")

logger = get_logger(__name__)


@dataclass(frozen=True)
class RetryPolicy:
    """Configuration for retry behavior.

    Attributes:
        max_attempts: Total attempts including the first one (>= 1)
        delay: Base wait in seconds, applied from the second retry onward
        multiplier: Growth factor per retry after the second (1.0 = fixed delay)
        max_delay: Upper bound for any single wait
    """

    max_attempts: int = DEFAULT_RETRY_ATTEMPTS
    delay: float = DEFAULT_RETRY_DELAY
    multiplier: float = DEFAULT_RETRY_MULTIPLIER
    max_delay: float = DEFAULT_MAX_RETRY_DELAY

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.delay < 0:
            raise ValueError(f"delay must be non-negative, got {self.delay}")
        if self.multiplier < 1:
            raise ValueError(f"multiplier must be >= 1, got {self.multiplier}")

    def calculate_delay(self, retry_number: int, error: ArxivError | None = None) -> float:
        """Calculate the wait before a retry.

        Args:
            retry_number: 1 for the first retry, 2 for the second, ...
            error: The failure that triggered the retry

        Returns:
            Delay in seconds
        """
        if retry_number <= 1:
            return 0.0

        delay = self.delay * (self.multiplier ** (retry_number - 2))

        # Server-provided hint wins when it asks for longer
        if isinstance(error, RateLimitError) and error.retry_after:
            delay = max(delay, error.retry_after)

        return min(delay, self.max_delay)

    @classmethod
    def no_retry(cls) -> RetryPolicy:
        return cls(max_attempts=1, delay=0.0)


@dataclass
class RetryContext:
    """Progress of one logical operation. Created per operation, then discarded."""

    max_attempts: int
    base_delay: float
    attempts_made: int = 0
    last_error: ArxivError | None = None

    @property
    def attempts_remaining(self) -> int:
        return max(0, self.max_attempts - self.attempts_made)

    @property
    def exhausted(self) -> bool:
        return self.attempts_made >= self.max_attempts


@dataclass
class RetryExecutor:
    """Retry executor shared by all operations of one client.

    Usage:
        executor = RetryExecutor(RetryPolicy(max_attempts=3, delay=1.0))

        results = executor.execute(lambda: transport.perform_request(...), token)
    """

    policy: RetryPolicy = field(default_factory=RetryPolicy)
    metrics: ClientMetrics | None = None
    sleep: Callable[[float], None] = time.sleep

    def new_context(self) -> RetryContext:
        return RetryContext(
            max_attempts=self.policy.max_attempts,
            base_delay=self.policy.delay,
        )

    def execute(
        self,
        operation: Callable[[], T],
        cancel_token: CancelToken | None = None,
    ) -> T:
        """Execute an operation with retries.

        Args:
            operation: Zero-argument callable performing one attempt
            cancel_token: Token checked before every attempt and during waits

        Returns:
            The operation's result

        Raises:
            OperationCancelledError: If cancelled before an attempt or during a wait
            ArxivError: The fatal error, or the last retryable error once attempts
                are exhausted (its `attempts` attribute records how many were made)
        """
        ctx = self.new_context()

        while True:
            if cancel_token is not None and cancel_token.cancelled:
                raise OperationCancelledError(
                    f"Cancelled after {ctx.attempts_made} attempt(s)"
                )

            ctx.attempts_made += 1
            try:
                with log_context(attempt=ctx.attempts_made):
                    return operation()

            except OperationCancelledError:
                raise

            except ArxivError as e:
                ctx.last_error = e
                e.attempts = ctx.attempts_made
                if self.metrics is not None:
                    self.metrics.record_failure(e.kind)

                if not e.is_retryable:
                    logger.debug(f"Non-retryable error: {type(e).__name__}")
                    raise

                if ctx.exhausted:
                    logger.warning(
                        f"Max attempts ({ctx.max_attempts}) exhausted",
                        extra={"error": str(e), "error_type": type(e).__name__},
                    )
                    raise

                delay = self.policy.calculate_delay(ctx.attempts_made, e)

                logger.info(
                    f"Retry {ctx.attempts_made}/{ctx.max_attempts - 1} after {delay:.1f}s",
                    extra={"error_type": type(e).__name__},
                )
                if self.metrics is not None:
                    self.metrics.record_retry()

                self._wait(delay, cancel_token)

    def _wait(self, delay: float, cancel_token: CancelToken | None) -> None:
        if delay <= 0:
            return
        if cancel_token is None:
            self.sleep(delay)
        elif cancel_token.wait(delay):
            raise OperationCancelledError("Cancelled while waiting to retry")
