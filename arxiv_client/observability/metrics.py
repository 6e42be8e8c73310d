"""Request metrics for the arXiv client.

Tracks request counts, retries, failure types, rate-limit waits and latency.
One instance is owned by each client and shared by all of its iterators,
so every counter update happens under a lock.

Usage:
    from arxiv_client.observability import ClientMetrics

    metrics = ClientMetrics()
    metrics.record_request(latency_ms=120.5, items=50)
    metrics.record_failure("rate_limit")

    print(metrics.success_rate)  # 50.0
    print(metrics.to_summary())
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class ClientMetrics:
    """Counters for one client instance."""

    started_at: datetime = field(default_factory=datetime.now)

    # Counts
    requests: int = 0
    successful: int = 0
    retries: int = 0
    items_received: int = 0

    # Error breakdown by kind
    failures_by_type: dict[str, int] = field(default_factory=dict)

    # Timing (seconds / milliseconds)
    rate_limit_wait_seconds: float = 0.0
    total_latency_ms: float = 0.0

    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    @property
    def failed(self) -> int:
        return sum(self.failures_by_type.values())

    @property
    def success_rate(self) -> float:
        """Success rate as percentage (0-100) of completed requests."""
        completed = self.successful + self.failed
        if completed == 0:
            return 0.0
        return self.successful / completed * 100

    @property
    def average_latency_ms(self) -> float:
        if self.successful == 0:
            return 0.0
        return self.total_latency_ms / self.successful

    def record_attempt(self) -> None:
        """Record one outbound request attempt."""
        with self._lock:
            self.requests += 1

    def record_request(self, latency_ms: float, items: int = 0) -> None:
        """Record a successful request."""
        with self._lock:
            self.successful += 1
            self.total_latency_ms += latency_ms
            self.items_received += items

    def record_failure(self, error_type: str = "unknown") -> None:
        """Record a failed attempt with its error kind."""
        with self._lock:
            self.failures_by_type[error_type] = self.failures_by_type.get(error_type, 0) + 1

    def record_retry(self) -> None:
        with self._lock:
            self.retries += 1

    def record_rate_limit_wait(self, seconds: float) -> None:
        """Record time spent waiting on the rate limiter."""
        if seconds <= 0:
            return
        with self._lock:
            self.rate_limit_wait_seconds += seconds

    def reset(self) -> None:
        """Zero all counters."""
        with self._lock:
            self.started_at = datetime.now()
            self.requests = 0
            self.successful = 0
            self.retries = 0
            self.items_received = 0
            self.failures_by_type = {}
            self.rate_limit_wait_seconds = 0.0
            self.total_latency_ms = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/output."""
        with self._lock:
            return {
                "started_at": self.started_at.isoformat(),
                "requests": self.requests,
                "successful": self.successful,
                "failed": self.failed,
                "retries": self.retries,
                "items_received": self.items_received,
                "success_rate": round(self.success_rate, 2),
                "failures_by_type": dict(self.failures_by_type),
                "rate_limit_wait_seconds": round(self.rate_limit_wait_seconds, 3),
                "total_latency_ms": round(self.total_latency_ms, 2),
                "average_latency_ms": round(self.average_latency_ms, 2),
            }

    def to_summary(self) -> str:
        """Generate human-readable summary."""
        lines = [
            "Request Summary",
            "=" * 40,
            f"Requests: {self.requests}",
            f"Success: {self.successful} ({self.success_rate:.1f}%)",
            f"Retries: {self.retries}",
            f"Items: {self.items_received}",
            f"Rate limit wait: {self.rate_limit_wait_seconds:.1f}s",
            f"Average latency: {self.average_latency_ms:.0f}ms",
        ]

        if self.failures_by_type:
            lines.append("")
            lines.append("Failures by Type:")
            for error_type, count in sorted(
                self.failures_by_type.items(), key=lambda x: -x[1]
            ):
                lines.append(f"  {error_type}: {count}")

        return "\n".join(lines)
