"""Resilience patterns for talking to the arXiv API.

Provides:
- CancelToken: cooperative cancellation with an optional deadline
- RateLimiter: minimum interval between requests of one client
- RetryExecutor: bounded retries driven by error classification
"""

from .cancellation import CancelToken
from .rate_limiter import RateLimiter
from .retry import RetryContext, RetryExecutor, RetryPolicy

__all__ = [
    "CancelToken",
    "RateLimiter",
    "RetryContext",
    "RetryExecutor",
    "RetryPolicy",
]
