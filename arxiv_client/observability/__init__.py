"""Observability infrastructure for the arXiv client.

Provides structured logging and request metrics.
"""

from .logger import LogContext, get_logger, log_context, setup_logging
from .metrics import ClientMetrics

__all__ = [
    "LogContext",
    "get_logger",
    "log_context",
    "setup_logging",
    "ClientMetrics",
]
