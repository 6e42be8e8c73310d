"""Structured logger for the arXiv client.

Provides context-aware logging with optional JSON formatting.

Usage:
    from arxiv_client.observability import get_logger, log_context

    logger = get_logger(__name__)

    with log_context(query="cat:cs.AI", page=2):
        logger.info("Fetching page", extra={"offset": 500})
        # Output: {"timestamp": "...", "query": "cat:cs.AI", "page": 2, "message": "...", "offset": 500}
"""

from __future__ import annotations

import contextvars
import json
import logging
import sys
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any

ROOT_LOGGER_NAME = "arxiv_client"

# LogRecord attributes that are not user-supplied extras
_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)


@dataclass
class LogContext:
    """Context for structured logging.

    Attributes are automatically included in all log messages
    within this context.
    """

    query: str | None = None
    page: int | None = None
    offset: int | None = None
    attempt: int | None = None
    correlation_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict, excluding None values."""
        return {k: v for k, v in asdict(self).items() if v is not None}


# Context variable to store current log context
_log_context: contextvars.ContextVar[LogContext] = contextvars.ContextVar(
    "arxiv_log_context",
    default=LogContext(),
)


class _ContextManager:
    """Context manager for setting log context."""

    def __init__(self, **kwargs: Any) -> None:
        unknown = set(kwargs) - set(LogContext.__dataclass_fields__)
        if unknown:
            raise TypeError(f"Unknown log context fields: {sorted(unknown)}")
        self.kwargs = kwargs
        self.token: contextvars.Token[LogContext] | None = None

    def __enter__(self) -> LogContext:
        current = _log_context.get()
        # Merge with current context
        merged = current.to_dict()
        merged.update(self.kwargs)
        new_context = LogContext(**merged)
        self.token = _log_context.set(new_context)
        return new_context

    def __exit__(self, *args: Any) -> None:
        if self.token is not None:
            _log_context.reset(self.token)
            self.token = None


def log_context(**kwargs: Any) -> _ContextManager:
    """Create a context manager for setting log context.

    Args:
        **kwargs: Context fields to set (query, page, offset, attempt, correlation_id)

    Returns:
        Context manager that sets the context

    Example:
        with log_context(query="au:Hinton", page=1):
            logger.info("Starting iteration")
    """
    return _ContextManager(**kwargs)


def current_context() -> LogContext:
    """Return the log context active on this thread of control."""
    return _log_context.get()


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in _RESERVED_ATTRS}


class StructuredFormatter(logging.Formatter):
    """JSON formatter with context support."""

    def format(self, record: logging.LogRecord) -> str:
        ctx = _log_context.get()

        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add context fields
        entry.update(ctx.to_dict())

        # Add extra fields from the log record
        entry.update(_extra_fields(record))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str, ensure_ascii=False)


class PrettyFormatter(logging.Formatter):
    """Human-readable formatter for terminals."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        ctx = _log_context.get()

        color = self.COLORS.get(record.levelname, "")

        # Build prefix from context
        prefix_parts = []
        if ctx.query:
            prefix_parts.append(f"[{ctx.query}]")
        if ctx.page is not None:
            prefix_parts.append(f"[page {ctx.page}]")
        if ctx.attempt is not None:
            prefix_parts.append(f"[try {ctx.attempt}]")

        prefix = " ".join(prefix_parts)
        if prefix:
            prefix += " "

        timestamp = datetime.now().strftime("%H:%M:%S")
        level = record.levelname[:4]
        message = record.getMessage()

        extras = [f"{key}={value}" for key, value in _extra_fields(record).items()]
        extra_str = " | " + ", ".join(extras) if extras else ""

        formatted = f"{timestamp} {color}{level}{self.RESET} {prefix}{message}{extra_str}"

        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)

        return formatted


# Track if logging has been set up
_logging_configured = False


def setup_logging(
    level: int = logging.WARNING,
    json_format: bool = False,
    quiet: bool = False,
    force: bool = False,
    handler: logging.Handler | None = None,
) -> None:
    """Set up logging for the client.

    Library code stays quiet at WARNING by default; the CLI raises the level.

    Args:
        level: Logging level (default: WARNING)
        json_format: Use JSON format (default: False, use pretty format)
        quiet: Suppress all output except errors (default: False)
        force: Reconfigure even if logging was already set up
        handler: Handler to install instead of the stderr stream handler
    """
    global _logging_configured

    if _logging_configured and not force:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    # Remove existing handlers
    root.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        if json_format:
            handler.setFormatter(StructuredFormatter())
        else:
            handler.setFormatter(PrettyFormatter())
    handler.setLevel(logging.ERROR if quiet else level)

    root.addHandler(handler)

    # Suppress noisy loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module.

    Args:
        name: Module name (usually __name__)

    Returns:
        Configured logger instance
    """
    setup_logging()

    # Create logger under arxiv_client namespace
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)
