"""Client for the arXiv export API.

Rate-limited, retried requests and lazy, cancellable iteration over
paginated search results.
"""

from .client import ArxivClient
from .config.options import ClientOptions
from .config.settings import Settings, get_settings
from .core.errors import (
    ArxivError,
    InvalidQueryError,
    NetworkError,
    NotFoundError,
    OperationCancelledError,
    ParseError,
    RateLimitError,
    RequestTimeoutError,
    TransportError,
    UnexpectedStatusError,
)
from .core.types import Author, Link, Paper, Query, SearchResults
from .pagination.iterator import PaperIterator
from .pagination.state import IterationPhase
from .query.builder import QueryBuilder
from .query.enums import Category, SortBy, SortOrder
from .resilience.cancellation import CancelToken
from .resilience.rate_limiter import RateLimiter
from .resilience.retry import RetryPolicy

__version__ = "0.1.0"

__all__ = [
    "ArxivClient",
    "ClientOptions",
    "Settings",
    "get_settings",
    # Errors
    "ArxivError",
    "OperationCancelledError",
    "TransportError",
    "RateLimitError",
    "RequestTimeoutError",
    "NetworkError",
    "ParseError",
    "UnexpectedStatusError",
    "InvalidQueryError",
    "NotFoundError",
    # Types
    "Author",
    "Link",
    "Paper",
    "Query",
    "SearchResults",
    # Iteration
    "PaperIterator",
    "IterationPhase",
    # Queries
    "QueryBuilder",
    "Category",
    "SortBy",
    "SortOrder",
    # Resilience
    "CancelToken",
    "RateLimiter",
    "RetryPolicy",
]
