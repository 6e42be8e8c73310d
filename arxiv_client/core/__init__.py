"""Core types and errors for the arXiv client."""

from .errors import (
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
    classify_exception,
)
from .types import (
    Author,
    FetchOutcome,
    Link,
    Paper,
    Query,
    RequestWindow,
    SearchResults,
)

__all__ = [
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
    "classify_exception",
    # Types
    "Author",
    "Link",
    "Paper",
    "Query",
    "SearchResults",
    "RequestWindow",
    "FetchOutcome",
]
