"""Transport layer: HTTP requests and Atom feed parsing."""

from .http import (
    HttpTransport,
    Transport,
    build_date_range_filter,
    build_query_params,
    build_search_expression,
)
from .parser import extract_arxiv_id, parse_feed

__all__ = [
    "HttpTransport",
    "Transport",
    "build_date_range_filter",
    "build_query_params",
    "build_search_expression",
    "extract_arxiv_id",
    "parse_feed",
]
