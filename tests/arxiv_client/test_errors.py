"""Tests for arxiv_client/core/errors.py.

Error classification drives the retry layer, so every kind's
`is_retryable` flag is pinned here.
"""

import httpx
import pytest

from arxiv_client.core.errors import (
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


# =============================================================================
# Retryability
# =============================================================================


class TestRetryability:
    """Tests for the is_retryable flag carried by each error kind."""

    @pytest.mark.parametrize(
        "error",
        [
            RateLimitError(),
            RequestTimeoutError(),
            NetworkError(),
        ],
    )
    def test_transient_errors_are_retryable(self, error):
        """Throttling, timeouts and network failures may be retried."""
        assert error.is_retryable is True
        assert isinstance(error, TransportError)

    @pytest.mark.parametrize(
        "error",
        [
            ArxivError("boom"),
            OperationCancelledError(),
            ParseError(),
            UnexpectedStatusError(),
            InvalidQueryError(),
            NotFoundError(),
        ],
    )
    def test_other_errors_are_fatal(self, error):
        """Everything else fails on first occurrence."""
        assert error.is_retryable is False

    def test_cancelled_is_not_a_transport_error(self):
        """Cancellation is distinct from both retryable and fatal transport failures."""
        assert not isinstance(OperationCancelledError(), TransportError)


# =============================================================================
# Serialization
# =============================================================================


class TestToDict:
    """Tests for to_dict() structured logging output."""

    def test_base_fields(self):
        error = NetworkError("socket closed", query="cat:cs.AI", status_code=502)
        error.attempts = 3

        d = error.to_dict()

        assert d["error_type"] == "NetworkError"
        assert d["kind"] == "network"
        assert d["message"] == "socket closed"
        assert d["query"] == "cat:cs.AI"
        assert d["status_code"] == 502
        assert d["attempts"] == 3
        assert d["is_retryable"] is True

    def test_rate_limit_includes_retry_after(self):
        d = RateLimitError(retry_after=30.0).to_dict()
        assert d["retry_after"] == 30.0
        assert d["kind"] == "rate_limit"

    def test_invalid_query_includes_field(self):
        d = InvalidQueryError("bad", field="max_results").to_dict()
        assert d["field"] == "max_results"

    def test_not_found_includes_paper_id(self):
        d = NotFoundError(paper_id="2301.00001").to_dict()
        assert d["paper_id"] == "2301.00001"


# =============================================================================
# classify_exception
# =============================================================================


class TestClassifyException:
    """Tests for mapping third-party exceptions into the taxonomy."""

    def test_arxiv_error_passes_through(self):
        original = ParseError("bad xml")
        assert classify_exception(original) is original

    def test_httpx_timeout(self):
        error = classify_exception(httpx.ReadTimeout("read timed out"), query="q")
        assert isinstance(error, RequestTimeoutError)
        assert error.query == "q"

    def test_httpx_connect_error(self):
        error = classify_exception(httpx.ConnectError("connection refused"))
        assert isinstance(error, NetworkError)

    def test_rate_limit_message(self):
        error = classify_exception(RuntimeError("HTTP 429 Too Many Requests"))
        assert isinstance(error, RateLimitError)

    def test_timeout_message(self):
        error = classify_exception(RuntimeError("deadline exceeded"))
        assert isinstance(error, RequestTimeoutError)

    def test_network_message(self):
        error = classify_exception(OSError("Connection reset by peer"))
        assert isinstance(error, NetworkError)

    def test_unknown_becomes_fatal_base_error(self):
        error = classify_exception(ValueError("something odd"))
        assert type(error) is ArxivError
        assert error.is_retryable is False
