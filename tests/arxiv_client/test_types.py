"""Tests for arxiv_client/core/types.py."""

from datetime import datetime

import pytest

from arxiv_client.core.errors import InvalidQueryError, NetworkError
from arxiv_client.core.types import FetchOutcome, Query, RequestWindow, SearchResults

from .fixtures.stub_transport import make_paper


class TestQueryValidate:
    """Tests for Query.validate()."""

    def test_search_query_is_valid(self):
        Query(search_query="au:Einstein").validate()

    def test_id_list_is_valid(self):
        Query(id_list=["2301.00001"]).validate()

    def test_date_only_is_valid(self):
        Query(submitted_date_from=datetime(2023, 1, 1)).validate()

    def test_empty_query_is_invalid(self):
        with pytest.raises(InvalidQueryError) as exc_info:
            Query().validate()
        assert exc_info.value.field == "search_query"

    def test_whitespace_query_is_invalid(self):
        with pytest.raises(InvalidQueryError):
            Query(search_query="   ").validate()

    @pytest.mark.parametrize(
        "kwargs, field",
        [
            ({"max_results": -1}, "max_results"),
            ({"max_results": 30001}, "max_results"),
            ({"limit": -5}, "limit"),
            ({"start": -1}, "start"),
        ],
    )
    def test_out_of_range_values(self, kwargs, field):
        with pytest.raises(InvalidQueryError) as exc_info:
            Query(search_query="x", **kwargs).validate()
        assert exc_info.value.field == field

    def test_describe(self):
        assert Query(search_query="cat:cs.AI").describe == "cat:cs.AI"
        assert Query(id_list=["a", "b"]).describe == "id_list=a,b"


class TestRequestWindow:
    """Tests for RequestWindow invariants."""

    def test_valid_window(self):
        window = RequestWindow(offset=0, size=10)
        assert window.offset == 0
        assert window.size == 10

    def test_negative_offset_rejected(self):
        with pytest.raises(ValueError):
            RequestWindow(offset=-1, size=10)

    def test_zero_size_rejected(self):
        with pytest.raises(ValueError):
            RequestWindow(offset=0, size=0)


class TestFetchOutcome:
    """Tests for FetchOutcome construction."""

    def test_from_results(self):
        papers = tuple(make_paper(i) for i in range(20, 25))
        results = SearchResults(papers=papers, total_results=100, start_index=20)

        outcome = FetchOutcome.from_results(results, RequestWindow(offset=20, size=10))

        assert outcome.is_success
        assert outcome.start_offset == 20
        assert outcome.end_offset == 25
        assert outcome.total_available == 100
        assert outcome.requested_size == 10
        assert outcome.items == papers

    def test_failure(self):
        error = NetworkError()
        outcome = FetchOutcome.failure(error, RequestWindow(offset=30, size=10))

        assert not outcome.is_success
        assert outcome.error is error
        assert outcome.items == ()
        assert outcome.start_offset == 30


class TestPaper:
    """Tests for Paper helpers."""

    def test_pdf_url(self):
        paper = make_paper(1)
        assert paper.pdf_url == "http://arxiv.org/pdf/2301.00001v1"

    def test_to_dict_is_json_friendly(self):
        d = make_paper(1).to_dict()
        assert d["id"] == "2301.00001v1"
        assert d["authors"] == [{"name": "Jane Doe", "affiliation": None}]
        assert d["published_at"].startswith("2023-01-01")
        assert d["categories"] == ["cs.AI"]

    def test_paper_is_immutable(self):
        paper = make_paper(1)
        with pytest.raises(AttributeError):
            paper.title = "changed"  # type: ignore[misc]
