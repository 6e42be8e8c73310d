"""Tests for arxiv_client/transport/parser.py."""

from datetime import datetime, timezone

import pytest

from arxiv_client.core.errors import InvalidQueryError, ParseError
from arxiv_client.transport.parser import extract_arxiv_id, parse_datetime, parse_feed

from .fixtures.atom_feeds import (
    ARXIV_FEED_BAD_DATE,
    ARXIV_FEED_EMPTY,
    ARXIV_FEED_ERROR,
    ARXIV_FEED_TWO_ENTRIES,
    HTML_ERROR_PAGE,
    make_entry,
    make_feed,
)


class TestExtractArxivId:
    @pytest.mark.parametrize(
        "full_id,expected",
        [
            ("http://arxiv.org/abs/2301.12345v1", "2301.12345v1"),
            ("https://arxiv.org/abs/2301.12345", "2301.12345"),
            ("http://arxiv.org/abs/hep-th/9901001v1", "hep-th/9901001v1"),
            ("  2301.12345v1 ", "2301.12345v1"),
        ],
    )
    def test_extract(self, full_id, expected):
        assert extract_arxiv_id(full_id) == expected


class TestParseDatetime:
    def test_utc_suffix(self):
        assert parse_datetime("2023-01-31T18:59:59Z") == datetime(
            2023, 1, 31, 18, 59, 59, tzinfo=timezone.utc
        )

    def test_invalid(self):
        with pytest.raises(ParseError, match="published"):
            parse_datetime("yesterday", "published")


# =============================================================================
# Feed parsing
# =============================================================================


class TestParseFeed:
    """Tests for parse_feed() on realistic responses."""

    def test_counters(self):
        results = parse_feed(ARXIV_FEED_TWO_ENTRIES)

        assert len(results) == 2
        assert results.total_results == 1542
        assert results.start_index == 0
        assert results.items_per_page == 2

    def test_full_entry(self):
        paper = parse_feed(ARXIV_FEED_TWO_ENTRIES).papers[0]

        assert paper.id == "2301.12345v2"
        assert paper.title == "Electron Transport in Layered Materials"
        assert paper.abstract.startswith("We study electron transport.")
        assert paper.abstract.endswith("Results are promising.")
        assert paper.published_at == datetime(2023, 1, 29, 10, 0, tzinfo=timezone.utc)
        assert paper.updated_at == datetime(2023, 1, 31, 18, 59, 59, tzinfo=timezone.utc)
        assert paper.doi == "10.1000/xyz123"
        assert paper.comment == "12 pages, 4 figures"
        assert paper.journal_ref == "Phys. Rev. B 99, 1 (2023)"

    def test_authors_and_affiliation(self):
        paper = parse_feed(ARXIV_FEED_TWO_ENTRIES).papers[0]

        assert paper.author_names == ["Alice Smith", "Bob Jones"]
        assert paper.authors[0].affiliation == "MIT"
        assert paper.authors[1].affiliation is None

    def test_categories(self):
        paper = parse_feed(ARXIV_FEED_TWO_ENTRIES).papers[0]

        assert paper.primary_category == "cond-mat.mes-hall"
        assert paper.categories == ("cond-mat.mes-hall", "physics.app-ph")

    def test_links(self):
        paper = parse_feed(ARXIV_FEED_TWO_ENTRIES).papers[0]

        assert len(paper.links) == 3
        assert paper.pdf_url == "http://arxiv.org/pdf/2301.12345v2"
        doi_link = paper.links[0]
        assert doi_link.title == "doi"
        assert doi_link.rel == "related"

    def test_sparse_entry(self):
        """Missing optional fields come back as None; primary falls back to first category."""
        paper = parse_feed(ARXIV_FEED_TWO_ENTRIES).papers[1]

        assert paper.id == "hep-th/9901001v1"
        assert paper.doi is None
        assert paper.comment is None
        assert paper.journal_ref is None
        assert paper.primary_category == "hep-th"
        assert paper.pdf_url is None

    def test_bytes_input(self):
        results = parse_feed(ARXIV_FEED_TWO_ENTRIES.encode("utf-8"))
        assert len(results) == 2

    def test_generated_feed(self):
        feed = make_feed([make_entry("2301.00001v1"), make_entry("2301.00002v1")], total=10)

        results = parse_feed(feed)

        assert [p.id for p in results.papers] == ["2301.00001v1", "2301.00002v1"]
        assert results.total_results == 10
        assert results.papers[0].abstract == "Abstract of 2301.00001v1."

    def test_empty_feed(self):
        results = parse_feed(ARXIV_FEED_EMPTY)

        assert len(results) == 0
        assert results.total_results == 0


class TestParseFeedErrors:
    def test_error_entry(self):
        with pytest.raises(InvalidQueryError) as exc_info:
            parse_feed(ARXIV_FEED_ERROR)

        assert "incorrect id format for 1234.12345" in str(exc_info.value)
        assert str(exc_info.value).startswith("arXiv API error:")

    @pytest.mark.parametrize("body", ["", "   \n", b""])
    def test_empty_body(self, body):
        with pytest.raises(ParseError, match="Empty"):
            parse_feed(body)

    def test_not_a_feed(self):
        with pytest.raises(ParseError, match="not an Atom feed"):
            parse_feed(HTML_ERROR_PAGE)

    def test_bad_entry_date(self):
        with pytest.raises(ParseError, match="Failed to convert entry 0"):
            parse_feed(ARXIV_FEED_BAD_DATE)

    def test_bad_counter(self):
        feed = make_feed([]).replace(">0</opensearch:totalResults>", ">many</opensearch:totalResults>")

        with pytest.raises(ParseError, match="totalResults"):
            parse_feed(feed)
