"""Atom feed parser for arXiv API responses.

The export API answers with Atom 1.0 plus the OpenSearch namespace
(totalResults, startIndex, itemsPerPage) and the arXiv namespace
(doi, comment, journal_ref, primary_category, affiliation).
"""

from __future__ import annotations

from datetime import datetime

from bs4 import BeautifulSoup, Tag

from ..config.constants import ARXIV_ABS_PREFIXES, ARXIV_ERROR_ID_PREFIX
from ..core.errors import InvalidQueryError, ParseError
from ..core.types import Author, Link, Paper, SearchResults


def extract_arxiv_id(full_id: str) -> str:
    """Reduce an entry id URL to the bare arXiv id.

    Example: "http://arxiv.org/abs/2301.12345v1" -> "2301.12345v1"
    """
    full_id = full_id.strip()
    for prefix in ARXIV_ABS_PREFIXES:
        if full_id.startswith(prefix):
            return full_id[len(prefix):]
    return full_id


def parse_datetime(value: str, field_name: str = "date") -> datetime:
    """Parse an RFC 3339 timestamp such as 2023-01-31T18:59:59Z."""
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise ParseError(f"Failed to parse {field_name} date: {value!r}") from e


def _text(parent: Tag, name: str) -> str:
    """Stripped text of the first direct child named `name` ('' if missing)."""
    child = parent.find(name, recursive=False)
    if child is None:
        return ""
    return child.get_text().strip()


def _optional_text(parent: Tag, name: str) -> str | None:
    return _text(parent, name) or None


def _int(feed: Tag, name: str) -> int:
    raw = _text(feed, name)
    if not raw:
        return 0
    try:
        return int(raw)
    except ValueError as e:
        raise ParseError(f"Invalid {name} value: {raw!r}") from e


def _is_error_entry(entry: Tag) -> bool:
    return _text(entry, "id").startswith(ARXIV_ERROR_ID_PREFIX)


def parse_entry(entry: Tag) -> Paper:
    """Convert one <entry> element into a Paper."""
    authors = []
    for author in entry.find_all("author", recursive=False):
        name = _text(author, "name")
        if name:
            authors.append(Author(name=name, affiliation=_optional_text(author, "affiliation")))

    categories = [
        cat["term"]
        for cat in entry.find_all("category", recursive=False)
        if cat.get("term")
    ]

    primary = entry.find("primary_category", recursive=False)
    primary_category = primary.get("term") if primary is not None else None
    if primary_category is None and categories:
        primary_category = categories[0]

    links = [
        Link(
            href=link.get("href", ""),
            rel=link.get("rel", ""),
            type=link.get("type"),
            title=link.get("title"),
        )
        for link in entry.find_all("link", recursive=False)
    ]

    return Paper(
        id=extract_arxiv_id(_text(entry, "id")),
        title=" ".join(_text(entry, "title").split()),
        abstract=_text(entry, "summary"),
        published_at=parse_datetime(_text(entry, "published"), "published"),
        updated_at=parse_datetime(_text(entry, "updated"), "updated"),
        authors=tuple(authors),
        categories=tuple(categories),
        primary_category=primary_category,
        doi=_optional_text(entry, "doi"),
        journal_ref=_optional_text(entry, "journal_ref"),
        comment=_optional_text(entry, "comment"),
        links=tuple(links),
    )


def parse_feed(text: str | bytes) -> SearchResults:
    """Parse an arXiv Atom response.

    Args:
        text: Response body

    Returns:
        SearchResults for the page

    Raises:
        InvalidQueryError: If arXiv answered with an error entry
        ParseError: If the body is not a readable Atom feed
    """
    if not text or not text.strip():
        raise ParseError("Empty response body")

    soup = BeautifulSoup(text, "xml")
    feed = soup.find("feed")
    if feed is None:
        raise ParseError("Response is not an Atom feed")

    entries = feed.find_all("entry", recursive=False)

    # arXiv reports bad queries as a feed with a single error entry
    for entry in entries:
        if _is_error_entry(entry):
            message = _text(entry, "summary") or "arXiv rejected the query"
            raise InvalidQueryError(f"arXiv API error: {message}")

    papers = []
    for i, entry in enumerate(entries):
        try:
            papers.append(parse_entry(entry))
        except ParseError as e:
            raise ParseError(f"Failed to convert entry {i}: {e.message}") from e

    return SearchResults(
        papers=tuple(papers),
        total_results=_int(feed, "totalResults"),
        start_index=_int(feed, "startIndex"),
        items_per_page=_int(feed, "itemsPerPage"),
    )
