"""Shared types for the arXiv client.

Records returned to callers (Paper, Author, Link), the Query description,
and the page-level values exchanged between the transport and the paginator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ..config.constants import DEFAULT_SORT_BY, DEFAULT_SORT_ORDER, MAX_PAGE_SIZE
from .errors import ArxivError, InvalidQueryError


@dataclass(frozen=True)
class Author:
    """A paper author."""

    name: str
    affiliation: str | None = None


@dataclass(frozen=True)
class Link:
    """A link attached to a paper (abstract page, PDF, DOI)."""

    href: str
    rel: str = ""
    type: str | None = None
    title: str | None = None


@dataclass(frozen=True)
class Paper:
    """A single arXiv paper."""

    id: str
    title: str
    abstract: str
    published_at: datetime
    updated_at: datetime
    authors: tuple[Author, ...] = ()
    categories: tuple[str, ...] = ()
    primary_category: str | None = None
    doi: str | None = None
    journal_ref: str | None = None
    comment: str | None = None
    links: tuple[Link, ...] = ()

    @property
    def pdf_url(self) -> str | None:
        """URL of the PDF rendition, if the feed listed one."""
        for link in self.links:
            if link.title == "pdf" or link.type == "application/pdf":
                return link.href
        return None

    @property
    def author_names(self) -> list[str]:
        return [author.name for author in self.authors]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "id": self.id,
            "title": self.title,
            "abstract": self.abstract,
            "authors": [
                {"name": a.name, "affiliation": a.affiliation} for a in self.authors
            ],
            "categories": list(self.categories),
            "primary_category": self.primary_category,
            "published_at": self.published_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "doi": self.doi,
            "journal_ref": self.journal_ref,
            "comment": self.comment,
            "links": [
                {"href": link.href, "rel": link.rel, "type": link.type, "title": link.title}
                for link in self.links
            ],
        }


@dataclass
class Query:
    """Search parameters for the arXiv API.

    Attributes:
        search_query: Search expression (e.g. "quantum computing", "au:Einstein")
        id_list: arXiv ids to look up (alternative to search_query)
        start: Offset of the first result (0-based)
        max_results: Page size per request (0 = client default)
        limit: Cap on results across all pages (0 = unlimited)
        sort_by: "relevance", "lastUpdatedDate" or "submittedDate"
        sort_order: "ascending" or "descending"
        submitted_date_from: Inclusive lower bound on submission date
        submitted_date_to: Inclusive upper bound on submission date
    """

    search_query: str = ""
    id_list: list[str] = field(default_factory=list)
    start: int = 0
    max_results: int = 0
    limit: int = 0
    sort_by: str = DEFAULT_SORT_BY
    sort_order: str = DEFAULT_SORT_ORDER
    submitted_date_from: datetime | None = None
    submitted_date_to: datetime | None = None

    @property
    def describe(self) -> str:
        """Short human-readable form used in logs and errors."""
        if self.id_list:
            return "id_list=" + ",".join(self.id_list)
        return self.search_query

    def validate(self) -> None:
        """Raise InvalidQueryError if the query cannot be sent."""
        if not self.id_list and not self.search_query.strip():
            if self.submitted_date_from is None and self.submitted_date_to is None:
                raise InvalidQueryError(
                    "either search query or ID list must be provided",
                    field="search_query",
                )
        if self.max_results < 0:
            raise InvalidQueryError(
                f"max results must be positive, got {self.max_results}",
                field="max_results",
            )
        if self.max_results > MAX_PAGE_SIZE:
            raise InvalidQueryError(
                f"max results must not exceed {MAX_PAGE_SIZE}, got {self.max_results}",
                field="max_results",
            )
        if self.limit < 0:
            raise InvalidQueryError(
                f"limit must be non-negative, got {self.limit}", field="limit"
            )
        if self.start < 0:
            raise InvalidQueryError(
                f"start index must be non-negative, got {self.start}", field="start"
            )


@dataclass(frozen=True)
class SearchResults:
    """One page of results as returned by the API."""

    papers: tuple[Paper, ...] = ()
    total_results: int = 0  # Matching papers on the server, not papers in this page
    start_index: int = 0
    items_per_page: int = 0

    def __len__(self) -> int:
        return len(self.papers)


@dataclass(frozen=True)
class RequestWindow:
    """Offset/size pair describing one page request."""

    offset: int
    size: int

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError(f"window offset must be non-negative, got {self.offset}")
        if self.size <= 0:
            raise ValueError(f"window size must be positive, got {self.size}")


@dataclass(frozen=True)
class FetchOutcome:
    """Result of one page fetch, successful or not.

    Attributes:
        items: Papers in this page (possibly empty)
        start_offset: Offset the page starts at
        total_available: Server-reported match count (0 = unknown or exhausted)
        requested_size: Window size that was asked for
        error: Failure that ended the fetch (None on success)
    """

    items: tuple[Paper, ...] = ()
    start_offset: int = 0
    total_available: int = 0
    requested_size: int = 0
    error: ArxivError | None = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def end_offset(self) -> int:
        """Offset just past the last item of this page."""
        return self.start_offset + len(self.items)

    @classmethod
    def from_results(cls, results: SearchResults, window: RequestWindow) -> FetchOutcome:
        return cls(
            items=results.papers,
            start_offset=window.offset,
            total_available=results.total_results,
            requested_size=window.size,
        )

    @classmethod
    def failure(cls, error: ArxivError, window: RequestWindow | None = None) -> FetchOutcome:
        return cls(
            start_offset=window.offset if window else 0,
            requested_size=window.size if window else 0,
            error=error,
        )
