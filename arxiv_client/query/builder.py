"""Fluent query builder.

Usage:
    results = (
        client.new_query()
        .category(Category.CS_AI)
        .author("Hinton")
        .sort_by(SortBy.SUBMITTED_DATE)
        .max_results(100)
        .execute()
    )

Invalid input does not raise immediately; errors are collected and
reported by build(), validate(), execute() or the first iterator poll.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from ..config.constants import DEFAULT_PAGE_SIZE, DEFAULT_TOTAL_LIMIT, MAX_PAGE_SIZE
from ..core.errors import InvalidQueryError
from ..core.types import Query, SearchResults
from ..resilience.cancellation import CancelToken
from .enums import Category, SortBy, SortOrder

if TYPE_CHECKING:
    from ..client import ArxivClient
    from ..pagination.iterator import PaperIterator

OPERATORS = ("AND", "OR", "ANDNOT")


def _field_group(prefix: str, values: list[str]) -> str:
    """'ti:a' for one value, '(ti:a OR ti:b)' for several."""
    terms = [f"{prefix}:{value}" for value in values]
    if len(terms) == 1:
        return terms[0]
    return "(" + " OR ".join(terms) + ")"


class QueryBuilder:
    """Fluent interface for building arXiv queries."""

    def __init__(
        self,
        client: ArxivClient | None = None,
        max_results: int = DEFAULT_PAGE_SIZE,
        limit: int = DEFAULT_TOTAL_LIMIT,
    ) -> None:
        self._client = client
        self._search_terms: list[str] = []
        self._categories: list[str] = []
        self._authors: list[str] = []
        self._titles: list[str] = []
        self._abstracts: list[str] = []
        self._date_from: datetime | None = None
        self._date_to: datetime | None = None
        self._sort_by: SortBy = SortBy.RELEVANCE
        self._sort_order: SortOrder = SortOrder.DESCENDING
        self._max_results = max_results
        self._limit = limit
        self._start = 0
        self._id_list: list[str] = []
        self._errors: list[InvalidQueryError] = []

    # =========================================================================
    # Search terms
    # =========================================================================

    def search_query(self, query: str) -> QueryBuilder:
        """Add a general search term (raw arXiv syntax allowed)."""
        if query:
            self._search_terms.append(query)
        return self

    def category(self, category: Category | str) -> QueryBuilder:
        if category:
            value = category.value if isinstance(category, Category) else category
            self._categories.append(value)
        return self

    def categories(self, *categories: Category | str) -> QueryBuilder:
        for category in categories:
            self.category(category)
        return self

    def author(self, author: str) -> QueryBuilder:
        if author:
            self._authors.append(author)
        return self

    def authors(self, *authors: str) -> QueryBuilder:
        for author in authors:
            self.author(author)
        return self

    def title(self, title: str) -> QueryBuilder:
        if title:
            self._titles.append(title)
        return self

    def abstract(self, abstract: str) -> QueryBuilder:
        if abstract:
            self._abstracts.append(abstract)
        return self

    def and_(self) -> QueryBuilder:
        """Join the surrounding search terms with AND."""
        self._search_terms.append("AND")
        return self

    def or_(self) -> QueryBuilder:
        """Join the surrounding search terms with OR."""
        self._search_terms.append("OR")
        return self

    def and_not(self) -> QueryBuilder:
        """Exclude the following search term."""
        self._search_terms.append("ANDNOT")
        return self

    # =========================================================================
    # Dates
    # =========================================================================

    def date_range(self, date_from: datetime, date_to: datetime) -> QueryBuilder:
        if date_from > date_to:
            self._errors.append(
                InvalidQueryError(
                    f"date range start {date_from:%Y-%m-%d} is after end {date_to:%Y-%m-%d}",
                    field="submitted_date",
                )
            )
        self._date_from = date_from
        self._date_to = date_to
        return self

    def date_from(self, date_from: datetime) -> QueryBuilder:
        self._date_from = date_from
        return self

    def date_to(self, date_to: datetime) -> QueryBuilder:
        self._date_to = date_to
        return self

    # =========================================================================
    # Paging and sorting
    # =========================================================================

    def sort_by(
        self,
        criterion: SortBy | str,
        order: SortOrder | str = SortOrder.DESCENDING,
    ) -> QueryBuilder:
        try:
            self._sort_by = SortBy(criterion)
            self._sort_order = SortOrder(order)
        except ValueError as e:
            self._errors.append(InvalidQueryError(str(e), field="sort"))
        return self

    def max_results(self, max_results: int) -> QueryBuilder:
        """Results per API request."""
        if 0 < max_results <= MAX_PAGE_SIZE:
            self._max_results = max_results
        else:
            self._errors.append(
                InvalidQueryError(
                    f"max results must be between 1 and {MAX_PAGE_SIZE}, got {max_results}",
                    field="max_results",
                )
            )
        return self

    def limit(self, limit: int) -> QueryBuilder:
        """Total results across all requests (0 = unlimited)."""
        if limit >= 0:
            self._limit = limit
        else:
            self._errors.append(
                InvalidQueryError(f"limit must be non-negative, got {limit}", field="limit")
            )
        return self

    def start(self, start: int) -> QueryBuilder:
        if start >= 0:
            self._start = start
        else:
            self._errors.append(
                InvalidQueryError(f"start index must be non-negative, got {start}", field="start")
            )
        return self

    def id_list(self, *ids: str) -> QueryBuilder:
        """Look up papers by arXiv id (replaces the search expression)."""
        self._id_list.extend(i for i in ids if i)
        return self

    # =========================================================================
    # Output
    # =========================================================================

    def build_search_query(self) -> str:
        """Combine all terms and field filters into one search expression."""
        parts = []

        if self._search_terms:
            terms = list(self._search_terms)
            # Dangling operators would make arXiv reject the query
            while terms and terms[-1] in OPERATORS:
                terms.pop()
            while terms and terms[0] in OPERATORS:
                terms.pop(0)
            if terms:
                parts.append("(" + " ".join(terms) + ")")

        for prefix, values in (
            ("cat", self._categories),
            ("au", self._authors),
            ("ti", self._titles),
            ("abs", self._abstracts),
        ):
            if values:
                parts.append(_field_group(prefix, values))

        return " AND ".join(parts)

    def _query(self) -> Query:
        query = Query(
            start=self._start,
            max_results=self._max_results,
            limit=self._limit,
            sort_by=self._sort_by.value,
            sort_order=self._sort_order.value,
            submitted_date_from=self._date_from,
            submitted_date_to=self._date_to,
        )
        if self._id_list:
            query.id_list = list(self._id_list)
        else:
            query.search_query = self.build_search_query()
        return query

    def validate(self) -> None:
        """Raise the first collected error, or InvalidQueryError for an empty query."""
        if self._errors:
            raise self._errors[0]
        self._query().validate()

    def build(self) -> Query:
        """Build the Query.

        Raises:
            InvalidQueryError: If any builder input was invalid or the query is empty
        """
        self.validate()
        return self._query()

    def _require_client(self) -> ArxivClient:
        if self._client is None:
            raise RuntimeError("QueryBuilder is not bound to a client; use client.new_query()")
        return self._client

    def execute(self, cancel_token: CancelToken | None = None) -> SearchResults:
        """Build the query and fetch one page."""
        client = self._require_client()
        return client.search(self.build(), cancel_token)

    def iterator(self, cancel_token: CancelToken | None = None) -> PaperIterator:
        """Iterator over all results.

        An invalid builder still returns an iterator; its first poll fails
        with the InvalidQueryError and no request is made.
        """
        client = self._require_client()
        try:
            query = self.build()
        except InvalidQueryError as e:
            return client.iterator(self._query(), cancel_token, query_error=e)
        return client.iterator(query, cancel_token)

    def __repr__(self) -> str:
        return f"QueryBuilder({self.build_search_query() or self._id_list!r})"
