"""Query construction: vocabularies and the fluent builder."""

from .builder import QueryBuilder
from .enums import Category, SortBy, SortOrder

__all__ = [
    "QueryBuilder",
    "Category",
    "SortBy",
    "SortOrder",
]
