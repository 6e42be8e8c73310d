"""Pagination: window planning, iteration state and the lazy paper iterator."""

from .fetcher import Fetcher
from .iterator import PaperIterator
from .paginator import Paginator, might_have_more, next_offset, next_page_size
from .state import (
    FetchCompleted,
    FetchStarted,
    InvalidTransitionError,
    ItemConsumed,
    IterationPhase,
    IterationState,
    IterationStateMachine,
    MarkExhausted,
    Reset,
)

__all__ = [
    "Fetcher",
    "PaperIterator",
    "Paginator",
    "next_offset",
    "next_page_size",
    "might_have_more",
    "IterationPhase",
    "IterationState",
    "IterationStateMachine",
    "InvalidTransitionError",
    "FetchStarted",
    "FetchCompleted",
    "ItemConsumed",
    "MarkExhausted",
    "Reset",
]
