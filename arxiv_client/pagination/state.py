"""Iteration state machine.

State transitions:
INITIAL → [FetchStarted] → FETCHING
FETCHING → [FetchCompleted, items] → READY
FETCHING → [FetchCompleted, no items] → EXHAUSTED
FETCHING → [FetchCompleted, error] → FAILED
READY → [ItemConsumed] → READY (cursor + 1)
READY → [FetchStarted] → FETCHING
INITIAL/READY → [MarkExhausted] → EXHAUSTED
any → [Reset] → INITIAL

EXHAUSTED and FAILED absorb every action except Reset.
States are immutable; each transition returns a new snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from ..core.errors import ArxivError
from ..core.types import FetchOutcome, Paper
from ..observability.logger import get_logger

logger = get_logger(__name__)


class IterationPhase(str, Enum):
    """Iteration phases."""

    INITIAL = "initial"  # Nothing fetched yet
    FETCHING = "fetching"  # A page request is in flight
    READY = "ready"  # A page is held; items may remain in it
    EXHAUSTED = "exhausted"  # No more items
    FAILED = "failed"  # Stopped on an error

    @property
    def is_terminal(self) -> bool:
        return self in (IterationPhase.EXHAUSTED, IterationPhase.FAILED)


class InvalidTransitionError(RuntimeError):
    """An action was applied in a phase that does not accept it."""


@dataclass(frozen=True)
class IterationState:
    """Snapshot of iteration progress.

    Attributes:
        phase: Current phase
        page_index: Pages received so far (1 after the first page)
        cursor: Position of the next unread item in the held page
        total_consumed: Items handed to the caller
        last_window: Most recent non-empty page
        total_available: Server-reported match count from the latest fetch
            (None before the first fetch completes)
        error: Failure that moved the machine to FAILED
    """

    phase: IterationPhase = IterationPhase.INITIAL
    page_index: int = 0
    cursor: int = 0
    total_consumed: int = 0
    last_window: FetchOutcome | None = None
    total_available: int | None = None
    error: ArxivError | None = None

    @property
    def items(self) -> tuple[Paper, ...]:
        if self.last_window is None:
            return ()
        return self.last_window.items

    @property
    def has_buffered_item(self) -> bool:
        return self.phase == IterationPhase.READY and self.cursor < len(self.items)

    @property
    def current_item(self) -> Paper | None:
        if not self.has_buffered_item:
            return None
        return self.items[self.cursor]


# =============================================================================
# Actions
# =============================================================================


class Action:
    """Base class for state transitions."""

    name = "action"

    def apply(self, state: IterationState) -> IterationState:
        raise NotImplementedError

    def _reject(self, state: IterationState) -> InvalidTransitionError:
        return InvalidTransitionError(f"{self.name} is not valid in phase {state.phase.value}")


@dataclass(frozen=True)
class FetchStarted(Action):
    name = "FetchStarted"

    def apply(self, state: IterationState) -> IterationState:
        if state.phase not in (IterationPhase.INITIAL, IterationPhase.READY):
            raise self._reject(state)
        if state.has_buffered_item:
            raise InvalidTransitionError("FetchStarted while the current page still has items")
        return replace(state, phase=IterationPhase.FETCHING)


@dataclass(frozen=True)
class FetchCompleted(Action):
    outcome: FetchOutcome
    name = "FetchCompleted"

    def apply(self, state: IterationState) -> IterationState:
        if state.phase != IterationPhase.FETCHING:
            raise self._reject(state)

        outcome = self.outcome
        if outcome.error is not None:
            return replace(state, phase=IterationPhase.FAILED, error=outcome.error)

        if not outcome.items:
            return replace(
                state,
                phase=IterationPhase.EXHAUSTED,
                total_available=outcome.total_available,
            )

        return replace(
            state,
            phase=IterationPhase.READY,
            page_index=state.page_index + 1,
            cursor=0,
            last_window=outcome,
            total_available=outcome.total_available,
        )


@dataclass(frozen=True)
class ItemConsumed(Action):
    name = "ItemConsumed"

    def apply(self, state: IterationState) -> IterationState:
        if not state.has_buffered_item:
            raise self._reject(state)
        # Stays READY even at the end of the page; the next poll notices
        return replace(
            state,
            cursor=state.cursor + 1,
            total_consumed=state.total_consumed + 1,
        )


@dataclass(frozen=True)
class MarkExhausted(Action):
    name = "MarkExhausted"

    def apply(self, state: IterationState) -> IterationState:
        if state.phase == IterationPhase.FETCHING:
            raise self._reject(state)
        return replace(state, phase=IterationPhase.EXHAUSTED)


@dataclass(frozen=True)
class Reset(Action):
    name = "Reset"

    def apply(self, state: IterationState) -> IterationState:
        return IterationState()


# =============================================================================
# Machine
# =============================================================================


class IterationStateMachine:
    """Holds the current IterationState and applies actions to it.

    Single-writer: owned by exactly one iterator.
    """

    def __init__(self, initial: IterationState | None = None) -> None:
        self._state = initial or IterationState()

    @property
    def state(self) -> IterationState:
        """Current snapshot. Snapshots are immutable and never change afterwards."""
        return self._state

    @property
    def phase(self) -> IterationPhase:
        return self._state.phase

    def transition(self, action: Action) -> IterationState:
        """Apply an action and return the new state.

        Terminal phases absorb everything but Reset.

        Raises:
            InvalidTransitionError: If the action is not valid in the current phase
        """
        current = self._state
        if current.phase.is_terminal and not isinstance(action, Reset):
            return current

        new_state = action.apply(current)
        if new_state.phase != current.phase:
            logger.debug(
                f"Iteration {current.phase.value} -> {new_state.phase.value}",
                extra={"action": action.name},
            )
        self._state = new_state
        return new_state

    def reset(self) -> IterationState:
        return self.transition(Reset())
