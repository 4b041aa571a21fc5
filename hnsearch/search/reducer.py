"""
Result state machine.

Pure function: (ViewState, event) -> ViewState

The view state is the only thing the presentation layer renders. It changes
exclusively through `reduce`, and `ResultStateMachine.dispatch` is the single
writer that applies it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from hnsearch.search.models import Record, ViewState

# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class StartFetching:
    """A request is about to go out."""


@dataclass(frozen=True, slots=True)
class SetResults:
    """A fetch succeeded (or was short-circuited) with these records."""

    records: tuple[Record, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "records", tuple(self.records))


@dataclass(frozen=True, slots=True)
class ReportError:
    """A fetch failed. The message is informational only."""

    message: str = "error"


@dataclass(frozen=True, slots=True)
class DeleteRecord:
    """Drop one record locally, without telling the server."""

    record_id: Any


SearchEvent = StartFetching | SetResults | ReportError | DeleteRecord

INITIAL_STATE = ViewState(records=(), is_loading=True, has_error=False)


# ---------------------------------------------------------------------------
# Transition
# ---------------------------------------------------------------------------


def reduce(state: ViewState, event: SearchEvent) -> ViewState:
    """Apply one event and return the next view state."""
    if isinstance(event, StartFetching):
        return ViewState(records=(), is_loading=True, has_error=False)

    if isinstance(event, SetResults):
        return ViewState(records=event.records, is_loading=False, has_error=False)

    if isinstance(event, ReportError):
        return ViewState(records=(), is_loading=False, has_error=True)

    if isinstance(event, DeleteRecord):
        # Flags reset even when the id is unknown.
        remaining = tuple(record for record in state.records if record.id != event.record_id)
        return ViewState(records=remaining, is_loading=False, has_error=False)

    raise TypeError(f"unknown search event: {event!r}")


Listener = Callable[[ViewState], None]


class ResultStateMachine:
    """Holds the current view state and applies events to it."""

    def __init__(self, initial: ViewState = INITIAL_STATE):
        self._state = initial
        self._listeners: list[Listener] = []

    @property
    def state(self) -> ViewState:
        return self._state

    def dispatch(self, event: SearchEvent) -> ViewState:
        self._state = reduce(self._state, event)
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener` after every transition. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe
