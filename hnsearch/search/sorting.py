"""Display ordering for search records."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from hnsearch.search.models import SORT_MODES, Record, SortMode

# (key, descending). Python's sort is stable in both directions.
_SORTS: dict[SortMode, tuple[Callable[[Record], Any], bool]] = {
    "author": (lambda record: record.author or "", False),
    "title": (lambda record: record.title or "", False),
    "comments": (lambda record: record.comment_count or 0, True),
    "points": (lambda record: record.score or 0, True),
}


def sort_records(records: Iterable[Record], mode: SortMode = "none") -> tuple[Record, ...]:
    """Return records ordered for display without touching the input sequence."""
    if mode not in SORT_MODES:
        raise ValueError(f"sort mode must be one of {list(SORT_MODES)}")
    if mode == "none":
        return tuple(records)
    key, descending = _SORTS[mode]
    return tuple(sorted(records, key=key, reverse=descending))
