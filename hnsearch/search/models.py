"""Data models for search results and view state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

SortMode = Literal["none", "author", "title", "comments", "points"]

SORT_MODES: tuple[SortMode, ...] = ("none", "author", "title", "comments", "points")


@dataclass(frozen=True, slots=True)
class Record:
    """One search hit (a story)."""

    title: str | None
    url: str | None
    author: str | None
    comment_count: int | None
    score: int | None
    id: Any

    @classmethod
    def from_hit(cls, data: dict[str, Any]) -> "Record":
        # Hits are trusted as-is; absent fields stay None.
        return cls(
            title=data.get("title"),
            url=data.get("url"),
            author=data.get("author"),
            comment_count=data.get("num_comments"),
            score=data.get("points"),
            id=data.get("objectID"),
        )

    def to_hit(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "url": self.url,
            "author": self.author,
            "num_comments": self.comment_count,
            "points": self.score,
            "objectID": self.id,
        }


@dataclass(frozen=True, slots=True)
class ViewState:
    """Everything the presentation layer renders: records plus loading/error flags."""

    records: tuple[Record, ...] = field(default_factory=tuple)
    is_loading: bool = False
    has_error: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "records": [record.to_hit() for record in self.records],
            "isLoading": self.is_loading,
            "hasError": self.has_error,
        }
