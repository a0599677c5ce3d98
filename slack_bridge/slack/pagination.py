from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, TypeVar, Union

T = TypeVar("T")

@dataclass(frozen=True, slots=True)
class PaginatedResult(Generic[T]):
    """
    Uniform page shape for every list operation.

    Invariants:
      - count == len(items)
      - next_cursor is None whenever has_more is False
    """

    items: list[T]
    has_more: bool = False
    next_cursor: str | None = None
    count: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", list(self.items))
        object.__setattr__(self, "count", len(self.items))
        object.__setattr__(self, "has_more", bool(self.has_more))
        cursor = str(self.next_cursor or "").strip() or None
        object.__setattr__(self, "next_cursor", cursor if self.has_more else None)

@dataclass(frozen=True, slots=True)
class CursorHints:
    """Cursor-style APIs: more data exists iff a non-empty cursor came back."""
    cursor: str | None = None

@dataclass(frozen=True, slots=True)
class PageHints:
    """Legacy page-counted APIs (files, stars, reactions.list)."""
    page: int = 1
    total_pages: int = 1

@dataclass(frozen=True, slots=True)
class FlagHints:
    """Boolean-flag APIs (conversations.history / conversations.replies)."""
    has_more: bool = False
    cursor: str | None = None

Hints = Union[CursorHints, PageHints, FlagHints]

def normalize(items: Iterable[T] | None, hints: Hints) -> PaginatedResult[T]:
    """
    Project a remote "more data" signal into a PaginatedResult.

    Pure: never issues network calls. An empty page with has_more=True is a
    legal state; callers must check has_more rather than len(items).
    """
    rows = list(items or [])

    if isinstance(hints, CursorHints):
        cursor = str(hints.cursor or "").strip() or None
        return PaginatedResult(items=rows, has_more=cursor is not None, next_cursor=cursor)

    if isinstance(hints, PageHints):
        # No cursor exists for these endpoints; the caller tracks `page`.
        return PaginatedResult(items=rows, has_more=int(hints.page) < int(hints.total_pages))

    if isinstance(hints, FlagHints):
        return PaginatedResult(items=rows, has_more=bool(hints.has_more), next_cursor=hints.cursor)

    raise TypeError(f"Unsupported pagination hints: {type(hints).__name__}")

def _next_cursor(envelope: dict[str, Any]) -> str | None:
    meta = envelope.get("response_metadata")
    if not isinstance(meta, dict):
        return None
    return str(meta.get("next_cursor") or "").strip() or None

def cursor_hints(envelope: dict[str, Any]) -> CursorHints:
    return CursorHints(cursor=_next_cursor(envelope))

def page_hints(envelope: dict[str, Any]) -> PageHints:
    paging = envelope.get("paging")
    p: dict[str, Any] = paging if isinstance(paging, dict) else {}
    try:
        page = int(p.get("page") or 1)
        pages = int(p.get("pages") or 1)
    except (TypeError, ValueError):
        page, pages = 1, 1
    return PageHints(page=page, total_pages=pages)

def flag_hints(envelope: dict[str, Any]) -> FlagHints:
    return FlagHints(has_more=bool(envelope.get("has_more")), cursor=_next_cursor(envelope))

def empty_page() -> PaginatedResult[Any]:
    """A final page with no items (count=0, has_more=False, no cursor)."""
    return PaginatedResult(items=[])

def clamp_limit(limit: int | None, *, default: int = 20, maximum: int = 100) -> int:
    """
    Normalize a caller-supplied page size: falsy -> default, capped at maximum.
    """
    try:
        lim = int(limit or 0)
    except (TypeError, ValueError):
        lim = 0
    if lim <= 0:
        lim = int(default)
    return max(1, min(int(maximum), lim))
