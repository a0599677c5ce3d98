from __future__ import annotations

from typing import Any, Iterable


class _Unset:
    """Sentinel for "argument not supplied" on clear-capable update fields."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def compact(params: dict[str, Any] | None) -> dict[str, Any]:
    """
    Drop absent values so they are omitted from the request body.

    Only None and UNSET are absent. An explicit "" is kept: it is how callers
    clear a topic, purpose, or description.
    """
    return {k: v for k, v in (params or {}).items() if v is not None and v is not UNSET}


def join_ids(ids: Iterable[str] | str | None) -> str | None:
    """Slack takes id lists as comma-separated strings."""
    if ids is None or ids is UNSET:
        return None
    if isinstance(ids, str):
        return ids
    return ",".join(str(i).strip() for i in ids if str(i or "").strip())

