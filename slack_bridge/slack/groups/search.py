from __future__ import annotations

from typing import Any, Literal

from ..entities import SearchResult
from .base import OperationGroup, decode


class SearchOperations(OperationGroup):
    def _query(
        self,
        method: str,
        query: str,
        *,
        sort: Literal["score", "timestamp"] | None,
        sort_dir: Literal["asc", "desc"] | None,
        limit: int | None,
        highlight: bool | None,
    ) -> dict[str, Any]:
        return self._api.call(
            method,
            {
                "query": query,
                "sort": sort or "timestamp",
                "sort_dir": sort_dir or "desc",
                "count": limit or 20,
                "highlight": highlight,
            },
        )

    def messages(
        self,
        query: str,
        *,
        sort: Literal["score", "timestamp"] | None = None,
        sort_dir: Literal["asc", "desc"] | None = None,
        limit: int | None = None,
        highlight: bool | None = None,
    ) -> SearchResult:
        data = self._query(
            "search.messages", query, sort=sort, sort_dir=sort_dir, limit=limit, highlight=highlight
        )
        return decode(SearchResult, data.get("messages") or {}, method="search.messages")

    def files(
        self,
        query: str,
        *,
        sort: Literal["score", "timestamp"] | None = None,
        sort_dir: Literal["asc", "desc"] | None = None,
        limit: int | None = None,
        highlight: bool | None = None,
    ) -> SearchResult:
        data = self._query(
            "search.files", query, sort=sort, sort_dir=sort_dir, limit=limit, highlight=highlight
        )
        return decode(SearchResult, data.get("files") or {}, method="search.files")

    def all(
        self,
        query: str,
        *,
        sort: Literal["score", "timestamp"] | None = None,
        sort_dir: Literal["asc", "desc"] | None = None,
        limit: int | None = None,
        highlight: bool | None = None,
    ) -> tuple[SearchResult, SearchResult]:
        """Messages and files in one call, returned as (messages, files)."""
        data = self._query(
            "search.all", query, sort=sort, sort_dir=sort_dir, limit=limit, highlight=highlight
        )
        return (
            decode(SearchResult, data.get("messages") or {}, method="search.all"),
            decode(SearchResult, data.get("files") or {}, method="search.all"),
        )
