from __future__ import annotations

from ..entities import StarredItem
from ..pagination import PaginatedResult, normalize, page_hints
from .base import OperationGroup, decode_list


class StarOperations(OperationGroup):
    def add(self, channel: str, *, timestamp: str | None = None, file: str | None = None) -> None:
        self._api.call("stars.add", {"channel": channel, "timestamp": timestamp, "file": file})

    def remove(
        self, channel: str, *, timestamp: str | None = None, file: str | None = None
    ) -> None:
        self._api.call("stars.remove", {"channel": channel, "timestamp": timestamp, "file": file})

    def list(
        self, *, limit: int | None = None, page: int | None = None
    ) -> PaginatedResult[StarredItem]:
        data = self._api.call("stars.list", {"count": limit or 100, "page": page})
        items = decode_list(StarredItem, data.get("items"), method="stars.list")
        return normalize(items, page_hints(data))
