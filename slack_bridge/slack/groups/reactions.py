from __future__ import annotations

from ..entities import Message, Reaction, ReactionItem
from ..pagination import PaginatedResult, normalize, page_hints
from .base import OperationGroup, decode, decode_list


class ReactionOperations(OperationGroup):
    def add(self, channel: str, timestamp: str, name: str) -> None:
        self._api.call("reactions.add", {"channel": channel, "timestamp": timestamp, "name": name})

    def remove(self, channel: str, timestamp: str, name: str) -> None:
        self._api.call(
            "reactions.remove", {"channel": channel, "timestamp": timestamp, "name": name}
        )

    def get(self, channel: str, timestamp: str) -> tuple[Message, list[Reaction]]:
        data = self._api.call(
            "reactions.get", {"channel": channel, "timestamp": timestamp, "full": True}
        )
        message = decode(Message, data.get("message") or {}, method="reactions.get")
        return message, list(message.reactions or [])

    def list(
        self,
        user: str | None = None,
        *,
        limit: int | None = None,
        page: int | None = None,
    ) -> PaginatedResult[ReactionItem]:
        data = self._api.call(
            "reactions.list",
            {"user": user, "count": limit or 100, "page": page, "full": True},
        )
        items = decode_list(ReactionItem, data.get("items"), method="reactions.list")
        return normalize(items, page_hints(data))
