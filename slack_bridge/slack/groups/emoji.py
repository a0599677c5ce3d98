from __future__ import annotations

from ..entities import EmojiList
from .base import OperationGroup, decode


class EmojiOperations(OperationGroup):
    def list(self) -> EmojiList:
        data = self._api.call("emoji.list")
        return decode(
            EmojiList,
            {"emoji": data.get("emoji") or {}, "cache_ts": data.get("cache_ts")},
            method="emoji.list",
        )
