from __future__ import annotations

from ..entities import PinnedItem
from .base import OperationGroup, decode_list


class PinOperations(OperationGroup):
    def add(self, channel: str, timestamp: str) -> None:
        self._api.call("pins.add", {"channel": channel, "timestamp": timestamp})

    def remove(self, channel: str, timestamp: str) -> None:
        self._api.call("pins.remove", {"channel": channel, "timestamp": timestamp})

    def list(self, channel: str) -> list[PinnedItem]:
        data = self._api.call("pins.list", {"channel": channel})
        return decode_list(PinnedItem, data.get("items"), method="pins.list")
