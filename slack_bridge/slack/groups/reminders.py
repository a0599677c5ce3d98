from __future__ import annotations

from ..entities import Reminder
from .base import OperationGroup, decode, decode_list


class ReminderOperations(OperationGroup):
    def add(self, text: str, time: str | int, *, user: str | None = None) -> Reminder:
        """`time` is a unix timestamp, a seconds offset, or natural language ("in 15 minutes")."""
        data = self._api.call("reminders.add", {"text": text, "time": time, "user": user})
        return decode(Reminder, data.get("reminder"), method="reminders.add")

    def complete(self, reminder: str) -> None:
        self._api.call("reminders.complete", {"reminder": reminder})

    def delete(self, reminder: str) -> None:
        self._api.call("reminders.delete", {"reminder": reminder})

    def info(self, reminder: str) -> Reminder:
        data = self._api.call("reminders.info", {"reminder": reminder})
        return decode(Reminder, data.get("reminder"), method="reminders.info")

    def list(self) -> list[Reminder]:
        data = self._api.call("reminders.list")
        return decode_list(Reminder, data.get("reminders"), method="reminders.list")
