from __future__ import annotations

from typing import Any

from ..entities import DndStatus
from .base import OperationGroup, decode


def _pick(data: dict[str, Any], *keys: str) -> dict[str, Any]:
    return {k: data.get(k) for k in keys if data.get(k) is not None}


class DndOperations(OperationGroup):
    """
    Do Not Disturb.

    Two pairs exist: `set_snooze`/`end_snooze` return a status, while the
    older `set_dnd`/`end_dnd` return nothing. `end_dnd` ends the whole DND
    session (dnd.endDnd), not only the snooze.
    """

    def info(self, user: str | None = None) -> DndStatus:
        data = self._api.call("dnd.info", {"user": user})
        row = _pick(
            data,
            "dnd_enabled",
            "next_dnd_start_ts",
            "next_dnd_end_ts",
            "snooze_enabled",
            "snooze_endtime",
            "snooze_remaining",
        )
        return decode(DndStatus, row, method="dnd.info")

    def set_snooze(self, num_minutes: int | None = None) -> DndStatus:
        data = self._api.call("dnd.setSnooze", {"num_minutes": num_minutes})
        row = _pick(data, "snooze_enabled", "snooze_endtime", "snooze_remaining")
        row["dnd_enabled"] = True
        return decode(DndStatus, row, method="dnd.setSnooze")

    def end_snooze(self) -> DndStatus:
        data = self._api.call("dnd.endSnooze")
        row = _pick(data, "dnd_enabled", "next_dnd_start_ts", "next_dnd_end_ts")
        row["snooze_enabled"] = False
        return decode(DndStatus, row, method="dnd.endSnooze")

    def set_dnd(self, num_minutes: int) -> None:
        self._api.call("dnd.setSnooze", {"num_minutes": num_minutes})

    def end_dnd(self) -> None:
        self._api.call("dnd.endDnd")
