from __future__ import annotations

from typing import Any

from ..entities import Team
from .base import OperationGroup, decode


class TeamOperations(OperationGroup):
    def info(self) -> Team:
        data = self._api.call("team.info")
        return decode(Team, data.get("team"), method="team.info")

    def billable_info(self, user: str | None = None) -> dict[str, dict[str, Any]]:
        """Map of user id -> {"billing_active": bool}."""
        data = self._api.call("team.billableInfo", {"user": user})
        raw = data.get("billable_info")
        if not isinstance(raw, dict):
            return {}
        return {str(k): dict(v) for k, v in raw.items() if isinstance(v, dict)}
