from __future__ import annotations

from typing import Iterable

from ..entities import UserGroup
from ..params import UNSET, join_ids
from .base import OperationGroup, decode, decode_list


class UserGroupOperations(OperationGroup):
    def list(
        self, *, include_users: bool = False, include_disabled: bool = False
    ) -> list[UserGroup]:
        data = self._api.call(
            "usergroups.list",
            {"include_users": include_users, "include_disabled": include_disabled},
        )
        return decode_list(UserGroup, data.get("usergroups"), method="usergroups.list")

    def create(
        self,
        name: str,
        *,
        handle: str | None = None,
        description: str | None = None,
        channels: Iterable[str] | str | None = None,
    ) -> UserGroup:
        data = self._api.call(
            "usergroups.create",
            {
                "name": name,
                "handle": handle,
                "description": description,
                "channels": join_ids(channels),
            },
        )
        return decode(UserGroup, data.get("usergroup"), method="usergroups.create")

    def update(
        self,
        usergroup: str,
        *,
        name: str | None = UNSET,
        handle: str | None = UNSET,
        description: str | None = UNSET,
        channels: Iterable[str] | str | None = UNSET,
    ) -> UserGroup:
        # description="" clears it; UNSET leaves it untouched.
        data = self._api.call(
            "usergroups.update",
            {
                "usergroup": usergroup,
                "name": name,
                "handle": handle,
                "description": description,
                "channels": join_ids(channels),
            },
        )
        return decode(UserGroup, data.get("usergroup"), method="usergroups.update")

    def disable(self, usergroup: str) -> UserGroup:
        data = self._api.call("usergroups.disable", {"usergroup": usergroup})
        return decode(UserGroup, data.get("usergroup"), method="usergroups.disable")

    def enable(self, usergroup: str) -> UserGroup:
        data = self._api.call("usergroups.enable", {"usergroup": usergroup})
        return decode(UserGroup, data.get("usergroup"), method="usergroups.enable")

    def members(self, usergroup: str) -> list[str]:
        data = self._api.call("usergroups.users.list", {"usergroup": usergroup})
        return [str(u) for u in (data.get("users") or [])]

    def update_members(self, usergroup: str, user_ids: Iterable[str] | str) -> UserGroup:
        data = self._api.call(
            "usergroups.users.update", {"usergroup": usergroup, "users": join_ids(user_ids)}
        )
        return decode(UserGroup, data.get("usergroup"), method="usergroups.users.update")
