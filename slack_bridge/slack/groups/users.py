from __future__ import annotations

from typing import Literal

from ..entities import Conversation, User, UserPresence
from ..pagination import PaginatedResult, cursor_hints, normalize
from .base import OperationGroup, decode, decode_list


DEFAULT_CONVERSATION_TYPES = "public_channel,private_channel,mpim,im"

_PRESENCE_FIELDS = (
    "presence",
    "online",
    "auto_away",
    "manual_away",
    "connection_count",
    "last_activity",
)


class UserOperations(OperationGroup):
    def list(self, *, limit: int | None = None, cursor: str | None = None) -> PaginatedResult[User]:
        data = self._api.call("users.list", {"limit": limit or 100, "cursor": cursor})
        items = decode_list(User, data.get("members"), method="users.list")
        return normalize(items, cursor_hints(data))

    def info(self, user: str) -> User:
        data = self._api.call("users.info", {"user": user})
        return decode(User, data.get("user"), method="users.info")

    def by_email(self, email: str) -> User:
        data = self._api.call("users.lookupByEmail", {"email": email})
        return decode(User, data.get("user"), method="users.lookupByEmail")

    def presence(self, user: str) -> UserPresence:
        # Presence fields sit at the top level of the envelope.
        data = self._api.call("users.getPresence", {"user": user})
        row = {k: data.get(k) for k in _PRESENCE_FIELDS if data.get(k) is not None}
        return decode(UserPresence, row, method="users.getPresence")

    def set_presence(self, presence: Literal["auto", "away"]) -> None:
        self._api.call("users.setPresence", {"presence": presence})

    def conversations(
        self,
        user: str | None = None,
        *,
        types: str | None = None,
        exclude_archived: bool = True,
        limit: int | None = None,
        cursor: str | None = None,
    ) -> PaginatedResult[Conversation]:
        data = self._api.call(
            "users.conversations",
            {
                "user": user,
                "types": types or DEFAULT_CONVERSATION_TYPES,
                "exclude_archived": exclude_archived,
                "limit": limit or 100,
                "cursor": cursor,
            },
        )
        items = decode_list(Conversation, data.get("channels"), method="users.conversations")
        return normalize(items, cursor_hints(data))
