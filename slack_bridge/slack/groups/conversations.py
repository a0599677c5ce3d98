from __future__ import annotations

from typing import Iterable

from ..entities import Conversation, Message
from ..pagination import PaginatedResult, cursor_hints, flag_hints, normalize
from ..params import UNSET, join_ids
from .base import OperationGroup, decode, decode_list


DEFAULT_TYPES = "public_channel,private_channel"


class ConversationOperations(OperationGroup):
    def list(
        self,
        *,
        types: str | None = None,
        exclude_archived: bool = True,
        limit: int | None = None,
        cursor: str | None = None,
        team_id: str | None = None,
    ) -> PaginatedResult[Conversation]:
        data = self._api.call(
            "conversations.list",
            {
                "types": types or DEFAULT_TYPES,
                "exclude_archived": exclude_archived,
                "limit": limit or 100,
                "cursor": cursor,
                "team_id": team_id,
            },
        )
        items = decode_list(Conversation, data.get("channels"), method="conversations.list")
        return normalize(items, cursor_hints(data))

    def info(self, channel: str) -> Conversation:
        data = self._api.call(
            "conversations.info", {"channel": channel, "include_num_members": True}
        )
        return decode(Conversation, data.get("channel"), method="conversations.info")

    def history(
        self,
        channel: str,
        *,
        limit: int | None = None,
        cursor: str | None = None,
        oldest: str | None = None,
        latest: str | None = None,
        inclusive: bool | None = None,
        include_all_metadata: bool | None = None,
    ) -> PaginatedResult[Message]:
        data = self._api.call(
            "conversations.history",
            {
                "channel": channel,
                "limit": limit or 100,
                "cursor": cursor,
                "oldest": oldest,
                "latest": latest,
                "inclusive": inclusive,
                "include_all_metadata": include_all_metadata,
            },
        )
        items = decode_list(Message, data.get("messages"), method="conversations.history")
        return normalize(items, flag_hints(data))

    def replies(
        self,
        channel: str,
        thread_ts: str,
        *,
        limit: int | None = None,
        cursor: str | None = None,
    ) -> PaginatedResult[Message]:
        data = self._api.call(
            "conversations.replies",
            {"channel": channel, "ts": thread_ts, "limit": limit or 100, "cursor": cursor},
        )
        items = decode_list(Message, data.get("messages"), method="conversations.replies")
        return normalize(items, flag_hints(data))

    def create(self, name: str, *, is_private: bool = False) -> Conversation:
        data = self._api.call("conversations.create", {"name": name, "is_private": is_private})
        return decode(Conversation, data.get("channel"), method="conversations.create")

    def archive(self, channel: str) -> None:
        self._api.call("conversations.archive", {"channel": channel})

    def unarchive(self, channel: str) -> None:
        self._api.call("conversations.unarchive", {"channel": channel})

    def rename(self, channel: str, name: str) -> Conversation:
        data = self._api.call("conversations.rename", {"channel": channel, "name": name})
        return decode(Conversation, data.get("channel"), method="conversations.rename")

    def set_topic(self, channel: str, topic: str = UNSET) -> Conversation:
        # "" is sent as-is and clears the topic.
        data = self._api.call("conversations.setTopic", {"channel": channel, "topic": topic})
        return decode(Conversation, data.get("channel"), method="conversations.setTopic")

    def set_purpose(self, channel: str, purpose: str = UNSET) -> Conversation:
        data = self._api.call("conversations.setPurpose", {"channel": channel, "purpose": purpose})
        return decode(Conversation, data.get("channel"), method="conversations.setPurpose")

    def invite(self, channel: str, user_ids: Iterable[str] | str) -> Conversation:
        data = self._api.call(
            "conversations.invite", {"channel": channel, "users": join_ids(user_ids)}
        )
        return decode(Conversation, data.get("channel"), method="conversations.invite")

    def kick(self, channel: str, user: str) -> None:
        self._api.call("conversations.kick", {"channel": channel, "user": user})

    def join(self, channel: str) -> Conversation:
        data = self._api.call("conversations.join", {"channel": channel})
        return decode(Conversation, data.get("channel"), method="conversations.join")

    def leave(self, channel: str) -> None:
        self._api.call("conversations.leave", {"channel": channel})

    def members(
        self,
        channel: str,
        *,
        limit: int | None = None,
        cursor: str | None = None,
    ) -> PaginatedResult[str]:
        data = self._api.call(
            "conversations.members",
            {"channel": channel, "limit": limit or 100, "cursor": cursor},
        )
        members = [str(m) for m in (data.get("members") or [])]
        return normalize(members, cursor_hints(data))

    def open(self, users: Iterable[str] | str) -> Conversation:
        """Open (or find) a DM / group DM with the given users."""
        data = self._api.call("conversations.open", {"users": join_ids(users)})
        return decode(Conversation, data.get("channel"), method="conversations.open")
