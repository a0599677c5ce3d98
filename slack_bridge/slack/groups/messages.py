from __future__ import annotations

import time
from typing import Any

from ..entities import Message, ScheduledMessage
from ..pagination import PaginatedResult, cursor_hints, normalize
from .base import OperationGroup, decode, decode_list


class MessageOperations(OperationGroup):
    def post(
        self,
        channel: str,
        text: str | None = None,
        *,
        blocks: list[dict[str, Any]] | None = None,
        attachments: list[dict[str, Any]] | None = None,
        thread_ts: str | None = None,
        reply_broadcast: bool | None = None,
        unfurl_links: bool | None = None,
        unfurl_media: bool | None = None,
        mrkdwn: bool | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> Message:
        """
        Post to a channel or thread (chat.postMessage).

        Content is not checked locally; Slack answers `no_text` when text,
        blocks and attachments are all missing.
        """
        data = self._api.call(
            "chat.postMessage",
            {
                "channel": channel,
                "text": text,
                "blocks": blocks,
                "attachments": attachments,
                "thread_ts": thread_ts,
                "reply_broadcast": reply_broadcast,
                "unfurl_links": unfurl_links,
                "unfurl_media": unfurl_media,
                "mrkdwn": mrkdwn,
                "metadata": metadata,
            },
        )
        return decode(Message, data.get("message") or {}, method="chat.postMessage")

    def update(
        self,
        channel: str,
        ts: str,
        text: str | None = None,
        *,
        blocks: list[dict[str, Any]] | None = None,
        attachments: list[dict[str, Any]] | None = None,
        as_user: bool | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> Message:
        data = self._api.call(
            "chat.update",
            {
                "channel": channel,
                "ts": ts,
                "text": text,
                "blocks": blocks,
                "attachments": attachments,
                "as_user": as_user,
                "metadata": metadata,
            },
        )
        return decode(Message, data.get("message") or {}, method="chat.update")

    def delete(self, channel: str, ts: str) -> None:
        self._api.call("chat.delete", {"channel": channel, "ts": ts})

    def schedule(
        self,
        channel: str,
        post_at: int,
        text: str | None = None,
        *,
        blocks: list[dict[str, Any]] | None = None,
        attachments: list[dict[str, Any]] | None = None,
        thread_ts: str | None = None,
        reply_broadcast: bool | None = None,
        unfurl_links: bool | None = None,
        unfurl_media: bool | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> ScheduledMessage:
        data = self._api.call(
            "chat.scheduleMessage",
            {
                "channel": channel,
                "post_at": post_at,
                "text": text,
                "blocks": blocks,
                "attachments": attachments,
                "thread_ts": thread_ts,
                "reply_broadcast": reply_broadcast,
                "unfurl_links": unfurl_links,
                "unfurl_media": unfurl_media,
                "metadata": metadata,
            },
        )
        msg = data.get("message")
        # Slack does not echo a creation time; stamp it locally.
        return decode(
            ScheduledMessage,
            {
                "id": data.get("scheduled_message_id"),
                "channel_id": data.get("channel"),
                "post_at": data.get("post_at"),
                "date_created": int(time.time()),
                "text": msg.get("text") if isinstance(msg, dict) else None,
            },
            method="chat.scheduleMessage",
        )

    def delete_scheduled(self, channel: str, scheduled_message_id: str) -> None:
        self._api.call(
            "chat.deleteScheduledMessage",
            {"channel": channel, "scheduled_message_id": scheduled_message_id},
        )

    def list_scheduled(
        self,
        channel: str | None = None,
        *,
        limit: int | None = None,
        cursor: str | None = None,
    ) -> PaginatedResult[ScheduledMessage]:
        data = self._api.call(
            "chat.scheduledMessages.list",
            {"channel": channel, "limit": limit or 100, "cursor": cursor},
        )
        items = decode_list(
            ScheduledMessage, data.get("scheduled_messages"), method="chat.scheduledMessages.list"
        )
        return normalize(items, cursor_hints(data))

    def permalink(self, channel: str, message_ts: str) -> str:
        data = self._api.call("chat.getPermalink", {"channel": channel, "message_ts": message_ts})
        return str(data.get("permalink") or "")
