from __future__ import annotations

from typing import Literal

from ..entities import Bookmark
from ..params import UNSET
from .base import OperationGroup, decode, decode_list


class BookmarkOperations(OperationGroup):
    def add(
        self,
        channel: str,
        title: str,
        type: Literal["link", "folder"] = "link",
        *,
        link: str | None = None,
        emoji: str | None = None,
    ) -> Bookmark:
        data = self._api.call(
            "bookmarks.add",
            {"channel_id": channel, "title": title, "type": type, "link": link, "emoji": emoji},
        )
        return decode(Bookmark, data.get("bookmark"), method="bookmarks.add")

    def edit(
        self,
        channel: str,
        bookmark_id: str,
        *,
        title: str | None = UNSET,
        link: str | None = UNSET,
        emoji: str | None = UNSET,
    ) -> Bookmark:
        """
        Change only the supplied fields.

        Omitted fields (UNSET or None) are left alone; "" is sent and clears
        the field on Slack's side.
        """
        data = self._api.call(
            "bookmarks.edit",
            {
                "channel_id": channel,
                "bookmark_id": bookmark_id,
                "title": title,
                "link": link,
                "emoji": emoji,
            },
        )
        return decode(Bookmark, data.get("bookmark"), method="bookmarks.edit")

    def remove(self, channel: str, bookmark_id: str) -> None:
        self._api.call("bookmarks.remove", {"channel_id": channel, "bookmark_id": bookmark_id})

    def list(self, channel: str) -> list[Bookmark]:
        data = self._api.call("bookmarks.list", {"channel_id": channel})
        return decode_list(Bookmark, data.get("bookmarks"), method="bookmarks.list")
