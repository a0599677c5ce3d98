from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class SlackEntity(BaseModel):
    # Keep every field Slack sent, even the ones not modeled here.
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


# --- conversations ---


class TopicOrPurpose(SlackEntity):
    value: str = ""
    creator: str | None = None
    last_set: int | None = None


class Conversation(SlackEntity):
    id: str
    name: str | None = None
    name_normalized: str | None = None
    is_channel: bool | None = None
    is_group: bool | None = None
    is_im: bool | None = None
    is_mpim: bool | None = None
    is_private: bool | None = None
    is_archived: bool | None = None
    is_general: bool | None = None
    is_member: bool | None = None
    created: int | None = None
    creator: str | None = None
    num_members: int | None = None
    topic: TopicOrPurpose | None = None
    purpose: TopicOrPurpose | None = None
    user: str | None = None  # DMs only


# --- files ---


class SlackFile(SlackEntity):
    id: str
    created: int | None = None
    timestamp: int | None = None
    name: str | None = None
    title: str | None = None
    mimetype: str | None = None
    filetype: str | None = None
    pretty_type: str | None = None
    user: str | None = None
    size: int | None = None
    is_public: bool | None = None
    url_private: str | None = None
    url_private_download: str | None = None
    permalink: str | None = None
    channels: list[str] | None = None


# --- messages ---


class Reaction(SlackEntity):
    name: str
    count: int = 0
    users: list[str] = Field(default_factory=list)


class Message(SlackEntity):
    type: str | None = None
    subtype: str | None = None
    text: str | None = None
    ts: str | None = None
    user: str | None = None
    bot_id: str | None = None
    channel: str | None = None
    thread_ts: str | None = None
    reply_count: int | None = None
    blocks: list[dict[str, Any]] | None = None
    attachments: list[dict[str, Any]] | None = None
    files: list[SlackFile] | None = None
    reactions: list[Reaction] | None = None
    permalink: str | None = None


class ScheduledMessage(SlackEntity):
    id: str
    channel_id: str | None = None
    post_at: int | None = None
    date_created: int | None = None
    text: str | None = None


# --- users ---


class UserProfile(SlackEntity):
    real_name: str | None = None
    display_name: str | None = None
    email: str | None = None
    title: str | None = None
    phone: str | None = None
    status_text: str | None = None
    status_emoji: str | None = None
    image_72: str | None = None


class User(SlackEntity):
    id: str
    team_id: str | None = None
    name: str | None = None
    real_name: str | None = None
    deleted: bool | None = None
    tz: str | None = None
    is_admin: bool | None = None
    is_owner: bool | None = None
    is_bot: bool | None = None
    is_restricted: bool | None = None
    profile: UserProfile | None = None


class UserPresence(SlackEntity):
    presence: Literal["active", "away"] | str
    online: bool | None = None
    auto_away: bool | None = None
    manual_away: bool | None = None
    connection_count: int | None = None
    last_activity: int | None = None


# --- reactions / pins / stars ---


class ReactionItem(SlackEntity):
    type: str
    channel: str | None = None
    message: Message | None = None
    file: SlackFile | None = None


class PinnedItem(SlackEntity):
    type: str
    channel: str | None = None
    message: Message | None = None
    file: SlackFile | None = None
    created: int | None = None
    created_by: str | None = None


class StarredItem(SlackEntity):
    type: str
    channel: str | None = None
    message: Message | None = None
    file: SlackFile | None = None
    date_create: int | None = None


# --- reminders / bookmarks ---


class Reminder(SlackEntity):
    id: str
    creator: str | None = None
    user: str | None = None
    text: str = ""
    recurring: bool = False
    time: int | None = None
    complete_ts: int | None = None


class Bookmark(SlackEntity):
    id: str
    channel_id: str | None = None
    title: str = ""
    link: str | None = None
    emoji: str | None = None
    icon_url: str | None = None
    type: str | None = None
    date_created: int | None = None
    date_updated: int | None = None


# --- user groups / team ---


class UserGroup(SlackEntity):
    id: str
    team_id: str | None = None
    name: str = ""
    handle: str | None = None
    description: str | None = None
    is_external: bool | None = None
    date_create: int | None = None
    date_update: int | None = None
    date_delete: int | None = None
    created_by: str | None = None
    prefs: dict[str, Any] | None = None
    users: list[str] | None = None
    user_count: int | None = None


class Team(SlackEntity):
    id: str
    name: str | None = None
    domain: str | None = None
    email_domain: str | None = None
    url: str | None = None
    icon: dict[str, Any] | None = None
    enterprise_id: str | None = None
    enterprise_name: str | None = None


# --- search ---


class SearchResult(SlackEntity):
    total: int = 0
    matches: list[dict[str, Any]] = Field(default_factory=list)
    pagination: dict[str, Any] | None = None
    paging: dict[str, Any] | None = None


# --- presence / dnd / emoji / auth ---


class DndStatus(SlackEntity):
    dnd_enabled: bool = False
    next_dnd_start_ts: int | None = None
    next_dnd_end_ts: int | None = None
    snooze_enabled: bool | None = None
    snooze_endtime: int | None = None
    snooze_remaining: int | None = None


class EmojiList(SlackEntity):
    emoji: dict[str, str] = Field(default_factory=dict)
    cache_ts: str | None = None


class ConnectionStatus(SlackEntity):
    connected: bool
    message: str
    team: str | None = None
    user: str | None = None
