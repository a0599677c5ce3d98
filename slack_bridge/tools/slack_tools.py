from __future__ import annotations

import json
from typing import Any, Callable

from pydantic import BaseModel

from ..observability.context import bind_request_id, reset_request_id
from ..observability.logging import get_logger
from ..settings import settings
from ..slack.client import SlackClient, create_slack_client
from ..slack.credentials import Credentials
from ..slack.dispatcher import RequestDispatcher
from ..slack.errors import ClassifiedError, error_details, render_error
from ..slack.pagination import PaginatedResult, clamp_limit
from ..slack.params import UNSET
from .tool_registry import ToolFn
from .tool_registry_impl import ToolRegistryImpl


log = get_logger("slack_tools")

Handler = Callable[[SlackClient, dict[str, Any]], Any]


def tool_def(name: str, description: str, parameters: dict[str, Any]) -> dict[str, Any]:
    return {
        "type": "function",
        "name": name,
        "description": description,
        "parameters": parameters,
    }


def clip_text(text: str, *, max_chars: int) -> str:
    s = str(text or "")
    if max_chars <= 0:
        return ""
    return s if len(s) <= max_chars else s[:max_chars]


# --- schema helpers ---


def _obj(*required: str, **properties: dict[str, Any]) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": properties,
        "required": list(required),
        "additionalProperties": False,
    }


def _str(description: str) -> dict[str, Any]:
    return {"type": "string", "description": description}


def _int(description: str, *, minimum: int | None = None, maximum: int | None = None) -> dict[str, Any]:
    out: dict[str, Any] = {"type": "integer", "description": description}
    if minimum is not None:
        out["minimum"] = minimum
    if maximum is not None:
        out["maximum"] = maximum
    return out


def _bool(description: str) -> dict[str, Any]:
    return {"type": "boolean", "description": description}


def _ids(description: str) -> dict[str, Any]:
    return {"type": "array", "items": {"type": "string"}, "description": description}


def _enum(description: str, *values: str) -> dict[str, Any]:
    return {"type": "string", "enum": list(values), "description": description}


def _any_list(description: str) -> dict[str, Any]:
    return {"type": "array", "items": {"type": "object"}, "description": description}


_LIMIT = _int("Max items to return", minimum=1, maximum=100)
_CURSOR = _str("Pagination cursor from a previous call (next_cursor)")
_PAGE = _int("Page number (page-counted listing)", minimum=1)
_CHANNEL = _str("Channel ID (e.g. C1234567890)")


# --- arg helpers ---


def _s(args: dict[str, Any], key: str) -> str | None:
    v = args.get(key)
    if v is None:
        return None
    return str(v).strip() or None


def _req(args: dict[str, Any], key: str) -> str:
    # Blank identifiers go out as-is and Slack rejects them.
    return str(args.get(key) or "").strip()


def _keep(args: dict[str, Any], key: str) -> Any:
    """Tri-state for clearable fields: absent -> UNSET, "" -> "" (clear)."""
    if key not in args or args.get(key) is None:
        return UNSET
    return str(args.get(key))


def _i(args: dict[str, Any], key: str) -> int | None:
    v = args.get(key)
    if v is None or v == "":
        return None
    try:
        return int(v)
    except (TypeError, ValueError):
        return None


def _b(args: dict[str, Any], key: str, default: bool | None = None) -> bool | None:
    v = args.get(key)
    if v is None:
        return default
    if isinstance(v, str):
        return v.strip().lower() in ("1", "true", "yes", "on")
    return bool(v)


def _list(args: dict[str, Any], key: str) -> list[str] | str | None:
    v = args.get(key)
    if v is None:
        return None
    if isinstance(v, str):
        return v
    return [str(x).strip() for x in v if str(x or "").strip()]


def _limit(args: dict[str, Any]) -> int:
    return clamp_limit(
        _i(args, "limit"),
        default=settings.slack_default_page_size,
        maximum=settings.slack_max_page_size,
    )


def _done(message: str, **extra: Any) -> dict[str, Any]:
    return {"success": True, "message": message, **extra}


# --- result shaping ---


def to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    if isinstance(value, PaginatedResult):
        return {
            "items": [to_jsonable(v) for v in value.items],
            "count": value.count,
            "has_more": value.has_more,
            "next_cursor": value.next_cursor,
        }
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def _clip(payload: dict[str, Any]) -> dict[str, Any]:
    limit = int(settings.slack_character_limit)
    text = json.dumps(payload, ensure_ascii=False, default=str)
    if len(text) <= limit:
        return payload
    log.info("slack_tool_output_clipped", size=len(text), limit=limit)
    return {
        "ok": bool(payload.get("ok")),
        "truncated": True,
        "result": clip_text(text, max_chars=limit),
        "message": f"Response exceeded {limit} characters; use a smaller limit or pagination.",
    }


# --- handlers: auth / conversations ---


def _test_connection(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.test_connection()


def _list_conversations(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.conversations.list(
        types=_s(a, "types"),
        exclude_archived=bool(_b(a, "exclude_archived", True)),
        limit=_limit(a),
        cursor=_s(a, "cursor"),
        team_id=_s(a, "team_id"),
    )


def _get_conversation_info(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.conversations.info(_req(a, "channel_id"))


def _get_conversation_history(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.conversations.history(
        _req(a, "channel_id"),
        limit=_limit(a),
        cursor=_s(a, "cursor"),
        oldest=_s(a, "oldest"),
        latest=_s(a, "latest"),
        inclusive=_b(a, "inclusive"),
    )


def _get_thread_replies(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.conversations.replies(
        _req(a, "channel_id"), _req(a, "thread_ts"), limit=_limit(a), cursor=_s(a, "cursor")
    )


def _create_conversation(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.conversations.create(_req(a, "name"), is_private=bool(_b(a, "is_private", False)))


def _archive_conversation(c: SlackClient, a: dict[str, Any]) -> Any:
    c.conversations.archive(_req(a, "channel_id"))
    return _done("Channel archived")


def _unarchive_conversation(c: SlackClient, a: dict[str, Any]) -> Any:
    c.conversations.unarchive(_req(a, "channel_id"))
    return _done("Channel unarchived")


def _rename_conversation(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.conversations.rename(_req(a, "channel_id"), _req(a, "name"))


def _set_conversation_topic(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.conversations.set_topic(_req(a, "channel_id"), _keep(a, "topic"))


def _set_conversation_purpose(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.conversations.set_purpose(_req(a, "channel_id"), _keep(a, "purpose"))


def _invite_to_conversation(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.conversations.invite(_req(a, "channel_id"), _list(a, "user_ids") or [])


def _kick_from_conversation(c: SlackClient, a: dict[str, Any]) -> Any:
    c.conversations.kick(_req(a, "channel_id"), _req(a, "user_id"))
    return _done("User removed from channel")


def _join_conversation(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.conversations.join(_req(a, "channel_id"))


def _leave_conversation(c: SlackClient, a: dict[str, Any]) -> Any:
    c.conversations.leave(_req(a, "channel_id"))
    return _done("Left channel")


def _get_conversation_members(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.conversations.members(_req(a, "channel_id"), limit=_limit(a), cursor=_s(a, "cursor"))


def _open_conversation(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.conversations.open(_list(a, "user_ids") or [])


# --- messages ---


def _post_message(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.messages.post(
        _req(a, "channel"),
        _s(a, "text"),
        blocks=a.get("blocks"),
        attachments=a.get("attachments"),
        thread_ts=_s(a, "thread_ts"),
        reply_broadcast=_b(a, "reply_broadcast"),
        unfurl_links=_b(a, "unfurl_links"),
        unfurl_media=_b(a, "unfurl_media"),
        mrkdwn=_b(a, "mrkdwn"),
    )


def _update_message(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.messages.update(
        _req(a, "channel"),
        _req(a, "ts"),
        _s(a, "text"),
        blocks=a.get("blocks"),
        attachments=a.get("attachments"),
    )


def _delete_message(c: SlackClient, a: dict[str, Any]) -> Any:
    c.messages.delete(_req(a, "channel"), _req(a, "ts"))
    return _done("Message deleted")


def _schedule_message(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.messages.schedule(
        _req(a, "channel"),
        _i(a, "post_at") or 0,
        _s(a, "text"),
        blocks=a.get("blocks"),
        thread_ts=_s(a, "thread_ts"),
    )


def _delete_scheduled_message(c: SlackClient, a: dict[str, Any]) -> Any:
    c.messages.delete_scheduled(_req(a, "channel"), _req(a, "scheduled_message_id"))
    return _done("Scheduled message deleted")


def _list_scheduled_messages(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.messages.list_scheduled(_s(a, "channel"), limit=_limit(a), cursor=_s(a, "cursor"))


def _get_permalink(c: SlackClient, a: dict[str, Any]) -> Any:
    return {"permalink": c.messages.permalink(_req(a, "channel"), _req(a, "message_ts"))}


# --- users ---


def _list_users(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.users.list(limit=_limit(a), cursor=_s(a, "cursor"))


def _get_user_info(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.users.info(_req(a, "user_id"))


def _get_user_by_email(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.users.by_email(_req(a, "email"))


def _get_user_presence(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.users.presence(_req(a, "user_id"))


def _set_presence(c: SlackClient, a: dict[str, Any]) -> Any:
    presence = _req(a, "presence")
    c.users.set_presence(presence)  # type: ignore[arg-type]
    return _done(f"Presence set to {presence}")


def _get_user_conversations(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.users.conversations(
        _s(a, "user_id"),
        types=_s(a, "types"),
        exclude_archived=bool(_b(a, "exclude_archived", True)),
        limit=_limit(a),
        cursor=_s(a, "cursor"),
    )


# --- files ---


def _list_files(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.files.list(
        channel=_s(a, "channel"),
        user=_s(a, "user"),
        types=_s(a, "types"),
        ts_from=_s(a, "ts_from"),
        ts_to=_s(a, "ts_to"),
        limit=_limit(a),
        page=_i(a, "page"),
    )


def _get_file_info(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.files.info(_req(a, "file_id"))


def _delete_file(c: SlackClient, a: dict[str, Any]) -> Any:
    c.files.delete(_req(a, "file_id"))
    return _done("File deleted")


def _upload_file(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.files.upload(
        _req(a, "channel"),
        str(a.get("content") or ""),
        _req(a, "filename"),
        title=_s(a, "title"),
        initial_comment=_s(a, "initial_comment"),
        thread_ts=_s(a, "thread_ts"),
    )


# --- reactions / search / pins / stars ---


def _add_reaction(c: SlackClient, a: dict[str, Any]) -> Any:
    c.reactions.add(_req(a, "channel"), _req(a, "timestamp"), _req(a, "name"))
    return _done("Reaction added")


def _remove_reaction(c: SlackClient, a: dict[str, Any]) -> Any:
    c.reactions.remove(_req(a, "channel"), _req(a, "timestamp"), _req(a, "name"))
    return _done("Reaction removed")


def _get_reactions(c: SlackClient, a: dict[str, Any]) -> Any:
    message, reactions = c.reactions.get(_req(a, "channel"), _req(a, "timestamp"))
    return {"message": message, "reactions": reactions}


def _list_user_reactions(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.reactions.list(_s(a, "user_id"), limit=_limit(a), page=_i(a, "page"))


def _search_kwargs(a: dict[str, Any]) -> dict[str, Any]:
    return {
        "sort": _s(a, "sort"),
        "sort_dir": _s(a, "sort_dir"),
        "limit": _limit(a),
        "highlight": _b(a, "highlight"),
    }


def _search_messages(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.search.messages(_req(a, "query"), **_search_kwargs(a))


def _search_files(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.search.files(_req(a, "query"), **_search_kwargs(a))


def _search_all(c: SlackClient, a: dict[str, Any]) -> Any:
    messages, files = c.search.all(_req(a, "query"), **_search_kwargs(a))
    return {"messages": messages, "files": files}


def _add_pin(c: SlackClient, a: dict[str, Any]) -> Any:
    c.pins.add(_req(a, "channel"), _req(a, "timestamp"))
    return _done("Message pinned")


def _remove_pin(c: SlackClient, a: dict[str, Any]) -> Any:
    c.pins.remove(_req(a, "channel"), _req(a, "timestamp"))
    return _done("Message unpinned")


def _list_pins(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.pins.list(_req(a, "channel"))


def _add_star(c: SlackClient, a: dict[str, Any]) -> Any:
    c.stars.add(_req(a, "channel"), timestamp=_s(a, "timestamp"), file=_s(a, "file_id"))
    return _done("Item starred")


def _remove_star(c: SlackClient, a: dict[str, Any]) -> Any:
    c.stars.remove(_req(a, "channel"), timestamp=_s(a, "timestamp"), file=_s(a, "file_id"))
    return _done("Star removed")


def _list_stars(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.stars.list(limit=_limit(a), page=_i(a, "page"))


# --- reminders / bookmarks ---


def _add_reminder(c: SlackClient, a: dict[str, Any]) -> Any:
    t = a.get("time")
    return c.reminders.add(_req(a, "text"), t if isinstance(t, int) else str(t or ""), user=_s(a, "user_id"))


def _complete_reminder(c: SlackClient, a: dict[str, Any]) -> Any:
    c.reminders.complete(_req(a, "reminder_id"))
    return _done("Reminder completed")


def _delete_reminder(c: SlackClient, a: dict[str, Any]) -> Any:
    c.reminders.delete(_req(a, "reminder_id"))
    return _done("Reminder deleted")


def _get_reminder(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.reminders.info(_req(a, "reminder_id"))


def _list_reminders(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.reminders.list()


def _add_bookmark(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.bookmarks.add(
        _req(a, "channel_id"),
        _req(a, "title"),
        _s(a, "type") or "link",  # type: ignore[arg-type]
        link=_s(a, "link"),
        emoji=_s(a, "emoji"),
    )


def _edit_bookmark(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.bookmarks.edit(
        _req(a, "channel_id"),
        _req(a, "bookmark_id"),
        title=_keep(a, "title"),
        link=_keep(a, "link"),
        emoji=_keep(a, "emoji"),
    )


def _remove_bookmark(c: SlackClient, a: dict[str, Any]) -> Any:
    c.bookmarks.remove(_req(a, "channel_id"), _req(a, "bookmark_id"))
    return _done("Bookmark removed")


def _list_bookmarks(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.bookmarks.list(_req(a, "channel_id"))


# --- usergroups / team / dnd / emoji ---


def _list_usergroups(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.usergroups.list(
        include_users=bool(_b(a, "include_users", False)),
        include_disabled=bool(_b(a, "include_disabled", False)),
    )


def _create_usergroup(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.usergroups.create(
        _req(a, "name"),
        handle=_s(a, "handle"),
        description=_s(a, "description"),
        channels=_list(a, "channels"),
    )


def _update_usergroup(c: SlackClient, a: dict[str, Any]) -> Any:
    channels = _list(a, "channels")
    return c.usergroups.update(
        _req(a, "usergroup_id"),
        name=_s(a, "name") or UNSET,
        handle=_s(a, "handle") or UNSET,
        description=_keep(a, "description"),
        channels=UNSET if channels is None else channels,
    )


def _disable_usergroup(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.usergroups.disable(_req(a, "usergroup_id"))


def _enable_usergroup(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.usergroups.enable(_req(a, "usergroup_id"))


def _get_usergroup_members(c: SlackClient, a: dict[str, Any]) -> Any:
    return {"users": c.usergroups.members(_req(a, "usergroup_id"))}


def _update_usergroup_members(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.usergroups.update_members(_req(a, "usergroup_id"), _list(a, "user_ids") or [])


def _get_team_info(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.team.info()


def _get_billable_info(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.team.billable_info(_s(a, "user_id"))


def _get_dnd_info(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.dnd.info(_s(a, "user_id"))


def _set_dnd_snooze(c: SlackClient, a: dict[str, Any]) -> Any:
    minutes = _i(a, "num_minutes")
    status = c.dnd.set_snooze(minutes)
    if minutes is None:
        return _done("DND enabled", status=status)
    return _done(f"DND enabled for {minutes} minutes", status=status)


def _end_dnd_snooze(c: SlackClient, a: dict[str, Any]) -> Any:
    return _done("Snooze ended", status=c.dnd.end_snooze())


def _end_dnd(c: SlackClient, a: dict[str, Any]) -> Any:
    c.dnd.end_dnd()
    return _done("DND session ended")


def _list_emoji(c: SlackClient, a: dict[str, Any]) -> Any:
    return c.emoji.list()


_TS = _str("Message timestamp (ts)")

SLACK_TOOLS: list[tuple[str, str, dict[str, Any], Handler]] = [
    ("slack_test_connection", "Verify the supplied token and report team/user.", _obj(), _test_connection),
    # conversations
    (
        "slack_list_conversations",
        "List channels the token can see (cursor paginated).",
        _obj(
            types=_str("Comma-separated conversation types"),
            exclude_archived=_bool("Skip archived channels (default true)"),
            limit=_LIMIT,
            cursor=_CURSOR,
            team_id=_str("Workspace ID (org tokens only)"),
        ),
        _list_conversations,
    ),
    ("slack_get_conversation_info", "Get details for a channel.", _obj("channel_id", channel_id=_CHANNEL), _get_conversation_info),
    (
        "slack_get_conversation_history",
        "Fetch messages from a channel, newest first.",
        _obj(
            "channel_id",
            channel_id=_CHANNEL,
            limit=_LIMIT,
            cursor=_CURSOR,
            oldest=_str("Only messages after this ts"),
            latest=_str("Only messages before this ts"),
            inclusive=_bool("Include messages at oldest/latest"),
        ),
        _get_conversation_history,
    ),
    (
        "slack_get_thread_replies",
        "Fetch a thread: the parent message followed by its replies.",
        _obj("channel_id", "thread_ts", channel_id=_CHANNEL, thread_ts=_TS, limit=_LIMIT, cursor=_CURSOR),
        _get_thread_replies,
    ),
    (
        "slack_create_conversation",
        "Create a channel.",
        _obj("name", name=_str("Channel name (lowercase, no spaces)"), is_private=_bool("Create as private")),
        _create_conversation,
    ),
    ("slack_archive_conversation", "Archive a channel.", _obj("channel_id", channel_id=_CHANNEL), _archive_conversation),
    ("slack_unarchive_conversation", "Unarchive a channel.", _obj("channel_id", channel_id=_CHANNEL), _unarchive_conversation),
    (
        "slack_rename_conversation",
        "Rename a channel.",
        _obj("channel_id", "name", channel_id=_CHANNEL, name=_str("New channel name")),
        _rename_conversation,
    ),
    (
        "slack_set_conversation_topic",
        "Set a channel topic. An empty string clears it.",
        _obj("channel_id", "topic", channel_id=_CHANNEL, topic=_str("New topic")),
        _set_conversation_topic,
    ),
    (
        "slack_set_conversation_purpose",
        "Set a channel purpose. An empty string clears it.",
        _obj("channel_id", "purpose", channel_id=_CHANNEL, purpose=_str("New purpose")),
        _set_conversation_purpose,
    ),
    (
        "slack_invite_to_conversation",
        "Invite users to a channel.",
        _obj("channel_id", "user_ids", channel_id=_CHANNEL, user_ids=_ids("User IDs to invite")),
        _invite_to_conversation,
    ),
    (
        "slack_kick_from_conversation",
        "Remove a user from a channel.",
        _obj("channel_id", "user_id", channel_id=_CHANNEL, user_id=_str("User ID")),
        _kick_from_conversation,
    ),
    ("slack_join_conversation", "Join a public channel.", _obj("channel_id", channel_id=_CHANNEL), _join_conversation),
    ("slack_leave_conversation", "Leave a channel.", _obj("channel_id", channel_id=_CHANNEL), _leave_conversation),
    (
        "slack_get_conversation_members",
        "List member user IDs of a channel (cursor paginated).",
        _obj("channel_id", channel_id=_CHANNEL, limit=_LIMIT, cursor=_CURSOR),
        _get_conversation_members,
    ),
    (
        "slack_open_conversation",
        "Open (or find) a direct or group message with the given users.",
        _obj("user_ids", user_ids=_ids("User IDs")),
        _open_conversation,
    ),
    # messages
    (
        "slack_post_message",
        "Post a message to a channel or thread.",
        _obj(
            "channel",
            channel=_CHANNEL,
            text=_str("Message text (mrkdwn)"),
            blocks=_any_list("Block Kit blocks"),
            attachments=_any_list("Legacy attachments"),
            thread_ts=_str("Reply in this thread"),
            reply_broadcast=_bool("Also post thread reply to the channel"),
            unfurl_links=_bool("Unfurl links"),
            unfurl_media=_bool("Unfurl media"),
            mrkdwn=_bool("Parse mrkdwn"),
        ),
        _post_message,
    ),
    (
        "slack_update_message",
        "Edit a message.",
        _obj(
            "channel",
            "ts",
            channel=_CHANNEL,
            ts=_TS,
            text=_str("New text"),
            blocks=_any_list("Block Kit blocks"),
            attachments=_any_list("Legacy attachments"),
        ),
        _update_message,
    ),
    (
        "slack_delete_message",
        "Delete a message.",
        _obj("channel", "ts", channel=_CHANNEL, ts=_TS),
        _delete_message,
    ),
    (
        "slack_schedule_message",
        "Schedule a message for later delivery.",
        _obj(
            "channel",
            "post_at",
            channel=_CHANNEL,
            post_at=_int("Unix time to send at"),
            text=_str("Message text"),
            blocks=_any_list("Block Kit blocks"),
            thread_ts=_str("Reply in this thread"),
        ),
        _schedule_message,
    ),
    (
        "slack_delete_scheduled_message",
        "Cancel a scheduled message.",
        _obj("channel", "scheduled_message_id", channel=_CHANNEL, scheduled_message_id=_str("Scheduled message ID")),
        _delete_scheduled_message,
    ),
    (
        "slack_list_scheduled_messages",
        "List pending scheduled messages (cursor paginated).",
        _obj(channel=_CHANNEL, limit=_LIMIT, cursor=_CURSOR),
        _list_scheduled_messages,
    ),
    (
        "slack_get_permalink",
        "Get a permanent link to a message.",
        _obj("channel", "message_ts", channel=_CHANNEL, message_ts=_TS),
        _get_permalink,
    ),
    # users
    ("slack_list_users", "List workspace users (cursor paginated).", _obj(limit=_LIMIT, cursor=_CURSOR), _list_users),
    ("slack_get_user_info", "Get a user's profile.", _obj("user_id", user_id=_str("User ID")), _get_user_info),
    ("slack_get_user_by_email", "Look up a user by email.", _obj("email", email=_str("Email address")), _get_user_by_email),
    ("slack_get_user_presence", "Get a user's presence.", _obj("user_id", user_id=_str("User ID")), _get_user_presence),
    (
        "slack_set_presence",
        "Set the authenticated user's presence.",
        _obj("presence", presence=_enum("Presence", "auto", "away")),
        _set_presence,
    ),
    (
        "slack_get_user_conversations",
        "List conversations a user belongs to (cursor paginated).",
        _obj(
            user_id=_str("User ID (defaults to the token's user)"),
            types=_str("Comma-separated conversation types"),
            exclude_archived=_bool("Skip archived channels (default true)"),
            limit=_LIMIT,
            cursor=_CURSOR,
        ),
        _get_user_conversations,
    ),
    # files
    (
        "slack_list_files",
        "List files (page counted: pass the next page number while has_more).",
        _obj(
            channel=_CHANNEL,
            user=_str("Filter by uploader"),
            types=_str("Comma-separated file types"),
            ts_from=_str("Only files after this unix time"),
            ts_to=_str("Only files before this unix time"),
            limit=_LIMIT,
            page=_PAGE,
        ),
        _list_files,
    ),
    ("slack_get_file_info", "Get file details.", _obj("file_id", file_id=_str("File ID")), _get_file_info),
    ("slack_delete_file", "Delete a file.", _obj("file_id", file_id=_str("File ID")), _delete_file),
    (
        "slack_upload_file",
        "Upload text content as a file and share it in a channel.",
        _obj(
            "channel",
            "content",
            "filename",
            channel=_CHANNEL,
            content=_str("File content"),
            filename=_str("File name"),
            title=_str("Title (defaults to filename)"),
            initial_comment=_str("Message posted with the file"),
            thread_ts=_str("Share into this thread"),
        ),
        _upload_file,
    ),
    # reactions
    (
        "slack_add_reaction",
        "Add an emoji reaction to a message.",
        _obj("channel", "timestamp", "name", channel=_CHANNEL, timestamp=_TS, name=_str("Emoji name without colons")),
        _add_reaction,
    ),
    (
        "slack_remove_reaction",
        "Remove an emoji reaction from a message.",
        _obj("channel", "timestamp", "name", channel=_CHANNEL, timestamp=_TS, name=_str("Emoji name without colons")),
        _remove_reaction,
    ),
    (
        "slack_get_reactions",
        "Get reactions on a message.",
        _obj("channel", "timestamp", channel=_CHANNEL, timestamp=_TS),
        _get_reactions,
    ),
    (
        "slack_list_user_reactions",
        "List items a user reacted to (page counted).",
        _obj(user_id=_str("User ID (defaults to the token's user)"), limit=_LIMIT, page=_PAGE),
        _list_user_reactions,
    ),
    # search
    (
        "slack_search_messages",
        "Search messages (user token required).",
        _obj(
            "query",
            query=_str("Search query (supports in:, from:, before: modifiers)"),
            sort=_enum("Sort key", "score", "timestamp"),
            sort_dir=_enum("Sort direction", "asc", "desc"),
            limit=_LIMIT,
            highlight=_bool("Highlight matches"),
        ),
        _search_messages,
    ),
    (
        "slack_search_files",
        "Search files (user token required).",
        _obj(
            "query",
            query=_str("Search query"),
            sort=_enum("Sort key", "score", "timestamp"),
            sort_dir=_enum("Sort direction", "asc", "desc"),
            limit=_LIMIT,
            highlight=_bool("Highlight matches"),
        ),
        _search_files,
    ),
    (
        "slack_search_all",
        "Search messages and files together (user token required).",
        _obj(
            "query",
            query=_str("Search query"),
            sort=_enum("Sort key", "score", "timestamp"),
            sort_dir=_enum("Sort direction", "asc", "desc"),
            limit=_LIMIT,
            highlight=_bool("Highlight matches"),
        ),
        _search_all,
    ),
    # pins
    ("slack_add_pin", "Pin a message.", _obj("channel", "timestamp", channel=_CHANNEL, timestamp=_TS), _add_pin),
    ("slack_remove_pin", "Unpin a message.", _obj("channel", "timestamp", channel=_CHANNEL, timestamp=_TS), _remove_pin),
    ("slack_list_pins", "List pinned items in a channel.", _obj("channel", channel=_CHANNEL), _list_pins),
    # stars
    (
        "slack_add_star",
        "Star a message or file.",
        _obj("channel", channel=_CHANNEL, timestamp=_TS, file_id=_str("File ID")),
        _add_star,
    ),
    (
        "slack_remove_star",
        "Remove a star.",
        _obj("channel", channel=_CHANNEL, timestamp=_TS, file_id=_str("File ID")),
        _remove_star,
    ),
    ("slack_list_stars", "List starred items (page counted).", _obj(limit=_LIMIT, page=_PAGE), _list_stars),
    # reminders
    (
        "slack_add_reminder",
        "Create a reminder.",
        _obj(
            "text",
            "time",
            text=_str("Reminder text"),
            time={"type": ["string", "integer"], "description": "Unix time, seconds from now, or natural language"},
            user_id=_str("Remind this user instead"),
        ),
        _add_reminder,
    ),
    ("slack_complete_reminder", "Mark a reminder complete.", _obj("reminder_id", reminder_id=_str("Reminder ID")), _complete_reminder),
    ("slack_delete_reminder", "Delete a reminder.", _obj("reminder_id", reminder_id=_str("Reminder ID")), _delete_reminder),
    ("slack_get_reminder", "Get a reminder.", _obj("reminder_id", reminder_id=_str("Reminder ID")), _get_reminder),
    ("slack_list_reminders", "List reminders.", _obj(), _list_reminders),
    # bookmarks
    (
        "slack_add_bookmark",
        "Add a bookmark to a channel.",
        _obj(
            "channel_id",
            "title",
            channel_id=_CHANNEL,
            title=_str("Bookmark title"),
            type=_enum("Bookmark type", "link", "folder"),
            link=_str("URL"),
            emoji=_str("Emoji, e.g. :link:"),
        ),
        _add_bookmark,
    ),
    (
        "slack_edit_bookmark",
        "Edit a bookmark. Only supplied fields change.",
        _obj(
            "channel_id",
            "bookmark_id",
            channel_id=_CHANNEL,
            bookmark_id=_str("Bookmark ID"),
            title=_str("New title"),
            link=_str("New URL"),
            emoji=_str("New emoji"),
        ),
        _edit_bookmark,
    ),
    (
        "slack_remove_bookmark",
        "Remove a bookmark.",
        _obj("channel_id", "bookmark_id", channel_id=_CHANNEL, bookmark_id=_str("Bookmark ID")),
        _remove_bookmark,
    ),
    ("slack_list_bookmarks", "List channel bookmarks.", _obj("channel_id", channel_id=_CHANNEL), _list_bookmarks),
    # usergroups
    (
        "slack_list_usergroups",
        "List user groups.",
        _obj(include_users=_bool("Include member IDs"), include_disabled=_bool("Include disabled groups")),
        _list_usergroups,
    ),
    (
        "slack_create_usergroup",
        "Create a user group.",
        _obj(
            "name",
            name=_str("Group name"),
            handle=_str("Mention handle"),
            description=_str("Description"),
            channels=_ids("Default channel IDs"),
        ),
        _create_usergroup,
    ),
    (
        "slack_update_usergroup",
        "Update a user group. Only supplied fields change; an empty description clears it.",
        _obj(
            "usergroup_id",
            usergroup_id=_str("User group ID"),
            name=_str("Group name"),
            handle=_str("Mention handle"),
            description=_str("Description"),
            channels=_ids("Default channel IDs"),
        ),
        _update_usergroup,
    ),
    ("slack_disable_usergroup", "Disable a user group.", _obj("usergroup_id", usergroup_id=_str("User group ID")), _disable_usergroup),
    ("slack_enable_usergroup", "Enable a user group.", _obj("usergroup_id", usergroup_id=_str("User group ID")), _enable_usergroup),
    (
        "slack_get_usergroup_members",
        "List member IDs of a user group.",
        _obj("usergroup_id", usergroup_id=_str("User group ID")),
        _get_usergroup_members,
    ),
    (
        "slack_update_usergroup_members",
        "Replace the members of a user group.",
        _obj("usergroup_id", "user_ids", usergroup_id=_str("User group ID"), user_ids=_ids("User IDs")),
        _update_usergroup_members,
    ),
    # team
    ("slack_get_team_info", "Get workspace details.", _obj(), _get_team_info),
    (
        "slack_get_billable_info",
        "Get billing status per user.",
        _obj(user_id=_str("Limit to one user")),
        _get_billable_info,
    ),
    # dnd
    ("slack_get_dnd_info", "Get Do Not Disturb status.", _obj(user_id=_str("User ID")), _get_dnd_info),
    (
        "slack_set_dnd_snooze",
        "Turn on Do Not Disturb for a number of minutes.",
        _obj("num_minutes", num_minutes=_int("Minutes to snooze", minimum=1)),
        _set_dnd_snooze,
    ),
    ("slack_end_dnd_snooze", "End the current snooze.", _obj(), _end_dnd_snooze),
    ("slack_end_dnd", "End the current Do Not Disturb session.", _obj(), _end_dnd),
    # emoji
    ("slack_list_emoji", "List custom emoji.", _obj(), _list_emoji),
]


def _wrap(name: str, handler: Handler, dispatcher: RequestDispatcher | None) -> ToolFn:
    def _fn(credentials: Credentials, args: dict[str, Any]) -> dict[str, Any]:
        client = create_slack_client(credentials, dispatcher=dispatcher)
        try:
            result = handler(client, dict(args or {}))
        except ClassifiedError as e:
            log.info(
                "slack_tool_failed",
                tool_name=name,
                kind=e.kind.value,
                remote_code=e.remote_code,
                retryable=e.retryable,
            )
            return {"ok": False, "error": render_error(e), "details": error_details(e)}
        return _clip({"ok": True, "result": to_jsonable(result)})

    _fn.__name__ = f"{name}_tool"
    return _fn


def build_slack_tools(*, dispatcher: RequestDispatcher | None = None) -> ToolRegistryImpl:
    """Registry with every slack_* tool; `dispatcher` is shared by all tools."""
    return ToolRegistryImpl(
        (name, tool_def(name, description, parameters), _wrap(name, handler, dispatcher))
        for name, description, parameters, handler in SLACK_TOOLS
    )


_global_registry: ToolRegistryImpl | None = None


def get_slack_registry() -> ToolRegistryImpl:
    """Process-wide registry built with the default dispatcher."""
    global _global_registry
    if _global_registry is None:
        _global_registry = build_slack_tools()
    return _global_registry


def invoke(
    name: str,
    args: dict[str, Any] | None,
    credentials: Credentials,
    *,
    registry: ToolRegistryImpl | None = None,
) -> dict[str, Any]:
    """
    Run one tool by name with the caller's credentials.

    Raises ValueError for an unknown tool; remote failures come back as
    {"ok": False, "error": ..., "details": ...}.
    """
    reg = registry or get_slack_registry()
    entry = reg.get_tool(name)
    if entry is None:
        raise ValueError(f"Unknown tool: {name}")
    _, fn = entry

    token = bind_request_id()
    try:
        log.debug("slack_tool_invoked", tool_name=name)
        return fn(credentials, dict(args or {}))
    finally:
        reset_request_id(token)
