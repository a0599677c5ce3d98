from __future__ import annotations


def test_users_list_info_and_lookup(slack_api, client):
    slack_api.reply(
        "users.list",
        {"ok": True, "members": [{"id": "U1", "profile": {"email": "a@x.io"}}], "response_metadata": {}},
    )
    slack_api.reply("users.lookupByEmail", {"ok": True, "user": {"id": "U1", "name": "ann"}})

    page = client.users.list(limit=1)
    assert page.items[0].profile.email == "a@x.io"
    assert page.has_more is False

    assert client.users.by_email("a@x.io").name == "ann"
    assert slack_api.last("users.lookupByEmail")["json"] == {"email": "a@x.io"}


def test_users_presence_reads_top_level_fields(slack_api, client):
    slack_api.reply(
        "users.getPresence",
        {"ok": True, "presence": "away", "online": False, "auto_away": True},
    )

    p = client.users.presence("U1")

    assert p.presence == "away"
    assert p.auto_away is True
    client.users.set_presence("auto")
    assert slack_api.last("users.setPresence")["json"] == {"presence": "auto"}


def test_users_conversations_default_types(slack_api, client):
    slack_api.reply("users.conversations", {"ok": True, "channels": [{"id": "D1", "is_im": True}]})

    page = client.users.conversations()

    assert page.items[0].is_im is True
    assert slack_api.last("users.conversations")["json"] == {
        "types": "public_channel,private_channel,mpim,im",
        "exclude_archived": True,
        "limit": 100,
    }


def test_reactions_get_splits_message_and_reactions(slack_api, client):
    slack_api.reply(
        "reactions.get",
        {
            "ok": True,
            "type": "message",
            "message": {"ts": "1.1", "reactions": [{"name": "tada", "count": 2, "users": ["U1", "U2"]}]},
        },
    )

    message, reactions = client.reactions.get("C1", "1.1")

    assert message.ts == "1.1"
    assert [(r.name, r.count) for r in reactions] == [("tada", 2)]
    assert slack_api.last("reactions.get")["json"] == {"channel": "C1", "timestamp": "1.1", "full": True}


def test_reactions_list_is_page_counted(slack_api, client):
    slack_api.reply(
        "reactions.list",
        {"ok": True, "items": [{"type": "message", "channel": "C1"}], "paging": {"page": 2, "pages": 2}},
    )

    page = client.reactions.list("U1", page=2)

    assert page.items[0].type == "message"
    assert page.has_more is False
    assert slack_api.last("reactions.list")["json"] == {"user": "U1", "count": 100, "page": 2, "full": True}


def test_search_defaults_and_all(slack_api, client):
    slack_api.reply(
        "search.all",
        {
            "ok": True,
            "messages": {"total": 1, "matches": [{"ts": "1.1"}]},
            "files": {"total": 0, "matches": []},
        },
    )

    messages, files = client.search.all("in:#general deploy")

    assert messages.total == 1
    assert files.total == 0
    assert slack_api.last("search.all")["json"] == {
        "query": "in:#general deploy",
        "sort": "timestamp",
        "sort_dir": "desc",
        "count": 20,
    }


def test_search_messages_passes_options(slack_api, client):
    slack_api.reply("search.messages", {"ok": True, "messages": {"total": 3, "matches": []}})

    res = client.search.messages("hello", sort="score", sort_dir="asc", limit=5, highlight=True)

    assert res.total == 3
    body = slack_api.last("search.messages")["json"]
    assert body["sort"] == "score"
    assert body["count"] == 5
    assert body["highlight"] is True


def test_pins_and_stars(slack_api, client):
    slack_api.reply("pins.list", {"ok": True, "items": [{"type": "message", "created_by": "U1"}]})
    slack_api.reply(
        "stars.list",
        {"ok": True, "items": [{"type": "file", "file": {"id": "F1"}}], "paging": {"page": 1, "pages": 2}},
    )

    client.pins.add("C1", "1.1")
    assert client.pins.list("C1")[0].created_by == "U1"
    client.stars.add("C1", file="F1")
    page = client.stars.list(limit=10)

    assert page.items[0].file.id == "F1"
    assert page.has_more is True
    assert slack_api.last("stars.add")["json"] == {"channel": "C1", "file": "F1"}
    assert slack_api.last("stars.list")["json"] == {"count": 10}


def test_reminders(slack_api, client):
    slack_api.reply("reminders.add", {"ok": True, "reminder": {"id": "Rm1", "text": "stand-up", "time": 1700000000}})
    slack_api.reply("reminders.list", {"ok": True, "reminders": [{"id": "Rm1"}, {"id": "Rm2"}]})

    r = client.reminders.add("stand-up", "in 15 minutes")
    assert r.id == "Rm1"
    assert [x.id for x in client.reminders.list()] == ["Rm1", "Rm2"]
    client.reminders.complete("Rm1")

    assert slack_api.last("reminders.add")["json"] == {"text": "stand-up", "time": "in 15 minutes"}
    assert slack_api.last("reminders.complete")["json"] == {"reminder": "Rm1"}


def test_bookmark_edit_sends_only_supplied_fields(slack_api, client):
    slack_api.reply("bookmarks.edit", {"ok": True, "bookmark": {"id": "Bk1", "title": "Docs"}})

    client.bookmarks.edit("C1", "Bk1", emoji="")

    assert slack_api.last("bookmarks.edit")["json"] == {
        "channel_id": "C1",
        "bookmark_id": "Bk1",
        "emoji": "",
    }


def test_bookmark_add_and_list(slack_api, client):
    slack_api.reply("bookmarks.add", {"ok": True, "bookmark": {"id": "Bk1", "title": "Docs"}})
    slack_api.reply("bookmarks.list", {"ok": True, "bookmarks": [{"id": "Bk1"}]})

    assert client.bookmarks.add("C1", "Docs", link="https://docs.test").id == "Bk1"
    assert len(client.bookmarks.list("C1")) == 1
    assert slack_api.last("bookmarks.add")["json"] == {
        "channel_id": "C1",
        "title": "Docs",
        "type": "link",
        "link": "https://docs.test",
    }


def test_usergroups(slack_api, client):
    slack_api.reply("usergroups.create", {"ok": True, "usergroup": {"id": "S1", "name": "oncall"}})
    slack_api.reply("usergroups.update", {"ok": True, "usergroup": {"id": "S1", "description": ""}})
    slack_api.reply("usergroups.users.list", {"ok": True, "users": ["U1", "U2"]})
    slack_api.reply("usergroups.users.update", {"ok": True, "usergroup": {"id": "S1", "user_count": 2}})

    client.usergroups.create("oncall", handle="oncall", channels=["C1", "C2"])
    client.usergroups.update("S1", description="")
    assert client.usergroups.members("S1") == ["U1", "U2"]
    assert client.usergroups.update_members("S1", ["U1", "U2"]).user_count == 2

    assert slack_api.last("usergroups.create")["json"] == {
        "name": "oncall",
        "handle": "oncall",
        "channels": "C1,C2",
    }
    assert slack_api.last("usergroups.update")["json"] == {"usergroup": "S1", "description": ""}
    assert slack_api.last("usergroups.users.update")["json"]["users"] == "U1,U2"


def test_team_and_emoji(slack_api, client):
    slack_api.reply("team.info", {"ok": True, "team": {"id": "T1", "domain": "acme"}})
    slack_api.reply(
        "team.billableInfo",
        {"ok": True, "billable_info": {"U1": {"billing_active": True}, "U2": "junk"}},
    )
    slack_api.reply("emoji.list", {"ok": True, "emoji": {"party": "https://e.test/p.gif"}, "cache_ts": "1.0"})

    assert client.team.info().domain == "acme"
    assert client.team.billable_info() == {"U1": {"billing_active": True}}
    emoji = client.emoji.list()
    assert emoji.emoji["party"].endswith("p.gif")
    assert emoji.cache_ts == "1.0"


def test_test_connection_folds_errors(slack_api, client):
    slack_api.reply("auth.test", {"ok": False, "error": "invalid_auth"})

    st = client.test_connection()

    assert st.connected is False
    assert st.message == "Slack API error: invalid_auth"


def test_test_connection_success(slack_api, client):
    slack_api.reply("auth.test", {"ok": True, "team": "Acme", "user": "bot"})

    st = client.test_connection()

    assert st.connected is True
    assert st.team == "Acme"
    assert st.user == "bot"
