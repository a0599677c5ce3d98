from __future__ import annotations


def test_info_projects_status(slack_api, client):
    slack_api.reply(
        "dnd.info",
        {
            "ok": True,
            "dnd_enabled": True,
            "next_dnd_start_ts": 1,
            "next_dnd_end_ts": 2,
            "snooze_enabled": False,
        },
    )

    st = client.dnd.info("U1")

    assert st.dnd_enabled is True
    assert st.next_dnd_end_ts == 2
    assert st.snooze_enabled is False
    assert slack_api.last("dnd.info")["json"] == {"user": "U1"}


def test_set_snooze_returns_status_with_dnd_enabled(slack_api, client):
    slack_api.reply(
        "dnd.setSnooze",
        {"ok": True, "snooze_enabled": True, "snooze_endtime": 1700003600, "snooze_remaining": 3600},
    )

    st = client.dnd.set_snooze(60)

    assert st.dnd_enabled is True
    assert st.snooze_enabled is True
    assert st.snooze_remaining == 3600
    assert slack_api.last("dnd.setSnooze")["json"] == {"num_minutes": 60}


def test_set_snooze_without_minutes_omits_the_field(slack_api, client):
    slack_api.reply("dnd.setSnooze", {"ok": True, "snooze_enabled": True})

    st = client.dnd.set_snooze()

    assert st.dnd_enabled is True
    assert slack_api.last("dnd.setSnooze")["json"] == {}


def test_end_snooze_forces_snooze_disabled(slack_api, client):
    slack_api.reply("dnd.endSnooze", {"ok": True, "dnd_enabled": True, "snooze_enabled": True})

    st = client.dnd.end_snooze()

    assert st.snooze_enabled is False
    assert st.dnd_enabled is True


def test_legacy_pair_returns_nothing_and_ends_whole_session(slack_api, client):
    slack_api.reply("dnd.setSnooze", {"ok": True, "snooze_enabled": True})

    assert client.dnd.set_dnd(30) is None
    assert client.dnd.end_dnd() is None

    assert slack_api.methods() == ["dnd.setSnooze", "dnd.endDnd"]
