from __future__ import annotations

import json
import logging

import pytest
import structlog


@pytest.fixture
def json_logging(monkeypatch):
    from slack_bridge.observability import logging as obs_logging

    root = logging.getLogger()
    saved = (list(root.handlers), root.level)
    monkeypatch.setattr(obs_logging, "_CONFIGURED", False)
    try:
        yield obs_logging
    finally:
        root.handlers = saved[0]
        root.setLevel(saved[1])
        structlog.reset_defaults()


def test_configure_logging_emits_json_with_request_id(json_logging, capsys):
    from slack_bridge.observability.context import bind_request_id, reset_request_id

    json_logging.configure_logging(level="INFO")

    token = bind_request_id("req-123")
    try:
        json_logging.get_logger("slack").info("slack_test_event", method="auth.test")
    finally:
        reset_request_id(token)

    lines = [ln for ln in capsys.readouterr().out.splitlines() if "slack_test_event" in ln]
    assert lines
    rec = json.loads(lines[-1])
    assert rec["event"] == "slack_test_event"
    assert rec["method"] == "auth.test"
    assert rec["request_id"] == "req-123"
    assert rec["level"] == "info"
    assert rec["logger"] == "slack"
    assert logging.getLogger("httpx").level == logging.WARNING


def test_configure_logging_is_idempotent(json_logging, capsys):
    json_logging.configure_logging(level="INFO")
    handlers = list(logging.getLogger().handlers)

    json_logging.configure_logging(level="DEBUG")

    assert logging.getLogger().handlers == handlers
