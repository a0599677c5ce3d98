from __future__ import annotations

from ...observability.logging import get_logger
from ..entities import ConnectionStatus
from ..errors import ClassifiedError
from .base import OperationGroup


log = get_logger("slack.auth")


class AuthOperations(OperationGroup):
    def test_connection(self) -> ConnectionStatus:
        """
        Probe the supplied token with auth.test.

        Failures are reported as connected=False instead of raising.
        """
        try:
            data = self._api.call("auth.test")
        except ClassifiedError as e:
            log.info("slack_connection_test_failed", kind=e.kind.value, remote_code=e.remote_code)
            return ConnectionStatus(connected=False, message=e.message)
        return ConnectionStatus(
            connected=True,
            message="Successfully connected to Slack",
            team=data.get("team"),
            user=data.get("user"),
        )
