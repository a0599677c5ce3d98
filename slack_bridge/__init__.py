from __future__ import annotations

from .slack.client import SlackClient, create_slack_client
from .slack.credentials import Credentials, MissingCredentials
from .slack.errors import ClassifiedError, ErrorKind
from .slack.pagination import PaginatedResult

__all__ = [
    "ClassifiedError",
    "Credentials",
    "ErrorKind",
    "MissingCredentials",
    "PaginatedResult",
    "SlackClient",
    "create_slack_client",
]
