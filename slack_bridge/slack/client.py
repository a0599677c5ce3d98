from __future__ import annotations

import httpx

from .credentials import Credentials
from .dispatcher import RequestDispatcher
from .entities import ConnectionStatus
from .groups import (
    AuthOperations,
    BookmarkOperations,
    ConversationOperations,
    DndOperations,
    EmojiOperations,
    FileOperations,
    MessageOperations,
    PinOperations,
    ReactionOperations,
    ReminderOperations,
    SearchOperations,
    StarOperations,
    TeamOperations,
    UserGroupOperations,
    UserOperations,
)
from .groups.base import Api


class SlackClient:
    """
    Typed facade over the Slack Web API for one tenant.

    Operations are grouped by capability:

        client = create_slack_client(Credentials(primary_token="xoxb-..."))
        page = client.conversations.list(limit=50)
        client.messages.post(page.items[0].id, "hello")

    The client holds no mutable state; it can be shared freely, and a call
    made with missing credentials fails with MissingCredentials at call time.
    """

    def __init__(self, credentials: Credentials, *, dispatcher: RequestDispatcher | None = None):
        self._api = Api(dispatcher=dispatcher or RequestDispatcher(), credentials=credentials)

        self.auth = AuthOperations(self._api)
        self.conversations = ConversationOperations(self._api)
        self.messages = MessageOperations(self._api)
        self.users = UserOperations(self._api)
        self.files = FileOperations(self._api)
        self.reactions = ReactionOperations(self._api)
        self.search = SearchOperations(self._api)
        self.pins = PinOperations(self._api)
        self.stars = StarOperations(self._api)
        self.reminders = ReminderOperations(self._api)
        self.bookmarks = BookmarkOperations(self._api)
        self.usergroups = UserGroupOperations(self._api)
        self.team = TeamOperations(self._api)
        self.dnd = DndOperations(self._api)
        self.emoji = EmojiOperations(self._api)

    @property
    def credentials(self) -> Credentials:
        return self._api.credentials

    def test_connection(self) -> ConnectionStatus:
        return self.auth.test_connection()

    def __repr__(self) -> str:
        return f"SlackClient(credentials={self._api.credentials!r}, base_url={self._api.dispatcher.base_url!r})"


def create_slack_client(
    credentials: Credentials,
    *,
    dispatcher: RequestDispatcher | None = None,
    base_url: str | None = None,
    timeout_s: float | None = None,
    transport: httpx.BaseTransport | None = None,
) -> SlackClient:
    """Build a client for one tenant's credentials."""
    if dispatcher is None:
        dispatcher = RequestDispatcher(base_url=base_url, timeout_s=timeout_s, transport=transport)
    return SlackClient(credentials, dispatcher=dispatcher)
