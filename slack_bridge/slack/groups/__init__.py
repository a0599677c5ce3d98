from __future__ import annotations

from .auth import AuthOperations
from .bookmarks import BookmarkOperations
from .conversations import ConversationOperations
from .dnd import DndOperations
from .emoji import EmojiOperations
from .files import FileOperations
from .messages import MessageOperations
from .pins import PinOperations
from .reactions import ReactionOperations
from .reminders import ReminderOperations
from .search import SearchOperations
from .stars import StarOperations
from .team import TeamOperations
from .usergroups import UserGroupOperations
from .users import UserOperations

__all__ = [
    "AuthOperations",
    "BookmarkOperations",
    "ConversationOperations",
    "DndOperations",
    "EmojiOperations",
    "FileOperations",
    "MessageOperations",
    "PinOperations",
    "ReactionOperations",
    "ReminderOperations",
    "SearchOperations",
    "StarOperations",
    "TeamOperations",
    "UserGroupOperations",
    "UserOperations",
]
