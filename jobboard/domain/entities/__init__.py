"""Domain entities exposed by the application."""

from .conversation import ConversationSummary
from .message import Message
from .notification import Notification
from .user import CallerIdentity, User

__all__ = [
    "CallerIdentity",
    "ConversationSummary",
    "Message",
    "Notification",
    "User",
]
