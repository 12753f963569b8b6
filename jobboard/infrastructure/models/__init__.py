"""ORM models used by the application infrastructure."""

from .message import MessageModel, MessageParticipantModel
from .notification import NotificationModel
from .user import UserModel

__all__ = [
    "MessageModel",
    "MessageParticipantModel",
    "NotificationModel",
    "UserModel",
]
