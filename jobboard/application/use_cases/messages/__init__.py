"""Use cases for sending, reading and deleting chat messages."""

from .delete_conversation import delete_conversation
from .list_messages import list_conversation_messages
from .send_message import send_message
from .share_attachment import share_attachment

__all__ = [
    "delete_conversation",
    "list_conversation_messages",
    "send_message",
    "share_attachment",
]
