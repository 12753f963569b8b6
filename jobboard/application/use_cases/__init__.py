"""Aggregate application use cases."""

from .conversations import list_conversations
from .messages import delete_conversation, list_conversation_messages, send_message, share_attachment
from .notifications import list_notifications, mark_notification_read

__all__ = [
    "delete_conversation",
    "list_conversation_messages",
    "list_conversations",
    "list_notifications",
    "mark_notification_read",
    "send_message",
    "share_attachment",
]
