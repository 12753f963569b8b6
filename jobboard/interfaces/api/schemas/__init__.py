from .message import (
    AttachmentShareCreate,
    ConversationList,
    ConversationRead,
    DeleteConversationResponse,
    MessageCreate,
    MessageRead,
)
from .notification import (
    NotificationAck,
    NotificationCreateRequest,
    NotificationRead,
    UnreadCount,
)

__all__ = [
    "AttachmentShareCreate",
    "ConversationList",
    "ConversationRead",
    "DeleteConversationResponse",
    "MessageCreate",
    "MessageRead",
    "NotificationAck",
    "NotificationCreateRequest",
    "NotificationRead",
    "UnreadCount",
]
