"""Public helpers for emitting and reading notifications."""

from .events import (
    APPLICATION_STATUSES,
    notify_application_status_changed,
    notify_attachment_shared,
)
from .read import (
    count_unread_notifications,
    list_notifications,
    mark_notification_read,
)

__all__ = [
    "APPLICATION_STATUSES",
    "count_unread_notifications",
    "list_notifications",
    "mark_notification_read",
    "notify_application_status_changed",
    "notify_attachment_shared",
]
