"""Use cases for reading notifications and flipping their read flag."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from jobboard.domain.entities import Notification
from jobboard.domain.errors import NotFoundError
from jobboard.infrastructure.repositories import NotificationRepository


def list_notifications(session: Session, user_id: int) -> Sequence[Notification]:
    """Return every notification of ``user_id``, newest first."""

    return NotificationRepository(session).list_for_user(user_id)


def count_unread_notifications(session: Session, user_id: int) -> int:
    return NotificationRepository(session).count_unread(user_id)


def mark_notification_read(
    session: Session, notification_id: int, *, user_id: int
) -> Notification:
    """Mark a notification as read.

    Only the owner may do so; unknown ids and other users' notifications are
    reported the same way. Marking twice is harmless.
    """

    notification = NotificationRepository(session).mark_as_read(
        notification_id, user_id=user_id
    )
    if notification is None:
        raise NotFoundError("Notificación no encontrada")
    return notification


__all__ = [
    "count_unread_notifications",
    "list_notifications",
    "mark_notification_read",
]
