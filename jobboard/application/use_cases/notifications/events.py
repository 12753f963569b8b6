"""Utility helpers to generate and dispatch domain notifications."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from jobboard.domain.entities import Message, Notification
from jobboard.domain.errors import ValidationError
from jobboard.infrastructure.realtime import dispatch_notification
from jobboard.infrastructure.repositories import NotificationRepository
from jobboard.utils import now_in_app_timezone

APPLICATION_STATUSES = ("pending", "reviewed", "accepted", "rejected")


def _persist_notification(
    session: Session,
    *,
    user_id: int,
    event_type: str,
    message: str,
    application_id: str | None = None,
    payload: dict[str, Any] | None = None,
) -> Notification:
    notification = Notification(
        id=None,
        user_id=user_id,
        message=message,
        event_type=event_type,
        application_id=application_id,
        payload=payload or {},
        is_read=False,
        created_at=now_in_app_timezone(),
    )
    saved = NotificationRepository(session).create(notification)
    dispatch_notification(saved)
    return saved


def notify_application_status_changed(
    session: Session,
    *,
    user_id: int,
    application_id: str,
    status: str,
    job_title: str | None = None,
    message: str | None = None,
) -> Notification:
    """Tell an applicant that an employer moved their application to ``status``."""

    if status not in APPLICATION_STATUSES:
        raise ValidationError("Invalid status")

    text = message or (
        f'Your application for "{job_title or "a job"}" has been updated to: {status}'
    )
    return _persist_notification(
        session,
        user_id=user_id,
        event_type="application.status",
        message=text,
        application_id=str(application_id),
        payload={"status": status, "job_title": job_title},
    )


def notify_attachment_shared(
    session: Session, *, user_id: int, message: Message
) -> Notification:
    """Alert ``user_id`` about files shared with them in a conversation."""

    return _persist_notification(
        session,
        user_id=user_id,
        event_type="message.attachment",
        message=message.text or "Shared attachment",
        payload={
            "conversation_id": message.conversation_id,
            "message_id": message.id,
            "sender": message.sender,
            "from_chat": True,
            "attachment": (message.meta or {}).get("attachment"),
        },
    )


__all__ = [
    "APPLICATION_STATUSES",
    "notify_application_status_changed",
    "notify_attachment_shared",
]
