"""Storage for per-user notifications."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy import func, select, update
from sqlalchemy.orm import Query, Session

from jobboard.domain.entities import Notification
from jobboard.infrastructure.models import NotificationModel
from jobboard.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_naive_datetime,
)

from .errors import upstream_guard

_MESSAGE_EVENT_PREFIX = "message."


class NotificationRepository:
    """Notifications are append-only apart from their read flag."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def _owned_by(self, user_id: int, *, unread_only: bool = False) -> Query:
        query = self.session.query(NotificationModel).filter(
            NotificationModel.user_id == user_id
        )
        if unread_only:
            query = query.filter(NotificationModel.is_read.is_(False))
        return query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )

    def list_for_user(
        self, user_id: int, *, limit: int | None = None
    ) -> Sequence[Notification]:
        """Newest first; equal timestamps keep the latest insert on top."""

        query = self._owned_by(user_id)
        if limit is not None:
            query = query.limit(limit)
        with upstream_guard(self.session, "list notifications"):
            rows = query.all()
        return [self._to_entity(row) for row in rows]

    def list_unread_for_user(
        self, user_id: int, *, limit: int | None = 50
    ) -> Sequence[Notification]:
        query = self._owned_by(user_id, unread_only=True)
        if limit is not None:
            query = query.limit(limit)
        with upstream_guard(self.session, "list unread notifications"):
            rows = query.all()
        return [self._to_entity(row) for row in rows]

    def count_unread(self, user_id: int) -> int:
        statement = select(func.count(NotificationModel.id)).where(
            NotificationModel.user_id == user_id,
            NotificationModel.is_read.is_(False),
        )
        with upstream_guard(self.session, "count unread notifications"):
            return int(self.session.execute(statement).scalar_one())

    def create(self, notification: Notification) -> Notification:
        row = NotificationModel(
            user_id=notification.user_id,
            application_id=notification.application_id,
            event_type=notification.event_type,
            message=notification.message,
            payload=dict(notification.payload or {}),
            is_read=notification.is_read,
            created_at=ensure_app_naive_datetime(notification.created_at)
            or now_in_app_naive_datetime(),
            read_at=ensure_app_naive_datetime(notification.read_at),
        )
        with upstream_guard(self.session, "create a notification"):
            self.session.add(row)
            self.session.commit()
            self.session.refresh(row)
        return self._to_entity(row)

    def mark_as_read(self, notification_id: int, *, user_id: int) -> Notification | None:
        """Flip the read flag of a notification owned by ``user_id``.

        ``None`` means the user owns no such notification. A notification that
        is already read keeps its original ``read_at``.
        """

        with upstream_guard(self.session, "mark a notification as read"):
            row = (
                self._owned_by(user_id)
                .filter(NotificationModel.id == notification_id)
                .one_or_none()
            )
            if row is None:
                return None
            if not row.is_read:
                row.is_read = True
                row.read_at = now_in_app_naive_datetime()
                self.session.commit()
                self.session.refresh(row)
        return self._to_entity(row)

    def mark_many_as_read(self, notification_ids: Iterable[int], *, user_id: int) -> int:
        """Acknowledge several notifications at once and return how many changed."""

        ids = [value for value in notification_ids if value is not None]
        if not ids:
            return 0
        statement = (
            update(NotificationModel)
            .where(
                NotificationModel.id.in_(ids),
                NotificationModel.user_id == user_id,
                NotificationModel.is_read.is_(False),
            )
            .values(is_read=True, read_at=now_in_app_naive_datetime())
            .execution_options(synchronize_session=False)
        )
        with upstream_guard(self.session, "mark notifications as read"):
            result = self.session.execute(statement)
            self.session.commit()
        return result.rowcount or 0

    def count_unread_by_conversation(self, user_id: int) -> dict[str, int]:
        """Unread ``message.*`` notifications keyed by ``payload["conversation_id"]``."""

        counts: dict[str, int] = {}
        for notification in self.list_unread_for_user(user_id, limit=None):
            if not notification.event_type.startswith(_MESSAGE_EVENT_PREFIX):
                continue
            conversation_id = (notification.payload or {}).get("conversation_id")
            if isinstance(conversation_id, str) and conversation_id:
                counts[conversation_id] = counts.get(conversation_id, 0) + 1
        return counts

    @staticmethod
    def _to_entity(row: NotificationModel) -> Notification:
        return Notification(
            id=row.id,
            user_id=row.user_id,
            message=row.message,
            event_type=row.event_type,
            application_id=row.application_id,
            payload=dict(row.payload or {}),
            is_read=bool(row.is_read),
            created_at=ensure_app_timezone(row.created_at),
            read_at=ensure_app_timezone(row.read_at),
        )


__all__ = ["NotificationRepository"]
