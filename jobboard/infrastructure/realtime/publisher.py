"""Utility helpers to push messages and notifications to websocket subscribers."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable

from anyio import from_thread

from jobboard.domain.entities import Message, Notification

from .manager import RealtimeConnectionManager, realtime_manager

logger = logging.getLogger(__name__)


class RealtimePublisher:
    """Serialize domain objects and schedule their delivery.

    Delivery is best effort: clients that miss a push pick the change up on
    their next poll.
    """

    def __init__(self, manager: RealtimeConnectionManager) -> None:
        self._manager = manager

    def publish_message(self, message: Message) -> None:
        payload = {"type": "message", "data": serialize_message(message)}
        self._schedule(message.participants, payload)

    def publish_notification(self, notification: Notification) -> None:
        payload = {"type": "notification", "data": serialize_notification(notification)}
        self._schedule([str(notification.user_id)], payload)

    def _schedule(self, identifiers: Iterable[str], message: dict[str, Any]) -> None:
        targets = [identifier for identifier in identifiers if self._manager.is_connected(identifier)]
        if not targets:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            try:
                from_thread.run(self._manager.send_to, targets, message)
            except RuntimeError as exc:
                # Not running inside an AnyIO worker thread (scripts, tests).
                logger.debug("Realtime push skipped: %s", exc)
        else:
            loop.create_task(self._manager.send_to(targets, message))


def serialize_message(message: Message) -> dict[str, Any]:
    """Return the JSON representation shared by REST responses and pushes."""

    return {
        "id": message.id,
        "conversationId": message.conversation_id,
        "participants": list(message.participants),
        "sender": message.sender,
        "text": message.text,
        "meta": message.meta or {},
        "createdAt": message.created_at.isoformat() if message.created_at else None,
    }


def serialize_notification(notification: Notification) -> dict[str, Any]:
    return {
        "id": notification.id,
        "user_id": notification.user_id,
        "application_id": notification.application_id,
        "event_type": notification.event_type,
        "message": notification.message,
        "payload": notification.payload or {},
        "is_read": notification.is_read,
        "created_at": notification.created_at.isoformat()
        if notification.created_at
        else None,
        "read_at": notification.read_at.isoformat() if notification.read_at else None,
    }


realtime_publisher = RealtimePublisher(realtime_manager)


def dispatch_message(message: Message) -> None:
    """Public helper that delegates to the shared publisher instance."""

    realtime_publisher.publish_message(message)


def dispatch_notification(notification: Notification) -> None:
    """Public helper that delegates to the shared publisher instance."""

    realtime_publisher.publish_notification(notification)


__all__ = [
    "RealtimePublisher",
    "realtime_publisher",
    "dispatch_message",
    "dispatch_notification",
    "serialize_message",
    "serialize_notification",
]
