"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    application_id: str | None = None
    event_type: str
    message: str
    payload: dict[str, Any] = Field(default_factory=dict)
    is_read: bool = False
    created_at: datetime
    read_at: datetime | None = None


class NotificationCreateRequest(BaseModel):
    """Client-side request to raise a notification for another user."""

    receiver_user_id: str | None = Field(default=None, alias="receiverUserId")
    type: str | None = None
    message: str | None = None
    meta: dict[str, Any] = Field(default_factory=dict)


class NotificationAck(BaseModel):
    ok: bool = True


class UnreadCount(BaseModel):
    unread: int = 0


__all__ = [
    "NotificationAck",
    "NotificationCreateRequest",
    "NotificationRead",
    "UnreadCount",
]
