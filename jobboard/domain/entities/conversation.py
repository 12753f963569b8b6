"""Read-side view of a conversation computed from its messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class ConversationSummary:
    """Latest state of a conversation as seen by one participant.

    Nothing here is persisted: the summary exists only while at least one
    message carries ``id`` as its conversation id.
    """

    id: str
    last_message: str
    last_at: datetime | None
    participants: list[str] = field(default_factory=list)
    name: str = ""
    other_role: str | None = None
    avatar: str | None = None
    img: str | None = None
    unread_count: int = 0


__all__ = ["ConversationSummary"]
