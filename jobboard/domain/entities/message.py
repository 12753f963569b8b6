"""Domain entity representing a chat message."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class Message:
    """One line of a two-party conversation. Immutable once stored."""

    id: int | None
    conversation_id: str
    participants: list[str]
    sender: str
    text: str
    meta: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None


__all__ = ["Message"]
