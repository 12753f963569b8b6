"""Validation helpers for message use cases."""

from __future__ import annotations

from typing import Any

from jobboard.config import get_settings
from jobboard.domain.conversation import normalize_participants
from jobboard.domain.errors import ValidationError

_REQUIRED_FIELDS_MESSAGE = "conversationId, participants[>=2], and text are required"


def ensure_conversation_id(conversation_id: object) -> str:
    """Return the stripped conversation id or raise ``ValidationError``."""

    if not isinstance(conversation_id, str) or not conversation_id.strip():
        raise ValidationError(_REQUIRED_FIELDS_MESSAGE)
    return conversation_id.strip()


def ensure_participants(participants: object) -> list[str]:
    """Return normalized participants, requiring at least two distinct entries."""

    if not isinstance(participants, (list, tuple)):
        raise ValidationError(_REQUIRED_FIELDS_MESSAGE)
    normalized = normalize_participants(participants)
    if len(normalized) < 2:
        raise ValidationError(_REQUIRED_FIELDS_MESSAGE)
    return normalized


def ensure_text(text: object) -> str:
    if not isinstance(text, str) or not text.strip():
        raise ValidationError(_REQUIRED_FIELDS_MESSAGE)
    return text


def ensure_meta(meta: object) -> dict[str, Any]:
    if meta is None:
        return {}
    if not isinstance(meta, dict):
        raise ValidationError("meta must be an object")
    return dict(meta)


def resolve_limit(limit: int | None) -> int:
    """Apply the default and the maximum to a requested page size."""

    settings = get_settings()
    if limit is None or limit <= 0:
        return settings.message_list_default_limit
    return min(limit, settings.message_list_max_limit)


__all__ = [
    "ensure_conversation_id",
    "ensure_meta",
    "ensure_participants",
    "ensure_text",
    "resolve_limit",
]
