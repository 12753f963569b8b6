"""Use case for appending a message to a conversation."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from jobboard.domain.entities import CallerIdentity, Message
from jobboard.domain.errors import ValidationError
from jobboard.infrastructure.realtime import dispatch_message
from jobboard.infrastructure.repositories import MessageRepository

from .access import ensure_can_post
from .validators import ensure_conversation_id, ensure_meta, ensure_participants, ensure_text

logger = logging.getLogger(__name__)


def send_message(
    session: Session,
    *,
    conversation_id: str,
    participants: list[str],
    sender: str,
    text: str,
    meta: dict[str, Any] | None = None,
    caller: CallerIdentity | None = None,
) -> Message:
    """Validate and persist a new message.

    When ``caller`` is given the message must be addressed to a
    conversation the caller belongs to. No notification is emitted for plain
    text messages; callers decide whether a send deserves one.
    """

    message = Message(
        id=None,
        conversation_id=ensure_conversation_id(conversation_id),
        participants=ensure_participants(participants),
        sender=(sender or "").strip().lower(),
        text=ensure_text(text),
        meta=ensure_meta(meta),
    )
    if not message.sender:
        raise ValidationError("sender is required")

    repository = MessageRepository(session)
    ensure_can_post(repository, message.conversation_id, message.participants, caller)

    saved = repository.append(message)
    logger.debug("Stored message %s in conversation %s", saved.id, saved.conversation_id)
    dispatch_message(saved)
    return saved


__all__ = ["send_message"]
