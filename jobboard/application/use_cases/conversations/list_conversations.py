"""Use case building the conversation list of the current user."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.domain.conversation import other_participant
from jobboard.domain.entities import CallerIdentity, ConversationSummary
from jobboard.domain.errors import MessagingError
from jobboard.infrastructure.repositories import (
    MessageRepository,
    NotificationRepository,
    UserRepository,
)

from .enrichment import describe_peer

logger = logging.getLogger(__name__)

_UNKNOWN_PEER = "unknown@example.com"


def list_conversations(
    session: Session, caller: CallerIdentity
) -> list[ConversationSummary]:
    """Return one summary per conversation the caller takes part in."""

    identifiers = caller.identifiers
    if not identifiers:
        return []

    latest = MessageRepository(session).list_latest_per_conversation(identifiers)
    unread = _unread_by_conversation(session, caller)
    users = UserRepository(session)

    summaries: list[ConversationSummary] = []
    for message in latest:
        peer = other_participant(message.participants, identifiers) or _UNKNOWN_PEER
        display = describe_peer(users, peer)
        summaries.append(
            ConversationSummary(
                id=message.conversation_id,
                last_message=message.text or "",
                last_at=message.created_at,
                participants=list(message.participants),
                name=display.name,
                other_role=display.role,
                avatar=display.avatar,
                img=display.img,
                unread_count=unread.get(message.conversation_id, 0),
            )
        )
    return summaries


def _unread_by_conversation(session: Session, caller: CallerIdentity) -> dict[str, int]:
    if caller.user_id is None:
        return {}
    try:
        return NotificationRepository(session).count_unread_by_conversation(caller.user_id)
    except (MessagingError, SQLAlchemyError) as exc:
        logger.debug("Unread counters unavailable for %s: %s", caller.id, exc)
        session.rollback()
        return {}


__all__ = ["list_conversations"]
