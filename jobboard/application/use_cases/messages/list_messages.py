"""Use case for reading the messages of one conversation."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from jobboard.domain.entities import CallerIdentity, Message
from jobboard.infrastructure.repositories import MessageRepository

from .access import ensure_participant
from .validators import ensure_conversation_id, resolve_limit


def list_conversation_messages(
    session: Session,
    conversation_id: str,
    *,
    limit: int | None = None,
    caller: CallerIdentity | None = None,
) -> Sequence[Message]:
    """Return up to ``limit`` messages in chronological order."""

    conversation_id = ensure_conversation_id(conversation_id)
    repository = MessageRepository(session)
    ensure_participant(repository, conversation_id, caller)
    return repository.list_by_conversation(conversation_id, limit=resolve_limit(limit))


__all__ = ["list_conversation_messages"]
