"""Use case for deleting a whole conversation."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from jobboard.domain.entities import CallerIdentity
from jobboard.infrastructure.repositories import MessageRepository

from .access import ensure_participant
from .validators import ensure_conversation_id

logger = logging.getLogger(__name__)


def delete_conversation(
    session: Session,
    conversation_id: str,
    *,
    caller: CallerIdentity | None = None,
) -> int:
    """Remove every message of ``conversation_id``; succeeds when none exist."""

    conversation_id = ensure_conversation_id(conversation_id)
    repository = MessageRepository(session)
    ensure_participant(repository, conversation_id, caller)
    deleted = repository.delete_conversation(conversation_id)
    logger.info("Deleted %s messages from conversation %s", deleted, conversation_id)
    return deleted


__all__ = ["delete_conversation"]
