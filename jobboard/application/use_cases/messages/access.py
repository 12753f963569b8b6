"""Participant checks shared by conversation reads, writes and deletes."""

from __future__ import annotations

from jobboard.domain.conversation import derive_conversation_id
from jobboard.domain.entities import CallerIdentity
from jobboard.domain.errors import ForbiddenError, ValidationError
from jobboard.infrastructure.repositories import MessageRepository


def ensure_participant(
    repository: MessageRepository, conversation_id: str, caller: CallerIdentity | None
) -> None:
    """Reject callers that are not part of an existing conversation.

    Conversations without messages pass so that deleting them stays
    idempotent.
    """

    if caller is None:
        return
    participants = repository.get_participants(conversation_id)
    if participants and not participants & caller.identifiers:
        raise ForbiddenError("No autorizado")


def ensure_can_post(
    repository: MessageRepository,
    conversation_id: str,
    participants: list[str],
    caller: CallerIdentity | None,
) -> None:
    """Check that ``caller`` may append a message addressed to ``participants``.

    ``participants`` must already be normalized. A two-party conversation id
    has to be the one derived from its participants, the caller has to be
    one of them, and an existing conversation cannot gain new members.
    """

    if len(participants) == 2:
        if conversation_id != derive_conversation_id(*participants):
            raise ValidationError("conversationId does not match participants")
    if caller is None:
        return
    if not caller.identifiers & set(participants):
        raise ForbiddenError("No autorizado")
    stored = repository.get_participants(conversation_id)
    if stored and not set(participants) <= stored:
        raise ForbiddenError("No autorizado")
