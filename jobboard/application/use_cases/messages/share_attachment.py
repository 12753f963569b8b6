"""Use case for sharing files in a conversation."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.application.use_cases.notifications import notify_attachment_shared
from jobboard.domain.attachments import ATTACHMENT_TYPES, encode_attachment_note
from jobboard.domain.conversation import derive_conversation_id, normalize_identifier
from jobboard.domain.entities import CallerIdentity, Message
from jobboard.domain.errors import MessagingError, ValidationError
from jobboard.infrastructure.repositories import UserRepository

from .send_message import send_message

logger = logging.getLogger(__name__)


def share_attachment(
    session: Session,
    *,
    caller: CallerIdentity,
    recipient: str,
    attachment_type: str,
    file_names: Sequence[str] = (),
) -> Message:
    """Post an attachment note and best-effort notify the recipient.

    The two writes are not atomic. When the notification cannot be stored
    the message is kept and the failure is only logged, so the recipient may
    see the message without a matching alert.
    """

    kind = (attachment_type or "").strip().lower()
    if kind not in ATTACHMENT_TYPES:
        raise ValidationError(
            f"type must be one of: {', '.join(ATTACHMENT_TYPES)}"
        )

    other = normalize_identifier(recipient)
    conversation_id = derive_conversation_id(caller.sender, other)
    if conversation_id is None:
        raise ValidationError("to is required")

    names = [name.strip() for name in file_names if name and name.strip()]
    message = send_message(
        session,
        conversation_id=conversation_id,
        participants=[caller.sender, other],
        sender=caller.sender,
        text=encode_attachment_note(kind, names),
        meta={"attachment": kind, "files": names},
        caller=caller,
    )

    try:
        target = UserRepository(session).find_by_identifier(other)
        if target is None or target.id is None:
            logger.info("Attachment recipient %s has no profile; skipping notification", other)
        else:
            notify_attachment_shared(session, user_id=target.id, message=message)
    except (MessagingError, SQLAlchemyError) as exc:
        session.rollback()
        logger.warning(
            "Message %s stored but the attachment notification failed: %s",
            message.id,
            exc,
        )
    return message


__all__ = ["share_attachment"]
