"""Persistence helpers for chat messages."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from jobboard.domain.entities import Message
from jobboard.infrastructure.models import MessageModel, MessageParticipantModel
from jobboard.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone

from .errors import upstream_guard


class MessageRepository:
    """Append-only storage for :class:`Message` objects keyed by conversation."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def append(self, message: Message) -> Message:
        model = MessageModel(
            conversation_id=message.conversation_id,
            sender=message.sender,
            text=message.text,
            meta=dict(message.meta or {}),
            created_at=ensure_app_naive_datetime(message.created_at)
            or ensure_app_naive_datetime(now_in_app_timezone()),
        )
        model.participant_rows = [
            MessageParticipantModel(position=position, participant=participant)
            for position, participant in enumerate(message.participants)
        ]
        with upstream_guard(self.session, "append a message"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def list_by_conversation(self, conversation_id: str, *, limit: int) -> Sequence[Message]:
        query = (
            self.session.query(MessageModel)
            .filter(MessageModel.conversation_id == conversation_id)
            .order_by(MessageModel.created_at.asc(), MessageModel.id.asc())
            .limit(limit)
        )
        with upstream_guard(self.session, "list conversation messages"):
            models = query.all()
        return [self._to_entity(model) for model in models]

    def list_latest_per_conversation(self, identifiers: Iterable[str]) -> Sequence[Message]:
        """Return the newest message of each conversation involving ``identifiers``.

        Conversations are ordered by that message, most recent first. Equal
        timestamps resolve to the latest insert.
        """

        lookup = sorted({identifier for identifier in identifiers if identifier})
        if not lookup:
            return []
        newest_first = (MessageModel.created_at.desc(), MessageModel.id.desc())
        member_of = select(MessageParticipantModel.message_id).where(
            MessageParticipantModel.participant.in_(lookup)
        )
        ranked = (
            select(
                MessageModel.id.label("message_id"),
                func.row_number()
                .over(partition_by=MessageModel.conversation_id, order_by=newest_first)
                .label("position"),
            )
            .where(MessageModel.id.in_(member_of))
            .subquery()
        )
        query = (
            self.session.query(MessageModel)
            .join(ranked, ranked.c.message_id == MessageModel.id)
            .filter(ranked.c.position == 1)
            .order_by(*newest_first)
        )
        with upstream_guard(self.session, "list conversations of a participant"):
            models = query.all()
        return [self._to_entity(model) for model in models]

    def get_participants(self, conversation_id: str) -> set[str]:
        query = (
            select(MessageParticipantModel.participant)
            .join(MessageModel, MessageModel.id == MessageParticipantModel.message_id)
            .where(MessageModel.conversation_id == conversation_id)
            .distinct()
        )
        with upstream_guard(self.session, "load conversation participants"):
            rows = self.session.execute(query).scalars().all()
        return set(rows)

    def delete_conversation(self, conversation_id: str) -> int:
        """Delete every message of ``conversation_id`` and return how many existed."""

        message_ids = select(MessageModel.id).where(
            MessageModel.conversation_id == conversation_id
        )
        with upstream_guard(self.session, "delete a conversation"):
            self.session.execute(
                delete(MessageParticipantModel).where(
                    MessageParticipantModel.message_id.in_(message_ids)
                )
            )
            result = self.session.execute(
                delete(MessageModel).where(MessageModel.conversation_id == conversation_id)
            )
            self.session.commit()
        return result.rowcount or 0

    @staticmethod
    def _to_entity(model: MessageModel) -> Message:
        return Message(
            id=model.id,
            conversation_id=model.conversation_id,
            participants=[row.participant for row in model.participant_rows],
            sender=model.sender,
            text=model.text,
            meta=dict(model.meta or {}),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["MessageRepository"]
