"""SQLAlchemy models for chat messages and their participants."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, JSON, String, Text
from sqlalchemy.orm import relationship

from jobboard.infrastructure.database import Base
from jobboard.utils import now_in_app_naive_datetime


class MessageModel(Base):
    """Database representation of one chat message."""

    __tablename__ = "message"
    __table_args__ = (Index("ix_message_conversation_created", "conversation_id", "created_at"),)

    id = Column(Integer, primary_key=True, index=True)
    conversation_id = Column(String(255), nullable=False, index=True)
    sender = Column(String(255), nullable=False)
    text = Column(Text, nullable=False)
    meta = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    participant_rows = relationship(
        "MessageParticipantModel",
        back_populates="message",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="MessageParticipantModel.position",
        lazy="selectin",
    )


class MessageParticipantModel(Base):
    """Membership row linking a message to one of its participants."""

    __tablename__ = "message_participant"

    message_id = Column(
        Integer, ForeignKey("message.id", ondelete="CASCADE"), primary_key=True
    )
    position = Column(Integer, primary_key=True)
    participant = Column(String(255), nullable=False, index=True)

    message = relationship("MessageModel", back_populates="participant_rows")


__all__ = ["MessageModel", "MessageParticipantModel"]
