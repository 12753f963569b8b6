"""Pydantic models describing message and conversation payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exchanging camelCase keys with the web client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageCreate(CamelModel):
    """Payload used to append a message to a conversation.

    Fields are loosely typed so that missing or malformed values reach the
    use case validators and produce a single 400 response.
    """

    conversation_id: str | None = None
    participants: Any = None
    text: str | None = None
    meta: dict[str, Any] | None = None


class AttachmentShareCreate(CamelModel):
    """Payload announcing files shared with another participant."""

    to: str = Field(..., min_length=1, description="Email o id del destinatario")
    type: str = Field(..., description="photo, video o document")
    files: list[str] = Field(default_factory=list)


class MessageRead(CamelModel):
    """Representation of a stored message delivered to the client."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int
    conversation_id: str
    participants: list[str]
    sender: str
    text: str
    meta: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime


class ConversationRead(CamelModel):
    """Entry of the conversation list."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: str
    name: str
    last_message: str = ""
    last_at: datetime | None = None
    participants: list[str] = Field(default_factory=list)
    other_role: str | None = None
    avatar: str | None = None
    img: str | None = None
    unread_count: int = 0


class ConversationList(BaseModel):
    conversations: list[ConversationRead] = Field(default_factory=list)


class DeleteConversationResponse(BaseModel):
    ok: bool = True
    deleted: int = 0


__all__ = [
    "AttachmentShareCreate",
    "ConversationList",
    "ConversationRead",
    "DeleteConversationResponse",
    "MessageCreate",
    "MessageRead",
]
