"""Rutas para enviar, listar y eliminar mensajes entre usuarios."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from jobboard.application.use_cases.conversations import list_conversations
from jobboard.application.use_cases.messages import (
    delete_conversation as delete_conversation_uc,
    list_conversation_messages,
    send_message,
    share_attachment,
)
from jobboard.domain.entities import CallerIdentity, ConversationSummary, Message
from jobboard.domain.errors import ForbiddenError, ValidationError
from jobboard.infrastructure.database import get_db
from jobboard.interfaces.api.dependencies import get_current_caller
from jobboard.interfaces.api.schemas import (
    AttachmentShareCreate,
    ConversationList,
    ConversationRead,
    DeleteConversationResponse,
    MessageCreate,
    MessageRead,
)

router = APIRouter(prefix="/messages", tags=["messages"])


def _to_read_model(message: Message) -> MessageRead:
    return MessageRead.model_validate(message)


def _conversation_to_schema(summary: ConversationSummary) -> ConversationRead:
    return ConversationRead.model_validate(summary)


@router.post("", response_model=MessageRead, status_code=status.HTTP_201_CREATED)
def create_message(
    payload: MessageCreate,
    db: Session = Depends(get_db),
    caller: CallerIdentity = Depends(get_current_caller),
):
    """Agrega un mensaje a la conversación indicada."""

    try:
        message = send_message(
            db,
            conversation_id=payload.conversation_id,
            participants=payload.participants,
            sender=caller.sender,
            text=payload.text,
            meta=payload.meta,
            caller=caller,
        )
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ForbiddenError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    return _to_read_model(message)


@router.post(
    "/attachments", response_model=MessageRead, status_code=status.HTTP_201_CREATED
)
def create_attachment_message(
    payload: AttachmentShareCreate,
    db: Session = Depends(get_db),
    caller: CallerIdentity = Depends(get_current_caller),
):
    """Publica una nota de archivos compartidos y avisa al destinatario si es posible."""

    try:
        message = share_attachment(
            db,
            caller=caller,
            recipient=payload.to,
            attachment_type=payload.type,
            file_names=payload.files,
        )
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ForbiddenError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    return _to_read_model(message)


@router.get("/conversations/list", response_model=ConversationList)
def read_conversations(
    db: Session = Depends(get_db),
    caller: CallerIdentity = Depends(get_current_caller),
):
    """Devuelve las conversaciones del usuario, la más reciente primero."""

    summaries = list_conversations(db, caller)
    return ConversationList(
        conversations=[_conversation_to_schema(summary) for summary in summaries]
    )


@router.get("/{conversation_id}", response_model=list[MessageRead])
def read_conversation_messages(
    conversation_id: str,
    limit: int | None = Query(
        None,
        description="Cantidad máxima de mensajes; se limita al máximo configurado.",
    ),
    db: Session = Depends(get_db),
    caller: CallerIdentity = Depends(get_current_caller),
):
    """Lista los mensajes de una conversación en orden cronológico."""

    try:
        messages = list_conversation_messages(
            db, conversation_id, limit=limit, caller=caller
        )
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ForbiddenError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    return [_to_read_model(message) for message in messages]


@router.delete("/{conversation_id}", response_model=DeleteConversationResponse)
def delete_conversation(
    conversation_id: str,
    db: Session = Depends(get_db),
    caller: CallerIdentity = Depends(get_current_caller),
):
    """Elimina todos los mensajes de la conversación. Repetir la llamada no falla."""

    try:
        deleted = delete_conversation_uc(db, conversation_id, caller=caller)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ForbiddenError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    return DeleteConversationResponse(ok=True, deleted=deleted)
