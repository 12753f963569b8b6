"""Endpoints and websocket handler for user notifications."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, WebSocket, WebSocketDisconnect, status
from sqlalchemy.orm import Session

from jobboard.application.use_cases.notifications import (
    count_unread_notifications,
    list_notifications as list_notifications_uc,
    mark_notification_read,
)
from jobboard.domain.entities import CallerIdentity, Notification
from jobboard.domain.errors import NotFoundError, TransientUpstreamError
from jobboard.infrastructure.database import SessionLocal, get_db
from jobboard.infrastructure.realtime import realtime_manager, serialize_notification
from jobboard.infrastructure.repositories import NotificationRepository
from jobboard.interfaces.api.dependencies import get_current_user_id, resolve_caller
from jobboard.interfaces.api.schemas import (
    NotificationAck,
    NotificationCreateRequest,
    NotificationRead,
    UnreadCount,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


@router.get("/me", response_model=list[NotificationRead])
def list_my_notifications(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> list[NotificationRead]:
    """Devuelve las notificaciones del usuario autenticado, la más reciente primero."""

    notifications = list_notifications_uc(db, user_id)
    return [_notification_to_schema(notification) for notification in notifications]


@router.get("/me/unread-count", response_model=UnreadCount)
def read_unread_count(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> UnreadCount:
    """Devuelve cuántas notificaciones siguen sin leer."""

    return UnreadCount(unread=count_unread_notifications(db, user_id))


@router.post("", response_model=NotificationAck, status_code=status.HTTP_202_ACCEPTED)
def create_notification(
    payload: NotificationCreateRequest,
    user_id: int = Depends(get_current_user_id),
) -> NotificationAck:
    """Acepta la solicitud del cliente sin crear nada.

    Las notificaciones se generan en el servidor a partir de eventos; el
    endpoint existe para que los clientes que lo invocan no fallen.
    """

    logger.debug(
        "Ignoring client notification request from %s for %s",
        user_id,
        payload.receiver_user_id,
    )
    return NotificationAck(ok=True)


@router.patch("/{notification_id}/read", response_model=NotificationAck)
def mark_as_read(
    notification_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> NotificationAck:
    """Marca una notificación propia como leída."""

    try:
        mark_notification_read(db, notification_id, user_id=user_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return NotificationAck(ok=True)


def _open_channel(token: str) -> tuple[CallerIdentity, list[Notification]]:
    """Authenticate a websocket client and load what it has not read yet."""

    with SessionLocal() as db:
        caller = resolve_caller(token, db)
        if caller.user_id is None:
            return caller, []
        return caller, list(NotificationRepository(db).list_unread_for_user(caller.user_id))


def _acknowledge(caller: CallerIdentity, ids: object) -> None:
    if caller.user_id is None or not isinstance(ids, list):
        return
    numeric = [value for value in ids if isinstance(value, int)]
    if not numeric:
        return
    with SessionLocal() as db:
        NotificationRepository(db).mark_many_as_read(numeric, user_id=caller.user_id)


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Canal en tiempo real: envía mensajes y notificaciones nuevas al usuario.

    Es un complemento del sondeo periódico; los clientes que pierdan un
    evento lo recuperan en la siguiente consulta REST.
    """

    try:
        caller, pending = _open_channel(websocket.query_params.get("token") or "")
    except HTTPException:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return
    except TransientUpstreamError:
        await websocket.close(code=status.WS_1011_INTERNAL_ERROR)
        return

    identifiers = caller.identifiers
    await realtime_manager.connect(identifiers, websocket)
    try:
        await websocket.send_json(
            {"type": "init", "data": [serialize_notification(item) for item in pending]}
        )
        while True:
            try:
                frame = await websocket.receive_json()
            except ValueError:
                continue
            kind = frame.get("type") if isinstance(frame, dict) else None
            if kind == "ping":
                await websocket.send_json({"type": "pong"})
            elif kind == "ack":
                _acknowledge(caller, frame.get("ids"))
    except WebSocketDisconnect:
        logger.debug("Realtime channel closed for %s", caller.id)
    finally:
        realtime_manager.disconnect(identifiers, websocket)
