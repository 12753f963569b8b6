"""FastAPI dependency utilities."""

from __future__ import annotations

import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.domain.entities import CallerIdentity
from jobboard.domain.errors import MessagingError
from jobboard.infrastructure.database import get_db
from jobboard.infrastructure.repositories import UserRepository
from jobboard.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token", auto_error=False)
logger = logging.getLogger(__name__)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_caller(token: str | None, db: Session) -> CallerIdentity:
    """Decode ``token`` into the identity of the caller.

    The token carries ``id`` and ``role``; the email, when a profile exists,
    is added so conversations addressed by email resolve too.
    """

    if not token:
        raise _unauthorized("Token requerido")
    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _unauthorized("Credenciales inválidas") from exc

    raw_id = payload.get("id")
    if raw_id is None or not str(raw_id).strip():
        raise _unauthorized("Credenciales inválidas")
    caller_id = str(raw_id).strip()
    role = str(payload.get("role") or "user")

    email = payload.get("email")
    if not isinstance(email, str) or not email.strip():
        email = None
        try:
            profile = UserRepository(db).find_by_identifier(caller_id)
        except (MessagingError, SQLAlchemyError) as exc:
            logger.debug("Caller profile unavailable for %s: %s", caller_id, exc)
            db.rollback()
            profile = None
        if profile is not None:
            email = profile.email

    return CallerIdentity(id=caller_id, role=role, email=email)


def get_current_caller(
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> CallerIdentity:
    """Return the authenticated caller from the bearer token."""

    return resolve_caller(token, db)


def get_current_user_id(caller: CallerIdentity = Depends(get_current_caller)) -> int:
    """Return the numeric user id of the caller, required by notifications."""

    if caller.user_id is None:
        raise _unauthorized("Credenciales inválidas")
    return caller.user_id
