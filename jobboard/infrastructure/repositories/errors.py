"""Translation of driver level failures into domain errors."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import DBAPIError, OperationalError
from sqlalchemy.orm import Session

from jobboard.domain.errors import TransientUpstreamError

logger = logging.getLogger(__name__)


@contextmanager
def upstream_guard(session: Session, action: str) -> Iterator[None]:
    """Raise :class:`TransientUpstreamError` when the database is unreachable."""

    try:
        yield
    except OperationalError as exc:
        _raise_transient(session, action, exc)
    except DBAPIError as exc:
        if not exc.connection_invalidated:
            raise
        _raise_transient(session, action, exc)


def _raise_transient(session: Session, action: str, exc: DBAPIError) -> None:
    session.rollback()
    logger.error("Database unavailable while trying to %s: %s", action, exc)
    raise TransientUpstreamError("La base de datos no está disponible") from exc


__all__ = ["upstream_guard"]
