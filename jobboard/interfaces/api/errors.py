"""Exception handlers shared by every router."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from jobboard.domain.errors import TransientUpstreamError

logger = logging.getLogger(__name__)


async def _transient_upstream_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Convierte los errores de infraestructura en respuestas JSON."""

    app.add_exception_handler(TransientUpstreamError, _transient_upstream_handler)


__all__ = ["register_exception_handlers"]
