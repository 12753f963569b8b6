"""Connection management helpers for realtime websockets."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, DefaultDict, Iterable, Set

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class RealtimeConnectionManager:
    """Manage active websocket connections grouped by participant identifier."""

    def __init__(self) -> None:
        self._connections: DefaultDict[str, Set[WebSocket]] = defaultdict(set)

    async def connect(self, identifiers: Iterable[str], websocket: WebSocket) -> None:
        """Accept the websocket connection and register it for ``identifiers``."""

        await websocket.accept()
        for identifier in identifiers:
            self._connections[identifier].add(websocket)

    def disconnect(self, identifiers: Iterable[str], websocket: WebSocket) -> None:
        """Remove ``websocket`` from the pool of every identifier."""

        for identifier in identifiers:
            connections = self._connections.get(identifier)
            if connections is None:
                continue
            connections.discard(websocket)
            if not connections:
                self._connections.pop(identifier, None)

    def is_connected(self, identifier: str) -> bool:
        return bool(self._connections.get(identifier))

    async def send_to(self, identifiers: Iterable[str], message: dict[str, Any]) -> None:
        """Send ``message`` once to every connection registered for ``identifiers``."""

        targets: dict[int, tuple[str, WebSocket]] = {}
        for identifier in identifiers:
            for connection in self._connections.get(identifier, set()):
                targets.setdefault(id(connection), (identifier, connection))

        for identifier, connection in targets.values():
            try:
                await connection.send_json(message)
            except Exception as exc:  # pragma: no cover - stale socket cleanup
                logger.debug("Dropping realtime connection for %s: %s", identifier, exc)
                self.disconnect([identifier], connection)


realtime_manager = RealtimeConnectionManager()


__all__ = ["RealtimeConnectionManager", "realtime_manager"]
