"""Fixed-interval polling used to keep client views close to the server."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

import httpx

logger = logging.getLogger(__name__)

T = TypeVar("T")

CONVERSATIONS_INTERVAL = 15.0
NOTIFICATIONS_INTERVAL = 10.0
MESSAGES_INTERVAL = 5.0
BACKOFF_INTERVAL = 30.0
FAILURE_THRESHOLD = 3


class Poller(Generic[T]):
    """Re-run ``fetch`` every ``interval`` seconds and keep the latest result.

    Each tick replaces the snapshot wholesale. A failed fetch resets the
    snapshot to ``empty`` rather than surfacing the error, and once more than
    ``failure_threshold`` consecutive ticks fail the poller waits
    ``backoff_interval`` between attempts until one succeeds.
    Listener errors are logged and never interrupt the loop.
    """

    def __init__(
        self,
        fetch: Callable[[], Awaitable[T]],
        *,
        interval: float,
        empty: Callable[[], T],
        name: str = "poller",
        backoff_interval: float = BACKOFF_INTERVAL,
        failure_threshold: int = FAILURE_THRESHOLD,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._fetch = fetch
        self._empty = empty
        self.name = name
        self.interval = interval
        self.backoff_interval = max(backoff_interval, interval)
        self.failure_threshold = failure_threshold
        self.consecutive_failures = 0
        self.snapshot: T = empty()
        self._listeners: list[Callable[[T], None]] = []
        self._stopped = asyncio.Event()

    @property
    def current_interval(self) -> float:
        if self.consecutive_failures > self.failure_threshold:
            return self.backoff_interval
        return self.interval

    @property
    def stopped(self) -> bool:
        return self._stopped.is_set()

    def subscribe(self, listener: Callable[[T], None]) -> None:
        """Call ``listener`` with every new snapshot."""

        self._listeners.append(listener)

    async def tick(self) -> T:
        """Fetch once and replace the snapshot."""

        try:
            result = await self._fetch()
        except (httpx.HTTPError, ValueError) as exc:
            self.consecutive_failures += 1
            logger.warning(
                "%s fetch failed (%s in a row): %s",
                self.name,
                self.consecutive_failures,
                exc,
            )
            result = self._empty()
        else:
            self.consecutive_failures = 0

        self.snapshot = result
        for listener in list(self._listeners):
            try:
                listener(result)
            except Exception:
                logger.exception("%s listener failed", self.name)
        return result

    async def run(self) -> None:
        """Poll until :meth:`stop` is called."""

        while not self._stopped.is_set():
            await self.tick()
            try:
                await asyncio.wait_for(self._stopped.wait(), timeout=self.current_interval)
            except asyncio.TimeoutError:
                continue

    def stop(self) -> None:
        self._stopped.set()


__all__ = [
    "BACKOFF_INTERVAL",
    "CONVERSATIONS_INTERVAL",
    "FAILURE_THRESHOLD",
    "MESSAGES_INTERVAL",
    "NOTIFICATIONS_INTERVAL",
    "Poller",
]
