"""Client-side state for the messages view, refreshed by polling."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from jobboard.domain.conversation import derive_conversation_id, normalize_identifier

from .api import MessagingAPIClient
from .poller import (
    CONVERSATIONS_INTERVAL,
    MESSAGES_INTERVAL,
    NOTIFICATIONS_INTERVAL,
    Poller,
)
from .preferences import RecipientPreference, RecipientPreferenceStore

logger = logging.getLogger(__name__)


class MessagingSession:
    """Keep conversations, notifications and the open chat up to date.

    Consistency is bounded by the polling intervals: a message sent by the
    other party shows up at the latest one messages interval later.
    """

    def __init__(
        self,
        api: MessagingAPIClient,
        me: str,
        *,
        preferences: RecipientPreferenceStore | None = None,
        conversations_interval: float = CONVERSATIONS_INTERVAL,
        notifications_interval: float = NOTIFICATIONS_INTERVAL,
        messages_interval: float = MESSAGES_INTERVAL,
    ) -> None:
        self.api = api
        self.me = normalize_identifier(me)
        if not self.me:
            raise ValueError("me is required")
        self.preferences = preferences or RecipientPreferenceStore()
        self.recipient: str | None = None
        self.conversation_id: str | None = None

        self.conversations: Poller[list[dict[str, Any]]] = Poller(
            api.list_conversations,
            interval=conversations_interval,
            empty=list,
            name="conversations",
        )
        self.notifications: Poller[list[dict[str, Any]]] = Poller(
            api.list_notifications,
            interval=notifications_interval,
            empty=list,
            name="notifications",
        )
        self.messages: Poller[list[dict[str, Any]]] = Poller(
            self._fetch_open_conversation,
            interval=messages_interval,
            empty=list,
            name="messages",
        )

    @property
    def unread_count(self) -> int:
        return sum(1 for item in self.notifications.snapshot if not item.get("is_read"))

    def open_conversation(
        self, recipient: str, *, name: str | None = None, avatar: str | None = None
    ) -> str:
        """Select the chat with ``recipient`` and return its conversation id."""

        conversation_id = derive_conversation_id(self.me, recipient)
        if conversation_id is None:
            raise ValueError("recipient is required")
        self.recipient = normalize_identifier(recipient)
        self.conversation_id = conversation_id
        self.messages.snapshot = []
        self.preferences.set(RecipientPreference(id=self.recipient, name=name, avatar=avatar))
        return conversation_id

    async def select_conversation(
        self, recipient: str, *, name: str | None = None, avatar: str | None = None
    ) -> str:
        """Open the chat with ``recipient``, clear its alerts and load its messages."""

        conversation_id = self.open_conversation(recipient, name=name, avatar=avatar)
        await self.mark_open_conversation_read()
        await self.messages.tick()
        return conversation_id

    async def mark_open_conversation_read(self) -> int:
        """Mark read the unread notifications that point at the open conversation.

        Returns how many were acknowledged. Failures are logged; the next poll
        still shows them as unread.
        """

        if self.conversation_id is None:
            return 0
        notifications = await self.notifications.tick()
        pending = [
            item["id"]
            for item in notifications
            if not item.get("is_read")
            and isinstance(item.get("id"), int)
            and (item.get("payload") or {}).get("conversation_id") == self.conversation_id
        ]
        marked = 0
        for notification_id in pending:
            try:
                if await self.api.mark_notification_read(notification_id):
                    marked += 1
            except httpx.HTTPError as exc:
                logger.warning("Could not mark notification %s as read: %s", notification_id, exc)
        if marked:
            await self.notifications.tick()
            await self.conversations.tick()
        return marked

    def restore_last_conversation(self) -> str | None:
        """Reopen the remembered recipient, if any."""

        preference = self.preferences.get()
        if preference is None:
            return None
        return self.open_conversation(
            preference.id, name=preference.name, avatar=preference.avatar
        )

    async def send(self, text: str, meta: dict[str, Any] | None = None) -> dict[str, Any]:
        """Send ``text`` to the open conversation and refresh it."""

        if self.conversation_id is None or self.recipient is None:
            raise RuntimeError("No conversation is open")
        message = await self.api.send_message(
            self.conversation_id, [self.me, self.recipient], text, meta
        )
        await self.messages.tick()
        return message

    async def delete_open_conversation(self) -> None:
        if self.conversation_id is None:
            return
        await self.api.delete_conversation(self.conversation_id)
        self.messages.snapshot = []
        await self.conversations.tick()

    async def refresh(self) -> None:
        """Run one tick of every poller."""

        await asyncio.gather(
            self.conversations.tick(),
            self.notifications.tick(),
            self.messages.tick(),
        )

    async def run(self) -> None:
        """Poll until :meth:`stop` is called."""

        await asyncio.gather(
            self.conversations.run(),
            self.notifications.run(),
            self.messages.run(),
        )

    def stop(self) -> None:
        self.conversations.stop()
        self.notifications.stop()
        self.messages.stop()

    async def _fetch_open_conversation(self) -> list[dict[str, Any]]:
        if self.conversation_id is None:
            return []
        return await self.api.list_messages(self.conversation_id)


__all__ = ["MessagingSession"]
