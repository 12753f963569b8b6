"""Async HTTP client for the messaging and notification endpoints."""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0


class MessagingAPIClient:
    """Thin wrapper over :class:`httpx.AsyncClient` with bearer authentication.

    The ``list_*`` and mutating methods raise :class:`httpx.HTTPError` on
    failure. ``conversations()`` and ``notifications()`` are the soft
    variants used by views: any failure is logged and reported as an empty
    list.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers={"Authorization": f"Bearer {token}"},
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "MessagingAPIClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        response = await self._client.request(method, path, **kwargs)
        response.raise_for_status()
        return response.json()

    async def send_message(
        self,
        conversation_id: str,
        participants: list[str],
        text: str,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "conversationId": conversation_id,
            "participants": participants,
            "text": text,
        }
        if meta:
            payload["meta"] = meta
        return await self._request("POST", "/messages", json=payload)

    async def share_attachment(
        self, to: str, attachment_type: str, files: list[str]
    ) -> dict[str, Any]:
        return await self._request(
            "POST",
            "/messages/attachments",
            json={"to": to, "type": attachment_type, "files": files},
        )

    async def list_conversations(self) -> list[dict[str, Any]]:
        body = await self._request("GET", "/messages/conversations/list")
        conversations = body.get("conversations") if isinstance(body, dict) else None
        return conversations if isinstance(conversations, list) else []

    async def list_messages(
        self, conversation_id: str, *, limit: int | None = None
    ) -> list[dict[str, Any]]:
        params = {"limit": limit} if limit is not None else None
        body = await self._request("GET", f"/messages/{conversation_id}", params=params)
        return body if isinstance(body, list) else []

    async def delete_conversation(self, conversation_id: str) -> dict[str, Any]:
        return await self._request("DELETE", f"/messages/{conversation_id}")

    async def list_notifications(self) -> list[dict[str, Any]]:
        body = await self._request("GET", "/notifications/me")
        return body if isinstance(body, list) else []

    async def mark_notification_read(self, notification_id: int) -> bool:
        body = await self._request("PATCH", f"/notifications/{notification_id}/read")
        return bool(isinstance(body, dict) and body.get("ok"))

    async def conversations(self) -> list[dict[str, Any]]:
        try:
            return await self.list_conversations()
        except httpx.HTTPError as exc:
            logger.warning("Could not load conversations: %s", exc)
            return []

    async def notifications(self) -> list[dict[str, Any]]:
        try:
            return await self.list_notifications()
        except httpx.HTTPError as exc:
            logger.warning("Could not load notifications: %s", exc)
            return []


__all__ = ["DEFAULT_TIMEOUT", "MessagingAPIClient"]
