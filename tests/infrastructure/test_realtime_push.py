"""Tests for websocket connection management and push scheduling."""

from __future__ import annotations

import asyncio
from datetime import datetime

from jobboard.domain.entities import Message, Notification
from jobboard.infrastructure.realtime import (
    RealtimeConnectionManager,
    RealtimePublisher,
    serialize_message,
)


class FakeWebSocket:
    def __init__(self, *, broken: bool = False) -> None:
        self.accepted = False
        self.sent: list[dict] = []
        self.broken = broken

    async def accept(self) -> None:
        self.accepted = True

    async def send_json(self, data: dict) -> None:
        if self.broken:
            raise RuntimeError("socket closed")
        self.sent.append(data)


def _message() -> Message:
    return Message(
        id=7,
        conversation_id="alice@x.com__bob@x.com",
        participants=["alice@x.com", "bob@x.com"],
        sender="alice@x.com",
        text="hi",
        meta={},
        created_at=datetime(2024, 5, 1, 12, 0, 0),
    )


def test_connection_registered_under_every_identifier_receives_one_copy():
    manager = RealtimeConnectionManager()
    socket = FakeWebSocket()

    async def scenario():
        await manager.connect(["2", "bob@x.com"], socket)
        await manager.send_to(["2", "bob@x.com"], {"type": "ping"})

    asyncio.run(scenario())

    assert socket.accepted
    assert socket.sent == [{"type": "ping"}]


def test_disconnect_forgets_the_socket():
    manager = RealtimeConnectionManager()
    socket = FakeWebSocket()

    asyncio.run(manager.connect(["bob@x.com"], socket))
    manager.disconnect(["bob@x.com"], socket)

    assert not manager.is_connected("bob@x.com")


def test_broken_socket_is_dropped():
    manager = RealtimeConnectionManager()
    socket = FakeWebSocket(broken=True)

    async def scenario():
        await manager.connect(["bob@x.com"], socket)
        await manager.send_to(["bob@x.com"], {"type": "ping"})

    asyncio.run(scenario())

    assert not manager.is_connected("bob@x.com")


def test_publish_message_reaches_connected_participants():
    manager = RealtimeConnectionManager()
    publisher = RealtimePublisher(manager)
    bob, stranger = FakeWebSocket(), FakeWebSocket()

    async def scenario():
        await manager.connect(["bob@x.com"], bob)
        await manager.connect(["carol@x.com"], stranger)
        publisher.publish_message(_message())
        await asyncio.sleep(0.01)

    asyncio.run(scenario())

    assert bob.sent == [{"type": "message", "data": serialize_message(_message())}]
    assert stranger.sent == []


def test_publish_notification_targets_the_user_id():
    manager = RealtimeConnectionManager()
    publisher = RealtimePublisher(manager)
    socket = FakeWebSocket()
    notification = Notification(id=3, user_id=2, message="Shared photo")

    async def scenario():
        await manager.connect(["2"], socket)
        publisher.publish_notification(notification)
        await asyncio.sleep(0.01)

    asyncio.run(scenario())

    assert socket.sent[0]["type"] == "notification"
    assert socket.sent[0]["data"]["id"] == 3
    assert socket.sent[0]["data"]["is_read"] is False


def test_publish_outside_an_event_loop_is_skipped():
    manager = RealtimeConnectionManager()
    publisher = RealtimePublisher(manager)
    socket = FakeWebSocket()
    asyncio.run(manager.connect(["bob@x.com"], socket))

    publisher.publish_message(_message())

    assert socket.sent == []


def test_serialized_message_uses_client_keys():
    data = serialize_message(_message())

    assert data["conversationId"] == "alice@x.com__bob@x.com"
    assert data["createdAt"] == "2024-05-01T12:00:00"
