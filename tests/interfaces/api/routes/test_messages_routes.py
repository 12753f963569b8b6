"""Integration tests for the /messages endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")

from jobboard.domain.errors import TransientUpstreamError  # noqa: E402
from jobboard.infrastructure.repositories import MessageRepository  # noqa: E402

CONVERSATION = "alice@x.com__bob@x.com"


def _send(client, headers, text, conversation_id=CONVERSATION, participants=None):
    return client.post(
        "/messages",
        json={
            "conversationId": conversation_id,
            "participants": participants or ["bob@x.com", "alice@x.com"],
            "text": text,
        },
        headers=headers,
    )


def test_requires_a_bearer_token(client, headers_for):
    assert client.get("/messages/conversations/list").status_code == 401
    response = client.get(
        "/messages/conversations/list", headers={"Authorization": "Bearer not-a-token"}
    )
    assert response.status_code == 401
    assert response.json()["detail"] == "Credenciales inválidas"


def test_send_and_read_back(client, headers_for, create_profile):
    create_profile("alice@x.com", full_name="Alice")
    alice = headers_for(1)

    response = _send(client, alice, "hi")

    assert response.status_code == 201
    body = response.json()
    assert body["conversationId"] == CONVERSATION
    assert body["participants"] == ["alice@x.com", "bob@x.com"]
    assert body["sender"] == "alice@x.com"
    assert body["meta"] == {}
    assert "createdAt" in body

    _send(client, alice, "still there?")
    listed = client.get(f"/messages/{CONVERSATION}", headers=alice)
    assert listed.status_code == 200
    assert [item["text"] for item in listed.json()] == ["hi", "still there?"]


def test_sender_falls_back_to_the_token_id(client, headers_for):
    response = _send(
        client, headers_for(42), "hello", conversation_id="42__bob@x.com", participants=["42", "bob@x.com"]
    )

    assert response.status_code == 201
    assert response.json()["sender"] == "42"


@pytest.mark.parametrize(
    "payload",
    [
        {"participants": ["a@x.com", "b@x.com"], "text": "hi"},
        {"conversationId": CONVERSATION, "participants": ["a@x.com"], "text": "hi"},
        {"conversationId": CONVERSATION, "participants": ["a@x.com", "b@x.com"]},
        {"conversationId": CONVERSATION, "participants": ["a@x.com", "b@x.com"], "text": ""},
        {"conversationId": CONVERSATION, "participants": "a@x.com", "text": "hi"},
    ],
)
def test_invalid_messages_are_rejected(client, headers_for, payload):
    response = client.post("/messages", json=payload, headers=headers_for(1))

    assert response.status_code == 400
    assert response.json()["detail"] == "conversationId, participants[>=2], and text are required"


def test_conversation_list_for_both_parties(client, headers_for, create_profile):
    create_profile("alice@x.com", full_name="Alice")
    create_profile("bob@x.com", full_name="Bob", role="admin")
    alice, bob = headers_for(1), headers_for(2)

    _send(client, alice, "hi")
    _send(client, bob, "hello")
    _send(client, alice, "bye")

    alice_view = client.get("/messages/conversations/list", headers=alice).json()["conversations"]
    bob_view = client.get("/messages/conversations/list", headers=bob).json()["conversations"]

    assert len(alice_view) == 1
    assert alice_view[0]["id"] == CONVERSATION
    assert alice_view[0]["lastMessage"] == "bye"
    assert alice_view[0]["name"] == "Bob"
    assert alice_view[0]["otherRole"] == "admin"
    assert alice_view[0]["unreadCount"] == 0
    assert set(alice_view[0]["participants"]) == {"alice@x.com", "bob@x.com"}
    assert bob_view[0]["name"] == "Alice"
    assert bob_view[0]["lastAt"] == alice_view[0]["lastAt"]


def test_limit_query_is_clamped(client, headers_for, create_profile):
    create_profile("alice@x.com")
    alice = headers_for(1)
    for index in range(4):
        _send(client, alice, f"m{index}")

    limited = client.get(f"/messages/{CONVERSATION}", params={"limit": 2}, headers=alice)
    huge = client.get(f"/messages/{CONVERSATION}", params={"limit": 10_000}, headers=alice)

    assert [item["text"] for item in limited.json()] == ["m0", "m1"]
    assert len(huge.json()) == 4


def test_delete_twice_succeeds(client, headers_for, create_profile):
    create_profile("alice@x.com")
    alice = headers_for(1)
    _send(client, alice, "hi")

    first = client.delete(f"/messages/{CONVERSATION}", headers=alice)
    second = client.delete(f"/messages/{CONVERSATION}", headers=alice)

    assert first.json() == {"ok": True, "deleted": 1}
    assert second.json() == {"ok": True, "deleted": 0}
    assert client.get(f"/messages/{CONVERSATION}", headers=alice).json() == []


def test_outsiders_are_forbidden(client, headers_for, create_profile):
    create_profile("alice@x.com")
    _send(client, headers_for(1), "private")

    outsider = headers_for(77)
    assert client.get(f"/messages/{CONVERSATION}", headers=outsider).status_code == 403
    assert client.delete(f"/messages/{CONVERSATION}", headers=outsider).status_code == 403


def test_outsiders_cannot_join_a_conversation_by_posting(client, headers_for, create_profile):
    create_profile("alice@x.com")
    create_profile("eve@x.com")
    alice, eve = headers_for(1), headers_for(2)
    _send(client, alice, "secret salary offer")

    joined = _send(client, eve, "x", participants=["eve@x.com", "zed@x.com"])
    impersonated = _send(client, eve, "x")

    assert joined.status_code == 400
    assert impersonated.status_code == 403
    assert client.get(f"/messages/{CONVERSATION}", headers=eve).status_code == 403
    texts = [item["text"] for item in client.get(f"/messages/{CONVERSATION}", headers=alice).json()]
    assert texts == ["secret salary offer"]


def test_conversation_id_must_match_participants(client, headers_for, create_profile):
    create_profile("eve@x.com")

    response = _send(
        client,
        headers_for(1),
        "hello",
        conversation_id="eve@x.com__zed@x.com",
        participants=["eve@x.com", "alice@x.com"],
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "conversationId does not match participants"


def test_cannot_add_members_to_an_existing_conversation(client, headers_for, create_profile):
    create_profile("alice@x.com")
    alice = headers_for(1)
    _send(client, alice, "hi")

    response = _send(client, alice, "group?", participants=["alice@x.com", "bob@x.com", "eve@x.com"])

    assert response.status_code == 403


def test_attachment_share_creates_note_and_notification(client, headers_for, create_profile):
    create_profile("alice@x.com")
    bob = create_profile("bob@x.com")

    response = client.post(
        "/messages/attachments",
        json={"to": "bob@x.com", "type": "photo", "files": ["a.png", "b.png"]},
        headers=headers_for(1),
    )

    assert response.status_code == 201
    assert response.json()["text"] == "Shared photos: a.png, b.png"
    notifications = client.get("/notifications/me", headers=headers_for(bob.id)).json()
    assert [item["event_type"] for item in notifications] == ["message.attachment"]

    bob_view = client.get("/messages/conversations/list", headers=headers_for(bob.id)).json()
    assert bob_view["conversations"][0]["unreadCount"] == 1


def test_attachment_share_rejects_unknown_type(client, headers_for):
    response = client.post(
        "/messages/attachments",
        json={"to": "bob@x.com", "type": "gif", "files": []},
        headers=headers_for(1),
    )

    assert response.status_code == 400


def test_database_outage_is_a_server_error(client, headers_for, monkeypatch):
    def _down(self, identifiers):
        raise TransientUpstreamError("down")

    monkeypatch.setattr(MessageRepository, "list_latest_per_conversation", _down)

    response = client.get("/messages/conversations/list", headers=headers_for(1))

    assert response.status_code == 503
    assert response.json() == {"detail": "Server error"}
