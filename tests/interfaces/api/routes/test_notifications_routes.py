"""Integration tests for the /notifications endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")

from jobboard.application.use_cases.notifications import (  # noqa: E402
    notify_application_status_changed,
)
from jobboard.infrastructure.database import SessionLocal  # noqa: E402


def _notify(user_id: int, status: str = "reviewed") -> int:
    with SessionLocal() as db:
        notification = notify_application_status_changed(
            db, user_id=user_id, application_id="app-9", status=status, job_title="Data Analyst"
        )
        return notification.id


def test_lists_only_my_notifications(client, headers_for):
    mine = _notify(1)
    _notify(2)

    response = client.get("/notifications/me", headers=headers_for(1))

    assert response.status_code == 200
    items = response.json()
    assert [item["id"] for item in items] == [mine]
    assert items[0]["is_read"] is False
    assert items[0]["application_id"] == "app-9"
    assert items[0]["message"] == 'Your application for "Data Analyst" has been updated to: reviewed'


def test_mark_read_and_unread_count(client, headers_for):
    first = _notify(1)
    _notify(1, status="accepted")

    assert client.get("/notifications/me/unread-count", headers=headers_for(1)).json() == {"unread": 2}

    response = client.patch(f"/notifications/{first}/read", headers=headers_for(1))
    repeated = client.patch(f"/notifications/{first}/read", headers=headers_for(1))

    assert response.json() == {"ok": True}
    assert repeated.json() == {"ok": True}
    assert client.get("/notifications/me/unread-count", headers=headers_for(1)).json() == {"unread": 1}


def test_cannot_mark_someone_elses_notification(client, headers_for):
    notification_id = _notify(1)

    response = client.patch(f"/notifications/{notification_id}/read", headers=headers_for(2))
    missing = client.patch("/notifications/12345/read", headers=headers_for(1))

    assert response.status_code == 404
    assert missing.status_code == 404
    items = client.get("/notifications/me", headers=headers_for(1)).json()
    assert items[0]["is_read"] is False


def test_notifications_need_a_numeric_user_id(client, headers_for):
    response = client.get("/notifications/me", headers=headers_for("recruiter@acme.io"))

    assert response.status_code == 401


def test_client_create_requests_are_accepted_without_effect(client, headers_for):
    response = client.post(
        "/notifications",
        json={"receiverUserId": "2", "type": "message", "message": "Shared photo"},
        headers=headers_for(1),
    )

    assert response.status_code == 202
    assert client.get("/notifications/me", headers=headers_for(2)).json() == []


def test_websocket_sends_pending_notifications_and_answers_pings(client, token_for):
    notification_id = _notify(1)

    with client.websocket_connect(f"/notifications/ws?token={token_for(1)}") as websocket:
        init = websocket.receive_json()
        assert init["type"] == "init"
        assert [item["id"] for item in init["data"]] == [notification_id]

        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}


def test_health(client):
    assert client.get("/health").json() == {"ok": True}
