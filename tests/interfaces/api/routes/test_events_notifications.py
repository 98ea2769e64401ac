"""Integration tests for the event intake and notification endpoints."""

from __future__ import annotations

from datetime import datetime

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from app.application.use_cases.users import replace_directory
from app.config import Settings
from app.domain.entities import DeliveryPreferences, DispatchOutcome, User
from app.domain.exceptions import PersistenceError, ValidationError
from app.infrastructure.database import SessionLocal
from app.infrastructure.repositories import EventRepository
from main import create_app

LIKE_EVENT = {
    "type": "like",
    "sourceUserId": "user1",
    "targetUserId": "user2",
    "data": {"sourceUsername": "Alice"},
}


@pytest.fixture()
def client():
    """Return a test client bound to a fresh application instance."""

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


def _dispatch(client: TestClient, ticks: int = 1):
    worker = client.app.state.dispatch_worker
    return [worker.run_once() for _ in range(ticks)]


def _set_in_app(user_id: str, enabled: bool) -> None:
    with SessionLocal() as session:
        replace_directory(
            session,
            [
                User("user1", "Alice", "alice@example.com"),
                User(
                    user_id,
                    "Bob",
                    "bob@example.com",
                    DeliveryPreferences(in_app=enabled, email=False),
                ),
            ],
        )


def test_liveness_probe(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "App is working"}


def test_health_reports_queue_backlog(client: TestClient) -> None:
    client.post("/events", json=LIKE_EVENT)

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "queueSize": 1,
        "dispatcherRunning": False,
    }


def test_directory_is_seeded_on_startup(client: TestClient) -> None:
    response = client.get("/users")

    assert response.status_code == 200
    users = response.json()
    assert [user["userId"] for user in users] == ["user1", "user2"]
    assert users[0]["preferences"] == {"inApp": True, "email": False}


def test_like_event_produces_notification_after_one_cycle(client: TestClient) -> None:
    response = client.post("/events", json=LIKE_EVENT)
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Event created"
    assert body["eventId"]

    assert client.get("/notifications/user2").json() == []

    results = _dispatch(client)
    assert results[0].outcome is DispatchOutcome.DELIVERED

    notifications = client.get("/notifications/user2").json()
    assert len(notifications) == 1
    notification = notifications[0]
    assert notification["userId"] == "user2"
    assert notification["type"] == "like"
    assert notification["status"] == "sent"
    assert notification["content"] == "Alice liked your post"
    assert notification["notificationId"]
    assert notification["timestamp"]


def test_disabled_preference_never_produces_notification(client: TestClient) -> None:
    _set_in_app("user2", False)

    response = client.post("/events", json=LIKE_EVENT)
    assert response.status_code == 201
    _dispatch(client, ticks=3)

    assert client.get("/notifications/user2").json() == []


def test_unknown_target_stores_event_without_notifying(client: TestClient) -> None:
    payload = {**LIKE_EVENT, "targetUserId": "userX"}

    response = client.post("/events", json=payload)
    assert response.status_code == 201
    results = _dispatch(client)

    assert results[0].outcome is DispatchOutcome.SKIPPED_UNKNOWN_USER
    events = client.get("/events/userX").json()
    assert [event["eventId"] for event in events] == [response.json()["eventId"]]
    assert events[0]["data"] == {"sourceUsername": "Alice"}
    assert client.get("/notifications/userX").json() == []


@pytest.mark.parametrize(
    "missing",
    ["type", "sourceUserId", "targetUserId"],
)
def test_event_without_identifier_is_rejected(client: TestClient, missing: str) -> None:
    payload = {key: value for key, value in LIKE_EVENT.items() if key != missing}

    response = client.post("/events", json=payload)

    assert response.status_code == 400
    assert missing in response.json()["detail"]
    assert client.get("/health").json()["queueSize"] == 0


def test_blank_identifier_is_rejected(client: TestClient) -> None:
    response = client.post("/events", json={**LIKE_EVENT, "targetUserId": "  "})

    assert response.status_code == 400


def test_direct_notification_ignores_preferences(client: TestClient) -> None:
    _set_in_app("user2", False)

    for user_id in ("user2", "nobody"):
        response = client.post(
            "/notifications",
            json={"userId": user_id, "type": "system", "content": "Maintenance tonight"},
        )
        assert response.status_code == 201
        assert response.json()["message"] == "Notification created"
        assert response.json()["notificationId"]

    for user_id in ("user2", "nobody"):
        notifications = client.get(f"/notifications/{user_id}").json()
        assert [n["content"] for n in notifications] == ["Maintenance tonight"]


def test_direct_notification_requires_user(client: TestClient) -> None:
    response = client.post("/notifications", json={"type": "system", "content": "x"})

    assert response.status_code == 400


def test_listing_is_scoped_ordered_and_stable(client: TestClient) -> None:
    for event_type in ("like", "comment", "share"):
        client.post("/events", json={**LIKE_EVENT, "type": event_type})
    client.post("/events", json={**LIKE_EVENT, "targetUserId": "user1"})
    _dispatch(client, ticks=4)

    first = client.get("/notifications/user2").json()
    second = client.get("/notifications/user2").json()

    assert first == second
    assert [n["type"] for n in first] == ["share", "comment", "like"]
    assert {n["userId"] for n in first} == {"user2"}
    timestamps = [datetime.fromisoformat(n["timestamp"]) for n in first]
    assert timestamps == sorted(timestamps, reverse=True)


def test_event_store_failure_reaches_caller_and_nothing_is_queued(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    def failing_record(self, event):
        raise PersistenceError("Could not record event")

    monkeypatch.setattr(EventRepository, "record", failing_record)

    response = client.post("/events", json=LIKE_EVENT)

    assert response.status_code == 500
    assert response.json()["detail"] == "Could not record event"
    assert client.get("/health").json()["queueSize"] == 0
    assert _dispatch(client)[0].outcome is DispatchOutcome.IDLE


def test_full_queue_rejects_event_but_keeps_it_stored() -> None:
    app = create_app(Settings(dispatch_queue_max_size=1))
    with TestClient(app) as bounded_client:
        first = bounded_client.post("/events", json=LIKE_EVENT)
        second = bounded_client.post("/events", json={**LIKE_EVENT, "type": "share"})

        assert first.status_code == 201
        assert second.status_code == 503
        assert bounded_client.get("/health").json()["queueSize"] == 1
        stored = bounded_client.get("/events/user2").json()
        assert [event["type"] for event in stored] == ["share", "like"]


def test_directory_listing_stays_valid_after_rejected_seed(client: TestClient) -> None:
    with SessionLocal() as session:
        with pytest.raises(ValidationError):
            replace_directory(session, [User("user9", "Zed", "")])

    response = client.get("/users")

    assert response.status_code == 200
    assert [user["userId"] for user in response.json()] == ["user1", "user2"]
