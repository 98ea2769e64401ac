"""Tests for the dispatcher step that turns queued events into notifications."""

from __future__ import annotations

from functools import partial

import pytest

from app.application.use_cases.events import submit_event
from app.application.use_cases.notifications import (
    NotificationContentRenderer,
    list_notifications,
    process_next,
)
from app.application.use_cases.notifications import dispatch as dispatch_module
from app.application.use_cases.users import replace_directory
from app.domain.entities import DeliveryPreferences, DispatchOutcome, User
from app.domain.exceptions import PersistenceError
from app.infrastructure.database import SessionLocal
from app.infrastructure.dispatch import DispatchQueue
from app.infrastructure.repositories import EventRepository


@pytest.fixture()
def queue() -> DispatchQueue:
    return DispatchQueue()


@pytest.fixture()
def tick(queue):
    return partial(process_next, SessionLocal, queue, NotificationContentRenderer())


@pytest.fixture(autouse=True)
def directory(session):
    replace_directory(
        session,
        [
            User("user1", "Alice", "alice@example.com", DeliveryPreferences(True, False)),
            User("user2", "Bob", "bob@example.com", DeliveryPreferences(True, False)),
            User("user3", "Carol", "carol@example.com", DeliveryPreferences(False, True)),
        ],
    )


def _submit(session, queue, target="user2", event_type="like", data=None):
    return submit_event(
        session,
        queue,
        type=event_type,
        source_user_id="user1",
        target_user_id=target,
        data={"sourceUsername": "Alice"} if data is None else data,
    )


def test_idle_tick_on_empty_queue(tick):
    result = tick()

    assert result.outcome is DispatchOutcome.IDLE
    assert not result.consumed


def test_eligible_event_creates_one_notification(session, queue, tick):
    event = _submit(session, queue)

    result = tick()

    assert result.outcome is DispatchOutcome.DELIVERED
    assert result.event.event_id == event.event_id
    notifications = list_notifications(session, "user2")
    assert len(notifications) == 1
    assert notifications[0].type == "like"
    assert notifications[0].status == "sent"
    assert notifications[0].content == "Alice liked your post"
    assert notifications[0].user_id == "user2"


def test_each_tick_consumes_exactly_one_entry(session, queue, tick):
    _submit(session, queue)
    _submit(session, queue)

    tick()

    assert len(queue) == 1
    assert len(list_notifications(session, "user2")) == 1


def test_disabled_in_app_preference_is_skipped_silently(session, queue, tick):
    _submit(session, queue, target="user3")

    results = [tick() for _ in range(3)]

    assert results[0].outcome is DispatchOutcome.SKIPPED_PREFERENCE
    assert all(r.outcome is DispatchOutcome.IDLE for r in results[1:])
    assert list_notifications(session, "user3") == []


def test_unknown_target_is_skipped_but_event_is_kept(session, queue, tick):
    event = _submit(session, queue, target="userX")

    result = tick()

    assert result.outcome is DispatchOutcome.SKIPPED_UNKNOWN_USER
    assert list_notifications(session, "userX") == []
    assert EventRepository(session).get(event.event_id) is not None


def test_notifications_follow_queue_order(session, queue, tick):
    _submit(session, queue, event_type="like")
    _submit(session, queue, event_type="share")

    first = tick()
    second = tick()

    assert first.notification.type == "like"
    assert second.notification.type == "share"
    assert first.notification.timestamp <= second.notification.timestamp
    newest_first = list_notifications(session, "user2")
    assert [n.type for n in newest_first] == ["share", "like"]


def test_missing_source_username_does_not_break_the_tick(session, queue, tick):
    _submit(session, queue, data={"other": 1})

    result = tick()

    assert result.outcome is DispatchOutcome.DELIVERED
    assert result.notification.content == "Someone liked your post"


def test_save_failure_is_contained_and_not_retried(session, queue, tick, monkeypatch):
    _submit(session, queue, event_type="like")
    _submit(session, queue, event_type="share")

    def failing_create(self, notification):
        raise PersistenceError("Could not save notification")

    monkeypatch.setattr(
        dispatch_module.NotificationRepository, "create", failing_create
    )
    failed = tick()
    monkeypatch.undo()
    delivered = tick()

    assert failed.outcome is DispatchOutcome.FAILED
    assert isinstance(failed.error, PersistenceError)
    assert failed.event.type == "like"
    assert delivered.outcome is DispatchOutcome.DELIVERED
    assert delivered.notification.type == "share"
    assert len(queue) == 0
    assert [n.type for n in list_notifications(session, "user2")] == ["share"]


def test_lookup_failure_is_contained(session, queue, tick, monkeypatch):
    _submit(session, queue)

    def failing_get_user(session, user_id):
        raise PersistenceError("Could not load user")

    monkeypatch.setattr(dispatch_module, "get_user", failing_get_user)

    result = tick()

    assert result.outcome is DispatchOutcome.FAILED
    assert len(queue) == 0
