"""Dispatcher step turning queued events into notifications."""

from __future__ import annotations

import logging
from collections.abc import Callable

from sqlalchemy.orm import Session

from app.domain.entities import (
    DispatchOutcome,
    DispatchResult,
    Event,
    NOTIFICATION_STATUS_SENT,
    Notification,
)
from app.domain.exceptions import NotFoundError
from app.infrastructure.dispatch.queue import DispatchQueue
from app.infrastructure.repositories import NotificationRepository
from app.utils import now_in_app_timezone

from ..users import get_user
from .content import NotificationContentRenderer

logger = logging.getLogger(__name__)


def process_next(
    session_factory: Callable[[], Session],
    queue: DispatchQueue,
    renderer: NotificationContentRenderer,
) -> DispatchResult:
    """Take at most one event from ``queue`` and notify its target if eligible.

    Events for unknown users or users with in-app notifications disabled are
    dropped silently. Errors are logged and reported in the result; the event
    is never put back in the queue.
    """

    event = queue.dequeue_one()
    if event is None:
        return DispatchResult(DispatchOutcome.IDLE)

    session: Session | None = None
    try:
        session = session_factory()
        return _dispatch_event(session, event, renderer)
    except Exception as exc:
        logger.exception(
            "Dispatch of event %s (%s) for %s failed; the event is dropped",
            event.event_id,
            event.type,
            event.target_user_id,
        )
        return DispatchResult(DispatchOutcome.FAILED, event=event, error=exc)
    finally:
        if session is not None:
            session.close()


def _dispatch_event(
    session: Session, event: Event, renderer: NotificationContentRenderer
) -> DispatchResult:
    try:
        user = get_user(session, event.target_user_id)
    except NotFoundError:
        logger.debug(
            "Skipping event %s: target %s is not in the directory",
            event.event_id,
            event.target_user_id,
        )
        return DispatchResult(DispatchOutcome.SKIPPED_UNKNOWN_USER, event=event)

    if not user.accepts_in_app():
        logger.debug(
            "Skipping event %s: %s disabled in-app notifications",
            event.event_id,
            user.user_id,
        )
        return DispatchResult(DispatchOutcome.SKIPPED_PREFERENCE, event=event)

    notification = NotificationRepository(session).create(
        Notification(
            notification_id=None,
            user_id=event.target_user_id,
            type=event.type,
            content=renderer.render(event),
            status=NOTIFICATION_STATUS_SENT,
            timestamp=now_in_app_timezone(),
        )
    )
    logger.info(
        "Notification %s created for %s from event %s",
        notification.notification_id,
        notification.user_id,
        event.event_id,
    )
    return DispatchResult(
        DispatchOutcome.DELIVERED, event=event, notification=notification
    )


__all__ = ["process_next"]
