"""Use case that ingests an event and schedules it for dispatch."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import Event
from app.domain.exceptions import ValidationError
from app.infrastructure.dispatch import DispatchQueue
from app.infrastructure.repositories import EventRepository

from ..validators import require_identifier

logger = logging.getLogger(__name__)


def submit_event(
    session: Session,
    queue: DispatchQueue,
    *,
    type: str,
    source_user_id: str,
    target_user_id: str,
    data: dict[str, Any] | None = None,
) -> Event:
    """Persist a new event and append it to the dispatch queue.

    The returned event only acknowledges the intake; whether a notification
    is produced is decided later by the dispatcher. Nothing is enqueued when
    the event could not be stored.
    """

    event_type = require_identifier(type, "type")
    source = require_identifier(source_user_id, "sourceUserId")
    target = require_identifier(target_user_id, "targetUserId")
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError("data must be an object")

    event = EventRepository(session).record(
        Event(
            event_id=None,
            type=event_type,
            source_user_id=source,
            target_user_id=target,
            data=data,
        )
    )
    queue.enqueue(event)
    logger.debug(
        "Event %s (%s) for %s queued, backlog=%d",
        event.event_id,
        event.type,
        event.target_user_id,
        len(queue),
    )
    return event
