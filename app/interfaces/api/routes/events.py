"""Event intake endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.events import list_events_for_user, submit_event
from app.domain.entities import Event
from app.domain.exceptions import DomainError
from app.infrastructure.database import get_db
from app.infrastructure.dispatch import DispatchQueue
from app.interfaces.api.dependencies import get_dispatch_queue
from app.interfaces.api.routes_helpers import http_error_for
from app.interfaces.api.schemas import EventAccepted, EventCreate, EventRead

router = APIRouter(prefix="/events", tags=["events"])
logger = logging.getLogger(__name__)


def _to_read_model(event: Event) -> EventRead:
    return EventRead(
        event_id=event.event_id,
        type=event.type,
        source_user_id=event.source_user_id,
        target_user_id=event.target_user_id,
        data=event.data or {},
        timestamp=event.timestamp,
    )


@router.post("", response_model=EventAccepted, status_code=status.HTTP_201_CREATED)
def create_event(
    event_in: EventCreate,
    db: Session = Depends(get_db),
    queue: DispatchQueue = Depends(get_dispatch_queue),
) -> EventAccepted:
    """Store an event and queue it for notification dispatch."""

    try:
        event = submit_event(
            db,
            queue,
            type=event_in.type,
            source_user_id=event_in.source_user_id,
            target_user_id=event_in.target_user_id,
            data=event_in.data,
        )
    except DomainError as exc:
        logger.warning("Event rejected: %s", exc)
        raise http_error_for(exc) from exc

    return EventAccepted(message="Event created", event_id=event.event_id)


@router.get("/{user_id}", response_model=list[EventRead])
def list_events(user_id: str, db: Session = Depends(get_db)) -> list[EventRead]:
    """Return the events addressed to ``user_id``, most recent first."""

    try:
        events = list_events_for_user(db, user_id)
    except DomainError as exc:
        raise http_error_for(exc) from exc
    return [_to_read_model(event) for event in events]
