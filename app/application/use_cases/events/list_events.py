"""Use case for reading events addressed to a user."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Event
from app.infrastructure.repositories import EventRepository

from ..validators import require_identifier


def list_events_for_user(session: Session, user_id: str) -> Sequence[Event]:
    """Return the events targeting ``user_id``, most recent first."""

    return EventRepository(session).list_for_target(
        require_identifier(user_id, "userId")
    )
