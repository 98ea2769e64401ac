"""Append-only persistence for ingested events."""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import Event
from app.infrastructure.models import EventModel
from app.utils import (
    from_storage_datetime,
    now_in_app_timezone,
    to_storage_datetime,
)

from .errors import persistence_guard


class EventRepository:
    """Record events and read them back. Events are never updated or deleted."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def record(self, event: Event) -> Event:
        """Persist ``event`` assigning its identifier and timestamp."""

        stamped = replace(
            event,
            event_id=str(uuid.uuid4()),
            timestamp=now_in_app_timezone(),
        )
        model = EventModel()
        self._apply_entity_to_model(model, stamped)
        with persistence_guard(self.session, "record event"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def get(self, event_id: str) -> Event | None:
        with persistence_guard(self.session, f"load event {event_id}"):
            model = (
                self.session.query(EventModel)
                .filter(EventModel.event_id == event_id)
                .one_or_none()
            )
        return self._to_entity(model) if model else None

    def list_for_target(self, user_id: str) -> Sequence[Event]:
        with persistence_guard(self.session, f"list events for {user_id}"):
            query = (
                self.session.query(EventModel)
                .filter(EventModel.target_user_id == user_id)
                .order_by(EventModel.timestamp.desc(), EventModel.id.desc())
            )
            return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _apply_entity_to_model(model: EventModel, event: Event) -> None:
        model.event_id = event.event_id
        model.type = event.type
        model.source_user_id = event.source_user_id
        model.target_user_id = event.target_user_id
        model.data = dict(event.data or {})
        model.timestamp = to_storage_datetime(event.timestamp)

    @staticmethod
    def _to_entity(model: EventModel) -> Event:
        return Event(
            event_id=model.event_id,
            type=model.type,
            source_user_id=model.source_user_id,
            target_user_id=model.target_user_id,
            data=model.data or {},
            timestamp=from_storage_datetime(model.timestamp),
        )


__all__ = ["EventRepository"]
