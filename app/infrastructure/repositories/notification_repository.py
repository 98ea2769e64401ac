"""Persistence helpers for notification entities."""

from __future__ import annotations

import uuid
from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import NOTIFICATION_STATUS_SENT, Notification
from app.infrastructure.models import NotificationModel
from app.utils import (
    from_storage_datetime,
    now_in_app_timezone,
    to_storage_datetime,
)

from .errors import persistence_guard


class NotificationRepository:
    """Create notifications and list them per recipient."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(self, user_id: str) -> Sequence[Notification]:
        """Return every notification of ``user_id``, most recent first."""

        with persistence_guard(self.session, f"list notifications for {user_id}"):
            query = (
                self.session.query(NotificationModel)
                .filter(NotificationModel.user_id == user_id)
                .order_by(
                    NotificationModel.timestamp.desc(), NotificationModel.id.desc()
                )
            )
            return [self._to_entity(model) for model in query.all()]

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel()
        model.notification_id = notification.notification_id or str(uuid.uuid4())
        model.user_id = notification.user_id
        model.type = notification.type
        model.content = notification.content
        model.status = notification.status or NOTIFICATION_STATUS_SENT
        model.timestamp = to_storage_datetime(
            notification.timestamp or now_in_app_timezone()
        )
        with persistence_guard(self.session, "save notification"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            notification_id=model.notification_id,
            user_id=model.user_id,
            type=model.type,
            content=model.content,
            status=model.status,
            timestamp=from_storage_datetime(model.timestamp),
        )


__all__ = ["NotificationRepository"]
