"""Endpoints to read and create notifications."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    create_notification,
    list_notifications as list_notifications_uc,
)
from app.domain.entities import Notification
from app.domain.exceptions import DomainError
from app.infrastructure.database import get_db
from app.interfaces.api.routes_helpers import http_error_for
from app.interfaces.api.schemas import (
    NotificationCreate,
    NotificationCreated,
    NotificationRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        notification_id=notification.notification_id,
        user_id=notification.user_id,
        type=notification.type,
        content=notification.content,
        status=notification.status,
        timestamp=notification.timestamp,
    )


@router.get("/{user_id}", response_model=list[NotificationRead])
def list_notifications(
    user_id: str, db: Session = Depends(get_db)
) -> list[NotificationRead]:
    """Return every notification of ``user_id``, most recent first."""

    try:
        notifications = list_notifications_uc(db, user_id)
    except DomainError as exc:
        raise http_error_for(exc) from exc
    return [_notification_to_schema(notification) for notification in notifications]


@router.post(
    "", response_model=NotificationCreated, status_code=status.HTTP_201_CREATED
)
def submit_notification(
    notification_in: NotificationCreate, db: Session = Depends(get_db)
) -> NotificationCreated:
    """Create a notification directly, ignoring the recipient's preferences."""

    try:
        notification = create_notification(
            db,
            user_id=notification_in.user_id,
            type=notification_in.type,
            content=notification_in.content,
        )
    except DomainError as exc:
        raise http_error_for(exc) from exc
    return NotificationCreated(
        message="Notification created",
        notification_id=notification.notification_id,
    )
