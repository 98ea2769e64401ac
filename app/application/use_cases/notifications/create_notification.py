"""Use case for creating a notification without going through the queue."""

from sqlalchemy.orm import Session

from app.domain.entities import NOTIFICATION_STATUS_SENT, Notification
from app.infrastructure.repositories import NotificationRepository
from app.utils import now_in_app_timezone

from ..validators import require_identifier


def create_notification(
    session: Session,
    *,
    user_id: str,
    type: str,
    content: str,
) -> Notification:
    """Persist a notification for ``user_id`` regardless of its preferences.

    The user directory is not consulted, so system messages can reach any
    identifier.
    """

    notification = Notification(
        notification_id=None,
        user_id=require_identifier(user_id, "userId"),
        type=require_identifier(type, "type"),
        content=content or "",
        status=NOTIFICATION_STATUS_SENT,
        timestamp=now_in_app_timezone(),
    )
    return NotificationRepository(session).create(notification)
