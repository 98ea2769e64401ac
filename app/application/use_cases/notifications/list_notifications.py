"""Use case for reading a user's notifications."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.repositories import NotificationRepository

from ..validators import require_identifier


def list_notifications(session: Session, user_id: str) -> Sequence[Notification]:
    """Return the notifications of ``user_id``, most recent first."""

    return NotificationRepository(session).list_for_user(
        require_identifier(user_id, "userId")
    )
