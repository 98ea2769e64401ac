"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

NOTIFICATION_STATUS_SENT = "sent"


@dataclass(frozen=True)
class Notification:
    """Message generated for a specific user."""

    notification_id: str | None
    user_id: str
    type: str
    content: str
    status: str = NOTIFICATION_STATUS_SENT
    timestamp: datetime | None = None


__all__ = ["Notification", "NOTIFICATION_STATUS_SENT"]
