"""Domain entities exposed by the application."""

from .dispatch import DispatchOutcome, DispatchResult
from .event import SOURCE_USERNAME_KEY, Event
from .notification import NOTIFICATION_STATUS_SENT, Notification
from .user import DeliveryPreferences, User

__all__ = [
    "DeliveryPreferences",
    "DispatchOutcome",
    "DispatchResult",
    "Event",
    "SOURCE_USERNAME_KEY",
    "Notification",
    "NOTIFICATION_STATUS_SENT",
    "User",
]
