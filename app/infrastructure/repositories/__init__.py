"""Repository implementations for infrastructure layer."""

from .errors import persistence_guard
from .event_repository import EventRepository
from .notification_repository import NotificationRepository
from .user_repository import UserRepository

__all__ = [
    "EventRepository",
    "NotificationRepository",
    "UserRepository",
    "persistence_guard",
]
