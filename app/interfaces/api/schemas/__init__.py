from .common import CamelModel, MessageResponse
from .event import EventAccepted, EventCreate, EventRead
from .health import HealthRead
from .notification import NotificationCreate, NotificationCreated, NotificationRead
from .user import PreferencesRead, UserRead

__all__ = [
    "CamelModel",
    "MessageResponse",
    "EventAccepted",
    "EventCreate",
    "EventRead",
    "HealthRead",
    "NotificationCreate",
    "NotificationCreated",
    "NotificationRead",
    "PreferencesRead",
    "UserRead",
]
