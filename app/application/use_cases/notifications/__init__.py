"""Use cases producing and reading notifications."""

from .content import (
    DEFAULT_CONTENT_TEMPLATE,
    DEFAULT_UNKNOWN_SOURCE,
    NotificationContentRenderer,
)
from .create_notification import create_notification
from .dispatch import process_next
from .list_notifications import list_notifications

__all__ = [
    "DEFAULT_CONTENT_TEMPLATE",
    "DEFAULT_UNKNOWN_SOURCE",
    "NotificationContentRenderer",
    "create_notification",
    "list_notifications",
    "process_next",
]
