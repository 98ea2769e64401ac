"""Use cases for event intake."""

from .list_events import list_events_for_user
from .submit_event import submit_event

__all__ = ["list_events_for_user", "submit_event"]
