"""Result of a single dispatcher tick."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .event import Event
from .notification import Notification


class DispatchOutcome(str, Enum):
    """What a tick did with the queue head."""

    IDLE = "idle"
    BUSY = "busy"
    DELIVERED = "delivered"
    SKIPPED_UNKNOWN_USER = "skipped_unknown_user"
    SKIPPED_PREFERENCE = "skipped_preference"
    FAILED = "failed"


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of a tick with the event and notification involved, if any."""

    outcome: DispatchOutcome
    event: Event | None = None
    notification: Notification | None = None
    error: BaseException | None = None

    @property
    def consumed(self) -> bool:
        """``True`` when the tick removed an entry from the queue."""

        return self.event is not None


__all__ = ["DispatchOutcome", "DispatchResult"]
