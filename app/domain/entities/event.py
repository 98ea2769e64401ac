"""Domain entity representing an ingested event."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

SOURCE_USERNAME_KEY = "sourceUsername"


@dataclass(frozen=True)
class Event:
    """Immutable fact such as "user1 liked a post of user2".

    ``event_id`` and ``timestamp`` stay ``None`` until the event store assigns
    them.
    """

    event_id: str | None
    type: str
    source_user_id: str
    target_user_id: str
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime | None = None

    @property
    def source_username(self) -> str | None:
        """Human readable name of the acting user carried in ``data``."""

        if not isinstance(self.data, dict):
            return None
        value = self.data.get(SOURCE_USERNAME_KEY)
        if value is None:
            return None
        value = str(value).strip()
        return value or None


__all__ = ["Event", "SOURCE_USERNAME_KEY"]
