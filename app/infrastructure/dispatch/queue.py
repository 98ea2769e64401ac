"""In-memory FIFO buffer of events waiting to be dispatched."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque

from app.domain.entities import Event
from app.domain.exceptions import QueueFullError


class DispatchQueue:
    """Thread-safe FIFO queue of persisted events.

    Contents live only as long as the process: entries not drained before a
    restart are lost, while the events themselves remain in the event store.
    """

    def __init__(self, max_size: int = 0) -> None:
        self._max_size = max_size
        self._items: Deque[Event] = deque()
        self._lock = threading.Lock()

    @property
    def max_size(self) -> int:
        return self._max_size

    def enqueue(self, event: Event) -> None:
        """Append ``event`` to the tail of the queue."""

        with self._lock:
            if self._max_size and len(self._items) >= self._max_size:
                raise QueueFullError(
                    f"Dispatch queue is full ({self._max_size} pending events)"
                )
            self._items.append(event)

    def dequeue_one(self) -> Event | None:
        """Remove and return the head of the queue, or ``None`` when empty."""

        with self._lock:
            if not self._items:
                return None
            return self._items.popleft()

    def clear(self) -> int:
        """Drop every pending entry and return how many were discarded."""

        with self._lock:
            dropped = len(self._items)
            self._items.clear()
            return dropped

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


__all__ = ["DispatchQueue"]
