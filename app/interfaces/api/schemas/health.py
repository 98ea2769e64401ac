"""Liveness payloads."""

from .common import CamelModel


class HealthRead(CamelModel):
    status: str
    queue_size: int
    dispatcher_running: bool
