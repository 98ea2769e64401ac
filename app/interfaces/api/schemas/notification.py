"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .common import CamelModel, MessageResponse


class NotificationCreate(CamelModel):
    """Direct notification request that bypasses the dispatch queue."""

    user_id: str | None = Field(default=None, description="Recipient")
    type: str | None = Field(default=None, description="Notification type")
    content: str = Field(default="", description="Rendered message")


class NotificationCreated(MessageResponse):
    notification_id: str


class NotificationRead(CamelModel):
    """Representation of a notification delivered to the client."""

    notification_id: str
    user_id: str
    type: str
    content: str
    status: str
    timestamp: datetime


__all__ = ["NotificationCreate", "NotificationCreated", "NotificationRead"]
