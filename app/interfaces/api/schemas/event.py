"""Pydantic models describing event payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from .common import CamelModel, MessageResponse


class EventCreate(CamelModel):
    """Event submitted by an upstream service.

    Identifiers are checked by the intake use case so that a missing or blank
    one is rejected with the same error whichever way it is malformed.
    """

    type: str | None = Field(default=None, description="Free-form tag, e.g. like or comment")
    source_user_id: str | None = Field(default=None, description="Acting user")
    target_user_id: str | None = Field(default=None, description="User to notify")
    data: dict[str, Any] | None = Field(
        default=None,
        description="Opaque payload; sourceUsername is used to render the notification",
    )


class EventAccepted(MessageResponse):
    event_id: str


class EventRead(CamelModel):
    event_id: str
    type: str
    source_user_id: str
    target_user_id: str
    data: dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime


__all__ = ["EventAccepted", "EventCreate", "EventRead"]
