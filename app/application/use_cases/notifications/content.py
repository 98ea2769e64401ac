"""Rendering of notification content from an event."""

from __future__ import annotations

import logging
from string import Formatter

from app.config import Settings, get_settings
from app.domain.entities import Event

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TEMPLATE = "{source_username} {type}d your post"
DEFAULT_UNKNOWN_SOURCE = "Someone"


class _BlankMissing(dict):
    def __missing__(self, key: str) -> str:
        return ""


class NotificationContentRenderer:
    """Build the text of a notification from the event that caused it.

    The template uses ``str.format`` fields: ``type``, ``source_username``,
    ``source_user_id`` and ``target_user_id``. Unknown fields render empty and
    a malformed template falls back to :data:`DEFAULT_CONTENT_TEMPLATE`, so a
    bad configuration never breaks a dispatcher tick.
    """

    def __init__(
        self,
        template: str = DEFAULT_CONTENT_TEMPLATE,
        unknown_source: str = DEFAULT_UNKNOWN_SOURCE,
    ) -> None:
        self.template = template
        self.unknown_source = unknown_source
        if not _is_valid_template(template):
            logger.warning(
                "Invalid notification content template %r, using %r instead",
                template,
                DEFAULT_CONTENT_TEMPLATE,
            )
            self.template = DEFAULT_CONTENT_TEMPLATE

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "NotificationContentRenderer":
        settings = settings or get_settings()
        return cls(
            template=settings.notification_content_template,
            unknown_source=settings.notification_unknown_source,
        )

    def render(self, event: Event) -> str:
        fields = _BlankMissing(
            type=event.type or "",
            source_username=event.source_username or self.unknown_source,
            source_user_id=event.source_user_id or "",
            target_user_id=event.target_user_id or "",
        )
        return self.template.format_map(fields).strip()


def _is_valid_template(template: str) -> bool:
    try:
        parsed = list(Formatter().parse(template))
    except ValueError:
        return False
    for _, field_name, _, _ in parsed:
        if field_name is None:
            continue
        # Only plain named fields; attribute/index access and positional
        # fields would fail against the rendering mapping.
        if not field_name.isidentifier():
            return False
    return True


__all__ = [
    "DEFAULT_CONTENT_TEMPLATE",
    "DEFAULT_UNKNOWN_SOURCE",
    "NotificationContentRenderer",
]
