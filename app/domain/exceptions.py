"""Errors raised by the notification pipeline."""

from __future__ import annotations


class DomainError(Exception):
    """Base class for pipeline errors."""


class ValidationError(DomainError, ValueError):
    """A submission is missing a required identifier."""


class NotFoundError(DomainError, LookupError):
    """A referenced user does not exist in the directory."""


class PersistenceError(DomainError):
    """A store could not be read or written."""


class QueueFullError(DomainError):
    """The dispatch queue reached its configured capacity."""


__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "PersistenceError",
    "QueueFullError",
]
