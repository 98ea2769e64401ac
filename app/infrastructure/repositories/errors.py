"""Translate SQLAlchemy failures into pipeline errors."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


@contextmanager
def persistence_guard(session: Session, action: str) -> Iterator[None]:
    """Roll back ``session`` and raise :class:`PersistenceError` on DB errors."""

    try:
        yield
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Database error while trying to %s: %s", action, exc)
        raise PersistenceError(f"Could not {action}") from exc


__all__ = ["persistence_guard"]
