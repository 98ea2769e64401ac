"""Use case for listing the user directory."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.repositories import UserRepository


def list_users(session: Session) -> Sequence[User]:
    """Return every user of the directory ordered by identifier."""

    return UserRepository(session).list()
