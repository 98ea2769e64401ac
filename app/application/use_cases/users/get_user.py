"""Use case for retrieving a single directory user."""

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import UserRepository


def get_user(session: Session, user_id: str) -> User:
    """Return the requested user or raise :class:`NotFoundError`."""

    user = UserRepository(session).get(user_id)
    if user is None:
        raise NotFoundError(f"User {user_id} not found")
    return user
