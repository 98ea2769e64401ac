"""Use case that resets the user directory to a known seed set."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from app.domain.entities import DeliveryPreferences, User
from app.domain.exceptions import ValidationError
from app.infrastructure.repositories import UserRepository

from ..validators import require_email, require_identifier

logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY: tuple[User, ...] = (
    User(
        user_id="user1",
        username="Alice",
        email="alice@example.com",
        preferences=DeliveryPreferences(in_app=True, email=False),
    ),
    User(
        user_id="user2",
        username="Bob",
        email="bob@example.com",
        preferences=DeliveryPreferences(in_app=True, email=False),
    ),
)


def replace_directory(
    session: Session, users: Iterable[User] = DEFAULT_DIRECTORY
) -> Sequence[User]:
    """Replace the whole directory with ``users``.

    Identifiers must be present and unique, and emails valid. The previous
    contents are removed in the same transaction; nothing changes when a
    user is rejected.
    """

    seen: set[str] = set()
    normalized: list[User] = []
    for user in users:
        user_id = require_identifier(user.user_id, "userId")
        if user_id in seen:
            raise ValidationError(f"Duplicated userId {user_id} in directory seed")
        seen.add(user_id)
        normalized.append(
            User(
                user_id=user_id,
                username=user.username,
                email=require_email(user.email, f"email of {user_id}"),
                preferences=user.preferences,
            )
        )

    saved = UserRepository(session).replace_all(normalized)
    logger.info("User directory replaced with %d users", len(saved))
    return saved
