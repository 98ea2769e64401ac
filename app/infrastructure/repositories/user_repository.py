"""Persistence layer for the user directory."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from app.domain.entities import DeliveryPreferences, User
from app.infrastructure.models import UserModel

from .errors import persistence_guard


class UserRepository:
    """Read access to the directory plus the bulk replacement used for seeding."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[User]:
        with persistence_guard(self.session, "list users"):
            query = self.session.query(UserModel).order_by(UserModel.user_id.asc())
            return [self._to_entity(model) for model in query.all()]

    def get(self, user_id: str) -> User | None:
        with persistence_guard(self.session, f"load user {user_id}"):
            model = (
                self.session.query(UserModel)
                .filter(UserModel.user_id == user_id)
                .one_or_none()
            )
        return self._to_entity(model) if model else None

    def replace_all(self, users: Iterable[User]) -> Sequence[User]:
        """Delete every directory entry and insert ``users`` in one commit."""

        with persistence_guard(self.session, "replace the user directory"):
            self.session.query(UserModel).delete(synchronize_session=False)
            models = []
            for user in users:
                model = UserModel()
                self._apply_entity_to_model(model, user)
                self.session.add(model)
                models.append(model)
            self.session.commit()
            for model in models:
                self.session.refresh(model)
        return [self._to_entity(model) for model in models]

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.user_id = user.user_id
        model.username = user.username
        model.email = user.email
        model.pref_in_app = bool(user.preferences.in_app)
        model.pref_email = bool(user.preferences.email)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            user_id=model.user_id,
            username=model.username,
            email=model.email,
            preferences=DeliveryPreferences(
                in_app=bool(model.pref_in_app),
                email=bool(model.pref_email),
            ),
        )


__all__ = ["UserRepository"]
