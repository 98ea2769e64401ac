"""Read-only access to the user directory."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.use_cases.users import list_users as list_users_uc
from app.domain.exceptions import DomainError
from app.infrastructure.database import get_db
from app.interfaces.api.routes_helpers import http_error_for
from app.interfaces.api.schemas import PreferencesRead, UserRead

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserRead])
def list_users(db: Session = Depends(get_db)) -> list[UserRead]:
    """Return the directory entries with their delivery preferences."""

    try:
        users = list_users_uc(db)
    except DomainError as exc:
        raise http_error_for(exc) from exc
    return [
        UserRead(
            user_id=user.user_id,
            username=user.username,
            email=user.email,
            preferences=PreferencesRead(
                in_app=user.preferences.in_app, email=user.preferences.email
            ),
        )
        for user in users
    ]
