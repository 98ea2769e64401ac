"""User directory schemas."""

from pydantic import EmailStr

from .common import CamelModel


class PreferencesRead(CamelModel):
    in_app: bool
    email: bool


class UserRead(CamelModel):
    user_id: str
    username: str
    email: EmailStr
    preferences: PreferencesRead
