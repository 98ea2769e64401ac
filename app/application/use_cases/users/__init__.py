"""Use cases for the user directory."""

from .get_user import get_user
from .list_users import list_users
from .replace_directory import DEFAULT_DIRECTORY, replace_directory

__all__ = [
    "DEFAULT_DIRECTORY",
    "get_user",
    "list_users",
    "replace_directory",
]
