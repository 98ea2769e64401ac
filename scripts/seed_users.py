"""Utility script to reset the user directory to a seed set."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from app.application.use_cases.users import DEFAULT_DIRECTORY, replace_directory
from app.domain.entities import DeliveryPreferences, User
from app.domain.exceptions import PersistenceError, ValidationError
from app.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for directory seeding."""

    parser = argparse.ArgumentParser(
        description="Replace the user directory of the notification service.",
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help=(
            "JSON file with a list of users "
            '({"userId", "username", "email", "preferences": {"inApp", "email"}}). '
            "Defaults to the built-in Alice/Bob directory."
        ),
    )
    return parser.parse_args()


def load_users(path: Path) -> list[User]:
    """Read directory entries from the JSON file at ``path``."""

    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise SystemExit("The seed file must contain a JSON list of users.")

    users: list[User] = []
    for position, item in enumerate(raw):
        if not isinstance(item, dict):
            raise SystemExit(f"Entry {position} of the seed file must be a JSON object.")
        preferences = item.get("preferences") or {}
        if not isinstance(preferences, dict):
            raise SystemExit(f"Entry {position} has preferences that are not an object.")
        users.append(
            User(
                user_id=item.get("userId"),
                username=item.get("username", ""),
                email=item.get("email", ""),
                preferences=DeliveryPreferences(
                    in_app=bool(preferences.get("inApp", True)),
                    email=bool(preferences.get("email", False)),
                ),
            )
        )
    return users


def main() -> None:
    """Replace the directory using the provided command line arguments."""

    args = parse_args()
    users = load_users(args.file) if args.file else list(DEFAULT_DIRECTORY)

    initialize_database()

    session = SessionLocal()
    try:
        saved = replace_directory(session, users)
    except ValidationError as exc:
        raise SystemExit(f"Invalid directory seed: {exc}") from exc
    except PersistenceError as exc:
        raise SystemExit(f"Could not store the directory: {exc}") from exc
    else:
        print(f"Directory replaced with {len(saved)} users:")
        for user in saved:
            print(f"  {user.user_id}: {user.username} <{user.email}> inApp={user.preferences.in_app}")
    finally:
        session.close()


if __name__ == "__main__":
    main()
