"""Shared test configuration.

The environment is prepared before the ``app`` package is imported so the
engine binds to a throwaway SQLite database and the periodic dispatcher stays
off; tests drive dispatcher ticks explicitly.
"""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "notification_service_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["DISPATCHER_ENABLED"] = "false"
os.environ["SEED_DIRECTORY_ON_STARTUP"] = "true"
os.environ["APP_TIMEZONE"] = "UTC"

from app.config import get_settings  # noqa: E402

get_settings.cache_clear()

from app.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def session():
    """Return a database session closed after the test."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def anyio_backend():
    return "asyncio"
