"""Shared fixtures: a throwaway SQLite database and token helpers."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "jobboard_messaging_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["APP_TIMEZONE"] = "UTC"
os.environ.pop("MESSAGE_LIST_DEFAULT_LIMIT", None)
os.environ.pop("MESSAGE_LIST_MAX_LIMIT", None)

from jobboard.config import get_settings  # noqa: E402

get_settings.cache_clear()

from jobboard.domain.entities import User  # noqa: E402
from jobboard.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from jobboard.infrastructure.repositories import UserRepository  # noqa: E402
from jobboard.infrastructure.security import create_access_token  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client():
    """Return a test client bound to a fresh application instance."""

    from fastapi.testclient import TestClient

    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def create_profile():
    """Insert a user profile and return it."""

    def _create(
        email: str,
        *,
        full_name: str | None = None,
        role: str = "user",
        avatar_url: str | None = None,
    ) -> User:
        with SessionLocal() as db:
            return UserRepository(db).create(
                User(
                    id=None,
                    email=email,
                    role=role,
                    full_name=full_name,
                    avatar_url=avatar_url,
                )
            )

    return _create


def make_token(user_id: object, role: str = "user", **claims: object) -> str:
    return create_access_token({"id": str(user_id), "role": role, **claims})


def auth_headers(user_id: object, role: str = "user", **claims: object) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(user_id, role, **claims)}"}


@pytest.fixture()
def headers_for():
    return auth_headers


@pytest.fixture()
def token_for():
    return make_token
