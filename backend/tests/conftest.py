"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Integration tests run against a temporary SQLite file (aiosqlite) with the
production schema.
"""

import pytest
from datetime import datetime, timezone, timedelta
from pathlib import Path

import jwt  # PyJWT
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from api.app import create_app
from api.dependencies import ServiceContainer
from shared.config import Settings
from shared.schema import metadata


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: int = 1,
    email: str = "test@example.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token in the shape the service issues.

    Args:
        user_id: User ID claim
        email: Email claim
        expired: If True, the token carries an exp one hour in the past
        secret: Signing key

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    payload = {
        "userId": user_id,
        "email": email,
        "iat": int(now.timestamp()),
    }
    if expired:
        payload["iat"] = int((now - timedelta(hours=2)).timestamp())
        payload["exp"] = int((now - timedelta(hours=1)).timestamp())
    return jwt.encode(payload, secret, algorithm="HS256")


def make_settings(db_path: Path, **overrides) -> Settings:
    """Settings pointing at a SQLite file, ignoring any local .env."""
    values = {
        "database_url": f"sqlite+aiosqlite:///{db_path}",
        "jwt_key": TEST_JWT_SECRET,
        "bcrypt_rounds": 4,
        "db_pool_size": 2,
        "db_pool_timeout": 0.5,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def create_schema(db_path: Path) -> None:
    """Create the tables synchronously before any async engine touches the file."""
    engine = create_engine(f"sqlite:///{db_path}")
    metadata.create_all(engine)
    engine.dispose()


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """A fresh database file with the schema in place."""
    path = tmp_path / "catalog.db"
    create_schema(path)
    return path


@pytest.fixture
def settings(db_path: Path) -> Settings:
    return make_settings(db_path)


@pytest.fixture
def app(settings: Settings):
    """Create a fresh app for each test."""
    return create_app(container=ServiceContainer(settings))


@pytest.fixture
def client(app):
    """Test client that runs the app's lifespan on a single event loop."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_token() -> str:
    """Create a valid auth token for testing."""
    return create_test_token()


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
