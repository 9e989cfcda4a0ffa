"""Tests for modules/auth/repository.py against SQLite."""

import pytest
import pytest_asyncio

from modules.auth.exceptions import DuplicateEmailError
from modules.auth.repository import UserRepository
from shared.database import create_pool
from tests.conftest import make_settings


@pytest_asyncio.fixture
async def db(db_path):
    pool = create_pool(make_settings(db_path))
    async with pool.session() as session:
        yield session
    await pool.dispose()


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_create_and_get(self, db):
        """A created user should be found by email."""
        repo = UserRepository(db)
        user_id = await repo.create("user@example.com", "$2b$04$digest")

        user = await repo.get_by_email("user@example.com")
        assert user.id == user_id
        assert user.password == "$2b$04$digest"

    @pytest.mark.asyncio
    async def test_ids_are_generated(self, db):
        repo = UserRepository(db)
        first = await repo.create("one@example.com", "x")
        second = await repo.create("two@example.com", "x")
        assert second != first

    @pytest.mark.asyncio
    async def test_get_unknown_email(self, db):
        assert await UserRepository(db).get_by_email("nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_duplicate_email(self, db):
        """The unique constraint should become DuplicateEmailError."""
        repo = UserRepository(db)
        await repo.create("user@example.com", "x")

        with pytest.raises(DuplicateEmailError):
            await repo.create("user@example.com", "y")

        # The session is still usable after the failed insert
        assert await repo.get_by_email("user@example.com") is not None

    @pytest.mark.asyncio
    async def test_email_lookup_is_exact(self, db):
        """Emails are matched as stored."""
        repo = UserRepository(db)
        await repo.create("User@Example.com", "x")
        assert await repo.get_by_email("user@example.com") is None
