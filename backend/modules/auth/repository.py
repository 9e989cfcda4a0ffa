"""
User persistence.
"""

from typing import Optional

from sqlalchemy import exc as sa_exc
from sqlalchemy import insert, select

from shared.repository import BaseRepository
from shared.schema import users_table

from .exceptions import DuplicateEmailError
from .models import UserRecord


class UserRepository(BaseRepository[UserRecord]):
    """Reads and creates rows of the users table."""

    async def create(self, email: str, password_hash: str) -> int:
        """
        Insert a user.

        Returns:
            The generated user ID

        Raises:
            DuplicateEmailError: If the unique email constraint fails
        """
        try:
            result = await self._write(
                insert(users_table).values(email=email, password=password_hash)
            )
        except sa_exc.IntegrityError as e:
            await self._db.rollback()
            raise DuplicateEmailError(email) from e
        return result.inserted_primary_key[0]

    async def get_by_email(self, email: str) -> Optional[UserRecord]:
        row = await self._fetch_one(
            select(users_table).where(users_table.c.email == email)
        )
        if row is None:
            return None
        return UserRecord(**row)
