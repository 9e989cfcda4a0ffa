"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
access to the request's database session and providing shared utilities
for data operations.
"""

from typing import Any, Generic, Optional, TypeVar

from sqlalchemy.engine import RowMapping
from sqlalchemy.ext.asyncio import AsyncConnection
from sqlalchemy.sql.base import Executable


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - The request-scoped session via self._db
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle row-to-Pydantic model mapping internally.

    Example:
        class ProductRepository(BaseRepository[Product]):
            async def get_by_id(self, product_id: int) -> Optional[Product]:
                row = await self._fetch_one(
                    select(products_table).where(products_table.c.id == product_id)
                )
                return Product(**row) if row else None
    """

    def __init__(self, db: AsyncConnection) -> None:
        """
        Initialize the repository with a database session.

        Args:
            db: Session bound to the current request by the session middleware.
        """
        self._db = db

    async def _fetch_one(self, statement: Executable) -> Optional[RowMapping]:
        result = await self._db.execute(statement)
        return result.mappings().first()

    async def _fetch_all(self, statement: Executable) -> list[RowMapping]:
        result = await self._db.execute(statement)
        return list(result.mappings().all())

    async def _write(self, statement: Executable) -> Any:
        """Execute a single write statement and commit it."""
        result = await self._db.execute(statement)
        await self._db.commit()
        return result
