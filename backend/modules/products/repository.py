"""
Product persistence.

Every write is a single statement committed on its own.
"""

from sqlalchemy import insert, select, update

from shared.repository import BaseRepository
from shared.schema import products_table

from .models import Product, ProductInput


class ProductRepository(BaseRepository[Product]):
    """Reads and writes rows of the products table."""

    async def list_active(self) -> list[Product]:
        rows = await self._fetch_all(
            select(products_table)
            .where(products_table.c.deleted_flag.is_(False))
            .order_by(products_table.c.id)
        )
        return [Product(**row) for row in rows]

    async def create(self, product: ProductInput) -> int:
        result = await self._write(
            insert(products_table).values(**product.model_dump(), deleted_flag=False)
        )
        return result.inserted_primary_key[0]

    async def update(self, product_id: int, product: ProductInput) -> int:
        """
        Overwrite a product's fields.

        Returns:
            Number of rows changed (0 when the ID does not exist)
        """
        result = await self._write(
            update(products_table)
            .where(products_table.c.id == product_id)
            .values(**product.model_dump())
        )
        return result.rowcount

    async def soft_delete(self, product_id: int) -> int:
        """
        Flag a product as deleted.

        Returns:
            Number of rows changed (0 when the ID does not exist)
        """
        result = await self._write(
            update(products_table)
            .where(products_table.c.id == product_id)
            .values(deleted_flag=True)
        )
        return result.rowcount
