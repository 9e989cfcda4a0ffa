"""
Products service implementation.
"""

import logging

from .interfaces import IProductService
from .models import Product, ProductInput
from .repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService(IProductService):
    """
    Catalog operations over the request's session.

    Missing IDs on edit and delete are logged, not reported to the caller.
    """

    def __init__(self, repository: ProductRepository):
        self._products = repository

    async def list_products(self) -> list[Product]:
        return await self._products.list_active()

    async def add_product(self, product: ProductInput) -> int:
        product_id = await self._products.create(product)
        logger.info(f"Added product {product_id}")
        return product_id

    async def edit_product(self, product_id: int, product: ProductInput) -> None:
        if not await self._products.update(product_id, product):
            logger.debug(f"Edit matched no product with id {product_id}")

    async def delete_product(self, product_id: int) -> None:
        if not await self._products.soft_delete(product_id):
            logger.debug(f"Delete matched no product with id {product_id}")
