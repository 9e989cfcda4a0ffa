"""
Products module interface.

The API layer depends on IProductService for all catalog operations.
"""

from typing import Protocol, runtime_checkable

from .models import Product, ProductInput


@runtime_checkable
class IProductService(Protocol):
    """
    Interface for catalog operations.

    Edit and delete do not check that the product exists; a missing ID is
    a silent no-op.
    """

    async def list_products(self) -> list[Product]:
        """
        List products that have not been deleted.

        Returns:
            Products with deleted_flag false, in ID order
        """
        ...

    async def add_product(self, product: ProductInput) -> int:
        """
        Create a product.

        Returns:
            The generated product ID
        """
        ...

    async def edit_product(self, product_id: int, product: ProductInput) -> None:
        """Overwrite name, price, quantity and amount of a product."""
        ...

    async def delete_product(self, product_id: int) -> None:
        """Set the product's deleted flag."""
        ...
