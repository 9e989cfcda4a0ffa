"""
Products module.

CRUD over the product catalog. Deletes are soft: rows are flagged, never
removed.

Public API:
- IProductService: Interface for catalog operations
- Product / ProductInput: Catalog record and its writable fields
"""

from .interfaces import IProductService
from .models import Product, ProductInput, ProductMutationResponse

__all__ = [
    # Interface
    "IProductService",
    # Models
    "Product",
    "ProductInput",
    "ProductMutationResponse",
]
