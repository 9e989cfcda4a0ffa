"""
Products module data models.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field


class ProductInput(BaseModel):
    """Writable product fields, as submitted to /addProduct and /editProduct."""

    name: str
    price: float
    quantity: int
    amount: float


class Product(BaseModel):
    """A row of the products table."""

    id: int = Field(..., description="Product ID")
    name: str
    price: float
    quantity: int
    amount: float
    deleted_flag: bool = Field(default=False, description="Soft delete marker")


class ProductMutationResponse(BaseModel):
    """Result of add, edit and delete."""

    success: bool = True
    message: str
    data: Optional[Any] = None
