"""
Product catalog API endpoints.

All routes pass through the auth gate. Whether a failed check stops the
request is decided by auth_failure_response(); by default it does not.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from api.dependencies import get_product_service, get_settings_dependency
from api.middleware.auth import AuthResult, auth_failure_response, authenticate
from shared.config import Settings
from shared.exceptions import CatalogError

from .interfaces import IProductService
from .models import Product, ProductInput, ProductMutationResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _internal_error() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "success": False},
    )


@router.get("/products", response_model=list[Product])
async def list_products(
    auth: AuthResult = Depends(authenticate),
    settings: Settings = Depends(get_settings_dependency),
    service: IProductService = Depends(get_product_service),
):
    """List products that have not been deleted."""
    if rejected := auth_failure_response(auth, settings):
        return rejected
    try:
        return await service.list_products()
    except (CatalogError, SQLAlchemyError):
        logger.exception("Error fetching products")
        return _internal_error()


@router.post("/addProduct", response_model=ProductMutationResponse)
async def add_product(
    product: ProductInput,
    auth: AuthResult = Depends(authenticate),
    settings: Settings = Depends(get_settings_dependency),
    service: IProductService = Depends(get_product_service),
):
    """Create a product."""
    if rejected := auth_failure_response(auth, settings):
        return rejected
    try:
        await service.add_product(product)
    except (CatalogError, SQLAlchemyError):
        logger.exception("Error adding product")
        return _internal_error()
    return ProductMutationResponse(message="Product added successfully", data=None)


@router.put("/editProduct/{product_id}", response_model=ProductMutationResponse)
async def edit_product(
    product_id: int,
    product: ProductInput,
    auth: AuthResult = Depends(authenticate),
    settings: Settings = Depends(get_settings_dependency),
    service: IProductService = Depends(get_product_service),
):
    """
    Overwrite a product.

    There is no existence check: an unknown ID still reports success.
    """
    if rejected := auth_failure_response(auth, settings):
        return rejected
    try:
        await service.edit_product(product_id, product)
    except (CatalogError, SQLAlchemyError):
        logger.exception("Error editing product")
        return _internal_error()
    return ProductMutationResponse(message="Product updated successfully")


@router.delete("/deleteProduct/{product_id}", response_model=ProductMutationResponse)
async def delete_product(
    product_id: int,
    auth: AuthResult = Depends(authenticate),
    settings: Settings = Depends(get_settings_dependency),
    service: IProductService = Depends(get_product_service),
):
    """
    Soft-delete a product.

    There is no existence check: an unknown ID still reports success.
    """
    if rejected := auth_failure_response(auth, settings):
        return rejected
    try:
        await service.delete_product(product_id)
    except (CatalogError, SQLAlchemyError):
        logger.exception("Error deleting product")
        return _internal_error()
    return ProductMutationResponse(message="Product deleted successfully")
