"""
Health check endpoints.

Provides an endpoint for monitoring application and database health.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from shared.exceptions import CatalogError

from ..dependencies import ServiceContainer, get_container

logger = logging.getLogger(__name__)

# Served without the request session middleware, see create_app().
HEALTH_PATH = "/health"

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    database: str


@router.get(HEALTH_PATH, response_model=HealthResponse)
async def health_check(
    container: ServiceContainer = Depends(get_container),
) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running. The database check uses its own
    pooled session, so an unreachable database or an exhausted pool is
    reported as `database: "unavailable"` rather than failing the request.
    """
    try:
        async with container.pool.session() as db:
            await db.execute(text("SELECT 1"))
        database = "connected"
    except (CatalogError, SQLAlchemyError, OSError):
        logger.exception("Health check query failed")
        database = "unavailable"
    return HealthResponse(
        status="healthy",
        version=container.settings.app_version,
        database=database,
    )
