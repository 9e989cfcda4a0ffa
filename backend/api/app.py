"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from modules.auth.routes import router as auth_router
from modules.products.routes import router as products_router

from .dependencies import ServiceContainer
from .middleware.session import SessionMiddleware
from .routes import health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    container: ServiceContainer = app.state.container
    settings = container.settings
    logging.basicConfig(level=settings.log_level.upper())
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    yield
    # Shutdown
    await container.close()
    logger.info(f"Shutting down {settings.app_name}")


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[ServiceContainer] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the environment
        container: Prebuilt service container (tests pass one with their own pool)

    Returns:
        Configured FastAPI instance
    """
    if container is None:
        container = ServiceContainer(settings or get_settings())
    settings = container.settings

    app = FastAPI(
        title=settings.app_name,
        description="User accounts and product catalog API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.container = container

    # Middleware added last runs first: CORS, then the request session.
    app.add_middleware(SessionMiddleware, exempt_paths=(health.HEALTH_PATH,))
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(auth_router, tags=["auth"])
    app.include_router(products_router, tags=["products"])

    return app
