"""
Dependency injection setup for FastAPI.

This module provides the "container" that holds the process-wide state
(settings, connection pool, credential and token services, auth gate) and
the FastAPI dependencies that build per-request services on top of it.

The container is created once by create_app() and stored on app.state,
so nothing here is an ambient module global.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncConnection

from shared.config import Settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from shared.database import ConnectionPool
    from modules.auth.credentials import CredentialService
    from modules.auth.interfaces import IAuthService
    from modules.auth.tokens import TokenService
    from modules.products.interfaces import IProductService
    from .middleware.auth import AuthGate


class ServiceContainer:
    """
    Container for all process-wide service instances.

    Services are created lazily on first access and cached for the
    lifetime of the application.
    """

    def __init__(
        self,
        settings: Settings,
        pool: "Optional[ConnectionPool]" = None,
    ) -> None:
        self.settings = settings
        self._pool = pool
        self._credentials: "CredentialService | None" = None
        self._tokens: "TokenService | None" = None
        self._auth_gate: "AuthGate | None" = None

    @property
    def pool(self) -> "ConnectionPool":
        """Get the connection pool."""
        if self._pool is None:
            from shared.database import create_pool
            self._pool = create_pool(self.settings)
        return self._pool

    @property
    def credentials(self) -> "CredentialService":
        """Get the password hashing service."""
        if self._credentials is None:
            from modules.auth.credentials import CredentialService
            self._credentials = CredentialService(rounds=self.settings.bcrypt_rounds)
        return self._credentials

    @property
    def tokens(self) -> "TokenService":
        """Get the token codec."""
        if self._tokens is None:
            from modules.auth.tokens import TokenService
            self._tokens = TokenService(
                secret=self.settings.jwt_key,
                algorithm=self.settings.jwt_algorithm,
                expires_in=self.settings.jwt_expires_in,
            )
        return self._tokens

    @property
    def auth_gate(self) -> "AuthGate":
        """Get the bearer token gate for protected routes."""
        if self._auth_gate is None:
            from .middleware.auth import AuthGate
            self._auth_gate = AuthGate(self.tokens)
        return self._auth_gate

    async def close(self) -> None:
        """Dispose of the pool if it was ever created."""
        if self._pool is not None:
            await self._pool.dispose()


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the application's service container."""
    return request.app.state.container


def get_settings_dependency(
    container: ServiceContainer = Depends(get_container),
) -> Settings:
    """FastAPI dependency for the application's settings."""
    return container.settings


def get_db(request: Request) -> AsyncConnection:
    """FastAPI dependency for the session bound by SessionMiddleware."""
    return request.state.db


def get_auth_service(
    db: AsyncConnection = Depends(get_db),
    container: ServiceContainer = Depends(get_container),
) -> "IAuthService":
    """FastAPI dependency for auth service."""
    from modules.auth.repository import UserRepository
    from modules.auth.service import AuthService

    return AuthService(
        repository=UserRepository(db),
        credentials=container.credentials,
        tokens=container.tokens,
    )


def get_product_service(
    db: AsyncConnection = Depends(get_db),
) -> "IProductService":
    """FastAPI dependency for product service."""
    from modules.products.repository import ProductRepository
    from modules.products.service import ProductService

    return ProductService(ProductRepository(db))
