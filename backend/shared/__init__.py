"""
Shared infrastructure for Catalog backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Connection pool for request-scoped sessions
- schema: Relational table definitions
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import ConnectionPool, create_pool, session_statements
from .exceptions import (
    CatalogError,
    ValidationError,
    AuthenticationError,
    StorageError,
    ResourceExhaustedError,
    SessionReleaseError,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "ConnectionPool",
    "create_pool",
    "session_statements",
    "CatalogError",
    "ValidationError",
    "AuthenticationError",
    "StorageError",
    "ResourceExhaustedError",
    "SessionReleaseError",
    "AuthenticatedUser",
]
