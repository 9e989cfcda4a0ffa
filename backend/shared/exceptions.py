"""
Base exception classes for the Catalog backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class CatalogError(Exception):
    """
    Base exception for all Catalog errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}


class ValidationError(CatalogError):
    """Input validation failed."""

    pass


class AuthenticationError(CatalogError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class StorageError(CatalogError):
    """The relational store rejected an operation (constraint, connection)."""

    pass


class ResourceExhaustedError(StorageError):
    """No pooled database session became free before the checkout timeout."""

    def __init__(self, timeout: float):
        super().__init__(
            f"No database session available after {timeout}s",
            code="RESOURCE_EXHAUSTED",
            details={"timeout": timeout},
        )


class SessionReleaseError(StorageError):
    """A session was released that is not currently checked out."""

    def __init__(self, message: str = "Session is not checked out from this pool"):
        super().__init__(message, code="SESSION_RELEASE")
