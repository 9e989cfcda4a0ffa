"""
Authentication module.

Handles password hashing, token issuance, registration and login.

Public API:
- IAuthService: Interface for auth operations
- CredentialService / TokenService: process-wide hashing and token codec
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .credentials import CredentialService
from .tokens import TokenService
from .models import Credentials, TokenClaims, UserRecord
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    CorruptCredentialError,
    EmailNotFoundError,
    WrongPasswordError,
    DuplicateEmailError,
    MissingSigningKeyError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Services
    "CredentialService",
    "TokenService",
    # Models
    "Credentials",
    "TokenClaims",
    "UserRecord",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "CorruptCredentialError",
    "EmailNotFoundError",
    "WrongPasswordError",
    "DuplicateEmailError",
    "MissingSigningKeyError",
]
