"""
Authentication module exceptions.

These exceptions are raised by the auth module and are converted into
JSON payloads by the auth routes and the auth gate.
"""

from shared.exceptions import AuthenticationError, StorageError, ValidationError


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class CorruptCredentialError(AuthenticationError):
    """Raised when a stored password digest cannot be parsed."""

    def __init__(self, message: str = "Stored password hash is malformed"):
        super().__init__(message, code="CORRUPT_CREDENTIAL")


class EmailNotFoundError(AuthenticationError):
    """Raised when logging in with an email that has no account."""

    def __init__(self, email: str):
        super().__init__(
            "Email not found",
            code="EMAIL_NOT_FOUND",
            details={"email": email},
        )


class WrongPasswordError(AuthenticationError):
    """Raised when the password does not match the stored hash."""

    def __init__(self):
        super().__init__("Password is wrong", code="WRONG_PASSWORD")


class DuplicateEmailError(StorageError):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            f"Email already registered: {email}",
            code="DUPLICATE_EMAIL",
            details={"email": email},
        )


class MissingSigningKeyError(ValidationError):
    """Raised when tokens are issued or verified without a JWT_KEY."""

    def __init__(self):
        super().__init__(
            "Token signing key not configured. Set the JWT_KEY environment variable.",
            code="MISSING_SIGNING_KEY",
        )
