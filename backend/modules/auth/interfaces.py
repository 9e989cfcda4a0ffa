"""
Authentication module interface.

Routes depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for registration and login.

    Implementations must provide all these methods.
    """

    async def register(self, email: str, password: str) -> str:
        """
        Create an account and issue a token for it.

        Args:
            email: Email address, stored as given
            password: Plaintext password, stored only as a hash

        Returns:
            Signed bearer token

        Raises:
            DuplicateEmailError: If the email already has an account
        """
        ...

    async def login(self, email: str, password: str) -> str:
        """
        Check credentials and issue a token.

        Returns:
            Signed bearer token

        Raises:
            EmailNotFoundError: If no account has this email
            WrongPasswordError: If the password does not match
            CorruptCredentialError: If the stored hash is malformed
        """
        ...
