"""
Password hashing.

bcrypt through passlib. Hashing is CPU bound, so both operations run in
the threadpool and only suspend the calling request.
"""

from fastapi.concurrency import run_in_threadpool
from passlib.context import CryptContext

from .exceptions import CorruptCredentialError


class CredentialService:
    """One-way, salted password hashing."""

    def __init__(self, rounds: int = 10) -> None:
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__default_rounds=rounds,
        )

    async def hash_password(self, password: str) -> str:
        return await run_in_threadpool(self._context.hash, password)

    async def verify_password(self, password: str, password_hash: str) -> bool:
        """
        Check a plaintext password against a stored digest.

        Returns:
            True on match, False on mismatch

        Raises:
            CorruptCredentialError: If the digest is not a bcrypt hash
        """
        try:
            return await run_in_threadpool(self._context.verify, password, password_hash)
        except (ValueError, TypeError) as e:
            raise CorruptCredentialError(str(e)) from e
