"""
Bearer token codec.

Signs and verifies JWTs with the process-wide JWT_KEY. Tokens carry no
expiry unless JWT_EXPIRES_IN is configured, and there is no revocation.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Mapping, Optional

import jwt

from .exceptions import ExpiredTokenError, InvalidTokenError, MissingSigningKeyError


class TokenService:
    """Issues and verifies signed claim sets."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: Optional[int] = None,
    ) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = expires_in

    def issue(self, claims: Mapping[str, Any]) -> str:
        """
        Sign a claim mapping.

        Args:
            claims: Arbitrary JSON-serializable claims

        Returns:
            Encoded JWT with `iat` added (and `exp` when an expiry is set)
        """
        if not self._secret:
            raise MissingSigningKeyError()

        now = datetime.now(timezone.utc)
        payload = {"iat": int(now.timestamp()), **claims}
        if self._expires_in is not None:
            payload["exp"] = int((now + timedelta(seconds=self._expires_in)).timestamp())
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> dict[str, Any]:
        """
        Decode a token and check its signature and expiry.

        Raises:
            ExpiredTokenError: If the embedded `exp` has passed
            InvalidTokenError: If the token is malformed or the signature fails
        """
        if not self._secret:
            raise MissingSigningKeyError()

        try:
            return jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))
