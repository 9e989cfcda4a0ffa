"""
Authentication service implementation.

Registers users and checks logins against the users table, issuing
bearer tokens through the TokenService.
"""

import logging

from .credentials import CredentialService
from .exceptions import EmailNotFoundError, WrongPasswordError
from .interfaces import IAuthService
from .repository import UserRepository
from .tokens import TokenService

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Built per request: the repository is bound to that request's session,
    while the credential and token services are process-wide.
    """

    def __init__(
        self,
        repository: UserRepository,
        credentials: CredentialService,
        tokens: TokenService,
    ):
        self._users = repository
        self._credentials = credentials
        self._tokens = tokens

    async def register(self, email: str, password: str) -> str:
        password_hash = await self._credentials.hash_password(password)
        user_id = await self._users.create(email, password_hash)
        logger.info(f"Registered user {user_id}")
        return self._tokens.issue({"userId": user_id, "email": email})

    async def login(self, email: str, password: str) -> str:
        user = await self._users.get_by_email(email)
        if user is None:
            raise EmailNotFoundError(email)

        if not await self._credentials.verify_password(password, user.password):
            raise WrongPasswordError()

        return self._tokens.issue({"userId": user.id, "email": user.email})
