"""
JWT authentication gate.

Validates the bearer token on protected routes and reports the outcome as
an AuthResult. Failed checks do not raise: the route layer inspects the
result and decides whether to continue (the default) or to reject the
request (AUTH_ENFORCE=true).
"""

import logging
from enum import Enum
from typing import Any, Optional

from fastapi import Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from modules.auth.exceptions import ExpiredTokenError, InvalidTokenError
from modules.auth.models import TokenClaims
from modules.auth.tokens import TokenService
from shared.config import Settings
from shared.models import AuthenticatedUser

from ..dependencies import ServiceContainer, get_container

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"


class AuthErrorKind(str, Enum):
    """Why a request failed the auth gate."""

    MISSING_HEADER = "missing_header"
    INVALID_SCHEME = "invalid_scheme"
    INVALID_TOKEN = "invalid_token"
    TOKEN_EXPIRED = "token_expired"


AUTH_ERROR_MESSAGES = {
    AuthErrorKind.MISSING_HEADER: "Invalid authorization, no authorization headers",
    AuthErrorKind.INVALID_SCHEME: "Invalid authorization, invalid authorization scheme",
    AuthErrorKind.INVALID_TOKEN: "Invalid token",
    AuthErrorKind.TOKEN_EXPIRED: "Token expired",
}


class AuthResult(BaseModel):
    """
    Outcome of the auth gate for one request.

    claims holds the decoded token whenever verification succeeded. user is
    only set when those claims carry a usable userId and email.
    """

    claims: Optional[dict[str, Any]] = None
    user: Optional[AuthenticatedUser] = None
    error: Optional[AuthErrorKind] = None
    message: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def authenticated(self) -> bool:
        return self.error is None and self.claims is not None

    @classmethod
    def failure(cls, kind: AuthErrorKind, detail: Optional[str] = None) -> "AuthResult":
        message = AUTH_ERROR_MESSAGES[kind]
        if detail:
            message = f"{message}: {detail}"
        return cls(error=kind, message=message)


class AuthGate:
    """
    Checks an Authorization header against the token service.

    Usage:
        result = gate.check(request.headers.get("Authorization"))
        if result.authenticated:
            ...
    """

    def __init__(self, tokens: TokenService) -> None:
        self._tokens = tokens

    def check(self, authorization: Optional[str]) -> AuthResult:
        """
        Validate an Authorization header value.

        The header must be exactly "<scheme> <token>" with the scheme
        literally "Bearer". Token errors become failed results; any other
        exception from the token service propagates.
        """
        if not authorization:
            return AuthResult.failure(AuthErrorKind.MISSING_HEADER)

        parts = authorization.split(" ")
        if len(parts) != 2 or parts[0] != BEARER_SCHEME:
            return AuthResult.failure(AuthErrorKind.INVALID_SCHEME)

        try:
            claims = self._tokens.verify(parts[1])
        except ExpiredTokenError:
            return AuthResult.failure(AuthErrorKind.TOKEN_EXPIRED)
        except InvalidTokenError as e:
            return AuthResult.failure(AuthErrorKind.INVALID_TOKEN, e.message)

        return AuthResult(claims=claims, user=_identity(claims))


def _identity(claims: dict[str, Any]) -> Optional[AuthenticatedUser]:
    """The user named by verified claims, or None if they name nobody usable."""
    try:
        token_claims = TokenClaims.model_validate(claims)
    except ValidationError:
        logger.debug(f"Verified token has no usable identity: {sorted(claims)}")
        return None
    return AuthenticatedUser(id=token_claims.userId, email=token_claims.email)


async def authenticate(
    request: Request,
    container: ServiceContainer = Depends(get_container),
) -> AuthResult:
    """
    Dependency that runs the auth gate for a protected route.

    The result is also stored on request.state.auth. Failures are logged
    here; the route decides what to do with them.

    Usage:
        @router.get("/protected")
        async def protected_route(auth: AuthResult = Depends(authenticate)):
            if auth.user:
                return {"user_id": auth.user.id}
    """
    result = container.auth_gate.check(request.headers.get("Authorization"))
    request.state.auth = result
    if not result.authenticated:
        logger.warning(f"Auth gate failed for {request.method} {request.url.path}: {result.message}")
    return result


def auth_failure_response(result: AuthResult, settings: Settings) -> Optional[JSONResponse]:
    """
    The response a protected route should return instead of running.

    None means the handler continues. Unless AUTH_ENFORCE is on, that is
    also the case for failed checks, so handlers must not assume
    result.user is set.
    """
    if result.authenticated or not settings.auth_enforce:
        return None
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"error": result.message, "success": False},
        headers={"WWW-Authenticate": BEARER_SCHEME},
    )
