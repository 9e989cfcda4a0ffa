"""
Authentication API endpoints.

Registration, login and logout. These routes are public; they use the
request's database session but not the auth gate.
"""

import logging
from typing import Union

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from api.dependencies import get_auth_service
from shared.exceptions import CatalogError

from .exceptions import EmailNotFoundError, WrongPasswordError
from .interfaces import IAuthService
from .models import (
    Credentials,
    LoginErrorResponse,
    LogoutResponse,
    RegisterErrorResponse,
    TokenResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

TOKEN_COOKIE = "jwtToken"


@router.post("/register", response_model=Union[TokenResponse, RegisterErrorResponse])
async def register(
    credentials: Credentials,
    service: IAuthService = Depends(get_auth_service),
) -> Union[TokenResponse, RegisterErrorResponse]:
    """
    Create an account and return a token for it.

    Failures (including a duplicate email) are reported in the body
    with success=false.
    """
    try:
        token = await service.register(credentials.email, credentials.password)
    except (CatalogError, SQLAlchemyError) as e:
        logger.warning(f"Registration failed: {e}")
        return RegisterErrorResponse(err=str(e))
    return TokenResponse(jwt=token)


@router.post("/login", response_model=Union[TokenResponse, LoginErrorResponse])
async def login(
    credentials: Credentials,
    response: Response,
    service: IAuthService = Depends(get_auth_service),
):
    """
    Check credentials, set the jwtToken cookie and return the token.
    """
    try:
        token = await service.login(credentials.email, credentials.password)
    except (EmailNotFoundError, WrongPasswordError) as e:
        return LoginErrorResponse(error=e.message)
    except (CatalogError, SQLAlchemyError):
        logger.exception("Error in /login")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "success": False},
        )

    response.set_cookie(TOKEN_COOKIE, token, httponly=True)
    return TokenResponse(jwt=token)


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response) -> LogoutResponse:
    """Clear the jwtToken cookie."""
    response.delete_cookie(TOKEN_COOKIE)
    return LogoutResponse()
