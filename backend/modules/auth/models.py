"""
Authentication module data models.

These models define the request and response shapes of the auth routes
and the records the auth module reads from the database.
"""

from typing import Optional
from pydantic import BaseModel, Field, StrictInt, StrictStr


class UserRecord(BaseModel):
    """A row of the users table."""

    id: int = Field(..., description="User ID")
    email: str = Field(..., description="Email address, as stored")
    password: str = Field(..., description="bcrypt digest")


class Credentials(BaseModel):
    """Email and plaintext password, as submitted to /register and /login."""

    email: str
    password: str


class TokenResponse(BaseModel):
    """Successful registration or login."""

    jwt: str = Field(..., description="Signed bearer token")
    success: bool = True


class RegisterErrorResponse(BaseModel):
    """Failed registration."""

    err: str
    success: bool = False


class LoginErrorResponse(BaseModel):
    """Failed login."""

    error: str
    success: bool = False


class LogoutResponse(BaseModel):
    success: bool = True


class TokenClaims(BaseModel):
    """Identity claims carried by the tokens this service issues."""

    userId: StrictInt
    email: StrictStr
    iat: Optional[int] = None
    exp: Optional[int] = None

    model_config = {"extra": "ignore"}
