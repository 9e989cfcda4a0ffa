import pytest
from pydantic import ValidationError

from modules.auth.models import (
    Credentials,
    LoginErrorResponse,
    RegisterErrorResponse,
    TokenClaims,
    TokenResponse,
)
from shared.models import AuthenticatedUser


class TestAuthenticatedUser:
    def test_create_user(self):
        """Should create an authenticated user."""
        user = AuthenticatedUser(id=7, email="test@example.com")
        assert user.id == 7
        assert user.email == "test@example.com"

    def test_user_is_immutable(self):
        """AuthenticatedUser should be immutable."""
        user = AuthenticatedUser(id=7, email="test@example.com")
        with pytest.raises(ValidationError):
            user.id = 8

    def test_email_kept_as_given(self):
        """Emails are not normalized."""
        user = AuthenticatedUser(id=7, email="Test@Example.COM")
        assert user.email == "Test@Example.COM"


class TestTokenClaims:
    def test_parse_claims(self):
        """Should parse the claims the service issues."""
        claims = TokenClaims(userId=3, email="a@b.c", iat=1704063600)
        assert claims.userId == 3
        assert claims.exp is None

    def test_ignores_extra_claims(self):
        """Unknown claims should be dropped."""
        claims = TokenClaims(userId=3, email="a@b.c", role="admin")
        assert not hasattr(claims, "role")

    def test_requires_user_id(self):
        """A claim set without userId is not one of ours."""
        with pytest.raises(ValidationError):
            TokenClaims(email="a@b.c")

    def test_rejects_non_integer_user_id(self):
        """userId must already be an integer, not a numeric string."""
        with pytest.raises(ValidationError):
            TokenClaims(userId="42", email="a@b.c")


class TestResponses:
    def test_token_response_defaults_success(self):
        assert TokenResponse(jwt="abc").model_dump() == {"jwt": "abc", "success": True}

    def test_error_responses_default_failure(self):
        assert RegisterErrorResponse(err="x").model_dump() == {"err": "x", "success": False}
        assert LoginErrorResponse(error="x").model_dump() == {"error": "x", "success": False}

    def test_credentials_require_both_fields(self):
        with pytest.raises(ValidationError):
            Credentials(email="a@b.c")
