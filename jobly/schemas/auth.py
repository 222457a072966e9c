"""
Authentication schemas.
"""
from pydantic import EmailStr, Field

from jobly.schemas.base import BaseSchema, RequestSchema


class LoginRequest(RequestSchema):
    """Token request body."""

    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=1)


class RegisterRequest(RequestSchema):
    """Self-registration body. New users are never admins."""

    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=5, max_length=20)
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: EmailStr


class TokenResponse(BaseSchema):
    """Token response after successful authentication."""

    token: str
