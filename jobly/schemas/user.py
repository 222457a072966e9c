"""
User schemas.
"""
from typing import List, Optional

from pydantic import EmailStr, Field

from jobly.schemas.base import BaseSchema, PatchSchema, RequestSchema


class UserCreate(RequestSchema):
    """
    Admin-only user creation schema.

    Unlike self-registration, an admin may create other admins.
    """

    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=5, max_length=20)
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: EmailStr
    is_admin: bool = False


class UserUpdate(PatchSchema):
    """User update schema. ``username`` and ``isAdmin`` cannot change here."""

    non_nullable = frozenset({"first_name", "last_name", "password", "email"})

    first_name: Optional[str] = Field(None, min_length=1, max_length=30)
    last_name: Optional[str] = Field(None, min_length=1, max_length=30)
    password: Optional[str] = Field(None, min_length=5, max_length=20)
    email: Optional[EmailStr] = None


class UserResponse(BaseSchema):
    """User response schema. Never carries the password hash."""

    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool


class UserDetail(UserResponse):
    """User with the ids of jobs applied to."""

    applications: List[int] = []


class UserEnvelope(BaseSchema):
    user: UserResponse


class UserDetailEnvelope(BaseSchema):
    user: UserDetail


class UserListResponse(BaseSchema):
    users: List[UserResponse]


class UserTokenResponse(BaseSchema):
    """Returned when an admin creates a user."""

    user: UserResponse
    token: str


class AppliedResponse(BaseSchema):
    applied: int
