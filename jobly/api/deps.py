"""
API dependencies for dependency injection.

Authorization works from the signed token alone: the payload carries the
username (``sub``) and the admin flag, so no database lookup is needed.
"""
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel

from jobly.core.security import read_access_token
from jobly.core.exceptions import UnauthorizedException


# Security scheme
security = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    """Identity taken from a verified token."""

    username: str
    is_admin: bool = False


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[CurrentUser]:
    """
    Identify the caller if a valid token was sent.

    A missing, malformed or expired token is not an error here; the caller
    is simply anonymous. The ``ensure_*`` dependencies decide what that means.
    """
    if not credentials:
        return None

    claims = read_access_token(credentials.credentials)
    if claims is None:
        return None

    # Rate limiter keys on this when present
    request.state.username = claims.sub
    return CurrentUser(username=claims.sub, is_admin=claims.is_admin)


async def ensure_logged_in(
    current_user: Optional[CurrentUser] = Depends(get_current_user),
) -> CurrentUser:
    """
    Require any logged-in user.

    Raises:
        UnauthorizedException: If the caller is anonymous
    """
    if current_user is None:
        raise UnauthorizedException("Authentication required")
    return current_user


async def ensure_admin(
    current_user: Optional[CurrentUser] = Depends(get_current_user),
) -> CurrentUser:
    """
    Require an admin.

    Raises:
        UnauthorizedException: If the caller is anonymous or not an admin
    """
    if current_user is None or not current_user.is_admin:
        raise UnauthorizedException("Admin access required")
    return current_user


async def ensure_correct_user_or_admin(
    username: str,
    current_user: CurrentUser = Depends(ensure_logged_in),
) -> CurrentUser:
    """
    Require an admin, or the user named by the ``username`` path parameter.

    Raises:
        UnauthorizedException: Otherwise
    """
    if not (current_user.is_admin or current_user.username == username):
        raise UnauthorizedException("Not allowed to access this user")
    return current_user
