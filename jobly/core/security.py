"""
Password hashing and the signed tokens Jobly hands out.

A token identifies a user by username (``sub``) and carries the admin flag,
so authorization never needs a database round trip.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Any

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel, ValidationError

from jobly.core.config import settings


pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_work_factor,
)

ACCESS_TOKEN_TYPE = "access"


class TokenClaims(BaseModel):
    """The claims Jobly reads back out of a token."""

    sub: str
    is_admin: bool = False
    type: str


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(
    username: str,
    is_admin: bool = False,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Sign a token for ``username``.

    Args:
        username: Stored as the ``sub`` claim
        is_admin: Stored as the ``is_admin`` claim
        expires_delta: Lifetime; defaults to ACCESS_TOKEN_EXPIRE_MINUTES
    """
    issued_at = datetime.now(timezone.utc)
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)

    claims = {
        "sub": username,
        "is_admin": is_admin,
        "type": ACCESS_TOKEN_TYPE,
        "iat": issued_at,
        "exp": issued_at + lifetime,
    }
    return jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)


def decode_token(token: str) -> Optional[dict[str, Any]]:
    """Raw payload of a correctly signed, unexpired token; None otherwise."""
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None


def verify_token_type(payload: dict[str, Any], expected_type: str) -> bool:
    return payload.get("type") == expected_type


def read_access_token(token: str) -> Optional[TokenClaims]:
    """
    Validate an access token and return its claims.

    Anything short of a well-formed access token (bad signature, expired,
    wrong type, missing ``sub``) gives None.
    """
    payload = decode_token(token)
    if payload is None or not verify_token_type(payload, ACCESS_TOKEN_TYPE):
        return None
    try:
        claims = TokenClaims.model_validate(payload)
    except ValidationError:
        return None
    return claims if claims.sub else None
