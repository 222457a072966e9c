"""
Authentication routes.
"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.database import get_db
from jobly.core.rate_limit import limiter, RATE_AUTH
from jobly.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from jobly.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])

auth_service = AuthService()


@router.post("/token", response_model=TokenResponse)
@limiter.limit(RATE_AUTH)
async def get_token(
    request: Request,
    data: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Exchange username and password for a JWT.

    Authorization required: none
    """
    return await auth_service.login(db, username=data.username, password=data.password)


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_AUTH)
async def register(
    request: Request,
    data: RegisterRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Register a new (non-admin) user and return a JWT.

    Authorization required: none
    """
    return await auth_service.register(db, **data.model_dump())
