"""
User routes.

Thin controllers - all business logic lives in UserService.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.database import get_db
from jobly.api.deps import CurrentUser, ensure_admin, ensure_correct_user_or_admin
from jobly.services.user_service import UserService
from jobly.schemas.base import DeletedResponse
from jobly.schemas.user import (
    AppliedResponse,
    UserCreate,
    UserDetailEnvelope,
    UserEnvelope,
    UserListResponse,
    UserTokenResponse,
    UserUpdate,
)

router = APIRouter(prefix="/users", tags=["users"])

user_service = UserService()


@router.post("", response_model=UserTokenResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    admin: CurrentUser = Depends(ensure_admin),
    db: AsyncSession = Depends(get_db),
):
    """
    Add a user, who may be an admin. Returns the user and a token for them.

    Self-registration goes through POST /auth/register instead.

    Authorization required: admin
    """
    return await user_service.create_user(db, data)


@router.get("", response_model=UserListResponse)
async def list_users(
    admin: CurrentUser = Depends(ensure_admin),
    db: AsyncSession = Depends(get_db),
):
    """
    List all users.

    Authorization required: admin
    """
    return await user_service.list_users(db)


@router.get("/{username}", response_model=UserDetailEnvelope)
async def get_user(
    username: str,
    current_user: CurrentUser = Depends(ensure_correct_user_or_admin),
    db: AsyncSession = Depends(get_db),
):
    """
    Get a user and the ids of jobs they applied to.

    Authorization required: admin or same user
    """
    user = await user_service.get_user(db, username)
    return UserDetailEnvelope(user=user)


@router.patch("/{username}", response_model=UserEnvelope)
async def update_user(
    username: str,
    data: UserUpdate,
    current_user: CurrentUser = Depends(ensure_correct_user_or_admin),
    db: AsyncSession = Depends(get_db),
):
    """
    Update some of firstName, lastName, password, email.

    Authorization required: admin or same user
    """
    user = await user_service.update_user(db, username, data)
    return UserEnvelope(user=user)


@router.delete("/{username}", response_model=DeletedResponse)
async def delete_user(
    username: str,
    current_user: CurrentUser = Depends(ensure_correct_user_or_admin),
    db: AsyncSession = Depends(get_db),
):
    """
    Delete a user.

    Authorization required: admin or same user
    """
    await user_service.delete_user(db, username)
    return DeletedResponse(deleted=username)


@router.post("/{username}/jobs/{job_id}", response_model=AppliedResponse)
async def apply_to_job(
    username: str,
    job_id: int,
    current_user: CurrentUser = Depends(ensure_correct_user_or_admin),
    db: AsyncSession = Depends(get_db),
):
    """
    Apply to a job.

    Authorization required: admin or same user
    """
    applied = await user_service.apply_to_job(db, username, job_id)
    return AppliedResponse(applied=applied)
