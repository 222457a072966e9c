"""
User service - business logic for user management and job applications.

Routes never touch the database directly - they call methods here.
"""
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.exceptions import JobNotFoundException, UserNotFoundException
from jobly.core.logging import get_logger
from jobly.core.security import hash_password
from jobly.repositories.job_repository import JobRepository
from jobly.repositories.user_repository import UserRepository
from jobly.schemas.user import (
    UserCreate,
    UserDetail,
    UserListResponse,
    UserResponse,
    UserTokenResponse,
    UserUpdate,
)
from jobly.services.auth_service import AuthService

logger = get_logger(__name__)


class UserService:
    """Handles user administration, profile changes and applications."""

    def __init__(self):
        self.user_repo = UserRepository()
        self.job_repo = JobRepository()
        self.auth_service = AuthService()

    async def create_user(
        self,
        db: AsyncSession,
        data: UserCreate,
    ) -> UserTokenResponse:
        """Admin creates a user (possibly another admin); returns user and token."""
        user = await self.auth_service.create_user(db, **data.model_dump())
        token = self.auth_service.issue_token(user)
        return UserTokenResponse(
            user=UserResponse.model_validate(user),
            token=token.token,
        )

    async def list_users(
        self,
        db: AsyncSession,
    ) -> UserListResponse:
        """All users, ordered by username."""
        users = await self.user_repo.get_many(db)
        return UserListResponse(
            users=[UserResponse.model_validate(u) for u in users],
        )

    async def get_user(
        self,
        db: AsyncSession,
        username: str,
    ) -> UserDetail:
        """
        Get a user with the ids of the jobs they applied to.

        Raises:
            UserNotFoundException: If no such user.
        """
        user = await self.user_repo.get_by_key(db, username)
        if not user:
            raise UserNotFoundException(username)

        applications = await self.user_repo.get_application_ids(db, username)
        return UserDetail(
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            is_admin=user.is_admin,
            applications=applications,
        )

    async def update_user(
        self,
        db: AsyncSession,
        username: str,
        data: UserUpdate,
    ) -> UserResponse:
        """
        Apply a partial update. A new password is hashed before storage.

        Raises:
            QueryBuildError: If the body has no fields.
            UserNotFoundException: If no such user.
        """
        updates = data.to_update()
        if "password" in updates:
            updates["password"] = hash_password(updates["password"])

        row = await self.user_repo.partial_update(db, username, updates)
        if row is None:
            raise UserNotFoundException(username)
        await db.commit()

        logger.info("user_updated", username=username, fields=sorted(data.model_fields_set))
        return UserResponse.model_validate(row)

    async def delete_user(
        self,
        db: AsyncSession,
        username: str,
    ) -> None:
        """
        Delete a user and their applications.

        Raises:
            UserNotFoundException: If no such user.
        """
        if not await self.user_repo.delete(db, username):
            raise UserNotFoundException(username)
        await db.commit()

        logger.info("user_deleted", username=username)

    async def apply_to_job(
        self,
        db: AsyncSession,
        username: str,
        job_id: int,
    ) -> int:
        """
        Record that a user applied to a job.

        Raises:
            JobNotFoundException: If the job doesn't exist.
            UserNotFoundException: If the user doesn't exist.
        """
        if not await self.job_repo.exists(db, job_id):
            raise JobNotFoundException(job_id)
        if not await self.user_repo.exists(db, username):
            raise UserNotFoundException(username)

        await self.user_repo.add_application(db, username, job_id)
        await db.commit()

        logger.info("job_applied", username=username, job_id=job_id)
        return job_id
