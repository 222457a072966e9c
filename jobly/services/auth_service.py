"""
Authentication service - handles registration, login, and token issuing.
"""
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.logging import get_logger
from jobly.core.security import (
    verify_password,
    hash_password,
    create_access_token,
)
from jobly.core.exceptions import (
    InvalidCredentialsException,
    DuplicateUsernameException,
)
from jobly.models.user import User
from jobly.repositories.user_repository import UserRepository
from jobly.schemas.auth import TokenResponse

logger = get_logger(__name__)


class AuthService:
    """Handles all authentication business logic."""

    def __init__(self):
        self.user_repo = UserRepository()

    async def create_user(
        self,
        db: AsyncSession,
        *,
        username: str,
        password: str,
        first_name: str,
        last_name: str,
        email: str,
        is_admin: bool = False,
    ) -> User:
        """
        Create a user with a hashed password.

        Raises:
            DuplicateUsernameException: If the username is taken.
        """
        if await self.user_repo.exists(db, username):
            raise DuplicateUsernameException(username)

        user = await self.user_repo.create(
            db,
            username=username,
            password=hash_password(password),
            first_name=first_name,
            last_name=last_name,
            email=email,
            is_admin=is_admin,
        )
        await db.commit()

        logger.info("user_registered", username=username, is_admin=is_admin)
        return user

    async def register(
        self,
        db: AsyncSession,
        *,
        username: str,
        password: str,
        first_name: str,
        last_name: str,
        email: str,
    ) -> TokenResponse:
        """Self-registration: create a non-admin user and return a token."""
        user = await self.create_user(
            db,
            username=username,
            password=password,
            first_name=first_name,
            last_name=last_name,
            email=email,
            is_admin=False,
        )
        return self.issue_token(user)

    async def authenticate(
        self,
        db: AsyncSession,
        *,
        username: str,
        password: str,
    ) -> User:
        """
        Check a username/password pair.

        Raises:
            InvalidCredentialsException: If username or password is wrong.
        """
        user = await self.user_repo.get_by_key(db, username)

        if not user or not verify_password(password, user.password):
            logger.warning("login_failed", username=username)
            raise InvalidCredentialsException()

        return user

    async def login(
        self,
        db: AsyncSession,
        *,
        username: str,
        password: str,
    ) -> TokenResponse:
        """Authenticate and return a token."""
        user = await self.authenticate(db, username=username, password=password)
        return self.issue_token(user)

    def issue_token(self, user: User) -> TokenResponse:
        """Sign a token carrying the username and admin flag."""
        return TokenResponse(
            token=create_access_token(user.username, is_admin=user.is_admin),
        )
