"""
User repository - data access for User entity and job applications.
"""
from typing import List

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.models.user import Application, User
from jobly.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    js_to_sql = {
        "firstName": "first_name",
        "lastName": "last_name",
        "isAdmin": "is_admin",
    }

    def __init__(self):
        super().__init__(User, User.username)

    async def get_application_ids(
        self,
        db: AsyncSession,
        username: str,
    ) -> List[int]:
        """Ids of the jobs a user has applied to, ascending."""
        result = await db.execute(
            select(Application.job_id)
            .where(Application.username == username)
            .order_by(Application.job_id)
        )
        return list(result.scalars().all())

    async def add_application(
        self,
        db: AsyncSession,
        username: str,
        job_id: int,
    ) -> None:
        """Record an application. Applying twice is a no-op."""
        stmt = (
            pg_insert(Application)
            .values(username=username, job_id=job_id)
            .on_conflict_do_nothing(index_elements=["username", "job_id"])
        )
        await db.execute(stmt)

