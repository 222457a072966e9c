"""
Job repository - data access for Job entity.
"""
from typing import List, Optional

from sqlalchemy import select, and_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from jobly.models.job import Job
from jobly.repositories.base import BaseRepository


class JobRepository(BaseRepository[Job]):
    # title, salary and equity are spelled the same in SQL
    js_to_sql = {}

    def __init__(self):
        super().__init__(Job, Job.id)

    async def find_with_filters(
        self,
        db: AsyncSession,
        *,
        title: Optional[str] = None,
        min_salary: Optional[int] = None,
        has_equity: Optional[bool] = None,
    ) -> List[Job]:
        """
        Find jobs with filters, ordered by title.

        ``has_equity=False`` (or None) does not filter at all; only True
        narrows to jobs offering a non-zero equity share.
        """
        query = select(Job).options(selectinload(Job.company))

        filters = []

        if title:
            filters.append(Job.title.ilike(f"%{title}%"))

        if min_salary is not None:
            filters.append(Job.salary >= min_salary)

        if has_equity:
            filters.append(Job.equity > 0)

        if filters:
            query = query.where(and_(*filters))

        result = await db.execute(query.order_by(Job.title, Job.id))
        return list(result.scalars().all())

    async def get_with_company(
        self,
        db: AsyncSession,
        job_id: int,
    ) -> Optional[Job]:
        """Get a job with company eagerly loaded."""
        result = await db.execute(
            select(Job)
            .options(selectinload(Job.company))
            .where(Job.id == job_id)
        )
        return result.scalar_one_or_none()
