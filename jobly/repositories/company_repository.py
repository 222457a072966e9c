"""
Company repository - data access for Company entity.
"""
from typing import List, Optional

from sqlalchemy import select, and_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from jobly.models.company import Company
from jobly.repositories.base import BaseRepository


class CompanyRepository(BaseRepository[Company]):
    js_to_sql = {
        "numEmployees": "num_employees",
        "logoUrl": "logo_url",
    }

    def __init__(self):
        super().__init__(Company, Company.handle)

    async def find_all(
        self,
        db: AsyncSession,
        *,
        name_like: Optional[str] = None,
        min_employees: Optional[int] = None,
        max_employees: Optional[int] = None,
    ) -> List[Company]:
        """
        Find companies matching every given filter, ordered by name.

        ``name_like`` is a case-insensitive substring match.
        """
        query = select(Company)

        filters = []

        if name_like:
            filters.append(Company.name.ilike(f"%{name_like}%"))

        if min_employees is not None:
            filters.append(Company.num_employees >= min_employees)

        if max_employees is not None:
            filters.append(Company.num_employees <= max_employees)

        if filters:
            query = query.where(and_(*filters))

        result = await db.execute(query.order_by(Company.name))
        return list(result.scalars().all())

    async def get_with_jobs(
        self,
        db: AsyncSession,
        handle: str,
    ) -> Optional[Company]:
        """Get a company with its jobs eagerly loaded."""
        result = await db.execute(
            select(Company)
            .options(selectinload(Company.jobs))
            .where(Company.handle == handle)
        )
        return result.scalar_one_or_none()
