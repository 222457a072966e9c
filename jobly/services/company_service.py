"""
Company service - business logic for company search and management.
"""
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.exceptions import (
    BadRequestException,
    CompanyNotFoundException,
    DuplicateCompanyException,
    DuplicateCompanyNameException,
)
from jobly.core.logging import get_logger
from jobly.repositories.company_repository import CompanyRepository
from jobly.schemas.company import (
    CompanyCreate,
    CompanyDetail,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdate,
)

logger = get_logger(__name__)


class CompanyService:
    """Handles company search and management."""

    def __init__(self):
        self.company_repo = CompanyRepository()

    async def create_company(
        self,
        db: AsyncSession,
        data: CompanyCreate,
    ) -> CompanyResponse:
        """
        Create a company.

        Raises:
            DuplicateCompanyException: If the handle is taken.
            DuplicateCompanyNameException: If another company has the name.
        """
        if await self.company_repo.exists(db, data.handle):
            raise DuplicateCompanyException(data.handle)

        try:
            company = await self.company_repo.create(db, **data.model_dump())
        except IntegrityError:
            await db.rollback()
            raise DuplicateCompanyNameException(data.name)
        await db.commit()

        logger.info("company_created", handle=company.handle)
        return CompanyResponse.model_validate(company)

    async def list_companies(
        self,
        db: AsyncSession,
        *,
        name_like: Optional[str] = None,
        min_employees: Optional[int] = None,
        max_employees: Optional[int] = None,
    ) -> CompanyListResponse:
        """
        Search companies. All filters are optional and combine with AND.

        Raises:
            BadRequestException: If min_employees > max_employees.
        """
        if (
            min_employees is not None
            and max_employees is not None
            and min_employees > max_employees
        ):
            raise BadRequestException(
                "minEmployees cannot be greater than maxEmployees"
            )

        companies = await self.company_repo.find_all(
            db,
            name_like=name_like,
            min_employees=min_employees,
            max_employees=max_employees,
        )
        return CompanyListResponse(
            companies=[CompanyResponse.model_validate(c) for c in companies],
        )

    async def get_company(
        self,
        db: AsyncSession,
        handle: str,
    ) -> CompanyDetail:
        """
        Get a company and its jobs.

        Raises:
            CompanyNotFoundException: If no such company.
        """
        company = await self.company_repo.get_with_jobs(db, handle)
        if not company:
            raise CompanyNotFoundException(handle)
        return CompanyDetail.model_validate(company)

    async def update_company(
        self,
        db: AsyncSession,
        handle: str,
        data: CompanyUpdate,
    ) -> CompanyResponse:
        """
        Apply a partial update.

        Raises:
            QueryBuildError: If the body has no fields.
            CompanyNotFoundException: If no such company.
            DuplicateCompanyNameException: If another company has the new name.
        """
        try:
            row = await self.company_repo.partial_update(db, handle, data.to_update())
        except IntegrityError:
            await db.rollback()
            # name is the only unique column a PATCH can touch
            if "name" not in data.model_fields_set:
                raise
            raise DuplicateCompanyNameException(data.name)
        if row is None:
            raise CompanyNotFoundException(handle)
        await db.commit()

        logger.info("company_updated", handle=handle, fields=sorted(data.model_fields_set))
        return CompanyResponse.model_validate(row)

    async def delete_company(
        self,
        db: AsyncSession,
        handle: str,
    ) -> None:
        """
        Delete a company and, by cascade, its jobs.

        Raises:
            CompanyNotFoundException: If no such company.
        """
        if not await self.company_repo.delete(db, handle):
            raise CompanyNotFoundException(handle)
        await db.commit()

        logger.info("company_deleted", handle=handle)
