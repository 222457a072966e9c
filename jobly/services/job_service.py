"""
Job service - business logic for job search and management.
"""
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.exceptions import CompanyNotFoundException, JobNotFoundException
from jobly.core.logging import get_logger
from jobly.models.job import Job
from jobly.repositories.company_repository import CompanyRepository
from jobly.repositories.job_repository import JobRepository
from jobly.schemas.company import CompanyResponse
from jobly.schemas.job import (
    JobCreate,
    JobDetail,
    JobListItem,
    JobListResponse,
    JobResponse,
    JobUpdate,
)

logger = get_logger(__name__)


class JobService:
    """Handles job search, detail retrieval, and admin changes."""

    def __init__(self):
        self.job_repo = JobRepository()
        self.company_repo = CompanyRepository()

    async def create_job(
        self,
        db: AsyncSession,
        data: JobCreate,
    ) -> JobResponse:
        """
        Post a job for an existing company.

        Raises:
            CompanyNotFoundException: If the company handle is unknown.
        """
        if not await self.company_repo.exists(db, data.company_handle):
            raise CompanyNotFoundException(data.company_handle)

        job = await self.job_repo.create(db, **data.model_dump())
        await db.commit()

        logger.info("job_created", job_id=job.id, company_handle=job.company_handle)
        return JobResponse.model_validate(job)

    async def list_jobs(
        self,
        db: AsyncSession,
        *,
        title: Optional[str] = None,
        min_salary: Optional[int] = None,
        has_equity: Optional[bool] = None,
    ) -> JobListResponse:
        """Search jobs. All filters are optional and combine with AND."""
        jobs = await self.job_repo.find_with_filters(
            db,
            title=title,
            min_salary=min_salary,
            has_equity=has_equity,
        )
        return JobListResponse(jobs=[self._to_list_item(job) for job in jobs])

    async def get_job(
        self,
        db: AsyncSession,
        job_id: int,
    ) -> JobDetail:
        """
        Get a job with its company.

        Raises:
            JobNotFoundException: If job doesn't exist.
        """
        job = await self.job_repo.get_with_company(db, job_id)
        if not job:
            raise JobNotFoundException(job_id)

        return JobDetail(
            id=job.id,
            title=job.title,
            salary=job.salary,
            equity=job.equity,
            company=CompanyResponse.model_validate(job.company),
        )

    async def update_job(
        self,
        db: AsyncSession,
        job_id: int,
        data: JobUpdate,
    ) -> JobResponse:
        """
        Apply a partial update to title, salary or equity.

        Raises:
            QueryBuildError: If the body has no fields.
            JobNotFoundException: If job doesn't exist.
        """
        row = await self.job_repo.partial_update(db, job_id, data.to_update())
        if row is None:
            raise JobNotFoundException(job_id)
        await db.commit()

        logger.info("job_updated", job_id=job_id, fields=sorted(data.model_fields_set))
        return JobResponse.model_validate(row)

    async def delete_job(
        self,
        db: AsyncSession,
        job_id: int,
    ) -> None:
        """
        Delete a job.

        Raises:
            JobNotFoundException: If job doesn't exist.
        """
        if not await self.job_repo.delete(db, job_id):
            raise JobNotFoundException(job_id)
        await db.commit()

        logger.info("job_deleted", job_id=job_id)

    def _to_list_item(self, job: Job) -> JobListItem:
        """Convert a Job model to a JobListItem response."""
        return JobListItem(
            id=job.id,
            title=job.title,
            salary=job.salary,
            equity=job.equity,
            company_handle=job.company_handle,
            company_name=job.company.name,
        )
