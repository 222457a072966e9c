"""
Job routes.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.database import get_db
from jobly.api.deps import CurrentUser, ensure_admin
from jobly.services.job_service import JobService
from jobly.schemas.base import DeletedResponse
from jobly.schemas.job import (
    JobCreate,
    JobDetailEnvelope,
    JobEnvelope,
    JobListResponse,
    JobUpdate,
)

router = APIRouter(prefix="/jobs", tags=["jobs"])

job_service = JobService()


@router.post("", response_model=JobEnvelope, status_code=status.HTTP_201_CREATED)
async def create_job(
    data: JobCreate,
    admin: CurrentUser = Depends(ensure_admin),
    db: AsyncSession = Depends(get_db),
):
    """
    Post a job.

    Authorization required: admin
    """
    job = await job_service.create_job(db, data)
    return JobEnvelope(job=job)


@router.get("", response_model=JobListResponse)
async def list_jobs(
    title: Optional[str] = Query(None, description="Case-insensitive title match"),
    min_salary: Optional[int] = Query(None, alias="minSalary", ge=0),
    has_equity: Optional[bool] = Query(None, alias="hasEquity", description="Only jobs offering equity"),
    db: AsyncSession = Depends(get_db),
):
    """
    List jobs with optional filters.

    Authorization required: none
    """
    return await job_service.list_jobs(
        db,
        title=title,
        min_salary=min_salary,
        has_equity=has_equity,
    )


@router.get("/{job_id}", response_model=JobDetailEnvelope)
async def get_job(
    job_id: int,
    db: AsyncSession = Depends(get_db),
):
    """
    Get a job and its company.

    Authorization required: none
    """
    job = await job_service.get_job(db, job_id)
    return JobDetailEnvelope(job=job)


@router.patch("/{job_id}", response_model=JobEnvelope)
async def update_job(
    job_id: int,
    data: JobUpdate,
    admin: CurrentUser = Depends(ensure_admin),
    db: AsyncSession = Depends(get_db),
):
    """
    Update some of title, salary, equity.

    Authorization required: admin
    """
    job = await job_service.update_job(db, job_id, data)
    return JobEnvelope(job=job)


@router.delete("/{job_id}", response_model=DeletedResponse)
async def delete_job(
    job_id: int,
    admin: CurrentUser = Depends(ensure_admin),
    db: AsyncSession = Depends(get_db),
):
    """
    Delete a job.

    Authorization required: admin
    """
    await job_service.delete_job(db, job_id)
    return DeletedResponse(deleted=job_id)
