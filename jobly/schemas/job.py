"""
Job schemas.
"""
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from jobly.schemas.base import BaseSchema, PatchSchema, RequestSchema
from jobly.schemas.company import CompanyResponse


class JobCreate(RequestSchema):
    """Job creation schema."""

    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)
    company_handle: str = Field(..., min_length=1, max_length=25)


class JobUpdate(PatchSchema):
    """Job update schema. ``id`` and ``companyHandle`` cannot change."""

    non_nullable = frozenset({"title"})

    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)


class JobResponse(BaseSchema):
    """Job response schema."""

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    company_handle: str


class JobListItem(JobResponse):
    """Job list item, with the company's display name."""

    company_name: str


class JobDetail(BaseSchema):
    """Full job detail with its company."""

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    company: CompanyResponse


class JobEnvelope(BaseSchema):
    job: JobResponse


class JobDetailEnvelope(BaseSchema):
    job: JobDetail


class JobListResponse(BaseSchema):
    jobs: List[JobListItem]
