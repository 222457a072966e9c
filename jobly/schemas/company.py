"""
Company schemas.
"""
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from jobly.schemas.base import BaseSchema, PatchSchema, RequestSchema


class CompanyCreate(RequestSchema):
    """Company creation schema."""

    handle: str = Field(..., min_length=1, max_length=25, pattern=r"^[a-z0-9_-]+$")
    name: str = Field(..., min_length=1)
    description: str
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None


class CompanyUpdate(PatchSchema):
    """Company update schema. ``handle`` cannot change."""

    non_nullable = frozenset({"name", "description"})

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None


class CompanyResponse(BaseSchema):
    """Company response schema."""

    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class CompanyJob(BaseSchema):
    """Job as listed on its company's page."""

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None


class CompanyDetail(CompanyResponse):
    """Company with its jobs."""

    jobs: List[CompanyJob] = []


class CompanyEnvelope(BaseSchema):
    company: CompanyResponse


class CompanyDetailEnvelope(BaseSchema):
    company: CompanyDetail


class CompanyListResponse(BaseSchema):
    companies: List[CompanyResponse]
