"""
Company routes.

Thin controllers - CompanyService handles validation across fields,
persistence and response construction.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.database import get_db
from jobly.api.deps import CurrentUser, ensure_admin
from jobly.services.company_service import CompanyService
from jobly.schemas.base import DeletedResponse
from jobly.schemas.company import (
    CompanyCreate,
    CompanyDetailEnvelope,
    CompanyEnvelope,
    CompanyListResponse,
    CompanyUpdate,
)

router = APIRouter(prefix="/companies", tags=["companies"])

company_service = CompanyService()


@router.post("", response_model=CompanyEnvelope, status_code=status.HTTP_201_CREATED)
async def create_company(
    data: CompanyCreate,
    admin: CurrentUser = Depends(ensure_admin),
    db: AsyncSession = Depends(get_db),
):
    """
    Create a company.

    Authorization required: admin
    """
    company = await company_service.create_company(db, data)
    return CompanyEnvelope(company=company)


@router.get("", response_model=CompanyListResponse)
async def list_companies(
    name_like: Optional[str] = Query(None, alias="nameLike", description="Case-insensitive name match"),
    min_employees: Optional[int] = Query(None, alias="minEmployees", ge=0),
    max_employees: Optional[int] = Query(None, alias="maxEmployees", ge=0),
    db: AsyncSession = Depends(get_db),
):
    """
    List companies, optionally filtered by name and head count.

    Authorization required: none
    """
    return await company_service.list_companies(
        db,
        name_like=name_like,
        min_employees=min_employees,
        max_employees=max_employees,
    )


@router.get("/{handle}", response_model=CompanyDetailEnvelope)
async def get_company(
    handle: str,
    db: AsyncSession = Depends(get_db),
):
    """
    Get a company and its jobs.

    Authorization required: none
    """
    company = await company_service.get_company(db, handle)
    return CompanyDetailEnvelope(company=company)


@router.patch("/{handle}", response_model=CompanyEnvelope)
async def update_company(
    handle: str,
    data: CompanyUpdate,
    admin: CurrentUser = Depends(ensure_admin),
    db: AsyncSession = Depends(get_db),
):
    """
    Update some of name, description, numEmployees, logoUrl.

    Authorization required: admin
    """
    company = await company_service.update_company(db, handle, data)
    return CompanyEnvelope(company=company)


@router.delete("/{handle}", response_model=DeletedResponse)
async def delete_company(
    handle: str,
    admin: CurrentUser = Depends(ensure_admin),
    db: AsyncSession = Depends(get_db),
):
    """
    Delete a company and its jobs.

    Authorization required: admin
    """
    await company_service.delete_company(db, handle)
    return DeletedResponse(deleted=handle)
