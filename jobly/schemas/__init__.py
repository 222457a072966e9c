"""
Pydantic schemas for API validation and serialization.
"""
from jobly.schemas.base import (
    BaseSchema,
    RequestSchema,
    PatchSchema,
    DeletedResponse,
    ErrorResponse,
)
from jobly.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
)
from jobly.schemas.company import (
    CompanyCreate,
    CompanyUpdate,
    CompanyResponse,
    CompanyJob,
    CompanyDetail,
    CompanyEnvelope,
    CompanyDetailEnvelope,
    CompanyListResponse,
)
from jobly.schemas.job import (
    JobCreate,
    JobUpdate,
    JobResponse,
    JobListItem,
    JobDetail,
    JobEnvelope,
    JobDetailEnvelope,
    JobListResponse,
)
from jobly.schemas.user import (
    UserCreate,
    UserUpdate,
    UserResponse,
    UserDetail,
    UserEnvelope,
    UserDetailEnvelope,
    UserListResponse,
    UserTokenResponse,
    AppliedResponse,
)

__all__ = [
    # Base
    "BaseSchema",
    "RequestSchema",
    "PatchSchema",
    "DeletedResponse",
    "ErrorResponse",
    # Auth
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    # Company
    "CompanyCreate",
    "CompanyUpdate",
    "CompanyResponse",
    "CompanyJob",
    "CompanyDetail",
    "CompanyEnvelope",
    "CompanyDetailEnvelope",
    "CompanyListResponse",
    # Job
    "JobCreate",
    "JobUpdate",
    "JobResponse",
    "JobListItem",
    "JobDetail",
    "JobEnvelope",
    "JobDetailEnvelope",
    "JobListResponse",
    # User
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "UserDetail",
    "UserEnvelope",
    "UserDetailEnvelope",
    "UserListResponse",
    "UserTokenResponse",
    "AppliedResponse",
]
