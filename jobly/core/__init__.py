"""Core module exports."""
from jobly.core.config import settings, get_settings
from jobly.core.database import Base, get_db, init_db, close_db, engine, async_session_maker
from jobly.core.security import (
    verify_password,
    hash_password,
    create_access_token,
    decode_token,
    verify_token_type,
    read_access_token,
    TokenClaims,
)
from jobly.core.sql import UpdateFragment, sql_for_partial_update
from jobly.core.exceptions import (
    ErrorKind,
    QueryBuildError,
    APIException,
    BadRequestException,
    UnauthorizedException,
    NotFoundException,
    ValidationException,
    InternalServerException,
    InvalidCredentialsException,
    CompanyNotFoundException,
    JobNotFoundException,
    UserNotFoundException,
    DuplicateCompanyException,
    DuplicateCompanyNameException,
    DuplicateUsernameException,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Database
    "Base",
    "get_db",
    "init_db",
    "close_db",
    "engine",
    "async_session_maker",
    # Security
    "verify_password",
    "hash_password",
    "create_access_token",
    "decode_token",
    "verify_token_type",
    "read_access_token",
    "TokenClaims",
    # SQL helpers
    "UpdateFragment",
    "sql_for_partial_update",
    # Exceptions
    "ErrorKind",
    "QueryBuildError",
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "NotFoundException",
    "ValidationException",
    "InternalServerException",
    "InvalidCredentialsException",
    "CompanyNotFoundException",
    "JobNotFoundException",
    "UserNotFoundException",
    "DuplicateCompanyException",
    "DuplicateCompanyNameException",
    "DuplicateUsernameException",
]
