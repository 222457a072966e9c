"""
Custom exceptions for the application.
All API exceptions should inherit from APIException for consistent error handling.
"""
from enum import Enum
from typing import Optional, Any


class ErrorKind(str, Enum):
    """
    Transport-neutral error kinds.

    Raised by helpers that know nothing about HTTP (see QueryBuildError);
    the status translation lives in jobly.main.
    """

    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"


class QueryBuildError(Exception):
    """Raised when a SQL fragment cannot be built from the caller's input."""

    def __init__(self, kind: ErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)


class APIException(Exception):
    """
    Base exception for all API errors.
    Provides consistent error response format.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Any] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        super().__init__(self.message)


class BadRequestException(APIException):
    """400 Bad Request"""

    def __init__(
        self,
        message: str = "Bad request",
        code: str = "BAD_REQUEST",
        details: Optional[Any] = None,
    ):
        super().__init__(400, code, message, details)


class UnauthorizedException(APIException):
    """401 Unauthorized"""

    def __init__(self, message: str = "Unauthorized", code: str = "UNAUTHORIZED"):
        super().__init__(401, code, message)


class NotFoundException(APIException):
    """404 Not Found"""

    def __init__(self, message: str = "Resource not found", code: str = "NOT_FOUND"):
        super().__init__(404, code, message)


class ValidationException(BadRequestException):
    """
    Request body or query failed schema validation.

    Reported as 400 rather than 422 so clients see one status for
    every kind of bad input.
    """

    def __init__(
        self,
        message: str = "Validation error",
        details: Optional[Any] = None,
    ):
        super().__init__(message, "VALIDATION_ERROR", details)


class InternalServerException(APIException):
    """500 Internal Server Error"""

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        code: str = "INTERNAL_ERROR",
    ):
        super().__init__(500, code, message)


# Authentication specific exceptions
class InvalidCredentialsException(UnauthorizedException):
    """Invalid username or password"""

    def __init__(self):
        super().__init__(
            message="Invalid username/password",
            code="INVALID_CREDENTIALS",
        )


# Resource specific exceptions
class CompanyNotFoundException(NotFoundException):
    """Company not found"""

    def __init__(self, handle: str):
        super().__init__(message=f"No company: {handle}", code="COMPANY_NOT_FOUND")


class JobNotFoundException(NotFoundException):
    """Job not found"""

    def __init__(self, job_id: int):
        super().__init__(message=f"No job: {job_id}", code="JOB_NOT_FOUND")


class UserNotFoundException(NotFoundException):
    """User not found"""

    def __init__(self, username: str):
        super().__init__(message=f"No user: {username}", code="USER_NOT_FOUND")


class DuplicateCompanyException(BadRequestException):
    """Company handle already taken"""

    def __init__(self, handle: str):
        super().__init__(message=f"Duplicate company: {handle}", code="DUPLICATE_COMPANY")


class DuplicateCompanyNameException(BadRequestException):
    """Company name already used by another company"""

    def __init__(self, name: str):
        super().__init__(message=f"Duplicate company name: {name}", code="DUPLICATE_COMPANY_NAME")


class DuplicateUsernameException(BadRequestException):
    """Username already registered"""

    def __init__(self, username: str):
        super().__init__(message=f"Duplicate username: {username}", code="DUPLICATE_USERNAME")


# HTTP status for each transport-neutral error kind
ERROR_KIND_STATUS = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
}
