"""
Service layer - business logic and orchestration.

Services contain the application's business logic, coordinate between
repositories, and handle cross-cutting concerns.

RULE: Routes call services. Services call repositories. Never the reverse.
"""
from jobly.services.auth_service import AuthService
from jobly.services.company_service import CompanyService
from jobly.services.job_service import JobService
from jobly.services.user_service import UserService

__all__ = [
    "AuthService",
    "CompanyService",
    "JobService",
    "UserService",
]
