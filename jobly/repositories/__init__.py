"""
Repository layer - data access abstraction.

Repositories handle all database queries, keeping SQL/ORM logic
out of the service and route layers.
"""
from jobly.repositories.base import BaseRepository
from jobly.repositories.company_repository import CompanyRepository
from jobly.repositories.job_repository import JobRepository
from jobly.repositories.user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "CompanyRepository",
    "JobRepository",
    "UserRepository",
]
