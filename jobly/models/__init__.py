"""
Database models for Jobly.
"""
from jobly.models.base import BaseModel
from jobly.models.company import Company
from jobly.models.job import Job
from jobly.models.user import User, Application

__all__ = [
    "BaseModel",
    "Company",
    "Job",
    "User",
    "Application",
]
