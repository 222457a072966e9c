"""
Pytest configuration and shared fixtures.

Settings are read once at import, so the environment is fixed here
before anything from jobly is imported.
"""
import os

os.environ["ENVIRONMENT"] = "test"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.setdefault("SECRET_KEY", "secret-test")

from typing import Dict
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from jobly.core.database import get_db
from jobly.core.security import create_access_token
from jobly.main import app


@pytest.fixture
def db_session() -> AsyncMock:
    """Stand-in for AsyncSession; nothing reaches a real database."""
    session = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def client(db_session):
    """Test client with the database dependency replaced."""

    async def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> Dict[str, str]:
    token = create_access_token("admin", is_admin=True)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def u1_headers() -> Dict[str, str]:
    token = create_access_token("u1", is_admin=False)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def company_data() -> Dict[str, object]:
    return {
        "handle": "c1",
        "name": "C1",
        "description": "Desc1",
        "num_employees": 1,
        "logo_url": "http://c1.img",
    }


@pytest.fixture
def job_data() -> Dict[str, object]:
    return {
        "id": 1,
        "title": "J1",
        "salary": 100,
        "equity": None,
        "company_handle": "c1",
    }


@pytest.fixture
def user_data() -> Dict[str, object]:
    return {
        "username": "u1",
        "first_name": "U1F",
        "last_name": "U1L",
        "email": "user1@user.com",
        "is_admin": False,
    }
