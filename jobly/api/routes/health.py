"""
Liveness/readiness probe.
"""
from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.config import settings
from jobly.core.database import get_db
from jobly.core.logging import get_logger
from jobly.schemas.base import BaseSchema

router = APIRouter(tags=["health"])

logger = get_logger(__name__)


class HealthResponse(BaseSchema):
    status: str
    version: str
    environment: str
    timestamp: str
    checks: Dict[str, str]


@router.get("/health", response_model=HealthResponse)
async def health_check(response: Response, db: AsyncSession = Depends(get_db)):
    """
    Report whether the API can reach PostgreSQL.

    503 with ``status: degraded`` when it cannot, so load balancers drop the node.
    """
    checks = {}

    try:
        await db.execute(text("SELECT 1"))
        checks["database"] = "healthy"
    except (SQLAlchemyError, OSError) as e:
        logger.warning("health_check_database_failed", error=str(e))
        checks["database"] = "unhealthy"

    healthy = all(v == "healthy" for v in checks.values())
    if not healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthResponse(
        status="healthy" if healthy else "degraded",
        version=settings.app_version,
        environment=settings.environment,
        timestamp=datetime.now(timezone.utc).isoformat(),
        checks=checks,
    )
