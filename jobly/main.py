"""
Jobly API - FastAPI Application Entry Point.

Job board backend: companies, the jobs they post, and the users who apply.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from jobly.core.config import settings
from jobly.core.database import close_db, init_db
from jobly.core.exceptions import (
    ERROR_KIND_STATUS,
    APIException,
    InternalServerException,
    QueryBuildError,
    ValidationException,
)
from jobly.core.logging import RequestIDMiddleware, get_logger, setup_logging
from jobly.core.rate_limit import limiter
from jobly.api.routes import api_router
from jobly.schemas.base import ErrorResponse

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown."""
    setup_logging()
    logger.info("starting_app", app_name=settings.app_name, env=settings.environment)
    await init_db()
    logger.info("database_initialized")

    yield

    await close_db()
    logger.info("shutting_down")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Job board API: companies, jobs and users",
    version=settings.app_version,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan,
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Request ID correlation
app.add_middleware(RequestIDMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
)


def _error_response(status_code: int, error: str, message, details=None) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


# Exception handlers
@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    """Handle custom API exceptions."""
    return _error_response(exc.status_code, exc.code, exc.message, exc.details)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Schema violations are bad requests; list every failure."""
    messages = [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    ]
    error = ValidationException(message=messages)
    return _error_response(error.status_code, error.code, error.message)


@app.exception_handler(QueryBuildError)
async def query_build_exception_handler(request: Request, exc: QueryBuildError):
    """Translate transport-neutral error kinds to HTTP status codes."""
    return _error_response(ERROR_KIND_STATUS.get(exc.kind, 400), exc.kind.value, exc.message)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Log the full error; return a sanitized message unless in debug."""
    logger.error(
        "unhandled_exception",
        exc_type=type(exc).__name__,
        exc_message=str(exc),
        path=request.url.path,
        exc_info=True,
    )

    error = InternalServerException(str(exc)) if settings.debug else InternalServerException()
    return _error_response(error.status_code, error.code, error.message)


app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    """Service name, version and the resource collections it serves."""
    prefix = settings.api_prefix
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "resources": [f"{prefix}/companies", f"{prefix}/jobs", f"{prefix}/users"],
        "docs": "/docs" if settings.debug else None,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "jobly.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
    )
