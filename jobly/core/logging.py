"""
Structured logging for Jobly.

Every log line is a structlog event (``company_updated``, ``login_failed``,
...) with key/value context. Request handling binds ``request_id`` so all
events from one request can be joined, and the access line names the
authenticated user when there is one. Credentials never reach the output:
password and token values are masked before rendering.
"""
import logging
import sys
import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from jobly.core.config import settings

REDACTED = "***"
SENSITIVE_KEYS = frozenset({"password", "token", "authorization", "secret_key"})

access_logger = structlog.get_logger("jobly.access")


def redact_secrets(logger, method_name, event_dict):
    """structlog processor: mask credential values anywhere in an event."""
    for key in event_dict:
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = REDACTED
    return event_dict


def setup_logging() -> None:
    """Route stdlib and structlog output through one renderer. Call once at startup."""
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_secrets,
    ]

    if settings.log_as_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Records from uvicorn/sqlalchemy get the same timestamp and level keys
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if settings.debug else settings.log_level.upper())

    # RequestIDMiddleware writes the access line
    logging.getLogger("uvicorn.access").disabled = True
    for noisy in ("sqlalchemy.engine", "passlib"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an ID (the caller's ``X-Request-ID`` or a fresh
    UUID), echo it on the response, and log one ``request_completed`` line.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 1)

        access_logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=elapsed_ms,
            # set by the auth dependency for token-bearing requests
            username=getattr(request.state, "username", None),
        )
        response.headers["X-Request-ID"] = request_id
        return response
