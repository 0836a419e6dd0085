"""
Structured logging for the marketplace, built on structlog.

Every log line carries the request id and, when the client identified
itself, the acting account. Output is JSON lines outside development and
colored console output in development.
"""
import logging
import sys
import time
import uuid
from typing import List, Optional

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from workova.core.config import settings

# Third-party loggers that are chatty at INFO
QUIET_LOGGERS = ("uvicorn.access", "aiosqlite", "sqlalchemy.engine")


def _renderer() -> structlog.types.Processor:
    if settings.environment == "development":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def setup_logging(level: Optional[str] = None) -> None:
    """
    Route structlog and stdlib logging through one stdout handler.

    Call once at startup. level defaults to settings.log_level, or DEBUG
    when debug is on.
    """
    pre_chain: List[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    structlog.configure(
        processors=[
            *pre_chain,
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel("DEBUG" if settings.debug else (level or settings.log_level).upper())

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Named structlog logger. Event names are snake_case."""
    return structlog.get_logger(name)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Bind request_id, account_id, method and path for the whole request and
    log one request_completed line with the status and duration.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            account_id=request.headers.get("X-Account-ID"),
            method=request.method,
            path=request.url.path,
        )

        started = time.perf_counter()
        response = await call_next(request)
        get_logger(__name__).info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 1),
        )

        response.headers["X-Request-ID"] = request_id
        return response
