"""
Workova API - FastAPI application entry point.

Peer-to-peer marketplace for local services: customers post jobs, workers
send offers, and an accepted offer opens a chat between the two.

Run locally with:
    uvicorn workova.main:app --reload
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from workova.api.routes import api_router
from workova.core.config import settings
from workova.core.database import database
from workova.core.exceptions import APIException, StoreUnavailableException
from workova.core.logging import RequestContextMiddleware, get_logger, setup_logging
from workova.core.rate_limit import limiter

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the local store on startup, release it on shutdown."""
    setup_logging()
    logger.info(
        "starting_app",
        app_name=settings.app_name,
        version=settings.app_version,
        env=settings.environment,
    )
    await database.init()
    logger.info("store_ready", url=database.engine.url.render_as_string(hide_password=True))

    yield

    await database.dispose()
    logger.info("store_closed")


async def handle_api_exception(request: Request, exc: APIException) -> JSONResponse:
    """Render engine errors as {error, message, details}."""
    if isinstance(exc, StoreUnavailableException):
        logger.warning("store_unavailable", path=request.url.path)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message, "details": exc.details},
    )


async def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
    """Log the full failure, return a sanitized 500 unless debugging."""
    logger.error(
        "unhandled_exception",
        exc_type=type(exc).__name__,
        path=request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_error",
            "message": str(exc) if settings.debug else "An unexpected error occurred",
        },
    )


def create_app() -> FastAPI:
    """Build the API with its middleware, error handlers and routes."""
    application = FastAPI(
        title=settings.app_name,
        description="Peer-to-peer marketplace for local services",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    application.state.limiter = limiter
    application.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    application.add_exception_handler(APIException, handle_api_exception)
    application.add_exception_handler(Exception, handle_unexpected_exception)

    application.add_middleware(RequestContextMiddleware)
    # Clients identify themselves with X-Account-ID, so it must pass CORS
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-Account-ID", "X-Request-ID"],
    )

    application.include_router(api_router, prefix=settings.api_prefix)

    @application.get("/", include_in_schema=False)
    async def root():
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "api": settings.api_prefix,
            "docs": "/docs" if settings.debug else None,
        }

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("workova.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
