"""
API Routes package.
"""
from fastapi import APIRouter

from workova.api.routes.auth import router as auth_router
from workova.api.routes.health import router as health_router
from workova.api.routes.users import router as users_router
from workova.api.routes.jobs import router as jobs_router
from workova.api.routes.offers import router as offers_router
from workova.api.routes.chats import router as chats_router
from workova.api.routes.reports import router as reports_router

# Main API router
api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(jobs_router)
api_router.include_router(offers_router)
api_router.include_router(chats_router)
api_router.include_router(reports_router)

__all__ = [
    "api_router",
    "auth_router",
    "health_router",
    "users_router",
    "jobs_router",
    "offers_router",
    "chats_router",
    "reports_router",
]
