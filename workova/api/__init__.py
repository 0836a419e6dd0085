"""
API package.
"""
from workova.api.routes import api_router
from workova.api.deps import (
    get_current_account,
    get_database,
    get_optional_account,
)

__all__ = [
    "api_router",
    "get_current_account",
    "get_database",
    "get_optional_account",
]
