"""
Rate limiting configuration using slowapi.

Limits are kept in process memory by default; point RATE_LIMIT_STORAGE_URI
at Redis if the API ever runs with more than one worker.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from workova.core.config import settings


def _get_account_or_ip(request: Request) -> str:
    """
    Rate-limit key: the acting account if the client sent one, otherwise
    the client IP (sign-up and sign-in are always anonymous).
    """
    account_id = request.headers.get("X-Account-ID")
    if account_id:
        return account_id
    return get_remote_address(request)


limiter = Limiter(
    key_func=_get_account_or_ip,
    storage_uri=settings.rate_limit_storage_uri,
    strategy="fixed-window",
    enabled=settings.rate_limit_enabled,
)

# Pre-defined rate limit strings for use in route decorators:
#   @limiter.limit(RATE_AUTH)
RATE_AUTH = "10/minute"          # sign-up, sign-in - enumeration protection
RATE_WRITE = "60/minute"         # posting jobs, offers, messages, reports
