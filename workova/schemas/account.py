"""
Account, session and worker profile schemas.
"""
from datetime import datetime
from typing import List, Literal, Optional
from pydantic import EmailStr, Field
from workova.schemas.base import BaseSchema, CreatedSchema, IDSchema, utc_now

ROLE_CUSTOMER = "customer"
ROLE_WORKER = "worker"
ROLE_BOTH = "both"

ROLES = (ROLE_CUSTOMER, ROLE_WORKER, ROLE_BOTH)

Role = Literal["customer", "worker", "both"]


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class Account(IDSchema, CreatedSchema):
    """Stored account record. email is always normalized."""

    email: str
    display_name: str
    role: Role = ROLE_CUSTOMER
    blocked_users: List[str] = Field(default_factory=list)


class Session(BaseSchema):
    """The single current-session record."""

    account_id: str
    started_at: datetime = Field(default_factory=utc_now)


class WorkerProfile(CreatedSchema):
    """
    Worker onboarding details, keyed by account_id.

    rating_avg / rating_count are written by a rating mechanism outside
    the marketplace engine and are only carried over here.
    """

    account_id: str
    display_name: str
    bio: str = ""
    categories: List[str] = Field(default_factory=list)
    service_radius: float
    rating_avg: float = 0
    rating_count: int = 0
    updated_at: datetime = Field(default_factory=utc_now)


# ── Requests ────────────────────────────────────────────────────────────────

class SignUpRequest(BaseSchema):
    """Sign-up request body. The password is accepted but not verified."""

    email: EmailStr
    display_name: str = Field(..., min_length=1, max_length=100)
    password: Optional[str] = None


class SignInRequest(BaseSchema):
    """Sign-in request body. Matching is by email only."""

    email: EmailStr
    password: Optional[str] = None


class SetRoleRequest(BaseSchema):
    role: Role


class WorkerProfileUpsert(BaseSchema):
    """Worker onboarding form."""

    display_name: str
    bio: str = ""
    categories: List[str]
    service_radius: float


class SessionResponse(BaseSchema):
    """Current session, if any."""

    account: Optional[Account] = None
