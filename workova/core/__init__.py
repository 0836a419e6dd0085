"""Core module exports."""
from workova.core.config import settings, get_settings
from workova.core.database import Base, Database, database
from workova.core.exceptions import (
    APIException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    ValidationFailedException,
    ModerationRejectedException,
    StoreUnavailableException,
    DuplicateAccountException,
    AccountNotFoundException,
    InvalidTransitionException,
    OfferNotActionableException,
    NotJobOwnerException,
    NotOfferOwnerException,
    NotChatMemberException,
    JobNotFoundException,
    OfferNotFoundException,
    ChatNotFoundException,
    WorkerProfileNotFoundException,
)
from workova.core.moderation import ModerationResult, moderate

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Database
    "Base",
    "Database",
    "database",
    # Moderation
    "ModerationResult",
    "moderate",
    # Exceptions
    "APIException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "ValidationFailedException",
    "ModerationRejectedException",
    "StoreUnavailableException",
    "DuplicateAccountException",
    "AccountNotFoundException",
    "InvalidTransitionException",
    "OfferNotActionableException",
    "NotJobOwnerException",
    "NotOfferOwnerException",
    "NotChatMemberException",
    "JobNotFoundException",
    "OfferNotFoundException",
    "ChatNotFoundException",
    "WorkerProfileNotFoundException",
]
