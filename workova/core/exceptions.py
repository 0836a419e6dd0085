"""
Custom exceptions for the marketplace engine.
Every engine error inherits from APIException so the HTTP layer can render
it consistently; none of them is fatal to the process.
"""
from typing import Optional, Any


class APIException(Exception):
    """
    Base exception for all engine errors.
    Provides consistent error response format.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Any] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        super().__init__(self.message)


class UnauthorizedException(APIException):
    """401 Unauthorized"""

    def __init__(self, message: str = "Unauthorized", code: str = "UNAUTHORIZED"):
        super().__init__(401, code, message)


class ForbiddenException(APIException):
    """403 Forbidden"""

    def __init__(self, message: str = "Forbidden", code: str = "FORBIDDEN"):
        super().__init__(403, code, message)


class NotFoundException(APIException):
    """404 Not Found"""

    def __init__(self, message: str = "Resource not found", code: str = "NOT_FOUND"):
        super().__init__(404, code, message)


class ConflictException(APIException):
    """409 Conflict"""

    def __init__(self, message: str = "Resource conflict", code: str = "CONFLICT"):
        super().__init__(409, code, message)


class ValidationFailedException(APIException):
    """422 - a field is missing or invalid."""

    def __init__(self, field: str, message: str):
        super().__init__(422, "VALIDATION_FAILED", message, {"field": field})
        self.field = field


class ModerationRejectedException(APIException):
    """422 - free text failed the content filter. The reason is shown verbatim."""

    def __init__(self, field: str, reason: str):
        super().__init__(422, "MODERATION_REJECTED", reason, {"field": field})
        self.field = field
        self.reason = reason


class StoreUnavailableException(APIException):
    """503 - the local store could not be read or written."""

    def __init__(self, message: str = "Local store is unavailable, please retry"):
        super().__init__(503, "STORE_UNAVAILABLE", message)


# Identity
class DuplicateAccountException(ConflictException):
    """Email already registered"""

    def __init__(self):
        super().__init__(
            message="An account with that email already exists.",
            code="DUPLICATE_ACCOUNT",
        )


class AccountNotFoundException(NotFoundException):
    """No account for the given id or email"""

    def __init__(self, message: str = "No account found with that email. Please sign up first."):
        super().__init__(message=message, code="ACCOUNT_NOT_FOUND")


# State machine
class InvalidTransitionException(ConflictException):
    """Requested status change is not allowed from the current status"""

    def __init__(self, entity: str, current: str, target: str):
        super().__init__(
            message=f"Cannot move {entity} from '{current}' to '{target}'.",
            code="INVALID_TRANSITION",
        )
        self.details = {"entity": entity, "current": current, "target": target}


class OfferNotActionableException(ConflictException):
    """Offer has already left the 'sent' state"""

    def __init__(self, status: str):
        super().__init__(
            message=f"Offer is already {status} and can no longer be changed.",
            code="OFFER_NOT_ACTIONABLE",
        )
        self.details = {"status": status}


# Ownership / membership
class NotJobOwnerException(ForbiddenException):
    """Actor is not the customer who posted the job"""

    def __init__(self):
        super().__init__(
            message="Only the customer who posted this job can do that.",
            code="NOT_JOB_OWNER",
        )


class NotOfferOwnerException(ForbiddenException):
    """Actor is not the worker who sent the offer"""

    def __init__(self):
        super().__init__(
            message="Only the worker who sent this offer can do that.",
            code="NOT_OFFER_OWNER",
        )


class NotChatMemberException(ForbiddenException):
    """Actor is not one of the two chat members"""

    def __init__(self):
        super().__init__(
            message="You are not a member of this chat.",
            code="NOT_CHAT_MEMBER",
        )


# Resource specific exceptions
class JobNotFoundException(NotFoundException):
    """Job not found"""

    def __init__(self):
        super().__init__(message="Job not found", code="JOB_NOT_FOUND")


class OfferNotFoundException(NotFoundException):
    """Offer not found"""

    def __init__(self):
        super().__init__(message="Offer not found", code="OFFER_NOT_FOUND")


class ChatNotFoundException(NotFoundException):
    """Chat not found"""

    def __init__(self):
        super().__init__(message="Chat not found", code="CHAT_NOT_FOUND")


class WorkerProfileNotFoundException(NotFoundException):
    """Worker has not completed onboarding"""

    def __init__(self):
        super().__init__(message="Worker profile not found", code="WORKER_PROFILE_NOT_FOUND")
