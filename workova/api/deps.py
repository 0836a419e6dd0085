"""
API dependencies for dependency injection.

There are no credentials in this marketplace. The acting account is taken
from the X-Account-ID header when the client sends one, otherwise from the
stored current session.
"""
from typing import Optional
from fastapi import Depends, Header

from workova.core.database import Database, database
from workova.core.exceptions import UnauthorizedException
from workova.schemas.account import Account
from workova.services import (
    AuthService,
    ChatService,
    FeedService,
    JobService,
    OfferService,
    ReportService,
    UserService,
)


def get_database() -> Database:
    """The local store. Overridden in tests."""
    return database


def get_auth_service(db: Database = Depends(get_database)) -> AuthService:
    return AuthService(db)


def get_user_service(db: Database = Depends(get_database)) -> UserService:
    return UserService(db)


def get_job_service(db: Database = Depends(get_database)) -> JobService:
    return JobService(db)


def get_offer_service(db: Database = Depends(get_database)) -> OfferService:
    return OfferService(db)


def get_chat_service(db: Database = Depends(get_database)) -> ChatService:
    return ChatService(db)


def get_report_service(db: Database = Depends(get_database)) -> ReportService:
    return ReportService(db)


def get_feed_service(db: Database = Depends(get_database)) -> FeedService:
    return FeedService(db)


async def get_optional_account(
    x_account_id: Optional[str] = Header(None),
    auth_service: AuthService = Depends(get_auth_service),
    user_service: UserService = Depends(get_user_service),
) -> Optional[Account]:
    """
    The acting account if there is one, None otherwise.
    Useful for endpoints that work with or without a signed-in user.
    """
    if x_account_id:
        return await user_service.find_account(x_account_id)
    return await auth_service.current_account()


async def get_current_account(
    account: Optional[Account] = Depends(get_optional_account),
) -> Account:
    """
    Get the acting account.

    Raises:
        UnauthorizedException: If nobody is signed in or the header names
            an unknown account.
    """
    if not account:
        raise UnauthorizedException("Sign in required")
    return account
