"""
Authentication service - sign-up, sign-in and the current session.

Accounts are matched by normalized email only. A password may be passed
through from the client but is never stored or checked.
"""
from typing import Optional

from workova.core.database import Database
from workova.core.exceptions import (
    AccountNotFoundException,
    DuplicateAccountException,
)
from workova.core.logging import get_logger
from workova.core.validation import require_text
from workova.repositories.account_repository import AccountRepository, SessionRepository
from workova.schemas.account import ROLE_CUSTOMER, Account, normalize_email
from workova.services.demo_service import DEMO_CUSTOMER_ID, seed_demo_data

logger = get_logger(__name__)


class AuthService:
    """Handles account lookup, creation and the current session."""

    def __init__(self, database: Database):
        self.database = database
        self.account_repo = AccountRepository()
        self.session_repo = SessionRepository()

    async def find_by_email(self, email: str) -> Optional[Account]:
        """Case-insensitive exact match on the normalized email."""
        async with self.database.session() as db:
            return await self.account_repo.get_by_email(db, email)

    async def sign_up(
        self,
        *,
        email: str,
        display_name: str,
        password: Optional[str] = None,
    ) -> Account:
        """
        Create a customer account and make it the current session.

        Raises:
            DuplicateAccountException: If the normalized email is taken.
            ValidationFailedException: If email or display name is empty.
        """
        normalized = normalize_email(email)
        require_text("email", normalized, "Email")
        name = require_text("display_name", display_name, "Display name")

        async with self.database.unit_of_work() as db:
            if await self.account_repo.email_exists(db, normalized):
                raise DuplicateAccountException()

            account = await self.account_repo.create(
                db,
                Account(email=normalized, display_name=name, role=ROLE_CUSTOMER),
            )
            await self.session_repo.set_current(db, account.id)

        logger.info("account_created", account_id=account.id)
        return account

    async def sign_in(
        self,
        *,
        email: str,
        password: Optional[str] = None,
    ) -> Account:
        """
        Make the account with this email the current session.

        Raises:
            AccountNotFoundException: If no account matches.
        """
        async with self.database.unit_of_work() as db:
            account = await self.account_repo.get_by_email(db, email)
            if not account:
                raise AccountNotFoundException()
            await self.session_repo.set_current(db, account.id)

        logger.info("signed_in", account_id=account.id)
        return account

    async def sign_out(self) -> None:
        async with self.database.unit_of_work() as db:
            await self.session_repo.clear(db)

    async def current_account(self) -> Optional[Account]:
        """The signed-in account, or None."""
        async with self.database.session() as db:
            session = await self.session_repo.get_current(db)
            if not session:
                return None
            return await self.account_repo.get_by_id(db, session.account_id)

    async def sign_in_demo(self) -> Account:
        """Seed the demo marketplace and sign in as the demo customer."""
        async with self.database.unit_of_work() as db:
            await seed_demo_data(db)
            account = await self.account_repo.get_by_id(db, DEMO_CUSTOMER_ID)
            await self.session_repo.set_current(db, account.id)

        logger.info("signed_in_demo", account_id=account.id)
        return account
