"""
Account repository - data access for accounts, worker profiles and the
current session.
"""
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from workova.models.collection import SESSION, USERS, WORKERS
from workova.repositories.base import CollectionRepository
from workova.schemas.account import Account, Session, WorkerProfile, normalize_email


class AccountRepository(CollectionRepository[Account]):
    def __init__(self):
        super().__init__(USERS, Account)

    async def get_by_email(
        self,
        db: AsyncSession,
        email: str,
    ) -> Optional[Account]:
        """Find an account by normalized email."""
        wanted = normalize_email(email)
        for account in await self.get_all(db):
            if account.email == wanted:
                return account
        return None

    async def email_exists(
        self,
        db: AsyncSession,
        email: str,
    ) -> bool:
        """Check if an email is already registered."""
        return await self.get_by_email(db, email) is not None


class WorkerProfileRepository(CollectionRepository[WorkerProfile]):
    def __init__(self):
        super().__init__(WORKERS, WorkerProfile, key="account_id")


class SessionRepository(CollectionRepository[Session]):
    """The session collection holds zero or one record."""

    def __init__(self):
        super().__init__(SESSION, Session, key="account_id")

    async def get_current(
        self,
        db: AsyncSession,
    ) -> Optional[Session]:
        records = await self.get_all(db)
        return records[0] if records else None

    async def set_current(
        self,
        db: AsyncSession,
        account_id: str,
    ) -> Session:
        session = Session(account_id=account_id)
        await self.save_all(db, [session])
        return session

    async def clear(
        self,
        db: AsyncSession,
    ) -> None:
        await self.save_all(db, [])
