"""
User service - roles, block lists, worker onboarding and account deletion.

This service owns ALL account mutations after sign-up. Routes never touch
the store directly - they call methods here.
"""
from typing import List, Optional

from workova.core.database import Database
from workova.core.exceptions import (
    AccountNotFoundException,
    ValidationFailedException,
    WorkerProfileNotFoundException,
)
from workova.core.logging import get_logger
from workova.core.validation import require_category, require_positive, require_text
from workova.repositories.account_repository import (
    AccountRepository,
    SessionRepository,
    WorkerProfileRepository,
)
from workova.repositories.chat_repository import ChatRepository, MessageRepository
from workova.repositories.job_repository import JobRepository
from workova.repositories.offer_repository import OfferRepository
from workova.schemas.account import (
    ROLE_BOTH,
    ROLE_CUSTOMER,
    ROLES,
    Account,
    WorkerProfile,
)
from workova.schemas.base import utc_now

logger = get_logger(__name__)


class UserService:
    """Handles account and worker profile operations."""

    def __init__(self, database: Database):
        self.database = database
        self.account_repo = AccountRepository()
        self.worker_repo = WorkerProfileRepository()
        self.session_repo = SessionRepository()
        self.job_repo = JobRepository()
        self.offer_repo = OfferRepository()
        self.chat_repo = ChatRepository()
        self.message_repo = MessageRepository()

    async def get_account(self, account_id: str) -> Account:
        """
        Raises:
            AccountNotFoundException: If the account doesn't exist.
        """
        async with self.database.session() as db:
            account = await self.account_repo.get_by_id(db, account_id)
        if not account:
            raise AccountNotFoundException("Account not found")
        return account

    async def set_role(self, account_id: str, role: str) -> Account:
        """Set the account's role. Setting the current role again is a no-op."""
        if role not in ROLES:
            raise ValidationFailedException("role", f"Role must be one of {', '.join(ROLES)}.")

        async with self.database.unit_of_work() as db:
            account = await self.account_repo.update(db, account_id, role=role)
            if not account:
                raise AccountNotFoundException("Account not found")
        return account

    async def block(self, actor_id: str, target_id: str) -> Account:
        """
        Add target to the actor's block list. Idempotent.

        Only the actor's own record changes; the target never learns about it.
        """
        if actor_id == target_id:
            raise ValidationFailedException("target_id", "You can't block yourself.")

        async with self.database.unit_of_work() as db:
            actor = await self.account_repo.get_by_id(db, actor_id)
            if not actor:
                raise AccountNotFoundException("Account not found")
            if target_id in actor.blocked_users:
                return actor
            actor = await self.account_repo.update(
                db, actor_id, blocked_users=[*actor.blocked_users, target_id]
            )

        logger.info("user_blocked", actor_id=actor_id, target_id=target_id)
        return actor

    async def unblock(self, actor_id: str, target_id: str) -> Account:
        """Remove target from the actor's block list. Idempotent."""
        async with self.database.unit_of_work() as db:
            actor = await self.account_repo.get_by_id(db, actor_id)
            if not actor:
                raise AccountNotFoundException("Account not found")
            if target_id not in actor.blocked_users:
                return actor
            actor = await self.account_repo.update(
                db,
                actor_id,
                blocked_users=[b for b in actor.blocked_users if b != target_id],
            )

        logger.info("user_unblocked", actor_id=actor_id, target_id=target_id)
        return actor

    async def is_blocked(self, actor_id: str, target_id: str) -> bool:
        async with self.database.session() as db:
            actor = await self.account_repo.get_by_id(db, actor_id)
        return bool(actor and target_id in actor.blocked_users)

    # ── Worker profile ───────────────────────────────────────────────────────

    async def get_worker_profile(self, account_id: str) -> WorkerProfile:
        """
        Raises:
            WorkerProfileNotFoundException: If the worker hasn't onboarded.
        """
        async with self.database.session() as db:
            profile = await self.worker_repo.get_by_id(db, account_id)
        if not profile:
            raise WorkerProfileNotFoundException()
        return profile

    async def upsert_worker_profile(
        self,
        account_id: str,
        *,
        display_name: str,
        bio: str = "",
        categories: List[str],
        service_radius: float,
    ) -> WorkerProfile:
        """
        Create or update the worker profile.

        Ratings and created_at survive an update. A plain customer is
        promoted to 'both' on first onboarding.
        """
        name = require_text("display_name", display_name, "Display name")
        if not categories:
            raise ValidationFailedException("categories", "Select at least one service category.")
        for category_id in categories:
            require_category("categories", category_id)
        radius = require_positive("service_radius", service_radius, "Service radius")

        async with self.database.unit_of_work() as db:
            account = await self.account_repo.get_by_id(db, account_id)
            if not account:
                raise AccountNotFoundException("Account not found")

            existing = await self.worker_repo.get_by_id(db, account_id)
            now = utc_now()
            profile = WorkerProfile(
                account_id=account_id,
                display_name=name,
                bio=(bio or "").strip(),
                categories=list(dict.fromkeys(categories)),
                service_radius=radius,
                rating_avg=existing.rating_avg if existing else 0,
                rating_count=existing.rating_count if existing else 0,
                created_at=existing.created_at if existing else now,
                updated_at=now,
            )
            await self.worker_repo.upsert(db, profile)

            if account.role == ROLE_CUSTOMER:
                await self.account_repo.update(db, account_id, role=ROLE_BOTH)

        logger.info("worker_profile_saved", account_id=account_id, created=existing is None)
        return profile

    # ── Deletion ─────────────────────────────────────────────────────────────

    async def delete_account(self, account_id: str) -> None:
        """
        Hard delete an account and everything it owns, all-or-nothing.

        Removes the worker profile, the account's jobs and every offer on
        them, the offers it sent, every chat it belongs to, and the messages
        it wrote or that lived in those chats. Reports are kept. The account
        record goes last so a failure part-way never leaves it findable with
        half its data gone (and the unit of work rolls everything back).
        """
        async with self.database.unit_of_work() as db:
            account = await self.account_repo.get_by_id(db, account_id)
            if not account:
                raise AccountNotFoundException("Account not found")

            await self.worker_repo.delete(db, account_id)

            jobs_removed = await self.job_repo.delete_where(
                db, lambda j: j.customer_id == account_id
            )
            offers_removed = await self.offer_repo.delete_where(
                db, lambda o: o.worker_id == account_id or o.customer_id == account_id
            )

            chat_ids = {c.id for c in await self.chat_repo.list_for_user(db, account_id)}
            await self.chat_repo.delete_where(db, lambda c: c.id in chat_ids)
            messages_removed = await self.message_repo.delete_where(
                db, lambda m: m.sender_id == account_id or m.chat_id in chat_ids
            )

            session = await self.session_repo.get_current(db)
            if session and session.account_id == account_id:
                await self.session_repo.clear(db)

            await self.account_repo.delete(db, account_id)

        logger.info(
            "account_deleted",
            account_id=account_id,
            jobs=jobs_removed,
            offers=offers_removed,
            chats=len(chat_ids),
            messages=messages_removed,
        )

    async def find_account(self, account_id: Optional[str]) -> Optional[Account]:
        """Lookup that returns None instead of raising."""
        if not account_id:
            return None
        async with self.database.session() as db:
            return await self.account_repo.get_by_id(db, account_id)
