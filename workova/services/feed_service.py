"""
Feed service - read-only projections for list screens.

Every query runs in its own read session and never takes the write lock.
Readers only ever see committed units of work.

Blocking is applied here and only here: it hides a blocked customer's jobs
from the open-jobs feed but never touches existing offers or chats.
"""
from typing import Dict, Iterable, List, Optional

from workova.core.database import Database
from workova.repositories.chat_repository import ChatRepository, MessageRepository
from workova.repositories.job_repository import JobRepository
from workova.repositories.offer_repository import OfferRepository
from workova.schemas.chat import Chat, Message
from workova.schemas.job import Job, JobWithOfferCount
from workova.schemas.offer import Offer


class FeedService:
    """List views over jobs, offers, chats and messages."""

    def __init__(self, database: Database):
        self.database = database
        self.job_repo = JobRepository()
        self.offer_repo = OfferRepository()
        self.chat_repo = ChatRepository()
        self.message_repo = MessageRepository()

    async def open_jobs_feed(
        self,
        viewer_id: Optional[str] = None,
        blocked_ids: Optional[Iterable[str]] = None,
    ) -> List[Job]:
        """Open jobs, minus the viewer's own and blocked customers', newest first."""
        excluded = set(blocked_ids or ())
        if viewer_id:
            excluded.add(viewer_id)
        async with self.database.session() as db:
            return await self.job_repo.list_open(db, exclude_customer_ids=excluded)

    async def jobs_by_customer(self, customer_id: str) -> List[Job]:
        async with self.database.session() as db:
            return await self.job_repo.list_by_customer(db, customer_id)

    async def jobs_with_offer_counts(self, customer_id: str) -> List[JobWithOfferCount]:
        """The customer's jobs, newest first, each with its offer count."""
        async with self.database.session() as db:
            jobs = await self.job_repo.list_by_customer(db, customer_id)
            counts = await self.offer_repo.count_by_job(db, [j.id for j in jobs])
        return [
            JobWithOfferCount(**job.model_dump(), offer_count=counts[job.id])
            for job in jobs
        ]

    async def offer_counts(self, job_ids: Iterable[str]) -> Dict[str, int]:
        async with self.database.session() as db:
            return await self.offer_repo.count_by_job(db, job_ids)

    async def offers_for_job(self, job_id: str) -> List[Offer]:
        async with self.database.session() as db:
            return await self.offer_repo.list_for_job(db, job_id)

    async def offers_by_worker(self, worker_id: str) -> List[Offer]:
        async with self.database.session() as db:
            return await self.offer_repo.list_by_worker(db, worker_id)

    async def chats_for_user(self, account_id: str) -> List[Chat]:
        async with self.database.session() as db:
            return await self.chat_repo.list_for_user(db, account_id)

    async def messages_for_chat(self, chat_id: str) -> List[Message]:
        """Oldest first. Screens that show newest first reverse it themselves."""
        async with self.database.session() as db:
            return await self.message_repo.list_for_chat(db, chat_id)
