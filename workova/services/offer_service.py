"""
Offer service - worker bids and the accept-offer workflow.

Accepting an offer is the one multi-collection transition in the
marketplace. It runs as a single unit of work under the store's write lock:

  1. the offer must still be 'sent'
  2. the job must still be 'open'
  3. offer → accepted, every other 'sent' offer on the job → rejected
  4. job → booked
  5. reuse or open the (job, customer, worker) chat

Either all of it commits or none of it does, and two accepts on the same
job can never interleave.
"""
from typing import Optional

from workova.core.database import Database
from workova.core.exceptions import (
    AccountNotFoundException,
    InvalidTransitionException,
    JobNotFoundException,
    NotJobOwnerException,
    NotOfferOwnerException,
    OfferNotActionableException,
    OfferNotFoundException,
    ValidationFailedException,
)
from workova.core.logging import get_logger
from workova.core.validation import ensure_clean, require_positive, require_text
from workova.repositories.account_repository import AccountRepository, WorkerProfileRepository
from workova.repositories.chat_repository import ChatRepository
from workova.repositories.job_repository import JobRepository
from workova.repositories.offer_repository import OfferRepository
from workova.schemas.base import utc_now
from workova.schemas.chat import Chat
from workova.schemas.job import JOB_STATUS_BOOKED, JOB_STATUS_OPEN, can_transition
from workova.schemas.offer import (
    OFFER_STATUS_ACCEPTED,
    OFFER_STATUS_REJECTED,
    OFFER_STATUS_SENT,
    OFFER_STATUS_WITHDRAWN,
    Offer,
)

logger = get_logger(__name__)


class OfferService:
    """Handles offer submission and disposition."""

    def __init__(self, database: Database):
        self.database = database
        self.offer_repo = OfferRepository()
        self.job_repo = JobRepository()
        self.account_repo = AccountRepository()
        self.worker_repo = WorkerProfileRepository()
        self.chat_repo = ChatRepository()

    async def get_offer(self, offer_id: str) -> Offer:
        async with self.database.session() as db:
            offer = await self.offer_repo.get_by_id(db, offer_id)
        if not offer:
            raise OfferNotFoundException()
        return offer

    async def create_offer(
        self,
        *,
        job_id: str,
        worker_id: str,
        price: float,
        eta_text: str,
        message: str = "",
    ) -> Offer:
        """
        Submit a priced offer on an open job.

        The worker name is snapshotted from the worker profile when one
        exists, otherwise from the account.

        Raises:
            ValidationFailedException: Bad price, empty ETA, or offering on own job.
            ModerationRejectedException: ETA or message failed the filter.
            JobNotFoundException / AccountNotFoundException: Unknown job or worker.
            InvalidTransitionException: The job is no longer open.
        """
        require_positive("price", price, "Price")
        eta_text = require_text("eta_text", eta_text, "Estimated time")
        message = (message or "").strip()
        if message:
            ensure_clean("message", message)
        ensure_clean("eta_text", eta_text)

        async with self.database.unit_of_work() as db:
            job = await self.job_repo.get_by_id(db, job_id)
            if not job:
                raise JobNotFoundException()
            if job.status != JOB_STATUS_OPEN:
                raise InvalidTransitionException("job", job.status, "offer")
            if job.customer_id == worker_id:
                raise ValidationFailedException("worker_id", "You can't make an offer on your own job.")

            worker = await self.account_repo.get_by_id(db, worker_id)
            if not worker:
                raise AccountNotFoundException("Account not found")
            profile = await self.worker_repo.get_by_id(db, worker_id)

            offer = await self.offer_repo.create(db, Offer(
                job_id=job.id,
                worker_id=worker.id,
                worker_name=profile.display_name if profile else worker.display_name,
                customer_id=job.customer_id,
                price=price,
                eta_text=eta_text,
                message=message,
                status=OFFER_STATUS_SENT,
            ))

        logger.info("offer_created", offer_id=offer.id, job_id=job_id, worker_id=worker_id)
        return offer

    async def accept_offer(self, offer_id: str, actor_id: Optional[str] = None) -> Chat:
        """
        Accept an offer, reject its competitors, book the job and open the chat.

        Returns the chat between the customer and the worker for this job,
        reusing an existing one.

        Raises:
            OfferNotFoundException / JobNotFoundException: Unknown ids.
            OfferNotActionableException: The offer is no longer 'sent'.
            InvalidTransitionException: The job is no longer 'open'.
            NotJobOwnerException: actor_id is given and isn't the job's customer.
        """
        async with self.database.unit_of_work() as db:
            offer = await self.offer_repo.get_by_id(db, offer_id)
            if not offer:
                raise OfferNotFoundException()
            if offer.status != OFFER_STATUS_SENT:
                raise OfferNotActionableException(offer.status)

            job = await self.job_repo.get_by_id(db, offer.job_id)
            if not job:
                raise JobNotFoundException()
            if actor_id is not None and actor_id != job.customer_id:
                raise NotJobOwnerException()
            if not can_transition(job.status, JOB_STATUS_BOOKED):
                raise InvalidTransitionException("job", job.status, JOB_STATUS_BOOKED)

            await self.offer_repo.update(db, offer.id, status=OFFER_STATUS_ACCEPTED)
            rejected = await self.offer_repo.update_where(
                db,
                lambda o: o.job_id == job.id and o.id != offer.id and o.status == OFFER_STATUS_SENT,
                status=OFFER_STATUS_REJECTED,
            )
            await self.job_repo.update(db, job.id, status=JOB_STATUS_BOOKED)

            members = [job.customer_id, offer.worker_id]
            chat = await self.chat_repo.find_by_job_and_members(db, job.id, members)
            if not chat:
                customer = await self.account_repo.get_by_id(db, job.customer_id)
                chat = await self.chat_repo.create(db, Chat(
                    job_id=job.id,
                    job_title=job.title,
                    members=members,
                    member_names={
                        job.customer_id: customer.display_name if customer else job.customer_name,
                        offer.worker_id: offer.worker_name,
                    },
                    last_message="",
                    updated_at=utc_now(),
                ))

        logger.info(
            "offer_accepted",
            offer_id=offer_id,
            job_id=job.id,
            rejected_offers=rejected,
            chat_id=chat.id,
        )
        return chat

    async def reject_offer(self, offer_id: str, actor_id: Optional[str] = None) -> Offer:
        """sent → rejected for one offer. Nothing else changes."""
        async with self.database.unit_of_work() as db:
            offer = await self.offer_repo.get_by_id(db, offer_id)
            if not offer:
                raise OfferNotFoundException()
            if actor_id is not None and actor_id != offer.customer_id:
                raise NotJobOwnerException()
            if offer.status != OFFER_STATUS_SENT:
                raise OfferNotActionableException(offer.status)

            offer = await self.offer_repo.update(db, offer_id, status=OFFER_STATUS_REJECTED)

        logger.info("offer_rejected", offer_id=offer_id, job_id=offer.job_id)
        return offer

    async def withdraw_offer(self, offer_id: str, actor_id: str) -> Offer:
        """sent → withdrawn, by the worker who sent it."""
        async with self.database.unit_of_work() as db:
            offer = await self.offer_repo.get_by_id(db, offer_id)
            if not offer:
                raise OfferNotFoundException()
            if actor_id != offer.worker_id:
                raise NotOfferOwnerException()
            if offer.status != OFFER_STATUS_SENT:
                raise OfferNotActionableException(offer.status)

            offer = await self.offer_repo.update(db, offer_id, status=OFFER_STATUS_WITHDRAWN)

        logger.info("offer_withdrawn", offer_id=offer_id, job_id=offer.job_id)
        return offer
