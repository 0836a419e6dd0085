"""
Demo service - seeds a small, realistic marketplace for trying the app.

Seeding is IDEMPOTENT: demo records are replaced by id on every run and
everything else in the store is left alone.
"""
from datetime import datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from workova.core.database import Database
from workova.core.logging import get_logger
from workova.repositories.account_repository import AccountRepository, WorkerProfileRepository
from workova.repositories.chat_repository import ChatRepository, MessageRepository
from workova.repositories.job_repository import JobRepository
from workova.repositories.offer_repository import OfferRepository
from workova.schemas.account import ROLE_BOTH, ROLE_WORKER, Account, WorkerProfile
from workova.schemas.chat import Chat, Message
from workova.schemas.job import Job
from workova.schemas.offer import Offer

logger = get_logger(__name__)

DEMO_CUSTOMER_ID = "demo-user-1"
DEMO_WORKER_ID = "demo-worker-1"

_ACCOUNTS_CREATED = datetime(2026, 1, 1, tzinfo=timezone.utc)

DEMO_JOBS = [
    {
        "id": "demo-job-1",
        "customer_id": DEMO_CUSTOMER_ID,
        "customer_name": "Demo User",
        "category_id": "handyman",
        "title": "Fix leaky kitchen faucet",
        "description": "The kitchen faucet has been dripping for a few days. Need someone to replace "
        "the washer or cartridge. Standard single-handle faucet.",
        "budget_min": 50,
        "budget_max": 120,
    },
    {
        "id": "demo-job-2",
        "customer_id": DEMO_CUSTOMER_ID,
        "customer_name": "Demo User",
        "category_id": "cleaning",
        "title": "Deep clean 2-bedroom apartment",
        "description": "Moving out and need a thorough deep clean including kitchen, bathrooms, "
        "and all rooms. Approximately 900 sq ft.",
        "budget_min": 150,
        "budget_max": 250,
    },
    {
        "id": "demo-job-3",
        "customer_id": DEMO_CUSTOMER_ID,
        "customer_name": "Demo User",
        "category_id": "moving",
        "title": "Help moving furniture to new apartment",
        "description": "Need help moving a couch, dining table, bed frame, and several boxes from "
        "2nd floor to a ground floor unit across town.",
        "budget_min": 200,
        "budget_max": 400,
    },
    {
        "id": "demo-job-4",
        "customer_id": DEMO_WORKER_ID,
        "customer_name": "Alex Pro",
        "category_id": "plumbing",
        "title": "Bathroom sink installation",
        "description": "Looking for help installing a new pedestal sink in the guest bathroom. "
        "Old vanity has been removed already.",
        "budget_min": 100,
        "budget_max": 200,
    },
    {
        "id": "demo-job-5",
        "customer_id": DEMO_WORKER_ID,
        "customer_name": "Alex Pro",
        "category_id": "landscaping",
        "title": "Backyard lawn mowing and trimming",
        "description": "Need weekly lawn mowing service for a medium-sized backyard. Includes "
        "edging and trimming around flower beds.",
        "budget_min": 40,
        "budget_max": 80,
    },
]

DEMO_OFFERS = [
    {
        "id": "demo-offer-1",
        "price": 75,
        "eta_text": "Today 2-4pm",
        "message": "I have extensive experience with faucet repairs. I can fix this quickly "
        "and bring all necessary parts.",
    },
    {
        "id": "demo-offer-2",
        "price": 95,
        "eta_text": "Tomorrow morning",
        "message": "I can also replace the entire faucet if needed for a more permanent fix.",
    },
]

DEMO_GREETING = "Hi! I'm interested in helping with your faucet repair."
DEMO_CHAT_ID = "demo-chat-1"


async def seed_demo_data(db: AsyncSession) -> None:
    """Write the demo records into the session's pending unit of work."""
    now = datetime.now(timezone.utc)
    accounts = AccountRepository()
    workers = WorkerProfileRepository()
    jobs = JobRepository()
    offers = OfferRepository()
    chats = ChatRepository()
    messages = MessageRepository()

    await accounts.upsert(db, Account(
        id=DEMO_CUSTOMER_ID,
        email="demo@workova.app",
        display_name="Demo User",
        role=ROLE_BOTH,
        created_at=_ACCOUNTS_CREATED,
    ))
    await accounts.upsert(db, Account(
        id=DEMO_WORKER_ID,
        email="worker@workova.app",
        display_name="Alex Pro",
        role=ROLE_WORKER,
        created_at=_ACCOUNTS_CREATED,
    ))

    await workers.upsert(db, WorkerProfile(
        account_id=DEMO_WORKER_ID,
        display_name="Alex Pro",
        bio="Experienced handyman and cleaner with 5+ years of professional experience.",
        categories=["handyman", "cleaning", "plumbing"],
        service_radius=25,
        rating_avg=4.8,
        rating_count=42,
        created_at=_ACCOUNTS_CREATED,
        updated_at=_ACCOUNTS_CREATED,
    ))

    # Demo jobs go back to open below, so drop whatever real activity
    # happened on them or a second offer could end up accepted
    demo_job_ids = {job["id"] for job in DEMO_JOBS}
    demo_offer_ids = {offer["id"] for offer in DEMO_OFFERS}
    stale_offers = await offers.delete_where(
        db, lambda o: o.job_id in demo_job_ids and o.id not in demo_offer_ids
    )
    stale_chat_ids = {
        c.id for c in await chats.find(db, lambda c: c.job_id in demo_job_ids)
        if c.id != DEMO_CHAT_ID
    }
    await chats.delete_where(db, lambda c: c.id in stale_chat_ids)
    await messages.delete_where(db, lambda m: m.chat_id in stale_chat_ids)
    if stale_offers or stale_chat_ids:
        logger.info("demo_activity_reset", offers=stale_offers, chats=len(stale_chat_ids))

    # Stagger timestamps so the feed order is stable: demo-job-1 is newest
    for i, job in enumerate(DEMO_JOBS):
        await jobs.upsert(db, Job(**job, created_at=now - timedelta(minutes=i)))

    for i, offer in enumerate(DEMO_OFFERS):
        await offers.upsert(db, Offer(
            **offer,
            job_id="demo-job-1",
            worker_id=DEMO_WORKER_ID,
            worker_name="Alex Pro",
            customer_id=DEMO_CUSTOMER_ID,
            created_at=now - timedelta(seconds=i),
        ))

    await chats.upsert(db, Chat(
        id=DEMO_CHAT_ID,
        job_id="demo-job-1",
        job_title="Fix leaky kitchen faucet",
        members=[DEMO_CUSTOMER_ID, DEMO_WORKER_ID],
        member_names={DEMO_CUSTOMER_ID: "Demo User", DEMO_WORKER_ID: "Alex Pro"},
        last_message=DEMO_GREETING,
        updated_at=now,
    ))
    await messages.upsert(db, Message(
        id="demo-msg-1",
        chat_id=DEMO_CHAT_ID,
        sender_id=DEMO_WORKER_ID,
        sender_name="Alex Pro",
        text=DEMO_GREETING,
        created_at=now,
    ))

    logger.info("demo_data_seeded", jobs=len(DEMO_JOBS), offers=len(DEMO_OFFERS))


class DemoService:
    """Seeds demo data as its own unit of work."""

    def __init__(self, database: Database):
        self.database = database

    async def seed(self) -> None:
        async with self.database.unit_of_work() as db:
            await seed_demo_data(db)
