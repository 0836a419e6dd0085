"""Tests for sign-up, sign-in and the current session."""

import pytest

from workova.core.exceptions import (
    AccountNotFoundException,
    DuplicateAccountException,
    ValidationFailedException,
)
from workova.services import AuthService, FeedService, JobService, OfferService
from workova.services.demo_service import DEMO_CUSTOMER_ID, DEMO_JOBS, DEMO_WORKER_ID


@pytest.mark.asyncio
async def test_sign_up_creates_customer_and_session(database):
    auth = AuthService(database)

    account = await auth.sign_up(
        email="  Casey@Mail.COM ", display_name="  Casey  ", password="ignored"
    )

    assert account.email == "casey@mail.com"
    assert account.display_name == "Casey"
    assert account.role == "customer"
    assert account.blocked_users == []
    assert (await auth.current_account()) == account


@pytest.mark.asyncio
async def test_sign_up_rejects_duplicate_email_in_any_case(database, customer):
    with pytest.raises(DuplicateAccountException) as exc_info:
        await AuthService(database).sign_up(email="CASEY@mail.com", display_name="Other")

    assert exc_info.value.code == "DUPLICATE_ACCOUNT"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "email, display_name, field",
    [("", "Casey", "email"), ("casey@mail.com", "   ", "display_name")],
)
async def test_sign_up_requires_email_and_name(database, email, display_name, field):
    with pytest.raises(ValidationFailedException) as exc_info:
        await AuthService(database).sign_up(email=email, display_name=display_name)

    assert exc_info.value.field == field


@pytest.mark.asyncio
async def test_sign_in_unknown_email(database):
    with pytest.raises(AccountNotFoundException) as exc_info:
        await AuthService(database).sign_in(email="nobody@mail.com")

    assert exc_info.value.message == "No account found with that email. Please sign up first."


@pytest.mark.asyncio
async def test_sign_in_matches_normalized_email_and_ignores_password(database, customer, worker):
    auth = AuthService(database)
    assert (await auth.current_account()).id == worker.id

    account = await auth.sign_in(email=" CASEY@mail.com", password="wrong")

    assert account.id == customer.id
    assert (await auth.current_account()).id == customer.id


@pytest.mark.asyncio
async def test_find_by_email(database, customer):
    auth = AuthService(database)

    assert (await auth.find_by_email("Casey@Mail.com")).id == customer.id
    assert await auth.find_by_email("someone@mail.com") is None


@pytest.mark.asyncio
async def test_sign_out_clears_session(database, customer):
    auth = AuthService(database)

    await auth.sign_out()

    assert await auth.current_account() is None


@pytest.mark.asyncio
async def test_demo_sign_in_seeds_marketplace_idempotently(database, customer):
    auth = AuthService(database)

    await auth.sign_in_demo()
    account = await auth.sign_in_demo()

    assert account.id == DEMO_CUSTOMER_ID
    feed = FeedService(database)
    demo_jobs = await feed.jobs_by_customer(DEMO_CUSTOMER_ID)
    worker_jobs = await feed.jobs_by_customer(DEMO_WORKER_ID)
    assert len(demo_jobs) + len(worker_jobs) == len(DEMO_JOBS)
    assert [j.id for j in demo_jobs] == ["demo-job-1", "demo-job-2", "demo-job-3"]
    assert len(await feed.offers_for_job("demo-job-1")) == 2
    assert len(await feed.messages_for_chat("demo-chat-1")) == 1
    # Existing accounts survive seeding
    assert (await auth.find_by_email("casey@mail.com")).id == customer.id


@pytest.mark.asyncio
async def test_demo_sign_in_reopens_demo_jobs_after_real_activity(database, worker):
    auth = AuthService(database)
    offers = OfferService(database)
    feed = FeedService(database)
    await auth.sign_in_demo()

    # A real worker gets hired on a demo job
    real_offer = await offers.create_offer(
        job_id="demo-job-1", worker_id=worker.id, price=90, eta_text="Tonight"
    )
    await offers.accept_offer(real_offer.id, DEMO_CUSTOMER_ID)
    assert (await JobService(database).get_job("demo-job-1")).status == "booked"

    await auth.sign_in_demo()

    assert (await JobService(database).get_job("demo-job-1")).status == "open"
    job_offers = await feed.offers_for_job("demo-job-1")
    assert sorted(o.id for o in job_offers) == ["demo-offer-1", "demo-offer-2"]
    assert {o.status for o in job_offers} == {"sent"}
    assert await feed.offers_by_worker(worker.id) == []
    assert await feed.chats_for_user(worker.id) == []

    chat = await offers.accept_offer("demo-offer-1", DEMO_CUSTOMER_ID)

    statuses = {o.id: o.status for o in await feed.offers_for_job("demo-job-1")}
    assert statuses == {"demo-offer-1": "accepted", "demo-offer-2": "rejected"}
    assert [c.id for c in await feed.chats_for_user(DEMO_CUSTOMER_ID)].count(chat.id) == 1
