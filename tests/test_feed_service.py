"""Tests for the read-only list views."""

import pytest

from workova.services import (
    AuthService,
    ChatService,
    FeedService,
    JobService,
    OfferService,
    UserService,
)


async def _post(database, customer_id, title):
    return await JobService(database).create_job(
        customer_id=customer_id,
        category_id="moving",
        title=title,
        description="Boxes and a couch.",
        budget_min=100,
        budget_max=200,
    )


@pytest.mark.asyncio
async def test_feed_hides_own_blocked_and_closed_jobs(database, customer, worker):
    neighbour = await AuthService(database).sign_up(email="nia@mail.com", display_name="Nia")
    older = await _post(database, customer.id, "Move boxes")
    newer = await _post(database, neighbour.id, "Move a couch")
    cancelled = await _post(database, neighbour.id, "Move a piano")
    await JobService(database).cancel_job(cancelled.id, neighbour.id)
    own = await _post(database, worker.id, "Haul old fridge")

    feed = FeedService(database)

    everyone = await feed.open_jobs_feed()
    assert [j.id for j in everyone] == [own.id, newer.id, older.id]

    for_worker = await feed.open_jobs_feed(worker.id)
    assert [j.id for j in for_worker] == [newer.id, older.id]

    blocked = await UserService(database).block(worker.id, customer.id)
    filtered = await feed.open_jobs_feed(worker.id, blocked.blocked_users)
    assert [j.id for j in filtered] == [newer.id]


@pytest.mark.asyncio
async def test_blocking_keeps_existing_offers_and_chats(database, customer, worker, chat):
    await UserService(database).block(worker.id, customer.id)
    await UserService(database).block(customer.id, worker.id)

    feed = FeedService(database)
    assert [c.id for c in await feed.chats_for_user(worker.id)] == [chat.id]
    assert [c.id for c in await feed.chats_for_user(customer.id)] == [chat.id]
    assert len(await feed.offers_by_worker(worker.id)) == 1
    # Chat still works both ways
    await ChatService(database).send_message(chat.id, worker.id, "Still on for Friday?")


@pytest.mark.asyncio
async def test_jobs_with_offer_counts(database, customer, worker, open_job, offer):
    quiet = await _post(database, customer.id, "Move a dresser")

    feed = FeedService(database)
    listed = await feed.jobs_with_offer_counts(customer.id)

    assert [(j.id, j.offer_count) for j in listed] == [(quiet.id, 0), (open_job.id, 1)]
    assert await feed.offer_counts([open_job.id, quiet.id, "missing"]) == {
        open_job.id: 1,
        quiet.id: 0,
        "missing": 0,
    }


@pytest.mark.asyncio
async def test_offers_by_worker_newest_first(database, customer, worker, open_job, offer):
    second_job = await _post(database, customer.id, "Move a bookshelf")
    later = await OfferService(database).create_offer(
        job_id=second_job.id, worker_id=worker.id, price=120, eta_text="Saturday"
    )

    offers = await FeedService(database).offers_by_worker(worker.id)

    assert [o.id for o in offers] == [later.id, offer.id]


@pytest.mark.asyncio
async def test_chats_ordered_by_latest_activity(database, customer, worker, open_job, chat):
    second_job = await _post(database, customer.id, "Move a bookshelf")
    second_offer = await OfferService(database).create_offer(
        job_id=second_job.id, worker_id=worker.id, price=120, eta_text="Saturday"
    )
    newer_chat = await OfferService(database).accept_offer(second_offer.id, customer.id)

    feed = FeedService(database)
    assert [c.id for c in await feed.chats_for_user(worker.id)] == [newer_chat.id, chat.id]

    await ChatService(database).send_message(chat.id, customer.id, "Any update?")

    ordered = await feed.chats_for_user(worker.id)
    assert [c.id for c in ordered] == [chat.id, newer_chat.id]
    assert ordered[0].other_member(worker.id) == customer.id
