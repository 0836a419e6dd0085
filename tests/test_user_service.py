"""Tests for roles, blocking, worker onboarding and account deletion."""

from unittest.mock import AsyncMock

import pytest

from workova.core.exceptions import (
    AccountNotFoundException,
    ValidationFailedException,
    WorkerProfileNotFoundException,
)
from workova.services import (
    AuthService,
    ChatService,
    FeedService,
    JobService,
    ReportService,
    UserService,
)


@pytest.mark.asyncio
async def test_set_role_is_idempotent(database, customer):
    users = UserService(database)

    first = await users.set_role(customer.id, "both")
    second = await users.set_role(customer.id, "both")

    assert first.role == second.role == "both"


@pytest.mark.asyncio
async def test_set_role_rejects_unknown_role(database, customer):
    with pytest.raises(ValidationFailedException):
        await UserService(database).set_role(customer.id, "admin")


@pytest.mark.asyncio
async def test_block_and_unblock_are_idempotent(database, customer, worker):
    users = UserService(database)

    await users.block(worker.id, customer.id)
    blocked = await users.block(worker.id, customer.id)
    assert blocked.blocked_users == [customer.id]
    assert await users.is_blocked(worker.id, customer.id) is True

    # The target's record is untouched
    assert (await users.get_account(customer.id)).blocked_users == []

    await users.unblock(worker.id, customer.id)
    unblocked = await users.unblock(worker.id, customer.id)
    assert unblocked.blocked_users == []
    assert await users.is_blocked(worker.id, customer.id) is False


@pytest.mark.asyncio
async def test_cannot_block_self(database, customer):
    with pytest.raises(ValidationFailedException):
        await UserService(database).block(customer.id, customer.id)


@pytest.mark.asyncio
async def test_worker_onboarding_promotes_customer(database, customer):
    users = UserService(database)

    profile = await users.upsert_worker_profile(
        customer.id,
        display_name=" Casey Fixes ",
        bio="Ten years of odd jobs.",
        categories=["handyman", "plumbing", "handyman"],
        service_radius=15,
    )

    assert profile.display_name == "Casey Fixes"
    assert profile.categories == ["handyman", "plumbing"]
    assert profile.rating_avg == 0 and profile.rating_count == 0
    assert (await users.get_account(customer.id)).role == "both"
    assert await users.get_worker_profile(customer.id) == profile


@pytest.mark.asyncio
async def test_worker_profile_update_keeps_ratings_and_created_at(database, worker):
    users = UserService(database)
    original = await users.upsert_worker_profile(
        worker.id, display_name="Wren", categories=["cleaning"], service_radius=10
    )
    async with database.unit_of_work() as db:
        await users.worker_repo.update(db, worker.id, rating_avg=4.5, rating_count=12)

    updated = await users.upsert_worker_profile(
        worker.id, display_name="Wren Pro", categories=["moving"], service_radius=30
    )

    assert updated.rating_avg == 4.5
    assert updated.rating_count == 12
    assert updated.created_at == original.created_at
    assert updated.updated_at >= original.updated_at
    # A worker stays a worker
    assert (await users.get_account(worker.id)).role == "worker"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "categories, radius, field",
    [
        ([], 10, "categories"),
        (["gardening"], 10, "categories"),
        (["cleaning"], 0, "service_radius"),
        (["cleaning"], float("inf"), "service_radius"),
    ],
)
async def test_worker_profile_validation(database, worker, categories, radius, field):
    with pytest.raises(ValidationFailedException) as exc_info:
        await UserService(database).upsert_worker_profile(
            worker.id, display_name="Wren", categories=categories, service_radius=radius
        )

    assert exc_info.value.field == field


@pytest.mark.asyncio
async def test_missing_worker_profile(database, customer):
    with pytest.raises(WorkerProfileNotFoundException):
        await UserService(database).get_worker_profile(customer.id)


@pytest.mark.asyncio
async def test_delete_customer_cascades(database, customer, worker, open_job, chat):
    await ChatService(database).send_message(chat.id, worker.id, "On my way")
    other_job = await JobService(database).create_job(
        customer_id=worker.id,
        category_id="moving",
        title="Move a sofa",
        description="Second floor to ground floor.",
        budget_min=60,
        budget_max=90,
    )
    report = await ReportService(database).submit_report(
        reporter_id=customer.id, target_type="user", target_id=worker.id, reason="No-show"
    )
    await AuthService(database).sign_in(email=customer.email)

    await UserService(database).delete_account(customer.id)

    feed = FeedService(database)
    assert await feed.jobs_by_customer(customer.id) == []
    assert await feed.offers_for_job(open_job.id) == []
    assert await feed.offers_by_worker(worker.id) == []
    assert await feed.chats_for_user(worker.id) == []
    assert await feed.messages_for_chat(chat.id) == []
    assert [j.id for j in await feed.jobs_by_customer(worker.id)] == [other_job.id]
    assert await ReportService(database).list_reports() == [report]
    assert await AuthService(database).current_account() is None
    with pytest.raises(AccountNotFoundException):
        await AuthService(database).sign_in(email=customer.email)
    # The other party is untouched
    assert (await UserService(database).get_account(worker.id)).email == worker.email


@pytest.mark.asyncio
async def test_delete_worker_removes_their_offers_and_profile(database, customer, worker, offer):
    users = UserService(database)
    await users.upsert_worker_profile(
        worker.id, display_name="Wren", categories=["handyman"], service_radius=5
    )

    await users.delete_account(worker.id)

    feed = FeedService(database)
    assert await feed.offers_for_job(offer.job_id) == []
    assert len(await feed.jobs_by_customer(customer.id)) == 1
    with pytest.raises(WorkerProfileNotFoundException):
        await users.get_worker_profile(worker.id)


@pytest.mark.asyncio
async def test_failed_delete_rolls_back_everything(database, customer, worker, open_job, chat):
    users = UserService(database)
    users.account_repo.delete = AsyncMock(side_effect=RuntimeError("disk full"))

    with pytest.raises(RuntimeError):
        await users.delete_account(customer.id)

    fresh = UserService(database)
    assert (await fresh.get_account(customer.id)).id == customer.id
    feed = FeedService(database)
    assert [j.id for j in await feed.jobs_by_customer(customer.id)] == [open_job.id]
    assert [c.id for c in await feed.chats_for_user(customer.id)] == [chat.id]
    assert len(await feed.offers_for_job(open_job.id)) == 1


@pytest.mark.asyncio
async def test_delete_unknown_account(database):
    with pytest.raises(AccountNotFoundException):
        await UserService(database).delete_account("no-such-account")
