"""Tests for posting jobs and the job state machine."""

import pytest

from workova.core.exceptions import (
    AccountNotFoundException,
    InvalidTransitionException,
    JobNotFoundException,
    ModerationRejectedException,
    NotJobOwnerException,
    ValidationFailedException,
)
from workova.schemas.job import can_transition
from workova.services import FeedService, JobService

JOB_FIELDS = dict(
    category_id="cleaning",
    title="  Deep clean 2-bedroom apartment ",
    description=" Moving out, need kitchen and bathrooms done. ",
    budget_min=150,
    budget_max=250,
)


@pytest.mark.asyncio
async def test_create_job(database, customer):
    job = await JobService(database).create_job(customer_id=customer.id, **JOB_FIELDS)

    assert job.status == "open"
    assert job.title == "Deep clean 2-bedroom apartment"
    assert job.description == "Moving out, need kitchen and bathrooms done."
    assert job.customer_name == customer.display_name
    assert job.photos == []
    assert await JobService(database).get_job(job.id) == job


@pytest.mark.asyncio
async def test_moderated_title_is_rejected_and_nothing_is_stored(database, customer):
    fields = {**JOB_FIELDS, "title": "buy crypto now!!!"}

    with pytest.raises(ModerationRejectedException) as exc_info:
        await JobService(database).create_job(customer_id=customer.id, **fields)

    assert exc_info.value.field == "title"
    assert await FeedService(database).jobs_by_customer(customer.id) == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "changes, field",
    [
        ({"title": "   "}, "title"),
        ({"description": ""}, "description"),
        ({"category_id": "gardening"}, "category_id"),
        ({"budget_min": 0}, "budget_min"),
        ({"budget_min": float("nan")}, "budget_min"),
        ({"budget_max": float("inf")}, "budget_max"),
        ({"budget_min": 50, "budget_max": float("nan")}, "budget_max"),
        ({"budget_min": 300, "budget_max": 200}, "budget_max"),
    ],
)
async def test_create_job_validation(database, customer, changes, field):
    with pytest.raises(ValidationFailedException) as exc_info:
        await JobService(database).create_job(
            customer_id=customer.id, **{**JOB_FIELDS, **changes}
        )

    assert exc_info.value.field == field


@pytest.mark.asyncio
async def test_create_job_unknown_customer(database):
    with pytest.raises(AccountNotFoundException):
        await JobService(database).create_job(customer_id="ghost", **JOB_FIELDS)


@pytest.mark.asyncio
async def test_get_missing_job(database):
    with pytest.raises(JobNotFoundException):
        await JobService(database).get_job("missing")


@pytest.mark.asyncio
async def test_cancel_open_job(database, customer, open_job):
    jobs = JobService(database)

    cancelled = await jobs.cancel_job(open_job.id, customer.id)
    assert cancelled.status == "cancelled"

    with pytest.raises(InvalidTransitionException):
        await jobs.cancel_job(open_job.id, customer.id)


@pytest.mark.asyncio
async def test_only_booked_jobs_complete(database, customer, open_job):
    with pytest.raises(InvalidTransitionException) as exc_info:
        await JobService(database).complete_job(open_job.id, customer.id)

    assert exc_info.value.details == {"entity": "job", "current": "open", "target": "complete"}


@pytest.mark.asyncio
async def test_complete_booked_job(database, customer, open_job, chat):
    jobs = JobService(database)

    done = await jobs.complete_job(open_job.id, customer.id)
    assert done.status == "complete"

    with pytest.raises(InvalidTransitionException):
        await jobs.cancel_job(open_job.id, customer.id)


@pytest.mark.asyncio
async def test_booked_job_cannot_be_cancelled(database, customer, open_job, chat):
    with pytest.raises(InvalidTransitionException):
        await JobService(database).cancel_job(open_job.id, customer.id)


@pytest.mark.asyncio
async def test_only_owner_changes_status(database, worker, open_job):
    with pytest.raises(NotJobOwnerException):
        await JobService(database).cancel_job(open_job.id, worker.id)

    assert (await JobService(database).get_job(open_job.id)).status == "open"


def test_transition_table():
    assert can_transition("open", "booked")
    assert can_transition("booked", "complete")
    assert can_transition("open", "cancelled")
    assert not can_transition("complete", "open")
    assert not can_transition("cancelled", "open")
    assert not can_transition("open", "offered")
