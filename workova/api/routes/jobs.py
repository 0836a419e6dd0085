"""
Job routes.

Thin controllers - job lifecycle lives in JobService, offers in
OfferService, list views in FeedService.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, status

from workova.api.deps import (
    get_current_account,
    get_feed_service,
    get_job_service,
    get_offer_service,
    get_optional_account,
)
from workova.core.categories import JOB_CATEGORIES
from workova.core.rate_limit import RATE_WRITE, limiter
from workova.schemas.account import Account
from workova.schemas.job import CategoryResponse, Job, JobCreate, JobWithOfferCount
from workova.schemas.offer import Offer, OfferCreate
from workova.services.feed_service import FeedService
from workova.services.job_service import JobService
from workova.services.offer_service import OfferService

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("/categories", response_model=List[CategoryResponse])
async def list_categories():
    """Service categories a job can be posted under."""
    return [CategoryResponse(id=c.id, label=c.label) for c in JOB_CATEGORIES]


@router.get("/feed", response_model=List[Job])
async def open_jobs_feed(
    current_account: Optional[Account] = Depends(get_optional_account),
    feed_service: FeedService = Depends(get_feed_service),
):
    """
    Browse open jobs, newest first.

    Signed-in viewers don't see their own jobs or jobs from users they blocked.
    """
    if current_account is None:
        return await feed_service.open_jobs_feed()
    return await feed_service.open_jobs_feed(
        current_account.id, current_account.blocked_users
    )


@router.get("/mine", response_model=List[JobWithOfferCount])
async def my_jobs(
    current_account: Account = Depends(get_current_account),
    feed_service: FeedService = Depends(get_feed_service),
):
    """Jobs posted by the acting account, with offer counts."""
    return await feed_service.jobs_with_offer_counts(current_account.id)


@router.post("", response_model=Job, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_WRITE)
async def create_job(
    request: Request,
    body: JobCreate,
    current_account: Account = Depends(get_current_account),
    job_service: JobService = Depends(get_job_service),
):
    """Post a job. Title and description go through the moderation filter."""
    return await job_service.create_job(
        customer_id=current_account.id,
        category_id=body.category_id,
        title=body.title,
        description=body.description,
        budget_min=body.budget_min,
        budget_max=body.budget_max,
    )


@router.get("/{job_id}", response_model=Job)
async def get_job(
    job_id: str,
    job_service: JobService = Depends(get_job_service),
):
    return await job_service.get_job(job_id)


@router.post("/{job_id}/complete", response_model=Job)
async def complete_job(
    job_id: str,
    current_account: Account = Depends(get_current_account),
    job_service: JobService = Depends(get_job_service),
):
    """Mark a booked job complete."""
    return await job_service.complete_job(job_id, current_account.id)


@router.post("/{job_id}/cancel", response_model=Job)
async def cancel_job(
    job_id: str,
    current_account: Account = Depends(get_current_account),
    job_service: JobService = Depends(get_job_service),
):
    """Cancel a job that hasn't been booked yet."""
    return await job_service.cancel_job(job_id, current_account.id)


# ── Offers on a job ─────────────────────────────────────────────────────────

@router.get("/{job_id}/offers", response_model=List[Offer])
async def list_job_offers(
    job_id: str,
    job_service: JobService = Depends(get_job_service),
    feed_service: FeedService = Depends(get_feed_service),
):
    """Offers on a job, newest first."""
    await job_service.get_job(job_id)
    return await feed_service.offers_for_job(job_id)


@router.post("/{job_id}/offers", response_model=Offer, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_WRITE)
async def create_offer(
    request: Request,
    job_id: str,
    body: OfferCreate,
    current_account: Account = Depends(get_current_account),
    offer_service: OfferService = Depends(get_offer_service),
):
    """Submit an offer on an open job as the acting worker."""
    return await offer_service.create_offer(
        job_id=job_id,
        worker_id=current_account.id,
        price=body.price,
        eta_text=body.eta_text,
        message=body.message,
    )
