"""
Offer routes.
"""
from typing import List

from fastapi import APIRouter, Depends

from workova.api.deps import get_current_account, get_feed_service, get_offer_service
from workova.schemas.account import Account
from workova.schemas.chat import Chat
from workova.schemas.offer import Offer
from workova.services.feed_service import FeedService
from workova.services.offer_service import OfferService

router = APIRouter(prefix="/offers", tags=["offers"])


@router.get("/mine", response_model=List[Offer])
async def my_offers(
    current_account: Account = Depends(get_current_account),
    feed_service: FeedService = Depends(get_feed_service),
):
    """Offers sent by the acting worker, newest first."""
    return await feed_service.offers_by_worker(current_account.id)


@router.get("/{offer_id}", response_model=Offer)
async def get_offer(
    offer_id: str,
    current_account: Account = Depends(get_current_account),
    offer_service: OfferService = Depends(get_offer_service),
):
    return await offer_service.get_offer(offer_id)


@router.post("/{offer_id}/accept", response_model=Chat)
async def accept_offer(
    offer_id: str,
    current_account: Account = Depends(get_current_account),
    offer_service: OfferService = Depends(get_offer_service),
):
    """
    Accept an offer on one of the acting customer's jobs.

    Competing offers are rejected, the job is booked, and the chat with the
    worker is returned.
    """
    return await offer_service.accept_offer(offer_id, current_account.id)


@router.post("/{offer_id}/reject", response_model=Offer)
async def reject_offer(
    offer_id: str,
    current_account: Account = Depends(get_current_account),
    offer_service: OfferService = Depends(get_offer_service),
):
    return await offer_service.reject_offer(offer_id, current_account.id)


@router.post("/{offer_id}/withdraw", response_model=Offer)
async def withdraw_offer(
    offer_id: str,
    current_account: Account = Depends(get_current_account),
    offer_service: OfferService = Depends(get_offer_service),
):
    """Take back an offer that hasn't been answered yet."""
    return await offer_service.withdraw_offer(offer_id, current_account.id)
