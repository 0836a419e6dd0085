"""
Offer schemas.

Offer status state machine (every state after 'sent' is terminal):
  sent → accepted
  sent → rejected
  sent → withdrawn
"""
from typing import Literal
from workova.schemas.base import BaseSchema, CreatedSchema, IDSchema

OFFER_STATUS_SENT = "sent"
OFFER_STATUS_ACCEPTED = "accepted"
OFFER_STATUS_REJECTED = "rejected"
OFFER_STATUS_WITHDRAWN = "withdrawn"

OfferStatus = Literal["sent", "accepted", "rejected", "withdrawn"]


class Offer(IDSchema, CreatedSchema):
    """
    Stored offer record.

    worker_name is snapshotted at creation; customer_id is copied from the
    job so a worker's offers can be listed without loading jobs.
    """

    job_id: str
    worker_id: str
    worker_name: str
    customer_id: str
    price: float
    eta_text: str
    message: str = ""
    status: OfferStatus = OFFER_STATUS_SENT


class OfferCreate(BaseSchema):
    """Offer submission request body."""

    price: float
    eta_text: str
    message: str = ""
