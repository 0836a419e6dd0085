"""
Job schemas.

Job status state machine:
  open → booked → complete
    ↓
  cancelled

'offered' and 'in_progress' are valid stored values that no operation sets.
"""
from typing import List, Literal
from pydantic import Field
from workova.schemas.base import BaseSchema, CreatedSchema, IDSchema

JOB_STATUS_OPEN = "open"
JOB_STATUS_OFFERED = "offered"
JOB_STATUS_BOOKED = "booked"
JOB_STATUS_IN_PROGRESS = "in_progress"
JOB_STATUS_COMPLETE = "complete"
JOB_STATUS_CANCELLED = "cancelled"

JobStatus = Literal["open", "offered", "booked", "in_progress", "complete", "cancelled"]

# Allowed (from, to) pairs
JOB_TRANSITIONS = {
    (JOB_STATUS_OPEN, JOB_STATUS_BOOKED),
    (JOB_STATUS_BOOKED, JOB_STATUS_COMPLETE),
    (JOB_STATUS_OPEN, JOB_STATUS_CANCELLED),
}


def can_transition(current: str, target: str) -> bool:
    return (current, target) in JOB_TRANSITIONS


class Job(IDSchema, CreatedSchema):
    """
    Stored job record.

    customer_name is a snapshot of the customer's display name at posting
    time and is never refreshed.
    """

    customer_id: str
    customer_name: str
    category_id: str
    title: str
    description: str
    budget_min: float
    budget_max: float
    photos: List[str] = Field(default_factory=list)
    status: JobStatus = JOB_STATUS_OPEN


class JobCreate(BaseSchema):
    """Job creation request body."""

    category_id: str
    title: str
    description: str
    budget_min: float
    budget_max: float


class JobWithOfferCount(Job):
    """Job as listed to its owner, with the number of offers received."""

    offer_count: int = 0


class CategoryResponse(BaseSchema):
    id: str
    label: str
