"""
Service categories a job can be posted under and a worker can offer.
"""
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class JobCategory:
    id: str
    label: str


JOB_CATEGORIES: List[JobCategory] = [
    JobCategory("handyman", "Handyman"),
    JobCategory("cleaning", "Cleaning"),
    JobCategory("hvac", "HVAC"),
    JobCategory("remodeling", "Remodeling"),
    JobCategory("moving", "Moving"),
    JobCategory("tutoring", "Tutoring"),
    JobCategory("babysitting", "Babysitting"),
    JobCategory("plumbing", "Plumbing"),
]

_BY_ID = {c.id: c for c in JOB_CATEGORIES}


def get_category(category_id: str) -> Optional[JobCategory]:
    return _BY_ID.get(category_id)


def category_label(category_id: str) -> str:
    """Human label, falling back to the raw id for unknown categories."""
    category = get_category(category_id)
    return category.label if category else category_id
