"""
Job repository - data access for Job entity.
"""
from typing import Iterable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from workova.models.collection import JOBS
from workova.repositories.base import CollectionRepository
from workova.schemas.job import JOB_STATUS_OPEN, Job


class JobRepository(CollectionRepository[Job]):
    def __init__(self):
        super().__init__(JOBS, Job)

    async def list_open(
        self,
        db: AsyncSession,
        *,
        exclude_customer_ids: Optional[Iterable[str]] = None,
    ) -> List[Job]:
        """Open jobs not posted by any excluded customer, newest first."""
        excluded = set(exclude_customer_ids or ())
        jobs = await self.find(
            db,
            lambda j: j.status == JOB_STATUS_OPEN and j.customer_id not in excluded,
        )
        jobs.sort(key=lambda j: j.created_at, reverse=True)
        return jobs

    async def list_by_customer(
        self,
        db: AsyncSession,
        customer_id: str,
    ) -> List[Job]:
        """All jobs posted by a customer, newest first."""
        jobs = await self.find(db, lambda j: j.customer_id == customer_id)
        jobs.sort(key=lambda j: j.created_at, reverse=True)
        return jobs
