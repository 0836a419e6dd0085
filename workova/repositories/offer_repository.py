"""
Offer repository - data access for Offer entity.
"""
from collections import Counter
from typing import Dict, Iterable, List

from sqlalchemy.ext.asyncio import AsyncSession

from workova.models.collection import OFFERS
from workova.repositories.base import CollectionRepository
from workova.schemas.offer import Offer


class OfferRepository(CollectionRepository[Offer]):
    def __init__(self):
        super().__init__(OFFERS, Offer)

    async def list_for_job(
        self,
        db: AsyncSession,
        job_id: str,
    ) -> List[Offer]:
        """Offers on a job, newest first."""
        offers = await self.find(db, lambda o: o.job_id == job_id)
        offers.sort(key=lambda o: o.created_at, reverse=True)
        return offers

    async def list_by_worker(
        self,
        db: AsyncSession,
        worker_id: str,
    ) -> List[Offer]:
        """Offers sent by a worker, newest first."""
        offers = await self.find(db, lambda o: o.worker_id == worker_id)
        offers.sort(key=lambda o: o.created_at, reverse=True)
        return offers

    async def count_by_job(
        self,
        db: AsyncSession,
        job_ids: Iterable[str],
    ) -> Dict[str, int]:
        """Number of offers per job id. Jobs without offers map to 0."""
        wanted = list(job_ids)
        counts = Counter(o.job_id for o in await self.get_all(db))
        return {job_id: counts.get(job_id, 0) for job_id in wanted}
