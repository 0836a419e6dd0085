"""
Job service - posting jobs and moving them through their lifecycle.
"""
from workova.core.database import Database
from workova.core.exceptions import (
    AccountNotFoundException,
    InvalidTransitionException,
    JobNotFoundException,
    NotJobOwnerException,
    ValidationFailedException,
)
from workova.core.logging import get_logger
from workova.core.validation import ensure_clean, require_category, require_positive, require_text
from workova.repositories.account_repository import AccountRepository
from workova.repositories.job_repository import JobRepository
from workova.schemas.job import (
    JOB_STATUS_CANCELLED,
    JOB_STATUS_COMPLETE,
    JOB_STATUS_OPEN,
    Job,
    can_transition,
)

logger = get_logger(__name__)


class JobService:
    """Handles job creation and customer-driven status changes."""

    def __init__(self, database: Database):
        self.database = database
        self.job_repo = JobRepository()
        self.account_repo = AccountRepository()

    async def create_job(
        self,
        *,
        customer_id: str,
        category_id: str,
        title: str,
        description: str,
        budget_min: float,
        budget_max: float,
    ) -> Job:
        """
        Post a new open job.

        Raises:
            ValidationFailedException: Missing text, unknown category or bad budget.
            ModerationRejectedException: Title or description failed the filter.
            AccountNotFoundException: If the customer doesn't exist.
        """
        require_category("category_id", category_id)
        title = require_text("title", title, "Title")
        description = require_text("description", description, "Description")
        require_positive("budget_min", budget_min, "Minimum budget")
        require_positive("budget_max", budget_max, "Maximum budget")
        if budget_max < budget_min:
            raise ValidationFailedException(
                "budget_max", "Maximum budget must be greater than minimum."
            )
        ensure_clean("title", title)
        ensure_clean("description", description)

        async with self.database.unit_of_work() as db:
            customer = await self.account_repo.get_by_id(db, customer_id)
            if not customer:
                raise AccountNotFoundException("Account not found")

            job = await self.job_repo.create(db, Job(
                customer_id=customer.id,
                customer_name=customer.display_name,
                category_id=category_id,
                title=title,
                description=description,
                budget_min=budget_min,
                budget_max=budget_max,
                status=JOB_STATUS_OPEN,
            ))

        logger.info("job_created", job_id=job.id, customer_id=customer_id, category=category_id)
        return job

    async def get_job(self, job_id: str) -> Job:
        """
        Raises:
            JobNotFoundException: If the job doesn't exist.
        """
        async with self.database.session() as db:
            job = await self.job_repo.get_by_id(db, job_id)
        if not job:
            raise JobNotFoundException()
        return job

    async def complete_job(self, job_id: str, actor_id: str) -> Job:
        """booked → complete, by the job's customer only."""
        return await self._transition(job_id, actor_id, JOB_STATUS_COMPLETE)

    async def cancel_job(self, job_id: str, actor_id: str) -> Job:
        """open → cancelled, by the job's customer only."""
        return await self._transition(job_id, actor_id, JOB_STATUS_CANCELLED)

    async def _transition(self, job_id: str, actor_id: str, target: str) -> Job:
        async with self.database.unit_of_work() as db:
            job = await self.job_repo.get_by_id(db, job_id)
            if not job:
                raise JobNotFoundException()
            if job.customer_id != actor_id:
                raise NotJobOwnerException()
            if not can_transition(job.status, target):
                raise InvalidTransitionException("job", job.status, target)

            job = await self.job_repo.update(db, job_id, status=target)

        logger.info("job_status_changed", job_id=job_id, status=target)
        return job
