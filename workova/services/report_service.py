"""
Report service - append-only content and user reports.
"""
from typing import List

from workova.core.database import Database
from workova.core.exceptions import ValidationFailedException
from workova.core.logging import get_logger
from workova.core.validation import require_text
from workova.repositories.report_repository import ReportRepository
from workova.schemas.report import REPORT_TARGET_TYPES, Report

logger = get_logger(__name__)


class ReportService:
    """Handles report submission."""

    def __init__(self, database: Database):
        self.database = database
        self.report_repo = ReportRepository()

    async def submit_report(
        self,
        *,
        reporter_id: str,
        target_type: str,
        target_id: str,
        reason: str,
    ) -> Report:
        """Record a report. The target is not looked up."""
        if target_type not in REPORT_TARGET_TYPES:
            raise ValidationFailedException(
                "target_type", f"Target type must be one of {', '.join(REPORT_TARGET_TYPES)}."
            )
        target_id = require_text("target_id", target_id, "Target")
        reason = require_text("reason", reason, "Reason")

        async with self.database.unit_of_work() as db:
            report = await self.report_repo.create(db, Report(
                reporter_id=reporter_id,
                target_type=target_type,
                target_id=target_id,
                reason=reason,
            ))

        logger.info("report_submitted", report_id=report.id, target_type=target_type, target_id=target_id)
        return report

    async def list_reports(self) -> List[Report]:
        async with self.database.session() as db:
            return await self.report_repo.get_all(db)
