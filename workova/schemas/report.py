"""
Report schemas.
"""
from typing import Literal
from workova.schemas.base import BaseSchema, CreatedSchema, IDSchema

REPORT_TARGET_TYPES = ("job", "user", "offer", "message")

ReportTarget = Literal["job", "user", "offer", "message"]


class Report(IDSchema, CreatedSchema):
    """Append-only moderation report. Never mutated."""

    reporter_id: str
    target_type: ReportTarget
    target_id: str
    reason: str


class ReportCreate(BaseSchema):
    """Report submission request body."""

    target_type: ReportTarget
    target_id: str
    reason: str
