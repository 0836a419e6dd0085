"""
Report routes.
"""
from fastapi import APIRouter, Depends, Request, status

from workova.api.deps import get_current_account, get_report_service
from workova.core.rate_limit import RATE_WRITE, limiter
from workova.schemas.account import Account
from workova.schemas.report import Report, ReportCreate
from workova.services.report_service import ReportService

router = APIRouter(prefix="/reports", tags=["reports"])


@router.post("", response_model=Report, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_WRITE)
async def submit_report(
    request: Request,
    body: ReportCreate,
    current_account: Account = Depends(get_current_account),
    report_service: ReportService = Depends(get_report_service),
):
    """Flag a job, user, offer or message for review."""
    return await report_service.submit_report(
        reporter_id=current_account.id,
        target_type=body.target_type,
        target_id=body.target_id,
        reason=body.reason,
    )
