"""
User routes.

Thin controllers - all business logic lives in UserService.
"""
from fastapi import APIRouter, Depends

from workova.api.deps import get_current_account, get_user_service
from workova.schemas.account import (
    Account,
    SetRoleRequest,
    WorkerProfile,
    WorkerProfileUpsert,
)
from workova.schemas.base import MessageResponse
from workova.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=Account)
async def get_me(current_account: Account = Depends(get_current_account)):
    """The acting account."""
    return current_account


@router.put("/me/role", response_model=Account)
async def set_role(
    body: SetRoleRequest,
    current_account: Account = Depends(get_current_account),
    user_service: UserService = Depends(get_user_service),
):
    """Switch between customer, worker and both."""
    return await user_service.set_role(current_account.id, body.role)


@router.delete("/me", response_model=MessageResponse)
async def delete_me(
    current_account: Account = Depends(get_current_account),
    user_service: UserService = Depends(get_user_service),
):
    """Permanently delete the account and everything it owns."""
    await user_service.delete_account(current_account.id)
    return MessageResponse(message="Account deleted successfully")


# ── Worker profile ──────────────────────────────────────────────────────────

@router.get("/me/worker-profile", response_model=WorkerProfile)
async def get_my_worker_profile(
    current_account: Account = Depends(get_current_account),
    user_service: UserService = Depends(get_user_service),
):
    return await user_service.get_worker_profile(current_account.id)


@router.put("/me/worker-profile", response_model=WorkerProfile)
async def upsert_my_worker_profile(
    body: WorkerProfileUpsert,
    current_account: Account = Depends(get_current_account),
    user_service: UserService = Depends(get_user_service),
):
    """Create or update the worker profile (worker onboarding)."""
    return await user_service.upsert_worker_profile(
        current_account.id,
        display_name=body.display_name,
        bio=body.bio,
        categories=body.categories,
        service_radius=body.service_radius,
    )


@router.get("/{account_id}/worker-profile", response_model=WorkerProfile)
async def get_worker_profile(
    account_id: str,
    user_service: UserService = Depends(get_user_service),
):
    return await user_service.get_worker_profile(account_id)


# ── Blocking ────────────────────────────────────────────────────────────────

@router.post("/{account_id}/block", response_model=Account)
async def block_user(
    account_id: str,
    current_account: Account = Depends(get_current_account),
    user_service: UserService = Depends(get_user_service),
):
    """Hide this user's jobs from the acting account's feed."""
    return await user_service.block(current_account.id, account_id)


@router.delete("/{account_id}/block", response_model=Account)
async def unblock_user(
    account_id: str,
    current_account: Account = Depends(get_current_account),
    user_service: UserService = Depends(get_user_service),
):
    return await user_service.unblock(current_account.id, account_id)
