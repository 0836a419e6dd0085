"""
Authentication routes.

Sign-in matches by email only; there are no tokens. Clients either rely on
the stored session or send X-Account-ID with each request.
"""
from fastapi import APIRouter, Depends, Request, status

from workova.api.deps import get_auth_service
from workova.core.rate_limit import RATE_AUTH, limiter
from workova.schemas.account import Account, SessionResponse, SignInRequest, SignUpRequest
from workova.schemas.base import MessageResponse
from workova.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/sign-up", response_model=Account, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_AUTH)
async def sign_up(
    request: Request,
    body: SignUpRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Create a customer account and sign in as it."""
    return await auth_service.sign_up(
        email=body.email,
        display_name=body.display_name,
        password=body.password,
    )


@router.post("/sign-in", response_model=Account)
@limiter.limit(RATE_AUTH)
async def sign_in(
    request: Request,
    body: SignInRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Sign in as the account registered with this email."""
    return await auth_service.sign_in(email=body.email, password=body.password)


@router.post("/sign-out", response_model=MessageResponse)
async def sign_out(auth_service: AuthService = Depends(get_auth_service)):
    """Clear the current session."""
    await auth_service.sign_out()
    return MessageResponse(message="Signed out")


@router.get("/session", response_model=SessionResponse)
async def current_session(auth_service: AuthService = Depends(get_auth_service)):
    """The currently signed-in account, if any."""
    return SessionResponse(account=await auth_service.current_account())


@router.post("/demo", response_model=Account)
async def sign_in_demo(auth_service: AuthService = Depends(get_auth_service)):
    """Seed demo data and sign in as the demo customer."""
    return await auth_service.sign_in_demo()
