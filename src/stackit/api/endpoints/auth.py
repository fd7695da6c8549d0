"""Authentication endpoints for the StackIt API."""

from __future__ import annotations

from fastapi import APIRouter, status

from stackit.api.dependencies import SessionDep
from stackit.core.security import create_access_token
from stackit.schemas.common import MessageResponse
from stackit.schemas.user import LoginRequest, LoginResponse, RegisterRequest, UserSummary
from stackit.services import accounts

router = APIRouter(tags=["authentication"])


@router.post(
    "/register",
    summary="Register a new account",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
)
async def register_user(payload: RegisterRequest, db: SessionDep) -> MessageResponse:
    """Create an account with the default ``user`` role."""
    accounts.register_user(
        db,
        username=payload.username,
        email=payload.email,
        password=payload.password,
    )
    return MessageResponse(message="User registered successfully")


@router.post(
    "/login",
    summary="Exchange credentials for a bearer token",
    response_model=LoginResponse,
)
async def login_user(payload: LoginRequest, db: SessionDep) -> LoginResponse:
    """Authenticate with username and password."""
    user = accounts.authenticate(db, payload.username, payload.password)
    token = create_access_token(user.id, user.role.value)
    return LoginResponse(
        token=token,
        token_type="bearer",
        user=UserSummary.model_validate(user),
    )
