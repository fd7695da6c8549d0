"""User administration endpoints."""

from fastapi import APIRouter

from stackit.api.dependencies import CurrentUserDep, SessionDep
from stackit.schemas.common import MessageResponse
from stackit.schemas.user import RoleUpdate, UserSummary
from stackit.services import accounts
from stackit.services.permissions import require_admin

router = APIRouter(prefix="/users", tags=["users", "admin"])


@router.get("", response_model=list[UserSummary])
async def list_users(current_user: CurrentUserDep, db: SessionDep) -> list[UserSummary]:
    """List every account; admin only."""
    require_admin(current_user, "Only admins can list users")
    return [UserSummary.model_validate(user) for user in accounts.list_users(db)]


@router.put("/{user_id}/role", response_model=MessageResponse)
async def update_user_role(
    user_id: int,
    payload: RoleUpdate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MessageResponse:
    """Change a user's role; admin only."""
    accounts.change_role(db, current_user, user_id, payload.role)
    return MessageResponse(message="User role updated successfully")
