"""Answer endpoints for the StackIt API."""

from fastapi import APIRouter

from stackit.api.dependencies import CurrentUserDep, SessionDep
from stackit.schemas.common import MessageResponse
from stackit.services import answers as answer_service

router = APIRouter(prefix="/answers", tags=["answers"])


@router.post("/{answer_id}/accept", response_model=MessageResponse)
async def accept_answer(
    answer_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MessageResponse:
    """Accept an answer; only the author of the question may do this."""
    answer_service.accept_answer(db, current_user, answer_id)
    return MessageResponse(message="Answer accepted successfully")


@router.delete("/{answer_id}", response_model=MessageResponse)
async def delete_answer(
    answer_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MessageResponse:
    """Delete an answer and its votes (author or admin)."""
    answer_service.delete_answer(db, current_user, answer_id)
    return MessageResponse(message="Answer deleted successfully")
