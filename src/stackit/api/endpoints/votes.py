# src/stackit/api/endpoints/votes.py
"""Vote-related endpoints for the StackIt API."""

from typing import Annotated

from fastapi import APIRouter, Query

from stackit.api.dependencies import CurrentUserDep, SessionDep
from stackit.schemas.vote import VoteCreate, VoteResponse
from stackit.services.voting import VoteTarget, cast_vote, get_vote

router = APIRouter(prefix="/vote", tags=["votes"])


@router.post("", response_model=VoteResponse)
async def vote(
    vote_data: VoteCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> VoteResponse:
    """Cast, toggle off or flip a vote on a question or an answer."""
    target = VoteTarget(question_id=vote_data.question_id, answer_id=vote_data.answer_id)
    outcome = cast_vote(db, current_user.id, target, vote_data.direction)
    return VoteResponse(
        message="Vote recorded successfully",
        action=outcome.action.value,
        direction=outcome.direction,
        votes=outcome.votes,
    )


@router.get("")
async def get_my_vote(
    current_user: CurrentUserDep,
    db: SessionDep,
    question_id: Annotated[int | None, Query(alias="questionId")] = None,
    answer_id: Annotated[int | None, Query(alias="answerId")] = None,
) -> dict[str, int]:
    """Get the current user's vote on a question or an answer (0 if none)."""
    target = VoteTarget(question_id=question_id, answer_id=answer_id)
    return {"voteType": get_vote(db, current_user.id, target)}
