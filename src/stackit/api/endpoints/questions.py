"""Question endpoints for the StackIt API."""

from fastapi import APIRouter, status

from stackit.api.dependencies import CurrentUserDep, SessionDep
from stackit.models import Answer
from stackit.schemas.common import CreatedResponse, MessageResponse
from stackit.schemas.question import (
    AnswerCreate,
    AnswerResponse,
    QuestionCreate,
    QuestionDetail,
    QuestionSummary,
)
from stackit.services import answers as answer_service
from stackit.services import questions as question_service

router = APIRouter(prefix="/questions", tags=["questions"])


def to_answer_response(answer: Answer) -> AnswerResponse:
    """Convert an Answer ORM instance to its API schema."""
    return AnswerResponse(
        id=answer.id,
        content=answer.content,
        author=answer.author.username,
        votes=answer.votes,
        is_accepted=answer.is_accepted,
        created_at=answer.created_at,
    )


@router.get("", response_model=list[QuestionSummary])
async def list_questions(db: SessionDep) -> list[QuestionSummary]:
    """List all questions, newest first."""
    return [
        QuestionSummary(
            id=row.question.id,
            title=row.question.title,
            content=row.question.content,
            author=row.question.author.username,
            tags=row.question.tags,
            votes=row.question.votes,
            view_count=row.question.view_count,
            answer_count=row.answer_count,
            created_at=row.question.created_at,
        )
        for row in question_service.list_questions(db)
    ]


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_question(
    payload: QuestionCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> CreatedResponse:
    """Create a question; guests are rejected."""
    question = question_service.create_question(
        db,
        current_user,
        title=payload.title,
        content=payload.content,
        tags=payload.tags,
    )
    return CreatedResponse(message="Question created successfully", id=question.id)


@router.get("/{question_id}", response_model=QuestionDetail)
async def get_question(question_id: int, db: SessionDep) -> QuestionDetail:
    """Fetch a question with its answers and count the view."""
    view = question_service.view_question(db, question_id)
    question = view.question
    return QuestionDetail(
        id=question.id,
        title=question.title,
        content=question.content,
        author=question.author.username,
        tags=question.tags,
        votes=question.votes,
        view_count=question.view_count,
        created_at=question.created_at,
        answers=[to_answer_response(answer) for answer in view.answers],
    )


@router.post(
    "/{question_id}/answers",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: int,
    payload: AnswerCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> CreatedResponse:
    """Post an answer to a question; guests are rejected."""
    answer = answer_service.create_answer(db, current_user, question_id, payload.content)
    return CreatedResponse(message="Answer created successfully", id=answer.id)


@router.delete("/{question_id}", response_model=MessageResponse)
async def delete_question(
    question_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MessageResponse:
    """Delete a question with its answers and votes (author or admin)."""
    question_service.delete_question(db, current_user, question_id)
    return MessageResponse(message="Question deleted successfully")
