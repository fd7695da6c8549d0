"""Question lifecycle: listing, creation, viewing and cascading deletion."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.orm import Session

from stackit.core.errors import NotFoundError
from stackit.models import Answer, Question, User, Vote
from stackit.services.permissions import require_contributor, require_owner_or_admin

logger = logging.getLogger(__name__)

__all__ = [
    "QuestionListing",
    "QuestionView",
    "normalize_tags",
    "list_questions",
    "create_question",
    "get_question",
    "view_question",
    "delete_question",
]


@dataclass(frozen=True)
class QuestionListing:
    """A question together with the number of answers it has."""

    question: Question
    answer_count: int


@dataclass(frozen=True)
class QuestionView:
    """A question with its answers in display order."""

    question: Question
    answers: Sequence[Answer]


def normalize_tags(tags: Iterable[str]) -> list[str]:
    """Strip tags, drop empty ones and remove duplicates keeping first occurrence."""
    seen: dict[str, None] = {}
    for tag in tags:
        cleaned = tag.strip()
        if cleaned:
            seen.setdefault(cleaned, None)
    return list(seen)


def list_questions(db: Session) -> list[QuestionListing]:
    """Return all questions, newest first, with their answer counts."""
    answer_counts = (
        select(Answer.question_id, func.count(Answer.id).label("answer_count"))
        .group_by(Answer.question_id)
        .subquery()
    )
    rows = db.execute(
        select(Question, func.coalesce(answer_counts.c.answer_count, 0))
        .outerjoin(answer_counts, answer_counts.c.question_id == Question.id)
        .order_by(Question.created_at.desc(), Question.id.desc())
    ).all()
    return [QuestionListing(question=question, answer_count=int(count)) for question, count in rows]


def create_question(
    db: Session,
    author: User,
    *,
    title: str,
    content: str,
    tags: Iterable[str] = (),
) -> Question:
    """Persist a new question authored by ``author``.

    Raises:
        AuthorizationError: If the author is a guest.
    """
    require_contributor(author, "questions")
    question = Question(
        title=title,
        content=content,
        author_id=author.id,
        tags=normalize_tags(tags),
    )
    db.add(question)
    db.commit()
    db.refresh(question)
    logger.info("User %s created question %s", author.id, question.id)
    return question


def get_question(db: Session, question_id: int) -> Question:
    """Return the question or raise :class:`NotFoundError`."""
    question = db.get(Question, question_id)
    if question is None:
        raise NotFoundError("Question not found")
    return question


def view_question(db: Session, question_id: int) -> QuestionView:
    """Count a view and return the question with its answers.

    The view counter is bumped with a SQL-side increment; under concurrent
    viewers the returned count may already be one behind.

    Raises:
        NotFoundError: If the question does not exist.
    """
    result = db.execute(
        update(Question)
        .where(Question.id == question_id)
        .values(view_count=Question.view_count + 1)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        db.rollback()
        raise NotFoundError("Question not found")
    db.commit()

    question = get_question(db, question_id)
    answers = db.execute(
        select(Answer)
        .where(Answer.question_id == question_id)
        .order_by(
            Answer.is_accepted.desc(),
            Answer.votes.desc(),
            Answer.created_at.asc(),
            Answer.id.asc(),
        )
    ).scalars().all()
    return QuestionView(question=question, answers=answers)


def delete_question(db: Session, actor: User, question_id: int) -> None:
    """Delete a question together with its answers and every vote on either.

    Raises:
        NotFoundError: If the question does not exist.
        AuthorizationError: If ``actor`` is neither the author nor an admin.
    """
    question = get_question(db, question_id)
    require_owner_or_admin(actor, question.author_id)

    answer_ids = select(Answer.id).where(Answer.question_id == question_id)
    db.execute(
        delete(Vote).where(
            or_(Vote.question_id == question_id, Vote.answer_id.in_(answer_ids))
        )
    )
    db.execute(delete(Answer).where(Answer.question_id == question_id))
    db.delete(question)
    db.commit()
    logger.info("User %s deleted question %s", actor.id, question_id)
