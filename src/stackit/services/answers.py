"""Answer lifecycle and acceptance."""
from __future__ import annotations

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from stackit.core.errors import AuthorizationError, ConflictError, NotFoundError
from stackit.models import Answer, Question, User, Vote
from stackit.services.permissions import require_contributor, require_owner_or_admin

logger = logging.getLogger(__name__)

__all__ = ["create_answer", "get_answer", "accept_answer", "delete_answer"]


def create_answer(db: Session, author: User, question_id: int, content: str) -> Answer:
    """Persist an answer to an existing question.

    Raises:
        AuthorizationError: If the author is a guest.
        NotFoundError: If the question does not exist.
    """
    require_contributor(author, "answers")
    if db.get(Question, question_id) is None:
        raise NotFoundError("Question not found")

    answer = Answer(content=content, author_id=author.id, question_id=question_id)
    db.add(answer)
    db.commit()
    db.refresh(answer)
    logger.info("User %s answered question %s with answer %s", author.id, question_id, answer.id)
    return answer


def get_answer(db: Session, answer_id: int) -> Answer:
    """Return the answer or raise :class:`NotFoundError`."""
    answer = db.get(Answer, answer_id)
    if answer is None:
        raise NotFoundError("Answer not found")
    return answer


def accept_answer(db: Session, caller: User, answer_id: int) -> Answer:
    """Mark ``answer_id`` as the accepted answer of its question.

    Every other answer of the question is unaccepted in the same transaction,
    so at most one answer per question is ever accepted. Accepting the
    already-accepted answer leaves the state unchanged.

    Raises:
        NotFoundError: If the answer or its parent question does not exist.
        AuthorizationError: If ``caller`` did not author the parent question.
        ConflictError: If a concurrent acceptance won the race.
    """
    answer = get_answer(db, answer_id)
    # Row lock on the parent serialises acceptances for the same question.
    question = db.execute(
        select(Question).where(Question.id == answer.question_id).with_for_update()
    ).scalar_one_or_none()
    if question is None:
        raise NotFoundError("Question not found")
    if question.author_id != caller.id:
        raise AuthorizationError("Only question author can accept answers")

    try:
        db.execute(
            update(Answer)
            .where(Answer.question_id == question.id, Answer.id != answer.id)
            .values(is_accepted=False)
            .execution_options(synchronize_session=False)
        )
        db.execute(
            update(Answer)
            .where(Answer.id == answer.id)
            .values(is_accepted=True)
            .execution_options(synchronize_session=False)
        )
        db.commit()
    except IntegrityError as err:
        db.rollback()
        raise ConflictError("Another answer was accepted concurrently") from err

    logger.info("User %s accepted answer %s on question %s", caller.id, answer_id, question.id)
    return get_answer(db, answer_id)


def delete_answer(db: Session, actor: User, answer_id: int) -> None:
    """Delete an answer and every vote cast on it.

    Raises:
        NotFoundError: If the answer does not exist.
        AuthorizationError: If ``actor`` is neither the author nor an admin.
    """
    answer = get_answer(db, answer_id)
    require_owner_or_admin(actor, answer.author_id)

    db.execute(delete(Vote).where(Vote.answer_id == answer_id))
    db.delete(answer)
    db.commit()
    logger.info("User %s deleted answer %s", actor.id, answer_id)
