"""Voting service.

Applies vote requests with toggle semantics and keeps the vote ledger and the
denormalised ``votes`` totals on questions and answers consistent. The ledger
write and the counter adjustment always commit together; the counter is moved
with a SQL-side increment and ledger writes are guarded on the state that was
read, so a concurrent writer makes the transition retry instead of drifting.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from sqlalchemy import ColumnElement, delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from stackit.core.errors import ConflictError, NotFoundError, ValidationError
from stackit.core.settings import settings
from stackit.models import Answer, Question, Vote
from stackit.models.vote import VOTE_DIRECTIONS

# Configure logger for this module
logger = logging.getLogger(__name__)


class VoteAction(str, enum.Enum):
    """Transition applied to the ledger by a vote request."""

    CREATED = "created"
    REMOVED = "removed"
    FLIPPED = "flipped"


@dataclass(frozen=True)
class VoteTarget:
    """A question or an answer, never both and never neither."""

    question_id: int | None = None
    answer_id: int | None = None

    def __post_init__(self) -> None:
        if (self.question_id is None) == (self.answer_id is None):
            raise ValidationError("Vote target must be exactly one of question or answer")

    @property
    def kind(self) -> str:
        return "question" if self.question_id is not None else "answer"

    @property
    def target_id(self) -> int:
        return self.question_id if self.question_id is not None else self.answer_id  # type: ignore[return-value]

    @property
    def model(self) -> type[Question] | type[Answer]:
        return Question if self.question_id is not None else Answer

    def ledger_clause(self) -> ColumnElement[bool]:
        """Return the WHERE clause selecting ledger rows for this target."""
        if self.question_id is not None:
            return Vote.question_id == self.question_id
        return Vote.answer_id == self.answer_id

    def __str__(self) -> str:
        return f"{self.kind}:{self.target_id}"


@dataclass(frozen=True)
class VoteOutcome:
    """Result of a vote request.

    Attributes:
        action: Transition that was applied.
        direction: The voter's direction after the request, 0 when removed.
        votes: The target's vote total after the request.
    """

    action: VoteAction
    direction: int
    votes: int


class _LostRace(Exception):
    """A guarded ledger write matched no row because another request got there first."""


def validate_direction(direction: object) -> int:
    """Return ``direction`` if it is exactly +1 or -1.

    Raises:
        ValidationError: For any other value, including booleans and floats.
    """
    if type(direction) is not int or direction not in VOTE_DIRECTIONS:
        raise ValidationError("Invalid vote type")
    return direction


def _ensure_target_exists(db: Session, target: VoteTarget) -> None:
    model = target.model
    found = db.execute(select(model.id).where(model.id == target.target_id)).first()
    if found is None:
        raise NotFoundError(f"{target.kind.capitalize()} not found")


def _adjust_total(db: Session, target: VoteTarget, delta: int) -> int:
    """Atomically add ``delta`` to the target's total and return the new value."""
    model = target.model
    result = db.execute(
        update(model)
        .where(model.id == target.target_id)
        .values(votes=model.votes + delta)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise NotFoundError(f"{target.kind.capitalize()} not found")
    return db.execute(select(model.votes).where(model.id == target.target_id)).scalar_one()


def _guarded_write(db: Session, statement) -> None:
    result = db.execute(statement.execution_options(synchronize_session=False))
    if result.rowcount != 1:
        raise _LostRace()


def _apply_transition(db: Session, voter_id: int, target: VoteTarget, direction: int) -> VoteOutcome:
    _ensure_target_exists(db, target)

    existing = db.execute(
        select(Vote.id, Vote.direction).where(Vote.voter_id == voter_id, target.ledger_clause())
    ).first()

    if existing is None:
        db.add(
            Vote(
                voter_id=voter_id,
                question_id=target.question_id,
                answer_id=target.answer_id,
                direction=direction,
            )
        )
        # Unique constraints reject a concurrent duplicate here.
        db.flush()
        action, delta, current = VoteAction.CREATED, direction, direction
    elif existing.direction == direction:
        _guarded_write(
            db,
            delete(Vote).where(Vote.id == existing.id, Vote.direction == direction),
        )
        action, delta, current = VoteAction.REMOVED, -direction, 0
    else:
        _guarded_write(
            db,
            update(Vote)
            .where(Vote.id == existing.id, Vote.direction == existing.direction)
            .values(direction=direction),
        )
        action, delta, current = VoteAction.FLIPPED, 2 * direction, direction

    total = _adjust_total(db, target, delta)
    return VoteOutcome(action=action, direction=current, votes=total)


def cast_vote(
    db: Session,
    voter_id: int,
    target: VoteTarget,
    direction: int,
    *,
    max_attempts: int | None = None,
) -> VoteOutcome:
    """Cast, toggle off or flip a vote.

    - no existing vote: record it, total += direction
    - same direction again: remove it, total -= direction
    - opposite direction: flip it, total += 2 * direction

    Args:
        db: Database session; committed on success, rolled back on failure.
        voter_id: Identifier of the authenticated voter.
        target: The question or answer being voted on.
        direction: +1 or -1.
        max_attempts: Override for the configured retry budget.

    Returns:
        The applied transition and the resulting totals.

    Raises:
        ValidationError: If ``direction`` is not +1 or -1.
        NotFoundError: If the target does not exist.
        ConflictError: If concurrent writers kept winning the race.
        ValueError: If ``max_attempts`` is below 1.
    """
    direction = validate_direction(direction)
    attempts = settings.vote_max_attempts if max_attempts is None else max_attempts
    if attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {attempts}")

    for attempt in range(1, attempts + 1):
        try:
            outcome = _apply_transition(db, voter_id, target, direction)
            db.commit()
        except (IntegrityError, _LostRace) as err:
            db.rollback()
            logger.warning(
                "Vote by user %s on %s lost a race (attempt %d/%d): %s",
                voter_id,
                target,
                attempt,
                attempts,
                type(err).__name__,
            )
            continue
        except Exception:
            db.rollback()
            raise

        logger.info(
            "Vote %s by user %s on %s; total now %d",
            outcome.action.value,
            voter_id,
            target,
            outcome.votes,
        )
        return outcome

    raise ConflictError("Vote could not be recorded, please retry")


def get_vote(db: Session, voter_id: int, target: VoteTarget) -> int:
    """Return the voter's current direction on ``target``, 0 when there is none."""
    direction = db.execute(
        select(Vote.direction).where(Vote.voter_id == voter_id, target.ledger_clause())
    ).scalar_one_or_none()
    return direction or 0


def ledger_sum(db: Session, target: VoteTarget) -> int:
    """Return the sum of all ledger directions for ``target``."""
    total = db.execute(
        select(func.coalesce(func.sum(Vote.direction), 0)).where(target.ledger_clause())
    ).scalar_one()
    return int(total)
