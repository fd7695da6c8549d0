# src/stackit/models/vote.py
"""Vote ledger: one row per (voter, target)."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import (
    CheckConstraint,
    ForeignKey,
    Integer,
    SmallInteger,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from stackit.db.session import Base
from stackit.db.columns import timestamp_column

UPVOTE = 1
DOWNVOTE = -1
VOTE_DIRECTIONS = (UPVOTE, DOWNVOTE)


class Vote(Base):
    """Per-user vote on either a question or an answer, never both."""

    __tablename__ = "vote"
    __table_args__ = (
        CheckConstraint("direction IN (1, -1)", name="ck_vote_direction"),
        CheckConstraint(
            "(question_id IS NULL) <> (answer_id IS NULL)",
            name="ck_vote_single_target",
        ),
        # NULLs are distinct, so each constraint only bites for its own target kind.
        UniqueConstraint("voter_id", "question_id", name="uq_vote_voter_question"),
        UniqueConstraint("voter_id", "answer_id", name="uq_vote_voter_answer"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    voter_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_account.id"),
        nullable=False,
    )
    question_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("question.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    answer_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("answer.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    # 1 = upvote, -1 = downvote.
    direction: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    created_at: Mapped[datetime] = timestamp_column()
