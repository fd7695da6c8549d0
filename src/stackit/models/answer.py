# src/stackit/models/answer.py
"""SQLAlchemy model for answers."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, ForeignKey, Index, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stackit.db.session import Base
from stackit.db.columns import timestamp_column
from stackit.models.user import User


class Answer(Base):
    """An answer to a question.

    At most one answer per question carries ``is_accepted = True``.
    """

    __tablename__ = "answer"
    __table_args__ = (
        # Partial unique index: one accepted answer per question at the storage level.
        Index(
            "uq_answer_accepted_per_question",
            "question_id",
            unique=True,
            sqlite_where=text("is_accepted = 1"),
            postgresql_where=text("is_accepted"),
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_account.id"),
        nullable=False,
    )
    question_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("question.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_accepted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = timestamp_column()
    updated_at: Mapped[datetime] = timestamp_column()

    author: Mapped[User] = relationship("User", lazy="joined")
