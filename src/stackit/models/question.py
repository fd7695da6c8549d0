# src/stackit/models/question.py
"""SQLAlchemy model for questions."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stackit.db.session import Base
from stackit.db.columns import timestamp_column
from stackit.models.user import User


class Question(Base):
    """A question posted by a user.

    ``votes`` is a denormalised total kept equal to the sum of the vote
    ledger rows targeting the question.
    """

    __tablename__ = "question"
    __table_args__ = (Index("ix_question_created_at", "created_at"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_account.id"),
        nullable=False,
    )
    # Ordered, de-duplicated list of tag strings.
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    view_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = timestamp_column()
    updated_at: Mapped[datetime] = timestamp_column()

    author: Mapped[User] = relationship("User", lazy="joined")
