"""Column helpers shared by the StackIt models."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import Mapped, mapped_column


def utcnow() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def timestamp_column() -> Mapped[datetime]:
    """A non-null timezone-aware column stamped with :func:`utcnow` on insert.

    Counter updates go through SQL ``UPDATE`` statements and never touch it.
    """
    return mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
