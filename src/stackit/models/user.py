# src/stackit/models/user.py
"""SQLAlchemy models for user accounts."""

from __future__ import annotations

import enum
from datetime import datetime

from sqlalchemy import Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from stackit.db.session import Base
from stackit.db.columns import timestamp_column


class Role(str, enum.Enum):
    """Account roles; every authorisation check is keyed by these members."""

    GUEST = "guest"
    USER = "user"
    ADMIN = "admin"


class User(Base):
    """Registered account with a bcrypt credential hash and a role."""

    __tablename__ = "user_account"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(128), nullable=False)
    role: Mapped[Role] = mapped_column(
        Enum(Role, name="user_role", values_callable=lambda roles: [r.value for r in roles]),
        nullable=False,
        default=Role.USER,
    )
    created_at: Mapped[datetime] = timestamp_column()

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, username={self.username!r}, role={self.role.value!r})"
