# src/stackit/models/__init__.py
"""SQLAlchemy models for the StackIt application."""

from .user import Role, User
from .question import Question
from .answer import Answer
from .vote import Vote

__all__ = [
    "Answer",
    "Question",
    "Role", "User",
    "Vote",
]
