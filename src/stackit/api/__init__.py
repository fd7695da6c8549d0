# src/stackit/api/__init__.py
"""HTTP API for StackIt."""

from .endpoints import (
    answers_router,
    auth_router,
    questions_router,
    users_router,
    votes_router,
)

__all__ = [
    "answers_router",
    "auth_router",
    "questions_router",
    "users_router",
    "votes_router",
]
