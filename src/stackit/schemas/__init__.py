"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .common import CreatedResponse, MessageResponse
from .question import (
    AnswerCreate,
    AnswerResponse,
    QuestionCreate,
    QuestionDetail,
    QuestionSummary,
)
from .user import LoginRequest, LoginResponse, RegisterRequest, RoleUpdate, UserSummary
from .vote import VoteCreate, VoteResponse

__all__ = [
    "CreatedResponse", "MessageResponse",
    "AnswerCreate", "AnswerResponse",
    "QuestionCreate", "QuestionDetail", "QuestionSummary",
    "LoginRequest", "LoginResponse", "RegisterRequest", "RoleUpdate", "UserSummary",
    "VoteCreate", "VoteResponse",
]
