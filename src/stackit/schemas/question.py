"""Question and answer Pydantic schemas."""

from datetime import datetime

from pydantic import Field

from .common import CamelModel


class QuestionCreate(CamelModel):
    """Schema for creating a new question."""

    title: str = Field(..., min_length=1, max_length=300)
    content: str = Field(..., min_length=1)
    tags: list[str] = Field(default_factory=list, description="Free-form tag strings")


class AnswerCreate(CamelModel):
    """Schema for posting an answer."""

    content: str = Field(..., min_length=1)


class AnswerResponse(CamelModel):
    """Answer as rendered under its question."""

    id: int
    content: str
    author: str
    votes: int
    is_accepted: bool
    created_at: datetime


class QuestionSummary(CamelModel):
    """Question row in the public listing."""

    id: int
    title: str
    content: str
    author: str
    tags: list[str]
    votes: int
    view_count: int
    answer_count: int
    created_at: datetime


class QuestionDetail(CamelModel):
    """A single question with its answers."""

    id: int
    title: str
    content: str
    author: str
    tags: list[str]
    votes: int
    view_count: int
    created_at: datetime
    answers: list[AnswerResponse]
