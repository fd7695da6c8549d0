"""Vote-related Pydantic schemas."""

from typing import Literal

from pydantic import Field, model_validator

from .common import CamelModel


class VoteCreate(CamelModel):
    """Schema for casting a vote on a question or an answer."""

    question_id: int | None = Field(None, description="Target question")
    answer_id: int | None = Field(None, description="Target answer")
    direction: Literal[-1, 1] = Field(
        ...,
        alias="voteType",
        description="1 for upvote, -1 for downvote",
    )

    @model_validator(mode="after")
    def _exactly_one_target(self) -> "VoteCreate":
        if (self.question_id is None) == (self.answer_id is None):
            raise ValueError("Provide exactly one of questionId or answerId")
        return self


class VoteResponse(CamelModel):
    """Acknowledgement of a vote transition."""

    message: str
    action: str
    direction: int = Field(..., alias="voteType")
    votes: int
