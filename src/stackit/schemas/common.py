"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that speaks camelCase on the wire and accepts snake_case too."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CamelModel):
    """Plain acknowledgement returned by mutating endpoints."""

    message: str = Field(..., description="Human readable outcome")


class CreatedResponse(MessageResponse):
    """Acknowledgement carrying the identifier of a newly created record."""

    id: int
