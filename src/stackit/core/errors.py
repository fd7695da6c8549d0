"""Domain errors raised by the service layer.

Every service failure derives from :class:`StackItError`. Each subclass carries
the HTTP status the API layer answers with, so endpoints never need to map
error kinds by hand.
"""

from __future__ import annotations

from fastapi import status


class StackItError(Exception):
    """Base class for all domain errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_detail: str = "Request could not be processed"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationError(StackItError):
    """Malformed or missing input, rejected before any mutation."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input"


class AuthorizationError(StackItError):
    """The caller is known but lacks permission for the operation."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Not permitted"


class AuthenticationError(AuthorizationError):
    """The caller could not be identified (bad credentials)."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid credentials"


class NotFoundError(StackItError):
    """The target entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class ConflictError(StackItError):
    """A uniqueness rule or a concurrent writer prevented the change."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict"


__all__ = [
    "StackItError",
    "ValidationError",
    "AuthorizationError",
    "AuthenticationError",
    "NotFoundError",
    "ConflictError",
]
