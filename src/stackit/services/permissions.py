"""Role-based permission checks.

Each table below is keyed by every :class:`Role` member, so adding a role
without deciding its permissions fails loudly instead of silently granting or
denying access.
"""
from __future__ import annotations

from collections.abc import Mapping

from stackit.core.errors import AuthorizationError, ValidationError
from stackit.models.user import Role, User

# Who may post questions and answers.
CAN_CONTRIBUTE: Mapping[Role, bool] = {
    Role.GUEST: False,
    Role.USER: True,
    Role.ADMIN: True,
}

# Who may delete or manage content and accounts they do not own.
CAN_MODERATE: Mapping[Role, bool] = {
    Role.GUEST: False,
    Role.USER: False,
    Role.ADMIN: True,
}


def _lookup(table: Mapping[Role, bool], role: Role) -> bool:
    try:
        return table[role]
    except KeyError as err:
        raise RuntimeError(f"Permission table has no entry for role {role!r}") from err


def parse_role(value: str) -> Role:
    """Convert a raw role string into a :class:`Role`.

    Raises:
        ValidationError: If ``value`` is not one of guest, user, admin.
    """
    try:
        return Role(value)
    except ValueError as err:
        raise ValidationError("Invalid role") from err


def can_contribute(user: User) -> bool:
    """Return True if the user may create questions and answers."""
    return _lookup(CAN_CONTRIBUTE, user.role)


def is_admin(user: User) -> bool:
    """Return True if the user holds moderation rights."""
    return _lookup(CAN_MODERATE, user.role)


def require_contributor(user: User, what: str) -> None:
    """Raise unless the user may create content.

    Args:
        user: The acting user.
        what: Plural noun used in the error message, e.g. ``"questions"``.
    """
    if not can_contribute(user):
        raise AuthorizationError(f"Guests cannot create {what}")


def require_admin(user: User, detail: str = "Admin privileges required") -> None:
    """Raise unless the user is an admin."""
    if not is_admin(user):
        raise AuthorizationError(detail)


def require_owner_or_admin(user: User, owner_id: int) -> None:
    """Raise unless the user owns the record or is an admin."""
    if user.id != owner_id and not is_admin(user):
        raise AuthorizationError("Unauthorized")
