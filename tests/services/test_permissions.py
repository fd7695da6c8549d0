"""Tests for role permission tables."""

import pytest

from stackit.core.errors import AuthorizationError, ValidationError
from stackit.models import Role, User
from stackit.services import permissions


@pytest.mark.parametrize("table", [permissions.CAN_CONTRIBUTE, permissions.CAN_MODERATE])
def test_tables_cover_every_role(table) -> None:
    assert set(table) == set(Role)


def test_missing_table_entry_raises(monkeypatch) -> None:
    monkeypatch.setattr(
        permissions, "CAN_MODERATE", {Role.GUEST: False, Role.USER: False}
    )
    admin = User(id=1, username="a", email="a@example.com", password_hash="-", role=Role.ADMIN)

    with pytest.raises(RuntimeError, match="no entry for role"):
        permissions.is_admin(admin)


@pytest.mark.parametrize(
    ("role", "contribute", "moderate"),
    [
        (Role.GUEST, False, False),
        (Role.USER, True, False),
        (Role.ADMIN, True, True),
    ],
)
def test_role_capabilities(role, contribute, moderate) -> None:
    user = User(id=1, username="x", email="x@example.com", password_hash="-", role=role)

    assert permissions.can_contribute(user) is contribute
    assert permissions.is_admin(user) is moderate


def test_owner_or_admin() -> None:
    owner = User(id=1, username="o", email="o@example.com", password_hash="-", role=Role.USER)
    stranger = User(id=2, username="s", email="s@example.com", password_hash="-", role=Role.USER)
    admin = User(id=3, username="a", email="a@example.com", password_hash="-", role=Role.ADMIN)

    permissions.require_owner_or_admin(owner, 1)
    permissions.require_owner_or_admin(admin, 1)
    with pytest.raises(AuthorizationError):
        permissions.require_owner_or_admin(stranger, 1)


@pytest.mark.parametrize("value", ["guest", "user", "admin"])
def test_parse_role(value) -> None:
    assert permissions.parse_role(value).value == value


@pytest.mark.parametrize("value", ["Admin", "root", ""])
def test_parse_role_rejects_unknown(value) -> None:
    with pytest.raises(ValidationError):
        permissions.parse_role(value)
