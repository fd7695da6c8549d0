"""Account registration, authentication and role management."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from stackit.core import security
from stackit.core.errors import AuthenticationError, ConflictError, NotFoundError
from stackit.models.user import Role, User
from stackit.services.permissions import parse_role, require_admin

logger = logging.getLogger(__name__)

__all__ = [
    "get_user",
    "get_user_by_username",
    "list_users",
    "register_user",
    "authenticate",
    "change_role",
]


def get_user(db: Session, user_id: int) -> User | None:
    """Return a single user by primary key."""
    return db.get(User, user_id)


def get_user_by_username(db: Session, username: str) -> User | None:
    """Return the user with ``username`` if any."""
    return db.execute(select(User).where(User.username == username)).scalar_one_or_none()


def list_users(db: Session) -> Sequence[User]:
    """Return all users ordered by id."""
    return db.execute(select(User).order_by(User.id)).scalars().all()


def register_user(
    db: Session,
    *,
    username: str,
    email: str,
    password: str,
    role: Role = Role.USER,
) -> User:
    """Create an account with a bcrypt-hashed password.

    Raises:
        ConflictError: If the username or email is already taken.
    """
    existing = db.execute(
        select(User.id).where(or_(User.username == username, User.email == email))
    ).first()
    if existing is not None:
        raise ConflictError("Username or email already exists")

    user = User(
        username=username,
        email=email,
        password_hash=security.hash_password(password),
        role=role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as err:
        db.rollback()
        raise ConflictError("Username or email already exists") from err
    db.refresh(user)
    logger.info("Registered user %s (%s)", user.id, user.username)
    return user


def authenticate(db: Session, username: str, password: str) -> User:
    """Return the user whose credentials match.

    Raises:
        AuthenticationError: If the user is unknown or the password is wrong.
    """
    user = get_user_by_username(db, username)
    if user is None or not security.verify_password(password, user.password_hash):
        logger.info("Failed login for username %r", username)
        raise AuthenticationError("Invalid credentials")
    return user


def change_role(db: Session, actor: User, user_id: int, role: str | Role) -> User:
    """Change another user's role; admin only.

    Raises:
        AuthorizationError: If ``actor`` is not an admin.
        ValidationError: If ``role`` is not a known role.
        NotFoundError: If the target user does not exist.
    """
    require_admin(actor, "Only admins can update user roles")
    new_role = role if isinstance(role, Role) else parse_role(role)

    user = get_user(db, user_id)
    if user is None:
        raise NotFoundError("User not found")

    previous = user.role
    user.role = new_role
    db.commit()
    db.refresh(user)
    logger.info(
        "Admin %s changed role of user %s from %s to %s",
        actor.id,
        user.id,
        previous.value,
        new_role.value,
    )
    return user
