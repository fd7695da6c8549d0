"""Create an admin account or promote an existing one, then list all users."""
from __future__ import annotations

import argparse
import sys

from sqlalchemy.orm import Session

from stackit.core.errors import StackItError
from stackit.db.session import SessionLocal
from stackit.models.user import Role
from stackit.services import accounts


def ensure_admin(db: Session, username: str, email: str, password: str) -> bool:
    """Promote ``username`` to admin, creating the account if needed.

    Returns:
        True if a new account was created, False if an existing one was promoted.
    """
    user = accounts.get_user_by_username(db, username)
    if user is not None:
        user.role = Role.ADMIN
        db.commit()
        return False

    accounts.register_user(
        db,
        username=username,
        email=email,
        password=password,
        role=Role.ADMIN,
    )
    return True


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Create or promote an admin account")
    parser.add_argument("--username", default="admin1", help="Admin username")
    parser.add_argument("--email", default="admin1@example.com", help="Email used if the account is created")
    parser.add_argument("--password", default="password123", help="Password used if the account is created")
    args = parser.parse_args(argv)

    with SessionLocal() as db:
        try:
            created = ensure_admin(db, args.username, args.email, args.password)
        except StackItError as exc:
            print(f"[create_admin] ERROR: {exc.detail}", file=sys.stderr)
            sys.exit(1)
        if created:
            print(f'[create_admin] admin user "{args.username}" created')
        else:
            print(f'[create_admin] user "{args.username}" role updated to admin')

        print("[create_admin] all users:")
        for user in accounts.list_users(db):
            print(f"- {user.username} ({user.email}) - role: {user.role.value}")


if __name__ == "__main__":
    main()
