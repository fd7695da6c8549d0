"""Create all database tables for the configured database."""
from __future__ import annotations

from stackit.db.session import create_tables


def main() -> None:
    create_tables()
    print("Database initialized.")


if __name__ == "__main__":
    main()
