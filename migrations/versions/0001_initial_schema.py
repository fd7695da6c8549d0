"""initial schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001_initial"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_role = sa.Enum("guest", "user", "admin", name="user_role")


def upgrade() -> None:
    """Create accounts, content and the vote ledger."""
    op.create_table(
        "user_account",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=64), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=128), nullable=False),
        sa.Column("role", user_role, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
    )
    op.create_table(
        "question",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_id", sa.Integer(), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("votes", sa.Integer(), nullable=False),
        sa.Column("view_count", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["author_id"], ["user_account.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_question_created_at", "question", ["created_at"])
    op.create_table(
        "answer",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_id", sa.Integer(), nullable=False),
        sa.Column("question_id", sa.Integer(), nullable=False),
        sa.Column("votes", sa.Integer(), nullable=False),
        sa.Column("is_accepted", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["author_id"], ["user_account.id"]),
        sa.ForeignKeyConstraint(["question_id"], ["question.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_answer_question_id", "answer", ["question_id"])
    op.create_index(
        "uq_answer_accepted_per_question",
        "answer",
        ["question_id"],
        unique=True,
        sqlite_where=sa.text("is_accepted = 1"),
        postgresql_where=sa.text("is_accepted"),
    )
    op.create_table(
        "vote",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("voter_id", sa.Integer(), nullable=False),
        sa.Column("question_id", sa.Integer(), nullable=True),
        sa.Column("answer_id", sa.Integer(), nullable=True),
        sa.Column("direction", sa.SmallInteger(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("direction IN (1, -1)", name="ck_vote_direction"),
        sa.CheckConstraint(
            "(question_id IS NULL) <> (answer_id IS NULL)",
            name="ck_vote_single_target",
        ),
        sa.ForeignKeyConstraint(["voter_id"], ["user_account.id"]),
        sa.ForeignKeyConstraint(["question_id"], ["question.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["answer_id"], ["answer.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("voter_id", "question_id", name="uq_vote_voter_question"),
        sa.UniqueConstraint("voter_id", "answer_id", name="uq_vote_voter_answer"),
    )
    op.create_index("ix_vote_question_id", "vote", ["question_id"])
    op.create_index("ix_vote_answer_id", "vote", ["answer_id"])


def downgrade() -> None:
    """Drop every table created by this revision."""
    op.drop_index("ix_vote_answer_id", table_name="vote")
    op.drop_index("ix_vote_question_id", table_name="vote")
    op.drop_table("vote")
    op.drop_index("uq_answer_accepted_per_question", table_name="answer")
    op.drop_index("ix_answer_question_id", table_name="answer")
    op.drop_table("answer")
    op.drop_index("ix_question_created_at", table_name="question")
    op.drop_table("question")
    op.drop_table("user_account")
    user_role.drop(op.get_bind(), checkfirst=True)
