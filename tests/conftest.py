# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from itertools import count
from pathlib import Path

import pytest

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["BCRYPT_ROUNDS"] = "4"

from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from stackit.core.security import create_access_token, hash_password
from stackit.db.session import Base
from stackit.db.session import get_db as app_get_session
from stackit.main import app as fastapi_app
from stackit.models import Answer, Question, Role, User

TEST_DB_URL = "sqlite://"
TEST_PASSWORD = "password123"

_USER_COUNTER = count(1)


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def file_engine(tmp_path: Path) -> Generator[Engine, None, None]:
    """File-backed SQLite engine for tests that need several real connections."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'stackit-test.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


def create_user(db: Session, username: str | None = None, role: Role = Role.USER) -> User:
    """Persist a user whose password is ``TEST_PASSWORD``."""
    username = username or f"user{next(_USER_COUNTER)}"
    user = User(
        username=username,
        email=f"{username}@example.com",
        password_hash=hash_password(TEST_PASSWORD),
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def auth_headers(user: User) -> dict[str, str]:
    """Return authorization headers for ``user``."""
    token = create_access_token(user.id, user.role.value)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Factory fixture creating additional users."""

    def _make(username: str | None = None, role: Role = Role.USER) -> User:
        return create_user(db_session, username, role)

    return _make


@pytest.fixture()
def test_user(db_session: Session) -> User:
    """Primary user with the default ``user`` role."""
    return create_user(db_session, "alice")


@pytest.fixture()
def other_user(db_session: Session) -> User:
    """Second regular user."""
    return create_user(db_session, "bob")


@pytest.fixture()
def admin_user(db_session: Session) -> User:
    """User holding the ``admin`` role."""
    return create_user(db_session, "root", Role.ADMIN)


@pytest.fixture()
def guest_user(db_session: Session) -> User:
    """User demoted to ``guest``."""
    return create_user(db_session, "visitor", Role.GUEST)


@pytest.fixture()
def auth_token(test_user: User) -> dict[str, str]:
    return auth_headers(test_user)


@pytest.fixture()
def other_auth_token(other_user: User) -> dict[str, str]:
    return auth_headers(other_user)


@pytest.fixture()
def admin_auth_token(admin_user: User) -> dict[str, str]:
    return auth_headers(admin_user)


@pytest.fixture()
def guest_auth_token(guest_user: User) -> dict[str, str]:
    return auth_headers(guest_user)


@pytest.fixture()
def test_question(db_session: Session, test_user: User) -> Question:
    """Question authored by ``test_user``."""
    question = Question(
        title="How do I center a div?",
        content="I have tried everything.",
        author_id=test_user.id,
        tags=["css", "html"],
    )
    db_session.add(question)
    db_session.commit()
    db_session.refresh(question)
    return question


@pytest.fixture()
def test_answer(db_session: Session, test_question: Question, other_user: User) -> Answer:
    """Answer by ``other_user`` to ``test_question``."""
    answer = Answer(
        content="Use flexbox.",
        author_id=other_user.id,
        question_id=test_question.id,
    )
    db_session.add(answer)
    db_session.commit()
    db_session.refresh(answer)
    return answer
