"""Shared fixtures for contact intake tests."""

from __future__ import annotations

import os
from collections.abc import Iterator
from datetime import datetime, timedelta, timezone

# Settings are read at import time; point them at a throwaway database first.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("APP_ENV", "test")
os.environ["DEBUG"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from contact_api.database.models import FeedbackItem, Submission
from contact_api.database.repository import Repository
from contact_api.database.session import get_db, init_db
from contact_api.main import app
from contact_api.services.submission_service import SubmissionService


VALID_CONTACT = {
    "name": "Jo",
    "email": "a@b.co",
    "subject": "Hi there",
    "message": "This is a test message",
}


@pytest.fixture
def engine() -> Iterator[Engine]:
    """In-memory SQLite engine shared by every connection in a test."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    init_db(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, class_=Session)


@pytest.fixture
def db(session_factory: sessionmaker) -> Iterator[Session]:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def contacts(db: Session) -> Repository[Submission]:
    return Repository(db, Submission)


@pytest.fixture
def feedback(db: Session) -> Repository[FeedbackItem]:
    return Repository(db, FeedbackItem)


@pytest.fixture
def service(contacts: Repository[Submission], feedback: Repository[FeedbackItem]) -> SubmissionService:
    return SubmissionService(contacts, feedback)


@pytest.fixture
def client(session_factory: sessionmaker) -> Iterator[TestClient]:
    """Test client whose requests use the in-memory engine."""

    def override_get_db() -> Iterator[Session]:
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seed_contacts(contacts: Repository[Submission]):
    """Insert ``n`` submissions one minute apart, oldest first."""

    def _seed(n: int) -> list[Submission]:
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        rows = []
        for i in range(n):
            row = Submission(
                name=f"Person {i}",
                email=f"person{i}@example.com",
                subject=f"Subject {i}",
                message=f"Message body number {i}",
                created_at=base + timedelta(minutes=i),
            )
            contacts.insert(row)
            rows.append(row)
        return rows

    return _seed
