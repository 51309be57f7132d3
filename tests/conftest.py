"""
Pytest configuration and shared fixtures for all tests.
"""
import os
import uuid
from datetime import datetime, timezone
from typing import Generator

# Settings are read at import time; point them at in-memory SQLite first.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.exceptions import NotificationError
from app.db.models import Base, User
from app.main import create_app
from app.services.checkin import EmotionCheckinService


class FakeNotifier:
    """Records crisis emails instead of sending them; can be told to fail."""

    def __init__(self):
        self.calls = []
        self.fail = False

    def send_crisis_email(self, to_email, first_name, resources):
        self.calls.append({"to_email": to_email, "first_name": first_name, "resources": dict(resources)})
        if self.fail:
            raise NotificationError("SendGrid unavailable")


@pytest.fixture
def test_engine():
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(test_engine) -> Generator[Session, None, None]:
    SessionLocal = sessionmaker(test_engine, expire_on_commit=False, class_=Session)
    with SessionLocal() as session:
        yield session


@pytest.fixture
def test_user_id() -> uuid.UUID:
    return uuid.UUID("123e4567-e89b-12d3-a456-426614174000")


@pytest.fixture
def another_user_id() -> uuid.UUID:
    return uuid.UUID("223e4567-e89b-12d3-a456-426614174001")


@pytest.fixture
def test_user(db_session, test_user_id) -> User:
    user = User(id=test_user_id, email="asha@example.com", first_name="Asha", last_name="Rao")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def another_user(db_session, another_user_id) -> User:
    user = User(id=another_user_id, email="meera@example.com", first_name="Meera", last_name="Iyer")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def fake_notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 10, 19, 8, 15, 30, 250000, tzinfo=timezone.utc)


@pytest.fixture
def service(db_session, fake_notifier, fixed_now) -> EmotionCheckinService:
    return EmotionCheckinService(db_session, fake_notifier, clock=lambda: fixed_now)


@pytest.fixture
def app(db_session, test_user_id, fake_notifier):
    """Application with database, auth and notifier dependencies overridden."""
    from app.api.deps import get_notifier
    from app.core.security import get_current_user
    from app.db.session import get_db

    application = create_app()

    def override_get_db():
        yield db_session

    async def override_auth():
        return {"user_id": str(test_user_id), "role": "mother"}

    application.dependency_overrides[get_db] = override_get_db
    application.dependency_overrides[get_current_user] = override_auth
    application.dependency_overrides[get_notifier] = lambda: fake_notifier
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c
