"""
Shared test fixtures.

Every test gets a fresh in-memory SQLite database. The API's get_db
dependency is overridden so requests use the same session as the test.
"""

import os

# Settings are read at import time; the app must not need a real database
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.session import get_db
from app.main import app
from app.models import Base, Subscription, User
from app.repositories import SubscriptionRepository, UserRepository
from app.services.subscription_service import SubscriptionService
from app.services.user_service import UserService


@pytest.fixture(scope="function")
def engine():
    """Isolated in-memory database with all tables created."""
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine):
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def user_service(db_session):
    return UserService(UserRepository(db_session))


@pytest.fixture
def subscription_service(db_session, user_service):
    return SubscriptionService(SubscriptionRepository(db_session), user_service)


@pytest.fixture
def client(db_session):
    """TestClient whose requests run against the test database."""

    def _override():
        yield db_session

    app.dependency_overrides[get_db] = _override
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def make_user(db_session):
    """Insert a user directly and return it."""

    def _make(name="Ivan Ivanov", email="ivan@example.com"):
        user = User(name=name, email=email)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make


@pytest.fixture
def make_subscription(db_session):
    """Insert a subscription directly and return it."""

    def _make(user, service_name, notification_enabled=False):
        subscription = Subscription(
            user_id=user.id,
            service_name=service_name,
            notification_enabled=notification_enabled,
        )
        db_session.add(subscription)
        db_session.commit()
        db_session.refresh(subscription)
        return subscription

    return _make
