"""Pytest configuration and fixtures."""

import os

# Settings are read at import time, so the environment must be in place first
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-the-smart-erp-suite")
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("ENVIRONMENT", "development")

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

import smart_erp.services.realtime as realtime_module
from smart_erp.database import Base, SessionLocal, engine, get_db
from smart_erp.main import app

TEST_PASSWORD = "Testpass1!"


class AuthHeaders(dict):
    """Dict subclass that also stores user_id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email

    @property
    def token(self) -> str:
        return self["Authorization"].replace("Bearer ", "")


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = SessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(autouse=True)
def mock_redis():
    """Replace the publishing Redis client so tests never need a server."""
    mock_client = MagicMock()
    realtime_module._sync_redis = mock_client
    yield mock_client
    realtime_module._sync_redis = None


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register(client, email: str, name: str = "Test User", password: str = TEST_PASSWORD):
    """Register an account and return its auth headers."""
    response = client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "name": name},
    )
    assert response.status_code == 201, response.text
    data = response.json()
    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"}, user_id=data["user"]["id"], email=email
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register(client, "test@example.com")


@pytest.fixture
def other_auth_headers(client):
    """A second, unrelated account."""
    return register(client, "other@example.com", name="Other User")


@pytest.fixture
def make_account(client):
    """Factory fixture: register further accounts by email."""

    def _make(email: str, name: str = "Test User") -> AuthHeaders:
        return register(client, email, name=name)

    return _make
