"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from around import models  # noqa: F401
from around.api.rate_limit import enforce_rate_limit
from around.database import Base, engine_options, get_db
from around.main import app
from around.services.auth import pwd_context

DEFAULT_PASSWORD = "testpass123"


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id and email."""

    def __init__(self, *args, user_id: str | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/around", "/around_test")
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(SQLALCHEMY_DATABASE_URL, **engine_options(SQLALCHEMY_DATABASE_URL))
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Cheapest bcrypt cost; hashing speed is irrelevant to what the tests check
pwd_context.update(bcrypt__rounds=4)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override and rate limiting off."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[enforce_rate_limit] = lambda: None
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _register(client, email: str, password: str = DEFAULT_PASSWORD, **profile) -> AuthHeaders:
    """Sign up and sign in a user, returning bearer headers for it."""
    response = client.post("/signup", json={"email": email, "password": password, **profile})
    assert response.status_code == 201, response.text
    user_id = response.json()["_id"]

    response = client.post("/signin", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    token = response.json()["token"]

    return AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=user_id, email=email)


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return _register(client, "test@example.com", name="Test User", about="Tester")


@pytest.fixture
def other_auth_headers(client):
    """A second user, for ownership checks."""
    return _register(client, "other@example.com", name="Other User", about="Lurker")


@pytest.fixture
def card(client, auth_headers):
    """A card owned by the auth_headers user."""
    response = client.post(
        "/cards",
        headers=auth_headers,
        json={"name": "Lake Louise", "link": "https://example.com/lake-louise.jpg"},
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.fixture
def make_user(client):
    """Factory fixture: make_user(email, password=..., **profile) -> AuthHeaders."""

    def factory(email: str, password: str = DEFAULT_PASSWORD, **profile) -> AuthHeaders:
        return _register(client, email, password, **profile)

    return factory
