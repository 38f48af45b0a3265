# tests/conftest.py
import os

# Must be set before anything imports eventboard.core.config
os.environ.setdefault("ENV", "local")
os.environ.setdefault("DATABASE_URL_LOCAL", "sqlite://")
# TestClient talks plain http, so a Secure cookie would never be sent back.
os.environ.setdefault("SESSION_COOKIE_SECURE", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from eventboard.main import app
from eventboard.db.session import get_db
from eventboard.models import Base
from tests.utils.user import create_user_with_session

# --- Test Database Setup ---
# One shared in-memory SQLite connection; StaticPool keeps it alive across
# the threads TestClient runs sync endpoints in.
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """A fresh schema per test; accessors are free to commit."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


# --- Test Client Fixtures ---
@pytest.fixture(scope="function")
def client(db_session):
    """
    TestClient wired to the test database. No session cookie is set.
    """

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def organizer_user(db_session):
    """A registered user with an open session: (user, token)."""
    return create_user_with_session(db_session, username="organizer_one")


@pytest.fixture(scope="function")
def auth_client(client, organizer_user):
    """TestClient carrying organizer_user's session cookie."""
    _, token = organizer_user
    client.cookies.set("session_token", token)
    return client
