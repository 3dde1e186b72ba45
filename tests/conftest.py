"""
Test configuration and fixtures for Daily Diet.

- Function-scoped in-memory SQLite engine with all tables created
- ORM session bound to that engine
- Isolated app instance per test built by create_app()
- Anonymous and authenticated TestClient fixtures
"""

from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from app.config import Settings
from app.database import Base, make_engine, make_session_factory
from app.main import create_app
from app.models import User
from tests.factories import create_user


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    return Settings(database_url="sqlite://", _env_file=None)


@pytest.fixture
def test_engine(test_settings: Settings) -> Generator[Engine, None, None]:
    """
    Create a fresh in-memory database for each test.

    StaticPool keeps every session on the same connection, so the test's
    session and the app's request sessions see the same data.
    """
    engine = make_engine(test_settings.database_url)
    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(test_engine: Engine) -> Generator[Session, None, None]:
    """Provide a database session for arranging and asserting test data."""
    session = make_session_factory(test_engine)()

    yield session

    session.close()


# =============================================================================
# App / TestClient Fixtures
# =============================================================================


@pytest.fixture
def app(test_settings: Settings, test_engine: Engine) -> FastAPI:
    """An app instance bound to the test database."""
    return create_app(test_settings, engine=test_engine)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Anonymous TestClient."""
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# Authentication Fixtures
# =============================================================================


@pytest.fixture
def test_user(db: Session) -> User:
    """Create a test user with a session token."""
    return create_user(db, email="testuser@example.com")


@pytest.fixture
def other_user(db: Session) -> User:
    """A second user, for ownership checks."""
    return create_user(db, email="otheruser@example.com")


@pytest.fixture
def auth_client(app: FastAPI, test_user: User) -> Generator[TestClient, None, None]:
    """
    Authenticated TestClient for the test user.

    Creates a separate TestClient instance to avoid cookie conflicts.
    """
    with TestClient(app) as test_client:
        test_client.cookies.set(app.state.settings.session_cookie_name, test_user.session_id)
        yield test_client


@pytest.fixture
def other_client(app: FastAPI, other_user: User) -> Generator[TestClient, None, None]:
    """Authenticated TestClient for the second user."""
    with TestClient(app) as test_client:
        test_client.cookies.set(app.state.settings.session_cookie_name, other_user.session_id)
        yield test_client


# =============================================================================
# pytest markers
# =============================================================================


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers",
        "security: marks tests as security tests (deselect with '-m not security')",
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
