"""
Pytest configuration and fixtures.

Provides shared fixtures for:
- An in-memory SQLite engine with the Customers table created
- A SQLAlchemy session bound to it
- A FastAPI test client whose get_db dependency uses that engine
"""

import os

# Settings are read once and cached, so the environment must be set before
# anything under app/ is imported.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.db.session import build_engine, get_db, init_db
from app.main import app


@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    engine = build_engine("sqlite://")
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """Create FastAPI test client backed by the test database."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def yuki() -> dict:
    return {
        "id": 1,
        "name": "Yuki",
        "email": "yuki@gmail.com",
        "phone": "(61)99999-9999",
    }
