"""Pytest configuration and fixtures for testing."""
import os
import tempfile

import pytest

# Set test environment before importing app modules
os.environ.setdefault("DB_USER", "test")
os.environ.setdefault("DB_PASSWORD", "test")
os.environ.setdefault("DB_HOST", "localhost")
os.environ.setdefault("DB_PORT", "3306")
os.environ.setdefault("DB_NAME", "test_db")
os.environ.setdefault("SERVER_PORT", "8000")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(tempfile.gettempdir(), "category_service_app.db")

from fastapi.testclient import TestClient

from app.core.database import Base, build_engine, build_session_factory, get_session_factory
from app.crud import user_crud
from app.main import app
from app.services.category_service import CategoryService
from app.services.user_service import UserService


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def session_factory(tmp_path):
    """File-based SQLite database per test (shared across worker threads)."""
    engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=engine)
    try:
        yield build_session_factory(engine)
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def category_service(session_factory):
    return CategoryService(session_factory)


@pytest.fixture
def user_service(session_factory):
    return UserService(session_factory)


@pytest.fixture
def users(session_factory):
    """Two seeded users: (alice_id, bob_id)."""
    with session_factory() as db:
        alice = user_crud.create_user(
            db, {"username": "alice", "email": "alice@example.com", "description": "admin"}
        )
        bob = user_crud.create_user(db, {"username": "bob", "email": "bob@example.com"})
        return alice.id, bob.id


@pytest.fixture
def api_client(session_factory):
    """Test client with the session factory dependency overridden."""
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
