"""
pytest configuration - shared fixtures
"""
import sys
import os
from typing import Generator

# Test settings must be in place before app.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

# Add backend directory to sys.path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../backend"))

from app.database import Base, get_db
import app.models  # noqa: F401
from app.services.auth_service import auth_service
from app.services.item_service import item_service

T0 = 1_700_000_000_000
HOUR = 60 * 60 * 1000
PASSWORD = "Secret#123"


@pytest.fixture
def test_db() -> Generator[Session, None, None]:
    """Create in-memory SQLite database for testing"""
    engine = create_engine(
        "sqlite://",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine, autoflush=False)
    session = SessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def frozen_clock(monkeypatch):
    """
    Pin app.core.clock.now_ms. Returns a setter so tests can move time forward.
    """
    current = {"now": T0}
    monkeypatch.setattr("app.core.clock.now_ms", lambda: current["now"])

    def _set(ms: int) -> None:
        current["now"] = ms

    _set.now = lambda: current["now"]
    return _set


@pytest.fixture
def users(test_db):
    """Three registered users: a seller and two bidders."""
    return {
        name: auth_service.register(
            test_db,
            first_name=name.capitalize(),
            last_name="Tester",
            email=f"{name}@example.com",
            password=PASSWORD,
        )
        for name in ("alice", "bob", "carol")
    }


@pytest.fixture
def item_id(test_db, users, frozen_clock):
    """Item listed by alice at T0, starting bid 10, ending in one hour."""
    return item_service.create_item(
        test_db,
        creator_id=users["alice"],
        name="Vintage Camera",
        description="Working 35mm film camera",
        starting_bid=10,
        end_date=T0 + HOUR,
    )


@pytest.fixture
def client(test_db):
    """TestClient whose requests all use the test database session."""
    from app.main import app

    def _get_db():
        yield test_db

    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def signup(client):
    """Register and log in through the API; returns (user_id, auth headers)."""

    def _signup(name: str):
        response = client.post(
            "/users",
            json={
                "first_name": name.capitalize(),
                "last_name": "Tester",
                "email": f"{name}@example.com",
                "password": PASSWORD,
            },
        )
        assert response.status_code == 201, response.text
        login = client.post(
            "/login", json={"email": f"{name}@example.com", "password": PASSWORD}
        )
        assert login.status_code == 200, login.text
        data = login.json()
        return data["user_id"], {"X-Authorization": data["session_token"]}

    return _signup
