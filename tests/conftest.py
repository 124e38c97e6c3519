# tests/conftest.py
"""
Pytest configuration and fixtures.
"""

import os

import pytest

# Set test environment before any app module reads settings
os.environ.setdefault("TESTING", "1")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_JSON", "false")

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


@pytest.fixture
def db_session():
    """Fresh in-memory SQLite database per test."""
    from app import models  # noqa: F401
    from app.database import Base

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine, autoflush=False)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    """TestClient bound to the per-test database."""
    from fastapi.testclient import TestClient

    from app.database import get_db
    from app.main import app

    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_account(db_session):
    """Factory creating stored accounts with a given role."""
    from app.models import UserRole
    from app.services import account_service

    counter = {"n": 0}

    def _make(role=UserRole.USER, name=None, email=None, password="secret123"):
        counter["n"] += 1
        n = counter["n"]
        return account_service.sign_up(
            db_session,
            name=name or f"member{n}",
            password=password,
            email=email or f"member{n}@example.com",
            role=role,
        )

    return _make


@pytest.fixture
def auth_headers():
    """Bearer header for an account."""
    from app.services import account_service

    def _headers(account):
        return {"Authorization": f"Bearer {account_service.issue_token(account)}"}

    return _headers
