"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator
from typing import Any

# Settings are cached on first use, so the test environment is set before any app import
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("PASSWORD_PEPPER", "test-pepper")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from commerce_api import models  # noqa: E402, F401
from commerce_api.database import Base, get_db  # noqa: E402
from commerce_api.infrastructure.identity.repositories import InMemoryUserRepository  # noqa: E402
from commerce_api.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine
test_engine = create_engine(
    TEST_DATABASE_URL, connect_args={"check_same_thread": False}, poolclass=StaticPool
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


class CountingPasswordHasher:
    """
    Deterministic stand-in for the pwdlib hasher.

    Counts calls so tests can assert when hashing happened.
    """

    PREFIX = "hashed::"

    def __init__(self) -> None:
        self.hash_calls = 0
        self.verify_calls = 0

    def hash(self, raw_password: str) -> str:
        self.hash_calls += 1
        return f"{self.PREFIX}{raw_password}"

    def verify(self, raw_password: str, hashed_password: str) -> bool:
        self.verify_calls += 1
        return hashed_password == f"{self.PREFIX}{raw_password}"

    def dummy_hash(self) -> str:
        return "dummy::never-matches"


@pytest.fixture
def hasher() -> CountingPasswordHasher:
    return CountingPasswordHasher()


@pytest.fixture
def directory() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
