"""
Test configuration and fixtures for the URL shortener core service.
This centralizes all test setup, making individual tests clean.
"""

import os

# Must be set before the app (and its engine) is imported
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["INIT_DB_ON_STARTUP"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from main import app
from shortener_core.database.connection import Base, create_db_engine, get_db
from shortener_core.models import ApiKey, Domain, Path

# Test database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_db_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_TOKEN = "test-token-0123456789abcdef"


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    This ensures tests are isolated and don't affect each other.
    """
    # Create tables
    Base.metadata.create_all(bind=engine)

    # Create session
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        # Cleanup
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """
    Create a test client with database dependency overridden.
    This is the main fixture that tests will use.
    """
    def override_get_db():
        yield db_session

    # Override the database dependency
    app.dependency_overrides[get_db] = override_get_db

    # Create test client
    with TestClient(app) as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()


@pytest.fixture
def api_token(db_session) -> str:
    """An issued API token, stored directly in the database."""
    db_session.add(ApiKey(name="edge", token=TEST_TOKEN))
    db_session.commit()
    return TEST_TOKEN


@pytest.fixture
def auth_headers(api_token):
    return {"x-api-token": api_token}


@pytest.fixture
def example_path(db_session) -> Path:
    """Active path "abc" under domain "example.com"."""
    domain = Domain(hostname="example.com")
    db_session.add(domain)
    db_session.flush()
    path = Path(domain_id=domain.id, short_path="abc", original_url="https://www.example.com/landing")
    db_session.add(path)
    db_session.commit()
    db_session.refresh(path)
    return path
