"""Pytest configuration and fixtures."""

import os

# Fast bcrypt and no dev-only startup work under test
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from lenslocked.database import Base, get_db  # noqa: E402
from lenslocked.main import app  # noqa: E402
from lenslocked.services.galleries import GalleryService  # noqa: E402
from lenslocked.services.hashing import HMAC, PasswordHasher  # noqa: E402
from lenslocked.services.users import UserService  # noqa: E402

# PostgreSQL when TEST_DATABASE_URL is set, SQLite otherwise
SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_PEPPER = "test-pepper"
TEST_HMAC_KEY = "test-hmac-key"


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    from lenslocked import models  # noqa: F401

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


@pytest.fixture
def hmac():
    return HMAC(TEST_HMAC_KEY)


@pytest.fixture
def hasher():
    return PasswordHasher(TEST_PEPPER, rounds=4)


@pytest.fixture
def user_service(db, hmac, hasher):
    """User service bound to the test session."""
    return UserService(db, hmac=hmac, hasher=hasher)


@pytest.fixture
def gallery_service(db):
    return GalleryService(db)


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


@pytest.fixture
def signed_up(client):
    """Sign a user up; the client keeps the remember cookie."""
    response = client.post(
        "/api/v1/users/signup",
        json={"name": "Test User", "email": "test@example.com", "password": "testpass123"},
    )
    assert response.status_code == 201
    return response.json()
