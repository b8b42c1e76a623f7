"""
Test configuration and fixtures for the Chirpy API.
This centralizes all test setup, making individual tests clean.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from main import app
from chirpy_app.database.connection import Base, get_session_factory
from chirpy_app.dependencies import get_settings
from chirpy_app.config import settings
from chirpy_app.storage.strategies import InMemoryStorage

# Test database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


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
def app_settings():
    """
    Setting overrides seen by the app. Tests change them before making
    requests, e.g. app_settings["platform"] = "dev".
    """
    overrides = {"platform": "prod", "storage_backend": "sqlalchemy"}

    def override_get_settings():
        return settings.model_copy(update=overrides)

    app.dependency_overrides[get_settings] = override_get_settings
    yield overrides
    app.dependency_overrides.pop(get_settings, None)


@pytest.fixture(scope="function")
def client(db_session, app_settings):
    """
    Create a test client with database dependency overridden.
    This is the main fixture that tests will use.
    """
    def override_get_session_factory():
        return TestingSessionLocal
    
    # Point request sessions at the test database
    app.dependency_overrides[get_session_factory] = override_get_session_factory
    app.state.hit_counter.reset()
    
    # Create test client
    with TestClient(app) as test_client:
        yield test_client
    
    # Clean up overrides
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def memory_storage():
    """Fresh in-memory storage for service-level tests"""
    return InMemoryStorage()


@pytest.fixture(scope="function")
def create_user(client):
    """Create a user through the API and return its JSON"""
    def _create(email: str = "a@b.com") -> dict:
        response = client.post("/api/users", json={"email": email})
        assert response.status_code == 201
        return response.json()
    return _create
