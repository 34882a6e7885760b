"""Pytest configuration and shared fixtures for tuiter tests."""
import os

# Set test environment variables BEFORE importing tuiter modules
os.environ["STORAGE_BACKEND"] = "memory"
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOGGING_HOST", "")

import pytest
from unittest.mock import AsyncMock


@pytest.fixture(autouse=True)
def reset_container():
    """Give every test empty in-memory stores."""
    from tuiter.container import init_container
    container = init_container()
    container.reset_singletons()
    yield container
    container.reset_singletons()


@pytest.fixture
def user_store():
    from tuiter.implementations.memory_record_store import InMemoryRecordStore
    return InMemoryRecordStore(id_field="user_id", id_prefix="user")


@pytest.fixture
def tuit_store():
    from tuiter.implementations.memory_record_store import InMemoryRecordStore
    return InMemoryRecordStore(id_field="tuit_id", id_prefix="tuit")


@pytest.fixture
def session_store():
    from tuiter.implementations.memory_session_store import InMemorySessionStore
    return InMemorySessionStore(ttl_seconds=3600)


@pytest.fixture
def user_repository(user_store):
    from tuiter.repositories.user_repository import UserRepository
    return UserRepository(user_store)


@pytest.fixture
def tuit_repository(tuit_store):
    from tuiter.repositories.tuit_repository import TuitRepository
    return TuitRepository(tuit_store)


@pytest.fixture
def auth_service(user_repository, session_store):
    from tuiter.services.authentication_service import AuthenticationService
    return AuthenticationService(user_repository, session_store)


@pytest.fixture
def sample_user():
    """Fixture for a sample User domain object."""
    from tuiter.domain.user import User
    from tuiter.utils.crypto import hash_password
    return User(
        user_id="user_test123",
        username="alice",
        password=hash_password("wonderland"),
        first_name="Alice",
        last_name="Liddell",
        user_type="personal"
    )


@pytest.fixture
def mock_user_repository():
    """Mock UserRepository for testing."""
    return AsyncMock()


@pytest.fixture
def mock_session_store():
    """Mock SessionStore for testing."""
    return AsyncMock()
