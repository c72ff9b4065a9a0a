"""Pytest configuration.

Environment variables are set before any src import because settings are
loaded once per process. Integration tests get a fresh in-memory SQLite
database per test.
"""

import asyncio
import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-characters")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from datetime import UTC, datetime  # noqa: E402
from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from src.domain.entities.log_entry import LogEntry  # noqa: E402
from src.domain.entities.permission_request import PermissionRequest  # noqa: E402
from src.domain.entities.user import User  # noqa: E402

pytest_plugins = ("pytest_asyncio",)


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: HTTP tests against the FastAPI app")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if asyncio.iscoroutinefunction(item.function):
            item.add_marker(pytest.mark.asyncio)


@pytest_asyncio.fixture
async def test_database():
    """Provide a Database with all tables created.

    Each test gets its own in-memory database; tests open as many sessions
    as they need:

        async with test_database.get_session() as session:
            ...
    """
    from src.core.config import settings
    from src.infrastructure.persistence.database import Database

    db = Database(database_url=settings.database_url, echo=settings.db_echo)
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()


@pytest.fixture
def mock_logger():
    """Provide a mock logger for testing.

    Usage:
        def test_something(mock_logger):
            handler = MyHandler(logger=mock_logger)
            ...
            mock_logger.info.assert_called_once()
    """
    logger = Mock()
    logger.info = Mock()
    logger.debug = Mock()
    logger.error = Mock()
    logger.warning = Mock()
    return logger


# =============================================================================
# Entity builders
# =============================================================================


def create_test_user(
    user_id=None,
    username="jdoe",
    email="jdoe@example.com",
    password_hash="hashed_password",
    is_active=True,
    roles=None,
    full_name=None,
):
    """Create a User with sensible defaults."""
    now = datetime.now(UTC)
    return User(
        id=user_id or uuid7(),
        username=username,
        email=email,
        password_hash=password_hash,
        is_active=is_active,
        roles=roles if roles is not None else ["User"],
        full_name=full_name,
        created_at=now,
        updated_at=now,
    )


def create_test_permission_request(
    user_id,
    requested_role="Developer",
    request_id=None,
    created_by="jdoe",
    created_at=None,
    request_message=None,
):
    return PermissionRequest(
        id=request_id or uuid7(),
        user_id=user_id,
        requested_role=requested_role,
        request_message=request_message,
        created_by=created_by,
        created_at=created_at or datetime.now(UTC),
    )


def create_test_log_entry(
    message="Something happened",
    log_level="Error",
    created_at=None,
    log_id=None,
    **fields,
):
    return LogEntry(
        id=log_id or uuid7(),
        log_level=log_level,
        message=message,
        created_at=created_at or datetime.now(UTC),
        **fields,
    )
