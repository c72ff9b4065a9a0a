"""Shared fixtures for HTTP tests.

Handlers are replaced through app.dependency_overrides, so these tests
exercise routing, request parsing, validation, auth and error mapping
without a database. The lifespan is not entered (no `with TestClient`).
"""

from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.core.container import get_token_service
from src.main import app


@pytest.fixture
def client():
    """TestClient that turns unhandled errors into 500 responses."""
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def override_handler():
    """Register a stub handler for a container factory.

    Usage:
        handler = override_handler(get_login_handler, return_value=Success(...))
        handler.handle.assert_awaited_once()
    """

    def _override(factory, return_value=None, side_effect=None):
        handler = Mock()
        handler.handle = AsyncMock(return_value=return_value, side_effect=side_effect)
        app.dependency_overrides[factory] = lambda: handler
        return handler

    return _override


def make_token(roles=("User",), user_id=None, username="jdoe"):
    return get_token_service().generate_access_token(
        user_id=user_id or uuid7(),
        username=username,
        email=f"{username}@example.com",
        roles=list(roles),
    )


@pytest.fixture
def user_headers():
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {make_token(roles=('User', 'Admin'), username='admin')}"}
