"""HTTP tests for /api/v1/sessions."""

import pytest

from src.application.dtos import AuthTokens
from src.core.container import get_login_handler, get_logout_handler
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, NotFoundError
from src.core.result import Failure, Success


@pytest.mark.api
class TestCreateSession:
    def test_returns_token_pair(self, client, override_handler):
        handler = override_handler(
            get_login_handler,
            Success(
                value=AuthTokens(
                    access_token="access", refresh_token="refresh", expires_in=900
                )
            ),
        )

        response = client.post(
            "/api/v1/sessions",
            json={"username_or_email": "jdoe", "password": "SecurePass123"},
        )

        assert response.status_code == 201
        assert response.json() == {
            "access_token": "access",
            "refresh_token": "refresh",
            "token_type": "bearer",
            "expires_in": 900,
        }
        assert handler.handle.await_args.args[0].username_or_email == "jdoe"

    def test_bad_credentials_return_401(self, client, override_handler):
        override_handler(
            get_login_handler,
            Failure(
                error=AuthenticationError(
                    code=ErrorCode.INVALID_CREDENTIALS,
                    message="Invalid username or password",
                )
            ),
        )

        response = client.post(
            "/api/v1/sessions",
            json={"username_or_email": "jdoe", "password": "wrong"},
        )

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
        assert response.json()["detail"] == "Invalid username or password"

    def test_missing_password_returns_422(self, client, override_handler):
        handler = override_handler(get_login_handler)

        response = client.post("/api/v1/sessions", json={"username_or_email": "jdoe"})

        assert response.status_code == 422
        assert response.json()["errors"] == [
            {"field": "password", "code": "validation_failed", "message": "Password is required"}
        ]
        handler.handle.assert_not_awaited()


@pytest.mark.api
class TestDeleteCurrentSession:
    def test_logout_returns_204(self, client, override_handler):
        handler = override_handler(get_logout_handler, Success(value=None))

        response = client.request(
            "DELETE", "/api/v1/sessions/current", json={"refresh_token": "opaque"}
        )

        assert response.status_code == 204
        assert handler.handle.await_args.args[0].refresh_token == "opaque"

    def test_unknown_token_returns_404(self, client, override_handler):
        override_handler(
            get_logout_handler,
            Failure(
                error=NotFoundError(
                    code=ErrorCode.TOKEN_NOT_FOUND,
                    message="Token not found or already revoked",
                    resource_type="RefreshToken",
                )
            ),
        )

        response = client.request(
            "DELETE", "/api/v1/sessions/current", json={"refresh_token": "gone"}
        )

        assert response.status_code == 404
        assert response.json()["title"] == "Resource Not Found"

    def test_empty_token_returns_422(self, client, override_handler):
        override_handler(get_logout_handler)

        response = client.request(
            "DELETE", "/api/v1/sessions/current", json={"refresh_token": ""}
        )

        assert response.status_code == 422
