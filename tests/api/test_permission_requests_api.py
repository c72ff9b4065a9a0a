"""HTTP tests for /api/v1/permission-requests.

Covers the role gate (401 without a token, 403 without Admin) as well as
each endpoint's happy and failure paths.
"""

from datetime import UTC, datetime

import pytest
from uuid_extensions import uuid7

from src.core.container import (
    get_approve_permission_request_handler,
    get_available_roles_handler,
    get_bulk_approve_permission_requests_handler,
    get_bulk_reject_permission_requests_handler,
    get_create_permission_requests_handler,
    get_list_permission_requests_handler,
    get_reject_permission_request_handler,
)
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Success
from src.domain.entities.permission_request import PermissionRequest
from tests.api.conftest import make_token

BASE = "/api/v1/permission-requests"


def _not_found():
    return Failure(
        error=NotFoundError(
            code=ErrorCode.PERMISSION_REQUEST_NOT_FOUND,
            message="Permission request not found",
            resource_type="PermissionRequest",
        )
    )


@pytest.mark.api
class TestAuthorization:
    def test_list_without_token_returns_401(self, client, override_handler):
        override_handler(get_list_permission_requests_handler, [])

        response = client.get(BASE)

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_list_with_invalid_token_returns_401(self, client, override_handler):
        override_handler(get_list_permission_requests_handler, [])

        response = client.get(BASE, headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid or expired token"

    def test_list_as_plain_user_returns_403(
        self, client, override_handler, user_headers
    ):
        handler = override_handler(get_list_permission_requests_handler, [])

        response = client.get(BASE, headers=user_headers)

        assert response.status_code == 403
        handler.handle.assert_not_awaited()

    def test_admin_role_check_ignores_case(self, client, override_handler):
        override_handler(get_list_permission_requests_handler, [])
        token = make_token(roles=("admin",))

        response = client.get(BASE, headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200


@pytest.mark.api
class TestListAndCreate:
    def test_list_returns_requests(self, client, override_handler, admin_headers):
        pending = PermissionRequest(
            id=uuid7(),
            user_id=uuid7(),
            requested_role="Developer",
            created_by="jdoe",
            created_at=datetime(2024, 1, 15, tzinfo=UTC),
            username="jdoe",
        )
        override_handler(get_list_permission_requests_handler, [pending])

        response = client.get(BASE, headers=admin_headers)

        assert response.status_code == 200
        body = response.json()
        assert len(body) == 1
        assert body[0]["id"] == str(pending.id)
        assert body[0]["username"] == "jdoe"
        assert body[0]["requested_role"] == "Developer"

    def test_create_uses_caller_identity(self, client, override_handler):
        user_id = uuid7()
        handler = override_handler(get_create_permission_requests_handler, Success(value=2))
        token = make_token(user_id=user_id)

        response = client.post(
            BASE,
            json={"requested_roles": ["Developer", "Admin"], "request_message": "please"},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 201
        assert response.json() == {"created_count": 2}
        command = handler.handle.await_args.args[0]
        assert command.user_id == user_id
        assert command.requested_by == "jdoe"
        assert command.requested_roles == ("Developer", "Admin")

    def test_create_rejects_unknown_role(
        self, client, override_handler, user_headers
    ):
        handler = override_handler(get_create_permission_requests_handler)

        response = client.post(
            BASE, json={"requested_roles": ["Superuser"]}, headers=user_headers
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "requested_roles"
        handler.handle.assert_not_awaited()

    def test_available_roles(self, client, override_handler, user_headers):
        override_handler(get_available_roles_handler, ["Developer", "Admin"])

        response = client.get(f"{BASE}/available-roles", headers=user_headers)

        assert response.json() == {"roles": ["Developer", "Admin"]}


@pytest.mark.api
class TestApproveReject:
    def test_approve_returns_204(self, client, override_handler, admin_headers):
        request_id = uuid7()
        handler = override_handler(
            get_approve_permission_request_handler, Success(value=None)
        )

        response = client.post(f"{BASE}/{request_id}/approval", headers=admin_headers)

        assert response.status_code == 204
        assert handler.handle.await_args.args[0].request_id == request_id

    def test_approve_unknown_returns_404(
        self, client, override_handler, admin_headers
    ):
        override_handler(get_approve_permission_request_handler, _not_found())

        response = client.post(f"{BASE}/{uuid7()}/approval", headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Permission request not found"

    def test_reject_returns_204(self, client, override_handler, admin_headers):
        override_handler(get_reject_permission_request_handler, Success(value=None))

        response = client.delete(f"{BASE}/{uuid7()}", headers=admin_headers)

        assert response.status_code == 204

    def test_malformed_id_returns_422(self, client, admin_headers):
        response = client.delete(f"{BASE}/not-a-uuid", headers=admin_headers)

        assert response.status_code == 422


@pytest.mark.api
class TestBulk:
    def test_bulk_approve_reports_count(
        self, client, override_handler, admin_headers
    ):
        ids = [uuid7(), uuid7()]
        handler = override_handler(get_bulk_approve_permission_requests_handler, 1)

        response = client.post(
            f"{BASE}/bulk-approvals",
            json={"request_ids": [str(i) for i in ids]},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json() == {"processed_count": 1}
        assert handler.handle.await_args.args[0].request_ids == tuple(ids)

    def test_bulk_reject_empty_list_returns_422(
        self, client, override_handler, admin_headers
    ):
        handler = override_handler(get_bulk_reject_permission_requests_handler, 0)

        response = client.post(
            f"{BASE}/bulk-rejections", json={"request_ids": []}, headers=admin_headers
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["message"] == (
            "At least one request ID is required"
        )
        handler.handle.assert_not_awaited()
