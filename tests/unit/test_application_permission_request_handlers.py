"""Unit tests for permission request command and query handlers.

Tests cover:
- CreatePermissionRequests skips held and pending roles
- Approve grants the role then removes the request; Reject only removes it
- Bulk approve/reject: dedupe, single batched delete, empty input short-circuit
- GetAvailableRoles excludes held and pending roles case-insensitively
"""

from unittest.mock import AsyncMock, Mock, call

import pytest
from uuid_extensions import uuid7

from src.application.commands import (
    ApprovePermissionRequest,
    BulkApprovePermissionRequests,
    BulkRejectPermissionRequests,
    CreatePermissionRequests,
    RejectPermissionRequest,
)
from src.application.commands.handlers.approve_permission_request_handler import (
    ApprovePermissionRequestHandler,
)
from src.application.commands.handlers.bulk_approve_permission_requests_handler import (
    BulkApprovePermissionRequestsHandler,
)
from src.application.commands.handlers.bulk_reject_permission_requests_handler import (
    BulkRejectPermissionRequestsHandler,
)
from src.application.commands.handlers.create_permission_requests_handler import (
    CreatePermissionRequestsHandler,
)
from src.application.commands.handlers.reject_permission_request_handler import (
    RejectPermissionRequestHandler,
)
from src.application.queries import GetAvailableRoles, ListPermissionRequests
from src.application.queries.handlers.permission_request_query_handlers import (
    GetAvailableRolesHandler,
    ListPermissionRequestsHandler,
)
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Success
from tests.conftest import create_test_permission_request, create_test_user


# =============================================================================
# CreatePermissionRequests
# =============================================================================


@pytest.mark.unit
class TestCreatePermissionRequestsHandler:
    @pytest.mark.asyncio
    async def test_creates_one_request_per_new_role(self):
        user = create_test_user()
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = user
        request_repo = AsyncMock()
        request_repo.get_by_user_id.return_value = []
        handler = CreatePermissionRequestsHandler(
            user_repo=user_repo, permission_request_repo=request_repo
        )

        result = await handler.handle(
            CreatePermissionRequests(
                user_id=user.id,
                requested_by="jdoe",
                requested_roles=("developer", "Admin"),
                request_message="Need access to the log viewer",
            )
        )

        assert result == Success(value=2)
        created = [c.args[0] for c in request_repo.create.call_args_list]
        assert [r.requested_role for r in created] == ["Developer", "Admin"]
        assert all(r.created_by == "jdoe" for r in created)
        assert all(r.request_message == "Need access to the log viewer" for r in created)

    @pytest.mark.asyncio
    async def test_skips_held_and_pending_roles(self):
        user = create_test_user(roles=["User", "Developer"])
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = user
        request_repo = AsyncMock()
        request_repo.get_by_user_id.return_value = [
            create_test_permission_request(user.id, requested_role="Admin")
        ]
        handler = CreatePermissionRequestsHandler(
            user_repo=user_repo, permission_request_repo=request_repo
        )

        result = await handler.handle(
            CreatePermissionRequests(
                user_id=user.id,
                requested_by="jdoe",
                requested_roles=("Developer", "ADMIN"),
            )
        )

        assert result == Success(value=0)
        request_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate_roles_in_command_create_once(self):
        user = create_test_user()
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = user
        request_repo = AsyncMock()
        request_repo.get_by_user_id.return_value = []
        handler = CreatePermissionRequestsHandler(
            user_repo=user_repo, permission_request_repo=request_repo
        )

        result = await handler.handle(
            CreatePermissionRequests(
                user_id=user.id,
                requested_by="jdoe",
                requested_roles=("Developer", "developer"),
            )
        )

        assert result == Success(value=1)

    @pytest.mark.asyncio
    async def test_missing_user_is_failure(self):
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = None
        request_repo = AsyncMock()
        handler = CreatePermissionRequestsHandler(
            user_repo=user_repo, permission_request_repo=request_repo
        )

        result = await handler.handle(
            CreatePermissionRequests(
                user_id=uuid7(), requested_by="ghost", requested_roles=("Admin",)
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USER_NOT_FOUND
        assert result.error.message == "User not found"
        request_repo.create.assert_not_called()


# =============================================================================
# Approve / Reject
# =============================================================================


@pytest.mark.unit
class TestApprovePermissionRequestHandler:
    @pytest.mark.asyncio
    async def test_approve_grants_role_then_deletes_request(self):
        request = create_test_permission_request(uuid7(), requested_role="Admin")
        user_repo = AsyncMock()
        request_repo = AsyncMock()
        request_repo.get_by_id.return_value = request
        manager = Mock()
        manager.attach_mock(user_repo.add_role, "add_role")
        manager.attach_mock(request_repo.delete, "delete")
        handler = ApprovePermissionRequestHandler(
            user_repo=user_repo, permission_request_repo=request_repo
        )

        result = await handler.handle(ApprovePermissionRequest(request_id=request.id))

        assert isinstance(result, Success)
        assert manager.mock_calls == [
            call.add_role(request.user_id, "Admin"),
            call.delete(request.id),
        ]

    @pytest.mark.asyncio
    async def test_approve_unknown_request_is_failure(self):
        user_repo = AsyncMock()
        request_repo = AsyncMock()
        request_repo.get_by_id.return_value = None
        handler = ApprovePermissionRequestHandler(
            user_repo=user_repo, permission_request_repo=request_repo
        )

        result = await handler.handle(ApprovePermissionRequest(request_id=uuid7()))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.PERMISSION_REQUEST_NOT_FOUND
        user_repo.add_role.assert_not_called()
        request_repo.delete.assert_not_called()


@pytest.mark.unit
class TestRejectPermissionRequestHandler:
    @pytest.mark.asyncio
    async def test_reject_deletes_request(self):
        request = create_test_permission_request(uuid7())
        request_repo = AsyncMock()
        request_repo.get_by_id.return_value = request
        handler = RejectPermissionRequestHandler(permission_request_repo=request_repo)

        result = await handler.handle(RejectPermissionRequest(request_id=request.id))

        assert isinstance(result, Success)
        request_repo.delete.assert_awaited_once_with(request.id)

    @pytest.mark.asyncio
    async def test_reject_unknown_request_is_failure(self):
        request_repo = AsyncMock()
        request_repo.get_by_id.return_value = None
        handler = RejectPermissionRequestHandler(permission_request_repo=request_repo)

        result = await handler.handle(RejectPermissionRequest(request_id=uuid7()))

        assert isinstance(result, Failure)
        request_repo.delete.assert_not_called()


# =============================================================================
# Bulk operations
# =============================================================================


@pytest.mark.unit
class TestBulkRejectPermissionRequestsHandler:
    @pytest.mark.asyncio
    async def test_returns_count_and_deletes_once(self, mock_logger):
        ids = (uuid7(), uuid7(), uuid7())
        request_repo = AsyncMock()
        handler = BulkRejectPermissionRequestsHandler(
            permission_request_repo=request_repo, logger=mock_logger
        )

        rejected = await handler.handle(BulkRejectPermissionRequests(request_ids=ids))

        assert rejected == 3
        request_repo.delete_range.assert_awaited_once_with(list(ids))
        mock_logger.info.assert_called_once()

    @pytest.mark.asyncio
    async def test_duplicate_ids_count_once(self, mock_logger):
        first, second = uuid7(), uuid7()
        request_repo = AsyncMock()
        handler = BulkRejectPermissionRequestsHandler(
            permission_request_repo=request_repo, logger=mock_logger
        )

        rejected = await handler.handle(
            BulkRejectPermissionRequests(request_ids=(first, second, first))
        )

        assert rejected == 2
        request_repo.delete_range.assert_awaited_once_with([first, second])

    @pytest.mark.asyncio
    async def test_empty_input_returns_zero_without_store_call(self, mock_logger):
        request_repo = AsyncMock()
        handler = BulkRejectPermissionRequestsHandler(
            permission_request_repo=request_repo, logger=mock_logger
        )

        rejected = await handler.handle(BulkRejectPermissionRequests(request_ids=()))

        assert rejected == 0
        request_repo.delete_range.assert_not_called()


@pytest.mark.unit
class TestBulkApprovePermissionRequestsHandler:
    @pytest.mark.asyncio
    async def test_grants_each_role_and_deletes_once(self, mock_logger):
        alice, bob = create_test_user(username="alice"), create_test_user(username="bob")
        requests = [
            create_test_permission_request(alice.id, requested_role="Developer"),
            create_test_permission_request(bob.id, requested_role="Admin"),
        ]
        user_repo = AsyncMock()
        user_repo.find_by_id.side_effect = lambda user_id: {
            alice.id: alice,
            bob.id: bob,
        }.get(user_id)
        request_repo = AsyncMock()
        request_repo.get_by_ids.return_value = requests
        handler = BulkApprovePermissionRequestsHandler(
            user_repo=user_repo, permission_request_repo=request_repo, logger=mock_logger
        )
        ids = tuple(r.id for r in requests)

        approved = await handler.handle(BulkApprovePermissionRequests(request_ids=ids))

        assert approved == 2
        user_repo.add_role.assert_has_awaits(
            [call(alice.id, "Developer"), call(bob.id, "Admin")]
        )
        request_repo.delete_range.assert_awaited_once_with(list(ids))

    @pytest.mark.asyncio
    async def test_missing_user_is_skipped_but_request_removed(self, mock_logger):
        orphan = create_test_permission_request(uuid7(), requested_role="Admin")
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = None
        request_repo = AsyncMock()
        request_repo.get_by_ids.return_value = [orphan]
        handler = BulkApprovePermissionRequestsHandler(
            user_repo=user_repo, permission_request_repo=request_repo, logger=mock_logger
        )

        approved = await handler.handle(
            BulkApprovePermissionRequests(request_ids=(orphan.id,))
        )

        assert approved == 0
        user_repo.add_role.assert_not_called()
        request_repo.delete_range.assert_awaited_once_with([orphan.id])
        mock_logger.warning.assert_called_once()

    @pytest.mark.asyncio
    async def test_empty_input_returns_zero_without_store_call(self, mock_logger):
        user_repo = AsyncMock()
        request_repo = AsyncMock()
        handler = BulkApprovePermissionRequestsHandler(
            user_repo=user_repo, permission_request_repo=request_repo, logger=mock_logger
        )

        approved = await handler.handle(BulkApprovePermissionRequests(request_ids=()))

        assert approved == 0
        request_repo.get_by_ids.assert_not_called()
        request_repo.delete_range.assert_not_called()


# =============================================================================
# Queries
# =============================================================================


@pytest.mark.unit
class TestGetAvailableRolesHandler:
    @pytest.mark.asyncio
    async def test_new_user_may_request_all_requestable_roles(self):
        user_repo = AsyncMock()
        user_repo.get_roles.return_value = ["User"]
        request_repo = AsyncMock()
        request_repo.get_by_user_id.return_value = []
        handler = GetAvailableRolesHandler(
            user_repo=user_repo, permission_request_repo=request_repo
        )

        roles = await handler.handle(GetAvailableRoles(user_id=uuid7()))

        assert roles == ["Developer", "Admin"]

    @pytest.mark.asyncio
    async def test_held_and_pending_roles_excluded_case_insensitively(self):
        user_id = uuid7()
        user_repo = AsyncMock()
        user_repo.get_roles.return_value = ["user", "developer"]
        request_repo = AsyncMock()
        request_repo.get_by_user_id.return_value = [
            create_test_permission_request(user_id, requested_role="ADMIN")
        ]
        handler = GetAvailableRolesHandler(
            user_repo=user_repo, permission_request_repo=request_repo
        )

        assert await handler.handle(GetAvailableRoles(user_id=user_id)) == []


@pytest.mark.unit
class TestListPermissionRequestsHandler:
    @pytest.mark.asyncio
    async def test_returns_repository_listing(self):
        listing = [create_test_permission_request(uuid7())]
        request_repo = AsyncMock()
        request_repo.get_all.return_value = listing
        handler = ListPermissionRequestsHandler(permission_request_repo=request_repo)

        assert await handler.handle(ListPermissionRequests()) == listing
