"""Integration tests for PermissionRequestRepository."""

from datetime import UTC, datetime, timedelta

import pytest

from src.infrastructure.persistence.repositories import (
    PermissionRequestRepository,
    UserRepository,
)
from tests.conftest import create_test_permission_request, create_test_user


@pytest.fixture
def user():
    return create_test_user()


async def _seed(test_database, user, *requests):
    async with test_database.get_session() as session:
        await UserRepository(session=session).save(user)
        repo = PermissionRequestRepository(session=session)
        for request in requests:
            await repo.create(request)


@pytest.mark.integration
class TestPermissionRequestRepository:
    @pytest.mark.asyncio
    async def test_get_all_newest_first_with_username(self, test_database, user):
        now = datetime.now(UTC)
        older = create_test_permission_request(
            user.id, requested_role="Developer", created_at=now - timedelta(hours=1)
        )
        newer = create_test_permission_request(
            user.id, requested_role="Admin", created_at=now
        )
        await _seed(test_database, user, older, newer)

        async with test_database.get_session() as session:
            listing = await PermissionRequestRepository(session=session).get_all()

        assert [r.id for r in listing] == [newer.id, older.id]
        assert listing[0].username == "jdoe"

    @pytest.mark.asyncio
    async def test_get_by_ids_and_user(self, test_database, user):
        first = create_test_permission_request(user.id, requested_role="Developer")
        second = create_test_permission_request(user.id, requested_role="Admin")
        await _seed(test_database, user, first, second)

        async with test_database.get_session() as session:
            repo = PermissionRequestRepository(session=session)
            by_ids = await repo.get_by_ids([first.id])
            by_user = await repo.get_by_user_id(user.id)
            by_id = await repo.get_by_id(second.id)

        assert [r.id for r in by_ids] == [first.id]
        assert {r.id for r in by_user} == {first.id, second.id}
        assert by_id.requested_role == "Admin"

    @pytest.mark.asyncio
    async def test_delete_range_removes_listed_only(self, test_database, user):
        requests = [
            create_test_permission_request(user.id, requested_role=role)
            for role in ("Developer", "Admin", "Developer")
        ]
        await _seed(test_database, user, *requests)

        async with test_database.get_session() as session:
            await PermissionRequestRepository(session=session).delete_range(
                [requests[0].id, requests[1].id]
            )

        async with test_database.get_session() as session:
            remaining = await PermissionRequestRepository(session=session).get_all()

        assert [r.id for r in remaining] == [requests[2].id]

    @pytest.mark.asyncio
    async def test_delete_single(self, test_database, user):
        request = create_test_permission_request(user.id)
        await _seed(test_database, user, request)

        async with test_database.get_session() as session:
            await PermissionRequestRepository(session=session).delete(request.id)

        async with test_database.get_session() as session:
            assert await PermissionRequestRepository(session=session).get_by_id(
                request.id
            ) is None
