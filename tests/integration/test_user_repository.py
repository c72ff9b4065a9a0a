"""Integration tests for UserRepository.

Tests cover:
- Save and retrieve with role grants
- Username uniqueness ignores case
- Case-insensitive lookups (username, email, either)
- Existence checks with exclude_user_id
- Role grants (idempotent)
- Ping on an empty store

Architecture:
- Integration tests against in-memory SQLite (aiosqlite)
- Fresh database per test (test_database fixture)
"""

import pytest
from sqlalchemy.exc import IntegrityError

from src.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)
from tests.conftest import create_test_user


async def _save(test_database, user):
    async with test_database.get_session() as session:
        await UserRepository(session=session).save(user)


@pytest.mark.integration
class TestUserRepositorySave:
    @pytest.mark.asyncio
    async def test_save_user_persists_to_database(self, test_database):
        user = create_test_user(full_name="Jane Doe")
        await _save(test_database, user)

        async with test_database.get_session() as session:
            found = await UserRepository(session=session).find_by_id(user.id)

        assert found is not None
        assert found.username == "jdoe"
        assert found.email == "jdoe@example.com"
        assert found.full_name == "Jane Doe"
        assert found.roles == ["User"]
        assert found.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_find_by_id_unknown_returns_none(self, test_database):
        async with test_database.get_session() as session:
            assert await UserRepository(session=session).find_by_id(
                create_test_user().id
            ) is None

    @pytest.mark.asyncio
    async def test_username_differing_only_in_case_is_rejected(self, test_database):
        await _save(test_database, create_test_user(username="Alice"))

        with pytest.raises(IntegrityError):
            await _save(
                test_database,
                create_test_user(username="alice", email="other@example.com"),
            )


@pytest.mark.integration
class TestUserRepositoryLookups:
    @pytest.mark.asyncio
    async def test_lookups_are_case_insensitive(self, test_database):
        user = create_test_user(username="JDoe_1", email="jdoe@example.com")
        await _save(test_database, user)

        async with test_database.get_session() as session:
            repo = UserRepository(session=session)
            assert (await repo.find_by_username("jdoe_1")).id == user.id
            assert (await repo.find_by_email("JDOE@Example.com")).id == user.id
            assert (await repo.find_by_username_or_email("JDOE_1")).id == user.id
            assert (await repo.find_by_username_or_email("jdoe@EXAMPLE.com")).id == user.id

    @pytest.mark.asyncio
    async def test_underscore_is_not_a_wildcard(self, test_database):
        await _save(test_database, create_test_user(username="jdoe1"))

        async with test_database.get_session() as session:
            assert await UserRepository(session=session).username_exists("jdoe_") is False


@pytest.mark.integration
class TestUserRepositoryExists:
    @pytest.mark.asyncio
    async def test_email_exists_excludes_given_user(self, test_database):
        user = create_test_user()
        other = create_test_user(username="other", email="other@example.com")
        await _save(test_database, user)
        await _save(test_database, other)

        async with test_database.get_session() as session:
            repo = UserRepository(session=session)
            assert await repo.email_exists("JDOE@example.com") is True
            assert await repo.email_exists("jdoe@example.com", exclude_user_id=user.id) is False
            assert await repo.email_exists("jdoe@example.com", exclude_user_id=other.id) is True

    @pytest.mark.asyncio
    async def test_repeated_checks_agree(self, test_database):
        await _save(test_database, create_test_user())

        async with test_database.get_session() as session:
            repo = UserRepository(session=session)
            first = await repo.username_exists("JDOE")
            second = await repo.username_exists("JDOE")

        assert first is second is True


@pytest.mark.integration
class TestUserRepositoryRoles:
    @pytest.mark.asyncio
    async def test_add_role_is_idempotent(self, test_database):
        user = create_test_user()
        await _save(test_database, user)

        async with test_database.get_session() as session:
            repo = UserRepository(session=session)
            await repo.add_role(user.id, "Developer")
            await repo.add_role(user.id, "developer")

        async with test_database.get_session() as session:
            roles = await UserRepository(session=session).get_roles(user.id)

        assert roles == ["Developer", "User"]


@pytest.mark.integration
class TestUserRepositoryPing:
    @pytest.mark.asyncio
    async def test_ping_succeeds_on_empty_store(self, test_database):
        async with test_database.get_session() as session:
            await UserRepository(session=session).ping()
