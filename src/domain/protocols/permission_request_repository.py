"""PermissionRequestRepository protocol for role request persistence."""

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID

from src.domain.entities.permission_request import PermissionRequest


class PermissionRequestRepository(Protocol):
    """Pending permission request storage.

    Approved and rejected requests are deleted; only pending requests exist.

    Implementations:
        - PermissionRequestRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
    """

    async def get_all(self) -> list[PermissionRequest]:
        """Return all pending requests, newest first, with username populated."""
        ...

    async def get_by_id(self, request_id: UUID) -> PermissionRequest | None:
        """Return request by ID, or None."""
        ...

    async def get_by_ids(self, request_ids: Sequence[UUID]) -> list[PermissionRequest]:
        """Return the requests matching request_ids. Unknown IDs are skipped."""
        ...

    async def get_by_user_id(self, user_id: UUID) -> list[PermissionRequest]:
        """Return pending requests created by user_id."""
        ...

    async def create(self, request: PermissionRequest) -> None:
        """Persist a new request."""
        ...

    async def delete(self, request_id: UUID) -> None:
        """Delete a request by ID. Deleting an unknown ID is a no-op."""
        ...

    async def delete_range(self, request_ids: Sequence[UUID]) -> None:
        """Delete all requests in request_ids in one statement.

        Args:
            request_ids: Request IDs to delete. Unknown IDs are ignored.
        """
        ...
