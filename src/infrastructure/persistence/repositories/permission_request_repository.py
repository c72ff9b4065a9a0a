"""PermissionRequestRepository - SQLAlchemy implementation.

Maps between domain PermissionRequest entities and PermissionRequestModel.
"""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.permission_request import PermissionRequest
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.permission_request import (
    PermissionRequest as PermissionRequestModel,
)


class PermissionRequestRepository:
    """SQLAlchemy implementation of PermissionRequestRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_all(self) -> list[PermissionRequest]:
        """Return all pending requests, newest first."""
        stmt = select(PermissionRequestModel).order_by(
            PermissionRequestModel.created_at.desc()
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def get_by_id(self, request_id: UUID) -> PermissionRequest | None:
        stmt = select(PermissionRequestModel).where(
            PermissionRequestModel.id == request_id
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def get_by_ids(self, request_ids: Sequence[UUID]) -> list[PermissionRequest]:
        if not request_ids:
            return []
        stmt = select(PermissionRequestModel).where(
            PermissionRequestModel.id.in_(request_ids)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def get_by_user_id(self, user_id: UUID) -> list[PermissionRequest]:
        stmt = (
            select(PermissionRequestModel)
            .where(PermissionRequestModel.user_id == user_id)
            .order_by(PermissionRequestModel.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create(self, request: PermissionRequest) -> None:
        self.session.add(self._to_model(request))
        await self.session.flush()

    async def delete(self, request_id: UUID) -> None:
        await self.session.execute(
            delete(PermissionRequestModel).where(
                PermissionRequestModel.id == request_id
            )
        )

    async def delete_range(self, request_ids: Sequence[UUID]) -> None:
        """Delete all listed requests with one DELETE ... WHERE id IN (...)."""
        if not request_ids:
            return
        await self.session.execute(
            delete(PermissionRequestModel).where(
                PermissionRequestModel.id.in_(request_ids)
            )
        )

    def _to_domain(self, model: PermissionRequestModel) -> PermissionRequest:
        return PermissionRequest(
            id=model.id,
            user_id=model.user_id,
            requested_role=model.requested_role,
            request_message=model.request_message,
            created_by=model.created_by,
            created_at=as_utc(model.created_at),
            username=model.user.username if model.user else None,
        )

    def _to_model(self, request: PermissionRequest) -> PermissionRequestModel:
        return PermissionRequestModel(
            id=request.id,
            user_id=request.user_id,
            requested_role=request.requested_role,
            request_message=request.request_message,
            created_by=request.created_by,
            created_at=request.created_at,
        )
