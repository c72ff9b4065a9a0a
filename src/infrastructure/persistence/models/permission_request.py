"""Permission request database model."""

from uuid import UUID

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.models.user import User


class PermissionRequest(BaseModel):
    """Pending role request.

    Rows are deleted on approval or rejection, so every row is pending.

    Foreign Keys:
        - user_id: References users(id) ON DELETE CASCADE
    """

    __tablename__ = "permission_requests"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    requested_role: Mapped[str] = mapped_column(String(50), nullable=False)
    request_message: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_by: Mapped[str] = mapped_column(String(50), nullable=False)

    user: Mapped[User] = relationship(lazy="selectin")
