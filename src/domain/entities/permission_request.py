"""Permission request entity.

A pending request by a user to be granted an additional role. Approving a
request grants the role and removes the request; rejecting only removes it.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class PermissionRequest:
    """Pending role elevation request.

    Attributes:
        id: Request identifier.
        user_id: Requesting user.
        requested_role: Role name asked for.
        request_message: Optional justification from the user.
        created_by: Username that submitted the request.
        created_at: Submission time.
        username: Requesting user's username (populated for listings).
    """

    id: UUID
    user_id: UUID
    requested_role: str
    created_by: str
    created_at: datetime
    request_message: str | None = None
    username: str | None = None
