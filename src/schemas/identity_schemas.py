"""Identity request/response schemas.

Pydantic models for HTTP parsing and serialization only. Field rules
(lengths, formats, allowed roles) are enforced by the application
validators so every rule failure reports the same messages regardless of
entry point.

RESTful Endpoints:
    POST   /api/v1/users                               - Register
    GET    /api/v1/users/email-exists                  - Email availability
    GET    /api/v1/users/username-exists               - Username availability
    POST   /api/v1/sessions                            - Login
    DELETE /api/v1/sessions/current                    - Logout
    GET    /api/v1/permission-requests                 - List pending requests
    POST   /api/v1/permission-requests                 - Request roles
    GET    /api/v1/permission-requests/available-roles - Requestable roles
    POST   /api/v1/permission-requests/{id}/approval   - Approve
    DELETE /api/v1/permission-requests/{id}            - Reject
    POST   /api/v1/permission-requests/bulk-approvals  - Approve many
    POST   /api/v1/permission-requests/bulk-rejections - Reject many
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Users
# =============================================================================


class UserCreateRequest(BaseModel):
    """POST /api/v1/users (201 Created)."""

    username: str = Field("", description="Login name (3-50 chars, A-Z a-z 0-9 _)")
    email: str = Field("", description="Email address")
    password: str = Field("", description="Password (8+ chars, mixed case, digit)")
    full_name: str | None = Field(None, description="Display name")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "jdoe",
                "email": "jdoe@example.com",
                "password": "SecurePass123",
                "full_name": "Jane Doe",
            }
        }
    )


class UserCreateResponse(BaseModel):
    id: UUID = Field(..., description="Created user ID")
    message: str = Field(default="User registered successfully.")


class ExistsResponse(BaseModel):
    """Availability check result."""

    exists: bool


# =============================================================================
# Sessions
# =============================================================================


class SessionCreateRequest(BaseModel):
    """POST /api/v1/sessions (201 Created)."""

    username_or_email: str = Field("", description="Username or email address")
    password: str = Field("", description="Account password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"username_or_email": "jdoe", "password": "SecurePass123"}
        }
    )


class SessionCreateResponse(BaseModel):
    access_token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="Opaque refresh token")
    token_type: str = Field(default="bearer")
    expires_in: int = Field(..., description="Access token lifetime in seconds")


class SessionDeleteRequest(BaseModel):
    """DELETE /api/v1/sessions/current (204 No Content)."""

    refresh_token: str = Field("", description="Refresh token to revoke")


class TokenCreateRequest(BaseModel):
    """POST /api/v1/tokens (201 Created); answered with SessionCreateResponse."""

    refresh_token: str = Field("", description="Refresh token to exchange")


# =============================================================================
# Permission requests
# =============================================================================


class PermissionRequestCreateRequest(BaseModel):
    """POST /api/v1/permission-requests (201 Created)."""

    requested_roles: list[str] = Field(
        default_factory=list,
        description="Roles to request",
        examples=[["Developer"]],
    )
    request_message: str | None = Field(None, description="Justification")


class PermissionRequestCreateResponse(BaseModel):
    created_count: int = Field(..., description="Requests created (held and pending roles are skipped)")


class PermissionRequestResponse(BaseModel):
    """One pending permission request."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    username: str | None = None
    requested_role: str
    request_message: str | None = None
    created_by: str
    created_at: datetime


class AvailableRolesResponse(BaseModel):
    roles: list[str]


class PermissionRequestBulkRequest(BaseModel):
    """Bulk approval/rejection body."""

    request_ids: list[UUID] = Field(default_factory=list)


class BulkOperationResponse(BaseModel):
    processed_count: int = Field(..., description="Requests approved or rejected")
