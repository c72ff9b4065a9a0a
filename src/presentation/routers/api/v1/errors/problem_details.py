"""RFC 7807 Problem Details models.

RFC 7807: https://tools.ietf.org/html/rfc7807

Exports:
    ErrorDetail: One failing field
    ProblemDetails: Error response body
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One field-level failure (from a validator verdict or request parsing).

    Examples:
        >>> ErrorDetail(
        ...     field="username",
        ...     code="invalid_username",
        ...     message="Username must be between 3 and 50 characters",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 7807 error response.

    Examples:
        >>> ProblemDetails(
        ...     type="http://localhost:8000/errors/log_not_found",
        ...     title="Resource Not Found",
        ...     status=404,
        ...     detail="Log not found",
        ...     instance="/api/v1/logs/0192f7c4-9a1e-7d6b-8c3f-5e2a1b0c9d8e",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/validation_failed"],
    )
    title: str = Field(..., description="Short summary", examples=["Validation Failed"])
    status: int = Field(..., description="HTTP status code", examples=[422])
    detail: str = Field(
        ...,
        description="Explanation specific to this occurrence",
        examples=["Request validation failed. Check 'errors' for details."],
    )
    instance: str = Field(
        ...,
        description="Request path of this occurrence",
        examples=["/api/v1/users"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="Field-level errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
