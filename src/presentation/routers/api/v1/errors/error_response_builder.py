"""Build RFC 7807 responses from handler outcomes.

Handlers report expected failures as data: a validator Verdict before the
handler runs, or a DomainError inside a Failure. This module turns either
into a JSONResponse.

Exports:
    ErrorResponseBuilder
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.domain.validators import Verdict
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

_STATUS_BY_ERROR: dict[type[DomainError], tuple[int, str]] = {
    ValidationError: (status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation Failed"),
    NotFoundError: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    ConflictError: (status.HTTP_409_CONFLICT, "Resource Conflict"),
    AuthenticationError: (status.HTTP_401_UNAUTHORIZED, "Authentication Required"),
}


class ErrorResponseBuilder:
    """Convert verdicts and domain errors into Problem Details responses.

    Example:
        >>> verdict = logout_validator.validate(Logout(refresh_token=""))
        >>> if verdict:
        ...     return ErrorResponseBuilder.from_verdict(verdict, request)
    """

    @staticmethod
    def from_verdict(verdict: Verdict, request: Request) -> JSONResponse:
        """422 response listing every failing field."""
        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{ErrorCode.VALIDATION_FAILED.value}",
            title="Validation Failed",
            status=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Request validation failed. Check 'errors' for details.",
            instance=str(request.url.path),
            errors=[
                ErrorDetail(
                    field=failure.field or "request",
                    code=failure.code.value,
                    message=failure.message,
                )
                for failure in verdict
            ],
            trace_id=get_trace_id(),
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def from_domain_error(error: DomainError, request: Request) -> JSONResponse:
        """Map a Failure's error to its HTTP status.

        NotFoundError is 404, ConflictError 409, AuthenticationError 401;
        anything else is treated as a bad request.
        """
        status_code, title = _STATUS_BY_ERROR.get(
            type(error), (status.HTTP_400_BAD_REQUEST, "Bad Request")
        )
        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=title,
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            trace_id=get_trace_id(),
        )
        if isinstance(error, ValidationError):
            problem.errors = [
                ErrorDetail(
                    field=error.field or "request",
                    code=error.code.value,
                    message=error.message,
                )
            ]

        headers = (
            {"WWW-Authenticate": "Bearer"}
            if status_code == status.HTTP_401_UNAUTHORIZED
            else None
        )
        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            headers=headers,
        )
