"""Exception handlers registered on the FastAPI app.

Expected failures never reach these: routes turn Verdicts and Failures into
responses themselves (see ErrorResponseBuilder). What arrives here is

    HTTPException           raised by the auth dependencies (401/403) and
                            by Starlette for unknown routes/methods
    RequestValidationError  body or query that could not be parsed
    Exception               a collaborator fault (store down, bug), 500

All three answer with ProblemDetails carrying the request's trace ID.
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.config import settings
from src.core.container import get_logger
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

_TITLES: dict[int, str] = {
    400: "Bad Request",
    401: "Authentication Required",
    403: "Access Denied",
    404: "Resource Not Found",
    405: "Method Not Allowed",
    409: "Resource Conflict",
    422: "Validation Failed",
    500: "Internal Server Error",
    503: "Service Unavailable",
}


def _problem_response(
    request: Request,
    status_code: int,
    detail: str,
    errors: list[ErrorDetail] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    title = _TITLES.get(status_code, "Error")
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{title.lower().replace(' ', '_')}",
        title=title,
        status=status_code,
        detail=detail,
        instance=request.url.path,
        errors=errors or None,
        # set by TraceMiddleware; survives after its context var is reset
        trace_id=getattr(request.state, "trace_id", None),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Keep the exception's status and headers (WWW-Authenticate on 401)."""
    assert isinstance(exc, StarletteHTTPException)
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return _problem_response(request, exc.status_code, detail, headers=exc.headers)


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """One ErrorDetail per parse error; field is the dotted location.

    GET /api/v1/logs?page=abc gives field "query.page", code "int_parsing".
    """
    assert isinstance(exc, RequestValidationError)
    errors = [
        ErrorDetail(
            field=".".join(str(part) for part in error.get("loc", ()) if part != "body")
            or "unknown",
            code=error.get("type", "validation_error"),
            message=error.get("msg", "Validation failed"),
        )
        for error in exc.errors()
    ]
    return _problem_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Request validation failed. Check 'errors' for details.",
        errors=errors,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the fault and answer 500 without leaking its message."""
    get_logger().error(
        "Unhandled exception",
        error=exc,
        trace_id=getattr(request.state, "trace_id", None),
        request_path=request.url.path,
        request_method=request.method,
    )
    return _problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred. Please contact support with the trace ID.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
