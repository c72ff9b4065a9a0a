"""Sessions resource router.

Endpoints:
    POST   /api/v1/sessions         - Create session (login)
    DELETE /api/v1/sessions/current - Delete current session (logout)
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, Response

from src.application.commands import Login, Logout
from src.application.commands.handlers.login_handler import LoginHandler
from src.application.commands.handlers.logout_handler import LogoutHandler
from src.application.validators import login_validator, logout_validator
from src.core.container import get_login_handler, get_logout_handler
from src.core.result import Failure, Success
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas import SessionCreateRequest, SessionCreateResponse, SessionDeleteRequest

router = APIRouter(prefix="/sessions", tags=["Sessions"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=SessionCreateResponse,
    responses={
        401: {"description": "Invalid credentials", "model": ProblemDetails},
        422: {"description": "Validation failed", "model": ProblemDetails},
    },
    summary="Create session",
)
async def create_session(
    request: Request,
    data: SessionCreateRequest,
    handler: LoginHandler = Depends(get_login_handler),
) -> SessionCreateResponse | JSONResponse:
    """Authenticate with username or email and issue a token pair.

    POST /api/v1/sessions → 201 Created
    """
    command = Login(username_or_email=data.username_or_email, password=data.password)
    if verdict := login_validator.validate(command):
        return ErrorResponseBuilder.from_verdict(verdict, request)

    match await handler.handle(command):
        case Success(value=tokens):
            return SessionCreateResponse(
                access_token=tokens.access_token,
                refresh_token=tokens.refresh_token,
                token_type=tokens.token_type,
                expires_in=tokens.expires_in,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.delete(
    "/current",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        404: {"description": "Token not found or already revoked", "model": ProblemDetails},
        422: {"description": "Validation failed", "model": ProblemDetails},
    },
    summary="Delete current session",
)
async def delete_current_session(
    request: Request,
    data: SessionDeleteRequest,
    handler: LogoutHandler = Depends(get_logout_handler),
) -> Response:
    """Revoke the refresh token (logout).

    The access token stays valid until it expires.
    """
    command = Logout(refresh_token=data.refresh_token)
    if verdict := logout_validator.validate(command):
        return ErrorResponseBuilder.from_verdict(verdict, request)

    match await handler.handle(command):
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
