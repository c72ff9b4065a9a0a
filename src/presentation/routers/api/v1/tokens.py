"""Tokens resource router.

Endpoints:
    POST /api/v1/tokens - Exchange a refresh token for a new pair (rotation)
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands import RefreshTokens
from src.application.commands.handlers.refresh_tokens_handler import (
    RefreshTokensHandler,
)
from src.application.validators import refresh_tokens_validator
from src.core.container import get_refresh_tokens_handler
from src.core.result import Failure, Success
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas import SessionCreateResponse, TokenCreateRequest

router = APIRouter(prefix="/tokens", tags=["Tokens"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=SessionCreateResponse,
    responses={
        401: {"description": "Invalid, expired or revoked token", "model": ProblemDetails},
        422: {"description": "Validation failed", "model": ProblemDetails},
    },
    summary="Create tokens",
)
async def create_tokens(
    request: Request,
    data: TokenCreateRequest,
    handler: RefreshTokensHandler = Depends(get_refresh_tokens_handler),
) -> SessionCreateResponse | JSONResponse:
    """Exchange a refresh token for a new access/refresh pair.

    POST /api/v1/tokens → 201 Created

    The presented refresh token is revoked; the access token carries the
    roles the user holds now.
    """
    command = RefreshTokens(refresh_token=data.refresh_token)
    if verdict := refresh_tokens_validator.validate(command):
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
