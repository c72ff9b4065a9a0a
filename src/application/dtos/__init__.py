"""Data Transfer Objects (DTOs) for application layer.

DTOs are response/result dataclasses returned by command and query handlers.
They are NOT API schemas (Pydantic models live in the presentation layer).

Usage:
    from src.application.dtos import AuthTokens, PagedResult
"""

from src.application.dtos.identity_dtos import AuthTokens
from src.application.dtos.paging_dtos import PagedResult

__all__ = [
    "AuthTokens",
    "PagedResult",
]
