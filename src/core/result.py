"""Result types for railway-oriented programming.

Handlers return a Result instead of raising when the outcome is expected:
a missing refresh token, an already-processed permission request or a
taken username are Failures, not exceptions. Unexpected collaborator faults
still raise and are handled by the hosting layer.

Usage:
    result = await logout_handler.handle(Logout(refresh_token=token))
    match result:
        case Success():
            ...
        case Failure(error=reason):
            print(f"Logout failed: {reason}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value (None for commands with no payload).
    """

    value: T = None  # type: ignore[assignment]


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: Human-readable reason or DomainError describing the failure.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
