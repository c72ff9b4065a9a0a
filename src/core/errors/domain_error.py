"""Base type for errors carried inside a Failure.

These are values, not exceptions: a handler returns
Failure(error=NotFoundError(...)) and the route maps the subclass to a
status code. Faults that should abort the request still raise.
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Expected failure of a command or query.

    Attributes:
        code: Stable machine-readable code; also the problem type slug.
        message: Text shown to the client as the problem detail.
        details: Extra key/value context.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
