"""Structured logging port.

A call is a short constant message plus key=value context, e.g.

    logger.info("Logs batch deleted", deleted_count=3)
    logger.bind(store="identity").warning("Health check failed")

Passwords and tokens (access or refresh) never go into context.
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Implemented by ConsoleAdapter (structlog)."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at error level.

        When error is given the adapter adds error_type and error_message.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """New logger carrying context on every event; self is unchanged."""
        ...
