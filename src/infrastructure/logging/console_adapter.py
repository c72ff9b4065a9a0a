"""structlog adapter writing one event per line to stdout.

JSON lines outside development, colored key=value lines in development.
Whatever TraceMiddleware put into structlog's contextvars (trace_id) ends
up on every event without the caller passing it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _processors(use_json: bool) -> list[structlog.types.Processor]:
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        renderer,
    ]


class ConsoleAdapter:
    """LoggerProtocol over structlog.

    Args:
        use_json: render JSON lines instead of the dev console format.
        level: lowest level emitted; unknown names fall back to INFO.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        threshold = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
        structlog.configure(
            processors=_processors(use_json),
            wrapper_class=structlog.make_filtering_bound_logger(threshold),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger: Any = structlog.get_logger()

    @classmethod
    def _wrapping(cls, logger: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = logger
        return adapter

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        if error is not None:
            context.update(error_type=type(error).__name__, error_message=str(error))
        self._logger.error(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        return self._wrapping(self._logger.bind(**context))
