"""Unit tests for the structlog console adapter."""

import json

import pytest
import structlog

from src.infrastructure.logging.console_adapter import ConsoleAdapter


def _events(capsys):
    return [json.loads(line) for line in capsys.readouterr().out.splitlines() if line]


@pytest.mark.unit
class TestConsoleAdapterJson:
    def test_info_renders_event_and_context(self, capsys):
        logger = ConsoleAdapter(use_json=True)

        logger.info("Logs batch deleted", deleted_count=3)

        (event,) = _events(capsys)
        assert event["event"] == "Logs batch deleted"
        assert event["level"] == "info"
        assert event["deleted_count"] == 3
        assert "timestamp" in event

    def test_error_adds_error_fields(self, capsys):
        logger = ConsoleAdapter(use_json=True)

        logger.error("Unhandled exception", error=RuntimeError("boom"))

        (event,) = _events(capsys)
        assert event["error_type"] == "RuntimeError"
        assert event["error_message"] == "boom"

    def test_bind_returns_new_logger(self, capsys):
        logger = ConsoleAdapter(use_json=True)

        logger.bind(store="identity").warning("Health check failed")
        logger.warning("Unbound")

        bound, unbound = _events(capsys)
        assert bound["store"] == "identity"
        assert "store" not in unbound

    def test_contextvars_are_merged(self, capsys):
        logger = ConsoleAdapter(use_json=True)
        structlog.contextvars.bind_contextvars(trace_id="trace-123")
        try:
            logger.info("Inside request")
        finally:
            structlog.contextvars.clear_contextvars()

        (event,) = _events(capsys)
        assert event["trace_id"] == "trace-123"

    def test_level_filtering(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="WARNING")

        logger.info("dropped")
        logger.warning("kept")

        assert [e["event"] for e in _events(capsys)] == ["kept"]
