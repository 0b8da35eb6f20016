"""Tests for structured logging helpers."""

import json

import pytest
import structlog

from route_health.observability.logging import (
    ConsoleFormatter,
    CorrelationIDProcessor,
    JSONFormatter,
    StructuredFormatter,
    configure_from_settings,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)


class TestCorrelation:
    """Test correlation ID handling."""

    def test_set_and_reset(self):
        """Test a correlation ID is scoped by its token."""
        assert get_correlation_id() is None

        token = set_correlation_id("req-1")
        assert get_correlation_id() == "req-1"

        reset_correlation_id(token)
        assert get_correlation_id() is None

    def test_processor_adds_id(self):
        """Test the processor copies the current ID into the event."""
        processor = CorrelationIDProcessor()
        token = set_correlation_id("req-2")
        try:
            event = processor(None, "info", {"event": "hello"})
        finally:
            reset_correlation_id(token)

        assert event["correlation_id"] == "req-2"

    def test_processor_without_id(self):
        """Test events are untouched outside a request."""
        event = CorrelationIDProcessor()(None, "info", {"event": "hello"})

        assert "correlation_id" not in event

    def test_generate(self):
        """Test generated IDs are unique."""
        assert generate_correlation_id() != generate_correlation_id()


class TestFormatters:
    """Test log formatters."""

    def test_json_formatter(self):
        """Test JSON output carries level and extra fields."""
        output = JSONFormatter()(
            None, "warning", {"event": "Health check timed out", "check_name": "db"}
        )

        record = json.loads(output)
        assert record["level"] == "WARNING"
        assert record["event"] == "Health check timed out"
        assert record["check_name"] == "db"
        assert "timestamp" in record

    def test_structured_formatter(self):
        """Test key-value output."""
        output = StructuredFormatter()(
            None,
            "info",
            {"event": "Route added", "logger": "routes", "route_id": "r1"},
        )

        assert output == (
            "level=INFO | logger=routes | message=Route added | route_id=r1"
        )

    def test_console_formatter_without_colors(self):
        """Test plain console output."""
        output = ConsoleFormatter(colors=False)(
            None,
            "error",
            {"event": "Health check failed", "groups": ["liveness"]},
        )

        assert output == 'ERROR Health check failed groups=["liveness"]'


class TestSetupLogging:
    """Test the processor chain built from settings values."""

    @pytest.fixture(autouse=True)
    def restore_structlog(self):
        """Put the default structlog configuration back afterwards."""
        yield
        structlog.reset_defaults()

    def test_debug_adds_caller_info(self):
        """Test debug level records the call site and ends in the renderer."""
        configure_from_settings("DEBUG", "structured")

        processors = structlog.get_config()["processors"]
        assert any(
            isinstance(p, structlog.processors.CallsiteParameterAdder)
            for p in processors
        )
        assert any(isinstance(p, CorrelationIDProcessor) for p in processors)
        assert isinstance(processors[-1], StructuredFormatter)

    def test_json_without_caller_info(self):
        """Test other levels skip call site details."""
        configure_from_settings("WARNING", "json")

        processors = structlog.get_config()["processors"]
        assert not any(
            isinstance(p, structlog.processors.CallsiteParameterAdder)
            for p in processors
        )
        assert isinstance(processors[-1], JSONFormatter)
