"""Tests for tracing spans around health evaluation."""

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode

from route_health.domain.models import HealthGroup
from route_health.health import HealthService, StaticHealthCheck, SwitchHealthCheck
from route_health.observability import tracing


@pytest.fixture
def exporter(monkeypatch):
    """Route spans to an in-memory exporter."""
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    monkeypatch.setattr(tracing, "get_tracer", lambda: provider.get_tracer("test"))
    return exporter


class TestTracing:
    """Test spans emitted by the health service."""

    @pytest.mark.asyncio
    async def test_report_and_check_spans(self, exporter):
        """Test one span per report with a child span per check."""
        service = HealthService()
        service.register(StaticHealthCheck("live", (HealthGroup.LIVENESS,)))
        service.register(SwitchHealthCheck("switch", (HealthGroup.LIVENESS,)))

        await service.liveness()

        spans = exporter.get_finished_spans()
        checks = [s for s in spans if s.name == "health.check"]
        (report,) = [s for s in spans if s.name == "health.report"]
        assert [s.attributes["health.check.name"] for s in checks] == ["live", "switch"]
        assert [s.attributes["health.status"] for s in checks] == ["UP", "DOWN"]
        assert all(s.parent.span_id == report.context.span_id for s in checks)
        assert report.attributes["health.scope"] == "liveness"
        assert report.attributes["health.status"] == "DOWN"

    @pytest.mark.asyncio
    async def test_span_records_errors(self, exporter):
        """Test an exception escaping the span marks it as failed."""
        with pytest.raises(RuntimeError):
            async with tracing.trace_span("work"):
                raise RuntimeError("boom")

        (span,) = exporter.get_finished_spans()
        assert span.status.status_code == StatusCode.ERROR
        assert span.events[0].name == "exception"
