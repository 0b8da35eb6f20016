"""Distributed tracing configuration and span helpers."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.trace import Span, Status, StatusCode, Tracer

from .logging import get_logger

logger = get_logger(__name__)

TRACER_NAME = "route_health"


class TracingConfig:
    """Configuration for distributed tracing."""

    def __init__(
        self,
        service_name: str = "route-health-app",
        service_version: str = "0.1.0",
        environment: str = "development",
        exporter_type: str = "console",
    ):
        self.service_name = service_name
        self.service_version = service_version
        self.environment = environment
        self.exporter_type = exporter_type

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "service_name": self.service_name,
            "service_version": self.service_version,
            "environment": self.environment,
            "exporter_type": self.exporter_type,
        }


def setup_tracing(config: TracingConfig) -> TracerProvider:
    """Install a tracer provider exporting spans as configured.

    Only the first provider installed in a process takes effect.
    """
    resource = Resource.create(
        {
            "service.name": config.service_name,
            "service.version": config.service_version,
            "deployment.environment": config.environment,
        }
    )
    tracer_provider = TracerProvider(resource=resource)

    exporter_type = config.exporter_type.lower()
    if exporter_type == "console":
        tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    elif exporter_type != "none":
        logger.warning(
            "Unknown span exporter, spans are not exported", exporter=exporter_type
        )

    trace.set_tracer_provider(tracer_provider)
    logger.info("Tracing setup complete", **config.to_dict())
    return tracer_provider


def get_tracer() -> Tracer:
    """Get the tracer of the application (a no-op one until tracing is set up)."""
    return trace.get_tracer(TRACER_NAME)


@asynccontextmanager
async def trace_span(
    name: str, attributes: dict[str, Any] | None = None
) -> AsyncIterator[Span]:
    """Async context manager running its body inside a span."""
    with get_tracer().start_as_current_span(
        name,
        attributes=attributes,
        record_exception=False,
        set_status_on_exception=False,
    ) as span:
        try:
            yield span
        except Exception as e:
            span.set_status(Status(StatusCode.ERROR, str(e)))
            span.record_exception(e)
            raise
