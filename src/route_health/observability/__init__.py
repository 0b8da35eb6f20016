"""Observability infrastructure for logging, metrics and tracing."""

from .logging import LogFormat, LogLevel, get_logger, setup_logging
from .metrics import HealthMetrics
from .tracing import TracingConfig, get_tracer, setup_tracing, trace_span

__all__ = [
    "setup_logging",
    "get_logger",
    "LogLevel",
    "LogFormat",
    "HealthMetrics",
    "TracingConfig",
    "get_tracer",
    "setup_tracing",
    "trace_span",
]
