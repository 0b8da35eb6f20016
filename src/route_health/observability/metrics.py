"""Prometheus metrics for health check evaluation."""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)
from prometheus_client.core import CollectorRegistry as PrometheusRegistry


class HealthMetrics:
    """Collects per-check evaluation metrics in a private registry."""

    def __init__(self, registry: PrometheusRegistry | None = None):
        self.registry = registry or PrometheusRegistry()

        self.evaluations_total = Counter(
            "health_check_evaluations_total",
            "Total health check evaluations",
            ["check", "group", "status"],
            registry=self.registry,
        )
        self.evaluation_duration_seconds = Histogram(
            "health_check_duration_seconds",
            "Health check evaluation duration in seconds",
            ["check"],
            buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
            registry=self.registry,
        )
        self.report_status = Gauge(
            "health_status",
            "Aggregate health status per scope (1 = UP, 0 = DOWN)",
            ["scope"],
            registry=self.registry,
        )

    def record_evaluation(
        self, check: str, group: str, status: str, duration_seconds: float
    ) -> None:
        """Record one evaluated check."""
        self.evaluations_total.labels(check=check, group=group, status=status).inc()
        self.evaluation_duration_seconds.labels(check=check).observe(duration_seconds)

    def record_report(self, scope: str, is_up: bool) -> None:
        """Record the folded status of a report."""
        self.report_status.labels(scope=scope).set(1 if is_up else 0)

    def export(self) -> tuple[bytes, str]:
        """Render the registry in the Prometheus text format."""
        return generate_latest(self.registry), CONTENT_TYPE_LATEST
