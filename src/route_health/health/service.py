"""Health service facade used by the HTTP layer."""

from collections.abc import Iterable

from ..domain.models import AggregateReport, HealthGroup, HealthStatus
from ..observability.logging import get_logger
from ..observability.metrics import HealthMetrics
from ..observability.tracing import trace_span
from .aggregator import AggregateStatusCalculator
from .checks import HealthCheck
from .evaluator import CheckEvaluator
from .registry import CheckRegistry, Registration

logger = get_logger(__name__)


class HealthService:
    """Wires the registry, evaluator and aggregator together."""

    def __init__(
        self,
        registry: CheckRegistry | None = None,
        evaluator: CheckEvaluator | None = None,
        aggregator: AggregateStatusCalculator | None = None,
        metrics: HealthMetrics | None = None,
        default_timeout: float = 1.0,
    ):
        self.registry = registry or CheckRegistry()
        self.metrics = metrics
        self.evaluator = evaluator or CheckEvaluator(
            self.registry, default_timeout=default_timeout, metrics=metrics
        )
        self.aggregator = aggregator or AggregateStatusCalculator()

    def register(
        self, check: HealthCheck, groups: Iterable[HealthGroup] | None = None
    ) -> list[Registration]:
        """Register a health check."""
        return self.registry.register(check, groups)

    def enable(self, name: str, enabled: bool) -> None:
        """Enable or disable a health check."""
        self.registry.enable(name, enabled)

    async def report(self, group: HealthGroup | None = None) -> AggregateReport:
        """Evaluate a scope and fold the results."""
        scope = group.value if group is not None else "all"
        async with trace_span("health.report", {"health.scope": scope}) as span:
            entries = await self.evaluator.evaluate(group)
            report = self.aggregator.aggregate(entries)
            span.set_attribute("health.status", report.status.value)

        if self.metrics is not None:
            self.metrics.record_report(scope, report.is_up)

        if not report.is_up:
            failing = [e.name for e in report.checks if e.status == HealthStatus.DOWN]
            logger.info("Health report is DOWN", scope=scope, failing_checks=failing)
        return report

    async def health(self) -> AggregateReport:
        """Report over every registered check."""
        return await self.report(None)

    async def liveness(self) -> AggregateReport:
        """Report over liveness checks."""
        return await self.report(HealthGroup.LIVENESS)

    async def readiness(self) -> AggregateReport:
        """Report over readiness checks."""
        return await self.report(HealthGroup.READINESS)
