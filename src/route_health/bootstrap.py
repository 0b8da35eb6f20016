"""Wiring of the route context and the default health checks."""

from dataclasses import dataclass

from .config.settings import ApplicationSettings, HealthSettings
from .domain.models import HealthGroup
from .health import (
    HealthService,
    StaticHealthCheck,
    SwitchHealthCheck,
    ThresholdPolicy,
)
from .observability.logging import get_logger
from .observability.metrics import HealthMetrics
from .routes import (
    ConsumersHealthCheck,
    ContextHealthCheck,
    RouteContext,
    RoutesHealthCheck,
)

logger = get_logger(__name__)

FAILING_CHECK = "failing-check"
FAILURE_THRESHOLD_CHECK = "failure-threshold"


@dataclass
class Runtime:
    """Everything the HTTP layer needs."""

    settings: ApplicationSettings
    context: RouteContext
    health: HealthService
    metrics: HealthMetrics | None = None

    def switch(self, name: str) -> SwitchHealthCheck:
        """Get a switchable check by name."""
        check = self.health.registry.get(name)
        if not isinstance(check, SwitchHealthCheck):
            raise TypeError(f"Health check '{name}' is not switchable")
        return check


def build_route_context(settings: ApplicationSettings) -> RouteContext:
    """Create and start the route context from settings."""
    context = RouteContext(settings.routes.context_name)
    for route_id in settings.routes.route_ids:
        context.add_route(route_id, f"{settings.routes.endpoint_scheme}:{route_id}")
    context.start()
    return context


def register_default_checks(
    service: HealthService, context: RouteContext, health_settings: HealthSettings
) -> None:
    """Register the context, route and probe checks.

    Raises:
        DuplicateCheckError: If a default check name is already taken
    """
    threshold = ThresholdPolicy(
        failure_threshold=health_settings.failure_threshold,
        window=health_settings.failure_window,
        success_threshold=health_settings.success_threshold,
    )

    service.register(ContextHealthCheck(context))
    service.register(RoutesHealthCheck(context))
    service.register(ConsumersHealthCheck(context))
    service.register(
        StaticHealthCheck("test-liveness", (HealthGroup.LIVENESS,), {"isLive": True})
    )
    service.register(
        StaticHealthCheck(
            "test-readiness", (HealthGroup.READINESS,), {"isReady": True}
        )
    )

    # Simulated failures, disabled until switched on through the admin API
    service.register(
        SwitchHealthCheck(
            FAILING_CHECK,
            (HealthGroup.LIVENESS, HealthGroup.READINESS),
            passing=False,
            enabled=False,
        )
    )
    service.register(
        SwitchHealthCheck(
            FAILURE_THRESHOLD_CHECK,
            (HealthGroup.GENERAL,),
            passing=False,
            enabled=False,
            threshold=threshold,
        )
    )


def build_runtime(settings: ApplicationSettings) -> Runtime:
    """Build the route context and health service for an application."""
    metrics = HealthMetrics() if settings.observability.metrics_enabled else None
    service = HealthService(
        metrics=metrics, default_timeout=settings.health.check_timeout
    )
    context = build_route_context(settings)
    register_default_checks(service, context, settings.health)

    logger.info(
        "Health runtime ready",
        context_name=context.name,
        routes=[route.route_id for route in context.routes()],
        checks=service.registry.names(),
    )
    return Runtime(settings=settings, context=context, health=service, metrics=metrics)
