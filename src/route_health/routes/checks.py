"""Health checks backed by the route context."""

from collections.abc import Iterable

from ..domain.exceptions import CheckEvaluationError
from ..domain.models import CheckResult, HealthGroup, ServiceStatus
from ..health.checks import HealthCheck
from .context import RouteContext


class ContextHealthCheck(HealthCheck):
    """UP while the route context is started."""

    def __init__(
        self,
        context: RouteContext,
        name: str = "context",
        groups: Iterable[HealthGroup] = (HealthGroup.GENERAL,),
    ):
        super().__init__(name, groups)
        self.context = context

    async def check_health(self) -> CheckResult:
        status = self.context.status
        data = {"context.name": self.context.name, "context.status": status.value}
        if status == ServiceStatus.STARTED:
            return CheckResult.up(data)
        return CheckResult.down(data)


class RoutesHealthCheck(HealthCheck):
    """DOWN when any route is not started, reporting the first such route."""

    def __init__(
        self,
        context: RouteContext,
        name: str = "camel-routes",
        groups: Iterable[HealthGroup] = (HealthGroup.READINESS,),
    ):
        super().__init__(name, groups)
        self.context = context

    async def check_health(self) -> CheckResult:
        routes = self.context.routes()
        for route in routes:
            if route.status != ServiceStatus.STARTED:
                raise CheckEvaluationError(
                    f"Route '{route.route_id}' is {route.status.value}",
                    {"route.id": route.route_id, "route.status": route.status.value},
                )
        return CheckResult.up({"route.count": len(routes)})


class ConsumersHealthCheck(HealthCheck):
    """DOWN when any route consumer is not running."""

    def __init__(
        self,
        context: RouteContext,
        name: str = "camel-consumers",
        groups: Iterable[HealthGroup] = (HealthGroup.READINESS,),
    ):
        super().__init__(name, groups)
        self.context = context

    async def check_health(self) -> CheckResult:
        routes = self.context.routes()
        for route in routes:
            if not route.consumer_running:
                raise CheckEvaluationError(
                    f"Consumer of route '{route.route_id}' is not running",
                    {
                        "route.id": route.route_id,
                        "route.status": route.status.value,
                        "consumer.endpoint": route.endpoint_uri,
                    },
                )
        return CheckResult.up({"consumer.count": len(routes)})
