"""Evaluation of registered health checks."""

import asyncio
import time
from typing import Any

from ..domain.exceptions import CheckEvaluationError, CheckTimeoutError
from ..domain.models import CheckEntry, CheckResult, HealthGroup
from ..observability.logging import get_logger
from ..observability.metrics import HealthMetrics
from ..observability.tracing import trace_span
from .registry import CheckRegistry, Registration

logger = get_logger(__name__)


class CheckEvaluator:
    """Runs the enabled checks of a scope and collects their entries."""

    def __init__(
        self,
        registry: CheckRegistry,
        default_timeout: float = 1.0,
        metrics: HealthMetrics | None = None,
    ):
        """Initialize check evaluator.

        Args:
            registry: Registry to read checks from
            default_timeout: Timeout in seconds for checks without their own
            metrics: Optional metrics collector
        """
        self.registry = registry
        self.default_timeout = default_timeout
        self.metrics = metrics

    async def evaluate(self, group: HealthGroup | None = None) -> list[CheckEntry]:
        """Evaluate every enabled check of a group, in registration order.

        Args:
            group: Group to evaluate, every group when None

        Returns:
            One entry per evaluated registration
        """
        entries = []
        for registration in self.registry.list(group):
            if not registration.check.enabled:
                continue
            entries.append(await self.evaluate_registration(registration))
        return entries

    async def evaluate_registration(self, registration: Registration) -> CheckEntry:
        """Evaluate a single registration. Never raises for check faults."""
        check = registration.check
        start_time = time.perf_counter()

        async with trace_span(
            "health.check",
            {"health.check.name": check.name, "health.group": registration.group.value},
        ) as span:
            raw = await self._invoke(registration)
            result = registration.tracker.apply(raw) if registration.tracker else raw
            span.set_attribute("health.status", result.status.value)

        duration = time.perf_counter() - start_time
        if self.metrics is not None:
            self.metrics.record_evaluation(
                check.name, registration.group.value, result.status.value, duration
            )

        logger.debug(
            "Evaluated health check",
            check_name=check.name,
            group=registration.group.value,
            raw_status=raw.status.value,
            status=result.status.value,
            duration_ms=round(duration * 1000, 3),
        )

        return CheckEntry(
            name=check.name,
            group=registration.group,
            status=result.status,
            data=result.data,
        )

    async def _invoke(self, registration: Registration) -> CheckResult:
        check = registration.check
        timeout = check.timeout if check.timeout is not None else self.default_timeout

        try:
            result = await asyncio.wait_for(check.check_health(), timeout=timeout)
        except TimeoutError:
            error = CheckTimeoutError(check.name, timeout)
            logger.warning(
                "Health check timed out", check_name=check.name, timeout=timeout
            )
            return CheckResult.down({"error": error.message})
        except CheckEvaluationError as e:
            logger.info(
                "Health check reported failure", check_name=check.name, error=e.message
            )
            data: dict[str, Any] = dict(e.details)
            data["error"] = e.message
            return CheckResult.down(data)
        except Exception as e:
            logger.error(
                "Health check failed",
                check_name=check.name,
                error_type=type(e).__name__,
                error=str(e),
            )
            return CheckResult.down({"error": str(e) or type(e).__name__})

        if not isinstance(result, CheckResult):
            logger.error(
                "Health check returned an invalid result",
                check_name=check.name,
                result_type=type(result).__name__,
            )
            return CheckResult.down(
                {"error": f"Invalid result type: {type(result).__name__}"}
            )
        return result
