"""Built-in probe checks."""

from collections.abc import Iterable, Mapping
from typing import Any

from ..domain.exceptions import CheckEvaluationError
from ..domain.models import CheckResult, HealthGroup
from .checks import AtomicFlag, HealthCheck
from .threshold import ThresholdPolicy


class StaticHealthCheck(HealthCheck):
    """Always UP, reporting a fixed data payload."""

    def __init__(
        self,
        name: str,
        groups: Iterable[HealthGroup],
        data: Mapping[str, Any] | None = None,
    ):
        super().__init__(name, groups)
        self.data = dict(data or {})

    async def check_health(self) -> CheckResult:
        return CheckResult.up(self.data)


class SwitchHealthCheck(HealthCheck):
    """Check whose outcome is driven by a runtime switch.

    UP while ``passing`` is set, otherwise it fails with
    ``failure_message``. Used to simulate failing dependencies.
    """

    def __init__(
        self,
        name: str,
        groups: Iterable[HealthGroup],
        passing: bool = False,
        enabled: bool = True,
        threshold: ThresholdPolicy | None = None,
        failure_message: str | None = None,
    ):
        super().__init__(name, groups, enabled=enabled, threshold=threshold)
        self.passing = AtomicFlag(passing)
        self.failure_message = failure_message or f"Health check '{name}' is failing"

    def set_passing(self, passing: bool) -> bool:
        """Flip the switch and return the previous value."""
        return self.passing.set(passing)

    async def check_health(self) -> CheckResult:
        if self.passing.get():
            return CheckResult.up()
        raise CheckEvaluationError(self.failure_message, {"simulated": True})
