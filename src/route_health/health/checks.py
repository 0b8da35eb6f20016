"""Health check definitions."""

import asyncio
import inspect
import threading
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any

from ..domain.models import CheckResult, HealthGroup
from .threshold import ThresholdPolicy


class AtomicFlag:
    """Boolean guarded by a lock so readers never see a torn update."""

    def __init__(self, value: bool = False):
        self._value = value
        self._lock = threading.Lock()

    def get(self) -> bool:
        with self._lock:
            return self._value

    def set(self, value: bool) -> bool:
        """Set the flag and return the previous value."""
        with self._lock:
            previous = self._value
            self._value = value
            return previous

    def __bool__(self) -> bool:
        return self.get()

    def __repr__(self) -> str:
        return f"AtomicFlag({self.get()})"


class HealthCheck(ABC):
    """Abstract base class for health checks."""

    def __init__(
        self,
        name: str,
        groups: Iterable[HealthGroup] = (HealthGroup.GENERAL,),
        timeout: float | None = None,
        enabled: bool = True,
        threshold: ThresholdPolicy | None = None,
    ):
        """Initialize health check.

        Args:
            name: Name of the check, unique within each of its groups
            groups: Groups the check is registered in by default
            timeout: Timeout in seconds, the evaluator default when None
            enabled: Whether the check starts enabled
            threshold: Failure threshold applied to the raw results
        """
        self.name = name
        self.groups = tuple(dict.fromkeys(groups))
        self.timeout = timeout
        self.threshold = threshold
        self._enabled = AtomicFlag(enabled)

        if not self.groups:
            raise ValueError(f"Health check '{name}' must belong to at least one group")

    @property
    def enabled(self) -> bool:
        return self._enabled.get()

    def set_enabled(self, enabled: bool) -> bool:
        """Toggle the check and return the previous value."""
        return self._enabled.set(enabled)

    @abstractmethod
    async def check_health(self) -> CheckResult:
        """Perform health check.

        Returns:
            Check result. Raising is allowed: the evaluator reports any
            exception as a DOWN result.
        """

    def __repr__(self) -> str:
        groups = ",".join(group.value for group in self.groups)
        return f"{type(self).__name__}(name={self.name!r}, groups={groups})"


CheckFunc = Callable[[], CheckResult | bool | Mapping[str, Any] | Awaitable[Any]]


class FunctionHealthCheck(HealthCheck):
    """Health check backed by a plain or async callable.

    The callable may return a ``CheckResult``, a boolean, or a mapping with
    a ``healthy`` key and optional ``data``. Synchronous callables run in a
    worker thread so they are bounded by the evaluator timeout.
    """

    def __init__(
        self,
        name: str,
        check_func: CheckFunc,
        groups: Iterable[HealthGroup] = (HealthGroup.GENERAL,),
        timeout: float | None = None,
        enabled: bool = True,
        threshold: ThresholdPolicy | None = None,
    ):
        super().__init__(name, groups, timeout, enabled, threshold)
        self.check_func = check_func

    async def check_health(self) -> CheckResult:
        if inspect.iscoroutinefunction(self.check_func):
            result = await self.check_func()
        else:
            result = await asyncio.to_thread(self.check_func)
            if inspect.isawaitable(result):
                result = await result

        if isinstance(result, CheckResult):
            return result
        elif isinstance(result, Mapping):
            data = result.get("data", {})
            if result.get("healthy", False):
                return CheckResult.up(data)
            return CheckResult.down(data)
        else:
            return CheckResult.up() if result else CheckResult.down()
