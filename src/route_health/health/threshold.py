"""Failure threshold tracking for health checks.

A tracker sits between the raw result of a check and the status recorded in
the report. A failing check only becomes visible as DOWN once it has failed
``failure_threshold`` times in a row *and* the failing streak has lasted at
least ``window`` seconds. Recovery happens after ``success_threshold``
consecutive passes (one by default).
"""

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from ..domain.models import CheckResult, HealthStatus
from ..observability.logging import get_logger

logger = get_logger(__name__)


class ThresholdPhase(str, Enum):
    """Tracker states."""

    STABLE_UP = "stable_up"
    DEGRADED = "degraded"
    STABLE_DOWN = "stable_down"


class ThresholdPolicy(BaseModel):
    """Failure threshold configuration for a check."""

    failure_threshold: int = Field(
        default=3, ge=1, description="Consecutive failures before reporting DOWN"
    )
    window: float = Field(
        default=0.0,
        ge=0.0,
        description="Minimum failing streak in seconds before reporting DOWN",
    )
    success_threshold: int = Field(
        default=1,
        ge=1,
        description="Consecutive passes needed to report UP again after DOWN",
    )


@dataclass
class ThresholdState:
    """Mutable state of a tracker."""

    phase: ThresholdPhase = ThresholdPhase.STABLE_UP
    consecutive_failures: int = 0
    consecutive_successes: int = 0
    first_failure_at: float | None = None
    last_evaluated_at: float | None = None


class ThresholdTracker:
    """Converts raw pass/fail signals into a debounced status."""

    def __init__(
        self,
        name: str,
        policy: ThresholdPolicy,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize threshold tracker.

        Args:
            name: Name of the tracked check (used for logging)
            policy: Threshold configuration
            clock: Monotonic clock returning seconds
        """
        self.name = name
        self.policy = policy
        self._clock = clock
        self._state = ThresholdState()
        self._lock = threading.Lock()

    @property
    def phase(self) -> ThresholdPhase:
        with self._lock:
            return self._state.phase

    def snapshot(self) -> ThresholdState:
        """Return a copy of the current state."""
        with self._lock:
            return replace(self._state)

    def record(self, passed: bool) -> HealthStatus:
        """Record one evaluation and return the status to report."""
        with self._lock:
            return self._record(passed)

    def apply(self, result: CheckResult) -> CheckResult:
        """Pass a raw check result through the tracker."""
        with self._lock:
            status = self._record(result.is_up)
            failures = self._state.consecutive_failures

        data: dict[str, Any] = dict(result.data)
        data["failure.count"] = failures
        data["failure.threshold"] = self.policy.failure_threshold
        data["failure.window.ms"] = int(self.policy.window * 1000)
        return CheckResult(status, data)

    def reset(self) -> None:
        """Return to the initial state."""
        with self._lock:
            self._state = ThresholdState()

    def _record(self, passed: bool) -> HealthStatus:
        state = self._state
        now = self._clock()
        state.last_evaluated_at = now

        if passed:
            state.consecutive_failures = 0
            state.first_failure_at = None
            if state.phase == ThresholdPhase.STABLE_DOWN:
                state.consecutive_successes += 1
                if state.consecutive_successes >= self.policy.success_threshold:
                    self._transition(ThresholdPhase.STABLE_UP)
            else:
                state.phase = ThresholdPhase.STABLE_UP
                state.consecutive_successes = 0
        else:
            state.consecutive_successes = 0
            state.consecutive_failures += 1
            if state.phase != ThresholdPhase.STABLE_DOWN:
                if state.first_failure_at is None:
                    state.first_failure_at = now
                elapsed = now - state.first_failure_at
                if (
                    state.consecutive_failures >= self.policy.failure_threshold
                    and elapsed >= self.policy.window
                ):
                    self._transition(ThresholdPhase.STABLE_DOWN)
                else:
                    state.phase = ThresholdPhase.DEGRADED

        if state.phase == ThresholdPhase.STABLE_DOWN:
            return HealthStatus.DOWN
        return HealthStatus.UP

    def _transition(self, phase: ThresholdPhase) -> None:
        state = self._state
        if phase == ThresholdPhase.STABLE_DOWN:
            logger.warning(
                "Health check failure threshold exceeded",
                check_name=self.name,
                failure_count=state.consecutive_failures,
                failure_threshold=self.policy.failure_threshold,
                window=self.policy.window,
            )
        else:
            logger.info(
                "Health check recovered",
                check_name=self.name,
                success_count=state.consecutive_successes,
            )
            state.consecutive_successes = 0
        state.phase = phase
