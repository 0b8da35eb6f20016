"""Registry of health checks and their group registrations."""

import threading
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..domain.exceptions import CheckNotFoundError, DuplicateCheckError
from ..domain.models import HealthGroup
from ..observability.logging import get_logger
from .checks import HealthCheck
from .threshold import ThresholdTracker

logger = get_logger(__name__)


@dataclass
class Registration:
    """A check registered in one group.

    A check registered in several groups gets one registration per group,
    each with its own threshold tracker.
    """

    check: HealthCheck
    group: HealthGroup
    tracker: ThresholdTracker | None = None

    @property
    def name(self) -> str:
        return self.check.name


class CheckRegistry:
    """Holds named health checks in registration order."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._registrations: list[Registration] = []
        self._clock = clock
        self._lock = threading.RLock()

    def register(
        self, check: HealthCheck, groups: Iterable[HealthGroup] | None = None
    ) -> list[Registration]:
        """Register a check in each of its groups.

        Raises:
            DuplicateCheckError: If the name is already taken in one of the
                groups. Nothing is registered in that case.
            ValueError: If no group is given
        """
        targets = tuple(dict.fromkeys(groups)) if groups is not None else check.groups
        if not targets:
            raise ValueError(
                f"Health check '{check.name}' must belong to at least one group"
            )

        with self._lock:
            for group in targets:
                if self._find(check.name, group) is not None:
                    raise DuplicateCheckError(check.name, group)

            added = []
            for group in targets:
                tracker = None
                if check.threshold is not None:
                    tracker = ThresholdTracker(check.name, check.threshold, self._clock)
                registration = Registration(check=check, group=group, tracker=tracker)
                self._registrations.append(registration)
                added.append(registration)

        logger.info(
            "Registered health check",
            check_name=check.name,
            groups=[group.value for group in targets],
            threshold=check.threshold is not None,
        )
        return added

    def unregister(self, name: str) -> int:
        """Remove every registration of a check.

        Returns:
            Number of registrations removed
        """
        with self._lock:
            kept = [r for r in self._registrations if r.name != name]
            removed = len(self._registrations) - len(kept)
            if removed == 0:
                raise CheckNotFoundError(name)
            self._registrations = kept

        logger.info("Unregistered health check", check_name=name, removed=removed)
        return removed

    def registrations_of(self, name: str) -> list[Registration]:
        with self._lock:
            return [r for r in self._registrations if r.name == name]

    def get(self, name: str) -> HealthCheck:
        """Get a check by name."""
        registrations = self.registrations_of(name)
        if not registrations:
            raise CheckNotFoundError(name)
        return registrations[0].check

    def enable(self, name: str, enabled: bool) -> None:
        """Enable or disable a check in every group it is registered in.

        Re-enabling a disabled check restarts its threshold trackers from
        the initial state.
        """
        with self._lock:
            registrations = self.registrations_of(name)
            if not registrations:
                raise CheckNotFoundError(name)

            checks = {id(r.check): r.check for r in registrations}
            for check in checks.values():
                was_enabled = check.set_enabled(enabled)
                if enabled and not was_enabled:
                    for registration in registrations:
                        if registration.check is check and registration.tracker:
                            registration.tracker.reset()

        logger.info("Toggled health check", check_name=name, enabled=enabled)

    def names(self) -> list[str]:
        """Distinct check names in registration order."""
        with self._lock:
            return list(dict.fromkeys(r.name for r in self._registrations))

    def __len__(self) -> int:
        with self._lock:
            return len(self._registrations)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return any(r.name == name for r in self._registrations)

    def _find(self, name: str, group: HealthGroup) -> Registration | None:
        for registration in self._registrations:
            if registration.name == name and registration.group == group:
                return registration
        return None

    # Defined last: the method name shadows the builtin inside the class body
    def list(self, group: HealthGroup | None = None) -> list[Registration]:
        """Registrations for a group in registration order; every group when None."""
        with self._lock:
            return [
                r for r in self._registrations if group is None or r.group == group
            ]
