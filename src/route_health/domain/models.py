"""Domain models for the route health application."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class HealthStatus(str, Enum):
    """Health status of a single check or of a whole report."""

    UP = "UP"
    DOWN = "DOWN"


class HealthGroup(str, Enum):
    """Groups a check can be registered in."""

    LIVENESS = "liveness"
    READINESS = "readiness"
    GENERAL = "general"


class ServiceStatus(str, Enum):
    """Lifecycle status of the route context and its routes."""

    INITIALIZED = "Initialized"
    STARTING = "Starting"
    STARTED = "Started"
    STOPPING = "Stopping"
    STOPPED = "Stopped"
    SUSPENDED = "Suspended"


class ErrorCode(str, Enum):
    """Standardized error codes."""

    VALIDATION_ERROR = "validation_error"
    DUPLICATE_CHECK = "duplicate_check"
    CHECK_NOT_FOUND = "check_not_found"
    CHECK_EVALUATION_ERROR = "check_evaluation_error"
    TIMEOUT_ERROR = "timeout_error"
    ROUTE_NOT_FOUND = "route_not_found"
    ROUTE_ALREADY_EXISTS = "route_already_exists"
    CONFIGURATION_ERROR = "configuration_error"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one evaluation of a health check."""

    status: HealthStatus
    data: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def up(cls, data: Mapping[str, Any] | None = None) -> "CheckResult":
        """Create a passing result."""
        return cls(HealthStatus.UP, dict(data or {}))

    @classmethod
    def down(cls, data: Mapping[str, Any] | None = None) -> "CheckResult":
        """Create a failing result."""
        return cls(HealthStatus.DOWN, dict(data or {}))

    @property
    def is_up(self) -> bool:
        return self.status == HealthStatus.UP


@dataclass(frozen=True)
class CheckEntry:
    """One line of a health report."""

    name: str
    group: HealthGroup
    status: HealthStatus
    data: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "status": self.status.value,
            "data": dict(self.data),
        }


@dataclass(frozen=True)
class AggregateReport:
    """Folded status of every check evaluated for a scope.

    Entries sharing a name are kept apart, so ``find`` may return more than
    one entry for the same check (one per group it is registered in).
    """

    status: HealthStatus
    checks: tuple[CheckEntry, ...] = ()

    def find(self, name: str) -> list[CheckEntry]:
        """Return every entry with the given name, in report order."""
        return [entry for entry in self.checks if entry.name == name]

    def statuses(self, names: Iterable[str] | None = None) -> set[HealthStatus]:
        """Distinct statuses, optionally restricted to some check names."""
        wanted = set(names) if names is not None else None
        return {
            entry.status
            for entry in self.checks
            if wanted is None or entry.name in wanted
        }

    @property
    def is_up(self) -> bool:
        return self.status == HealthStatus.UP

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "status": self.status.value,
            "checks": [entry.to_dict() for entry in self.checks],
        }


# Response Models
class CheckEntryResponse(BaseModel):
    """Serialized health check entry."""

    model_config = ConfigDict(use_enum_values=True)

    name: str
    status: HealthStatus
    data: dict[str, Any] = Field(default_factory=dict)


class HealthReportResponse(BaseModel):
    """Serialized health report."""

    model_config = ConfigDict(use_enum_values=True)

    status: HealthStatus
    checks: list[CheckEntryResponse] = Field(default_factory=list)

    @classmethod
    def from_report(cls, report: AggregateReport) -> "HealthReportResponse":
        return cls.model_validate(report.to_dict())
