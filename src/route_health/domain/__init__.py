"""Domain layer for the route health application.

This module contains the health statuses, check results, reports and the
exception hierarchy shared by every other layer.
"""

from .exceptions import (
    CheckEvaluationError,
    CheckNotFoundError,
    CheckTimeoutError,
    ConfigurationError,
    DuplicateCheckError,
    RouteAlreadyExistsError,
    RouteHealthException,
    RouteNotFoundError,
)
from .models import (
    AggregateReport,
    CheckEntry,
    CheckEntryResponse,
    CheckResult,
    ErrorCode,
    HealthGroup,
    HealthReportResponse,
    HealthStatus,
    ServiceStatus,
)

__all__ = [
    # Models
    "AggregateReport",
    "CheckEntry",
    "CheckEntryResponse",
    "CheckResult",
    "ErrorCode",
    "HealthGroup",
    "HealthReportResponse",
    "HealthStatus",
    "ServiceStatus",
    # Exceptions
    "CheckEvaluationError",
    "CheckNotFoundError",
    "CheckTimeoutError",
    "ConfigurationError",
    "DuplicateCheckError",
    "RouteAlreadyExistsError",
    "RouteHealthException",
    "RouteNotFoundError",
]
