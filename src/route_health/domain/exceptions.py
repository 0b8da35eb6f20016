"""Exception hierarchy for the route health application."""

from typing import Any

from .models import ErrorCode, HealthGroup


class RouteHealthException(Exception):
    """Base exception for the route health application."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: dict[str, Any] | None = None,
        correlation_id: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.correlation_id = correlation_id


class DuplicateCheckError(RouteHealthException):
    """A check with the same name is already registered in the group."""

    def __init__(self, name: str, group: HealthGroup):
        super().__init__(
            f"Health check '{name}' is already registered in group '{group.value}'",
            ErrorCode.DUPLICATE_CHECK,
            {"name": name, "group": group.value},
        )
        self.name = name
        self.group = group


class CheckNotFoundError(RouteHealthException):
    """No check is registered under the given name."""

    def __init__(self, name: str):
        super().__init__(
            f"Health check '{name}' not found",
            ErrorCode.CHECK_NOT_FOUND,
            {"name": name},
        )
        self.name = name


class CheckEvaluationError(RouteHealthException):
    """Raised by check logic to report a failure with diagnostic data.

    ``details`` end up in the data of the DOWN entry produced for the check.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.CHECK_EVALUATION_ERROR, details)


class CheckTimeoutError(RouteHealthException):
    """A check did not complete within its timeout."""

    def __init__(self, name: str, timeout_duration: float):
        super().__init__(
            f"Health check '{name}' timed out after {timeout_duration}s",
            ErrorCode.TIMEOUT_ERROR,
            {"name": name, "timeout_duration": timeout_duration},
        )
        self.timeout_duration = timeout_duration


class RouteNotFoundError(RouteHealthException):
    """No route is registered under the given id."""

    def __init__(self, route_id: str):
        super().__init__(
            f"Route '{route_id}' not found",
            ErrorCode.ROUTE_NOT_FOUND,
            {"route_id": route_id},
        )
        self.route_id = route_id


class RouteAlreadyExistsError(RouteHealthException):
    """A route with the same id is already part of the context."""

    def __init__(self, route_id: str):
        super().__init__(
            f"Route '{route_id}' already exists",
            ErrorCode.ROUTE_ALREADY_EXISTS,
            {"route_id": route_id},
        )
        self.route_id = route_id


class ConfigurationError(RouteHealthException):
    """Invalid application configuration."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(
            message, ErrorCode.CONFIGURATION_ERROR, {"errors": errors or []}
        )
        self.errors = errors or []
