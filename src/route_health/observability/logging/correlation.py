"""Correlation ID management for request-scoped logging."""

import contextvars
import uuid
from typing import Any

# Context variable for correlation ID
correlation_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "correlation_id", default=None
)


class CorrelationIDProcessor:
    """Processor to add correlation ID to log events."""

    def __init__(self, correlation_id_key: str = "correlation_id"):
        self.correlation_id_key = correlation_id_key

    def __call__(
        self, logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        """Add correlation ID to log event."""
        correlation_id = get_correlation_id()
        if correlation_id:
            event_dict.setdefault(self.correlation_id_key, correlation_id)
        return event_dict


def get_correlation_id() -> str | None:
    """Get current correlation ID from context."""
    return correlation_id_var.get()


def set_correlation_id(correlation_id: str) -> contextvars.Token[str | None]:
    """Set correlation ID in context."""
    return correlation_id_var.set(correlation_id)


def reset_correlation_id(token: contextvars.Token[str | None]) -> None:
    """Restore the correlation ID that was active before ``set_correlation_id``."""
    correlation_id_var.reset(token)


def generate_correlation_id() -> str:
    """Generate a new correlation ID."""
    return str(uuid.uuid4())
