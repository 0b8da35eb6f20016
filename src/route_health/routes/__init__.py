"""Route context and the health checks that observe it."""

from .checks import ConsumersHealthCheck, ContextHealthCheck, RoutesHealthCheck
from .context import Route, RouteContext

__all__ = [
    "ConsumersHealthCheck",
    "ContextHealthCheck",
    "Route",
    "RouteContext",
    "RoutesHealthCheck",
]
