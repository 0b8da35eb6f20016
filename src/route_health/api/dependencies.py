"""Shared API dependencies."""

from typing import Annotated

from fastapi import Depends, Request

from route_health.bootstrap import Runtime
from route_health.health import HealthService


def get_runtime(request: Request) -> Runtime:
    """Get the runtime attached to the application."""
    runtime: Runtime = request.app.state.runtime
    return runtime


def get_health_service(request: Request) -> HealthService:
    """Get the health service of the application."""
    return get_runtime(request).health


RuntimeDependency = Annotated[Runtime, Depends(get_runtime)]
