"""Administrative endpoints toggling check and route state."""

from typing import Annotated

from fastapi import APIRouter, Query, Response, status

from route_health.api.dependencies import RuntimeDependency
from route_health.bootstrap import FAILING_CHECK, FAILURE_THRESHOLD_CHECK
from route_health.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


def _no_content() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/checks/{name}", status_code=status.HTTP_204_NO_CONTENT)
async def toggle_check(
    name: str,
    runtime: RuntimeDependency,
    enabled: Annotated[bool, Query()],
) -> Response:
    """Enable or disable any registered check."""
    runtime.health.enable(name, enabled)
    return _no_content()


@router.post("/failing-check", status_code=status.HTTP_204_NO_CONTENT)
async def toggle_failing_check(
    runtime: RuntimeDependency,
    health_check_enabled: Annotated[bool, Query(alias="healthCheckEnabled")],
) -> Response:
    """Switch the simulated failing check on or off."""
    runtime.health.enable(FAILING_CHECK, health_check_enabled)
    return _no_content()


@router.post("/route/{route_id}/stop", status_code=status.HTTP_204_NO_CONTENT)
async def stop_route(route_id: str, runtime: RuntimeDependency) -> Response:
    """Stop a route."""
    runtime.context.stop_route(route_id)
    return _no_content()


@router.post("/route/{route_id}/start", status_code=status.HTTP_204_NO_CONTENT)
async def start_route(route_id: str, runtime: RuntimeDependency) -> Response:
    """Start a route."""
    runtime.context.start_route(route_id)
    return _no_content()


@router.post("/failure-threshold", status_code=status.HTTP_204_NO_CONTENT)
async def toggle_failure_threshold_check(
    runtime: RuntimeDependency,
    health_check_enabled: Annotated[bool, Query(alias="healthCheckEnabled")],
) -> Response:
    """Switch the failure threshold check on or off."""
    runtime.health.enable(FAILURE_THRESHOLD_CHECK, health_check_enabled)
    return _no_content()


@router.post(
    "/failure-threshold/return/status", status_code=status.HTTP_204_NO_CONTENT
)
async def set_failure_threshold_status(
    runtime: RuntimeDependency,
    return_status_up: Annotated[bool, Query(alias="returnStatusUp")],
) -> Response:
    """Choose whether the failure threshold check passes or fails."""
    runtime.switch(FAILURE_THRESHOLD_CHECK).set_passing(return_status_up)
    logger.info(
        "Failure threshold check switched",
        check_name=FAILURE_THRESHOLD_CHECK,
        passing=return_status_up,
    )
    return _no_content()
