"""Health check API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from route_health.api.dependencies import get_health_service
from route_health.domain.models import AggregateReport, HealthReportResponse
from route_health.health import HealthService

router = APIRouter(prefix="/health", tags=["health"])


class HealthJSONResponse(JSONResponse):
    """JSON response declaring its charset."""

    media_type = "application/json; charset=UTF-8"


def _render(report: AggregateReport) -> HealthJSONResponse:
    # 200 for UP and DOWN alike, the status lives in the body
    body = HealthReportResponse.from_report(report).model_dump(mode="json")
    return HealthJSONResponse(content=body)


@router.get("", response_model=HealthReportResponse)
async def health_check(
    service: Annotated[HealthService, Depends(get_health_service)],
) -> HealthJSONResponse:
    """Aggregate health over every registered check."""
    return _render(await service.health())


@router.get("/live", response_model=HealthReportResponse)
async def liveness_check(
    service: Annotated[HealthService, Depends(get_health_service)],
) -> HealthJSONResponse:
    """Liveness checks: restart the process when DOWN."""
    return _render(await service.liveness())


@router.get("/ready", response_model=HealthReportResponse)
async def readiness_check(
    service: Annotated[HealthService, Depends(get_health_service)],
) -> HealthJSONResponse:
    """Readiness checks: route traffic to the process only when UP."""
    return _render(await service.readiness())
