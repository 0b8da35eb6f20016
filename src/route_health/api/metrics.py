"""Prometheus exposition endpoint."""

from fastapi import APIRouter, HTTPException, Response, status

from route_health.api.dependencies import RuntimeDependency


def create_metrics_router(path: str = "/metrics") -> APIRouter:
    """Create the router exposing health check metrics at ``path``."""
    router = APIRouter(tags=["metrics"])

    @router.get(path)
    async def metrics(runtime: RuntimeDependency) -> Response:
        """Expose health check metrics in the Prometheus text format."""
        if runtime.metrics is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Metrics are disabled"
            )
        payload, content_type = runtime.metrics.export()
        return Response(content=payload, media_type=content_type)

    return router
