"""Route Health: health-check aggregation for route-based integration runtimes."""

__version__ = "0.1.0"
__description__ = (
    "Liveness, readiness and aggregate health reporting with failure thresholds"
)
