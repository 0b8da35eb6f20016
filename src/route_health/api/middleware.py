"""Custom middleware for the route health application."""

import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from route_health.observability.logging import (
    generate_correlation_id,
    get_logger,
    reset_correlation_id,
    set_correlation_id,
)

logger = get_logger(__name__)


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """Middleware to add correlation IDs to requests and responses."""

    header_name = "X-Correlation-ID"

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Add correlation ID to request, log context and response."""
        correlation_id = request.headers.get(self.header_name) or (
            generate_correlation_id()
        )
        request.state.correlation_id = correlation_id
        token = set_correlation_id(correlation_id)

        try:
            response = await call_next(request)
        finally:
            reset_correlation_id(token)

        response.headers[self.header_name] = correlation_id
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log request details."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Log request details."""
        start_time = time.perf_counter()

        response = await call_next(request)

        process_time = time.perf_counter() - start_time
        response.headers["X-Process-Time"] = str(process_time)

        logger.info(
            "Request processed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration=process_time,
        )

        return response
