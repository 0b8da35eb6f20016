"""Error handling and response standardization for the API."""

from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from route_health.domain.exceptions import (
    CheckNotFoundError,
    RouteHealthException,
    RouteNotFoundError,
)
from route_health.observability.logging import get_logger

logger = get_logger(__name__)

HTTP_422_UNPROCESSABLE = 422


class ErrorResponse(BaseModel):
    """Standardized error response format."""

    error: bool = True
    code: str
    message: str
    details: dict[str, Any] | None = None
    correlation_id: str | None = None
    timestamp: str
    path: str


class ValidationErrorDetail(BaseModel):
    """Validation error detail."""

    field: str
    message: str
    value: Any


class ValidationErrorResponse(ErrorResponse):
    """Validation error response."""

    code: str = "validation_error"
    validation_errors: list[ValidationErrorDetail]


def get_correlation_id(request: Request) -> str:
    """Extract correlation ID from request."""
    return getattr(request.state, "correlation_id", "unknown")


def create_error_response(
    request: Request,
    code: str,
    message: str,
    status_code: int,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """Create standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            code=code,
            message=message,
            details=details,
            correlation_id=get_correlation_id(request),
            timestamp=datetime.now(UTC).isoformat(),
            path=str(request.url.path),
        ).model_dump(mode="json"),
    )


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Handle request validation errors."""
    if not isinstance(exc, RequestValidationError):
        raise exc

    validation_errors = [
        ValidationErrorDetail(
            field=".".join(str(loc) for loc in error["loc"]),
            message=error["msg"],
            value=error.get("input"),
        )
        for error in exc.errors()
    ]

    return JSONResponse(
        status_code=HTTP_422_UNPROCESSABLE,
        content=ValidationErrorResponse(
            message="Validation failed",
            validation_errors=validation_errors,
            correlation_id=get_correlation_id(request),
            timestamp=datetime.now(UTC).isoformat(),
            path=str(request.url.path),
        ).model_dump(mode="json"),
    )


async def not_found_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Handle unknown checks and routes."""
    if not isinstance(exc, CheckNotFoundError | RouteNotFoundError):
        raise exc
    return create_error_response(
        request=request,
        code=exc.error_code.value,
        message=exc.message,
        status_code=status.HTTP_404_NOT_FOUND,
        details=exc.details,
    )


async def general_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Handle route health exceptions."""
    if not isinstance(exc, RouteHealthException):
        raise exc
    logger.error(
        "Request failed",
        path=str(request.url.path),
        error_code=exc.error_code.value,
        error=exc.message,
    )
    return create_error_response(
        request=request,
        code=exc.error_code.value,
        message=exc.message,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        details=exc.details,
    )


async def unexpected_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception("Unexpected error", path=str(request.url.path))
    return create_error_response(
        request=request,
        code="internal_error",
        message="An unexpected error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        details={"exception_type": type(exc).__name__},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the exception handlers on an application."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(CheckNotFoundError, not_found_exception_handler)
    app.add_exception_handler(RouteNotFoundError, not_found_exception_handler)
    app.add_exception_handler(RouteHealthException, general_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)
