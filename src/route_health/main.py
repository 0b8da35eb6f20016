"""FastAPI application entry point."""

from dotenv import load_dotenv
from fastapi import FastAPI

from . import __description__, __version__
from .api import admin, health
from .api.error_handlers import register_exception_handlers
from .api.metrics import create_metrics_router
from .api.middleware import CorrelationIDMiddleware, RequestLoggingMiddleware
from .bootstrap import build_runtime
from .config.settings import (
    ApplicationSettings,
    ConfigurationValidator,
    get_settings,
)
from .domain.exceptions import ConfigurationError
from .observability.logging import configure_from_settings, get_logger
from .observability.tracing import TracingConfig, setup_tracing

logger = get_logger(__name__)


def create_app(settings: ApplicationSettings | None = None) -> FastAPI:
    """Create the application.

    Raises:
        ConfigurationError: If the settings do not validate
        DuplicateCheckError: If two default checks share a name and group
    """
    if settings is None:
        # Load .env file before reading settings
        load_dotenv()
        settings = get_settings()

    errors = ConfigurationValidator.validate_settings(settings)
    if errors:
        logger.error("Configuration validation failed", errors=errors)
        raise ConfigurationError("Invalid configuration", errors)

    observability = settings.observability
    configure_from_settings(
        observability.log_level.value, observability.log_format, observability.log_file
    )
    if observability.tracing_enabled:
        setup_tracing(
            TracingConfig(
                service_name=settings.app_name,
                service_version=__version__,
                environment=settings.environment.value,
                exporter_type=observability.tracing_exporter,
            )
        )

    app = FastAPI(
        title=settings.app_name,
        description=__description__,
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url=None,
    )

    # Last added runs first, so the correlation ID is set before request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationIDMiddleware)

    register_exception_handlers(app)

    app.state.settings = settings
    app.state.runtime = build_runtime(settings)

    app.include_router(health.router)
    if settings.health.admin_enabled:
        app.include_router(admin.router)
    if observability.metrics_enabled:
        app.include_router(create_metrics_router(observability.metrics_path))

    logger.info(
        "Application created",
        app_name=settings.app_name,
        environment=settings.environment.value,
        admin_enabled=settings.health.admin_enabled,
        metrics_enabled=observability.metrics_enabled,
    )
    return app

