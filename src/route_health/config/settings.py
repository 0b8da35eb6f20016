"""
Configuration management for the route health application.

This module implements environment-specific configuration with validation
and a factory for selecting the configuration of the current environment.
"""

import os
from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environments."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class HealthSettings(BaseSettings):
    """Health check evaluation configuration."""

    model_config = SettingsConfigDict(
        env_prefix="HEALTH_", env_file=".env", extra="ignore"
    )

    # Default per-check timeout in seconds
    check_timeout: float = Field(default=1.0, gt=0)

    # Failure threshold applied to the failure-threshold check
    failure_threshold: int = Field(default=3, ge=1)
    failure_window: float = Field(default=0.2, ge=0)
    success_threshold: int = Field(default=1, ge=1)

    # Administrative toggle endpoints
    admin_enabled: bool = True


class RouteSettings(BaseSettings):
    """Route context configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ROUTES_", env_file=".env", extra="ignore"
    )

    context_name: str = "route-health"
    route_ids: list[str] = Field(default_factory=lambda: ["healthyRoute"])
    endpoint_scheme: str = "timer"

    @field_validator("route_ids")
    @classmethod
    def validate_route_ids(cls, v: list[str]) -> list[str]:
        if len(set(v)) != len(v):
            raise ValueError("Route ids must be unique")
        return v


class ObservabilitySettings(BaseSettings):
    """Observability configuration."""

    model_config = SettingsConfigDict(
        env_prefix="OBSERVABILITY_", env_file=".env", extra="ignore"
    )

    # Logging settings
    log_level: LogLevel = LogLevel.INFO
    log_format: str = "json"
    log_file: str | None = None

    # Metrics settings
    metrics_enabled: bool = True
    metrics_path: str = "/metrics"

    # Tracing settings
    tracing_enabled: bool = False
    tracing_exporter: str = "console"


class ApplicationSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    # Application info
    app_name: str = "Route Health Application"
    app_version: str = "0.1.0"

    # Environment
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000

    # Component settings
    health: HealthSettings = Field(default_factory=HealthSettings)
    routes: RouteSettings = Field(default_factory=RouteSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment == Environment.DEVELOPMENT


# Environment-specific configurations
class DevelopmentSettings(ApplicationSettings):
    """Development environment settings."""

    environment: Environment = Environment.DEVELOPMENT
    debug: bool = True

    # Verbose logging for development
    observability: ObservabilitySettings = Field(
        default_factory=lambda: ObservabilitySettings(
            log_level=os.getenv("OBSERVABILITY_LOG_LEVEL") or LogLevel.DEBUG,
            log_format=os.getenv("OBSERVABILITY_LOG_FORMAT") or "console",
        )
    )


class TestingSettings(ApplicationSettings):
    """Testing environment settings."""

    environment: Environment = Environment.TESTING
    debug: bool = True

    # Minimal logging for testing
    observability: ObservabilitySettings = Field(
        default_factory=lambda: ObservabilitySettings(
            log_level=os.getenv("OBSERVABILITY_LOG_LEVEL") or LogLevel.WARNING,
            log_format=os.getenv("OBSERVABILITY_LOG_FORMAT") or "structured",
        )
    )


class ProductionSettings(ApplicationSettings):
    """Production environment settings."""

    environment: Environment = Environment.PRODUCTION
    debug: bool = False

    # Toggle endpoints are off unless explicitly enabled
    health: HealthSettings = Field(
        default_factory=lambda: HealthSettings(
            admin_enabled=os.getenv("HEALTH_ADMIN_ENABLED", "false").lower() == "true"
        )
    )


def get_settings() -> ApplicationSettings:
    """Get application settings based on environment."""
    environment = os.getenv("ENVIRONMENT", "development").lower()

    if environment == "development":
        return DevelopmentSettings()
    elif environment == "production":
        return ProductionSettings()
    elif environment == "testing":
        return TestingSettings()
    else:
        return ApplicationSettings()


# Configuration validation
class ConfigurationValidator:
    """Validates application configuration."""

    @staticmethod
    def validate_settings(settings: ApplicationSettings) -> list[str]:
        """Validate settings and return list of errors."""
        errors = []

        if settings.is_production and settings.debug:
            errors.append("Debug mode should be disabled in production")

        if settings.is_production and settings.health.admin_enabled:
            errors.append("Admin toggle endpoints should be disabled in production")

        if not settings.routes.context_name.strip():
            errors.append("Route context name must not be empty")

        if settings.observability.log_format not in ("json", "console", "structured"):
            errors.append(
                f"Unknown log format: {settings.observability.log_format}"
            )

        if settings.observability.tracing_exporter not in ("console", "none"):
            errors.append(
                f"Unknown span exporter: {settings.observability.tracing_exporter}"
            )

        return errors
