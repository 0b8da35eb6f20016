"""Configuration management for the route health application."""

from .settings import (
    ApplicationSettings,
    ConfigurationValidator,
    DevelopmentSettings,
    Environment,
    HealthSettings,
    LogLevel,
    ObservabilitySettings,
    ProductionSettings,
    RouteSettings,
    TestingSettings,
    get_settings,
)

__all__ = [
    "ApplicationSettings",
    "ConfigurationValidator",
    "DevelopmentSettings",
    "Environment",
    "HealthSettings",
    "LogLevel",
    "ObservabilitySettings",
    "ProductionSettings",
    "RouteSettings",
    "TestingSettings",
    "get_settings",
]
