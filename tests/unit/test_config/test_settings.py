"""Tests for configuration management."""

import pytest
from pydantic import ValidationError

from route_health import config
from route_health.config import (
    ApplicationSettings,
    ConfigurationValidator,
    Environment,
    HealthSettings,
    LogLevel,
    ObservabilitySettings,
    RouteSettings,
    get_settings,
)
from route_health.domain.exceptions import ConfigurationError
from route_health.main import create_app


class TestSettings:
    """Test settings defaults and environment overrides."""

    def test_health_defaults(self):
        """Test default health settings."""
        settings = HealthSettings()

        assert settings.check_timeout == 1.0
        assert settings.failure_threshold == 3
        assert settings.failure_window == 0.2
        assert settings.success_threshold == 1
        assert settings.admin_enabled is True

    def test_health_from_environment(self, monkeypatch):
        """Test HEALTH_ variables override the defaults."""
        monkeypatch.setenv("HEALTH_FAILURE_THRESHOLD", "5")
        monkeypatch.setenv("HEALTH_FAILURE_WINDOW", "1.5")

        settings = HealthSettings()

        assert settings.failure_threshold == 5
        assert settings.failure_window == 1.5

    def test_invalid_threshold(self):
        """Test thresholds must be positive."""
        with pytest.raises(ValidationError):
            HealthSettings(failure_threshold=0)

    def test_route_ids_unique(self):
        """Test duplicate route ids are rejected."""
        with pytest.raises(ValidationError):
            RouteSettings(route_ids=["a", "a"])

    @pytest.mark.parametrize(
        ("environment", "expected"),
        [
            ("development", Environment.DEVELOPMENT),
            ("testing", Environment.TESTING),
            ("production", Environment.PRODUCTION),
        ],
    )
    def test_get_settings(self, monkeypatch, environment, expected):
        """Test the environment selects the settings class."""
        monkeypatch.setenv("ENVIRONMENT", environment)

        assert get_settings().environment == expected

    def test_development_logging(self, monkeypatch):
        """Test development logs verbosely to the console."""
        monkeypatch.delenv("OBSERVABILITY_LOG_FORMAT", raising=False)
        monkeypatch.delenv("OBSERVABILITY_LOG_LEVEL", raising=False)

        settings = config.DevelopmentSettings()

        assert settings.debug is True
        assert settings.observability.log_level == LogLevel.DEBUG
        assert settings.observability.log_format == "console"

    def test_development_logging_from_environment(self, monkeypatch):
        """Test OBSERVABILITY_ variables override the development defaults."""
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.setenv("OBSERVABILITY_LOG_FORMAT", "json")
        monkeypatch.setenv("OBSERVABILITY_LOG_LEVEL", "ERROR")

        settings = get_settings()

        assert isinstance(settings, config.DevelopmentSettings)
        assert settings.observability.log_format == "json"
        assert settings.observability.log_level == LogLevel.ERROR

    def test_testing_logging_from_environment(self, monkeypatch):
        """Test OBSERVABILITY_ variables override the testing defaults."""
        monkeypatch.setenv("OBSERVABILITY_LOG_FORMAT", "console")
        monkeypatch.setenv("OBSERVABILITY_LOG_LEVEL", "DEBUG")

        settings = config.TestingSettings()

        assert settings.observability.log_format == "console"
        assert settings.observability.log_level == LogLevel.DEBUG

    def test_testing_logging_defaults(self, monkeypatch):
        """Test the testing defaults apply when nothing is set."""
        monkeypatch.delenv("OBSERVABILITY_LOG_FORMAT", raising=False)
        monkeypatch.delenv("OBSERVABILITY_LOG_LEVEL", raising=False)

        settings = config.TestingSettings()

        assert settings.observability.log_format == "structured"
        assert settings.observability.log_level == LogLevel.WARNING

    def test_production_disables_admin(self, monkeypatch):
        """Test production turns the toggle endpoints off by default."""
        monkeypatch.delenv("HEALTH_ADMIN_ENABLED", raising=False)

        settings = config.ProductionSettings()

        assert settings.health.admin_enabled is False
        assert settings.is_production


class TestConfigurationValidator:
    """Test configuration validation."""

    def test_valid_settings(self, settings):
        """Test the testing settings validate."""
        assert ConfigurationValidator.validate_settings(settings) == []

    def test_production_checks(self):
        """Test debug and admin endpoints are flagged in production."""
        settings = ApplicationSettings(
            environment=Environment.PRODUCTION,
            debug=True,
            health=HealthSettings(admin_enabled=True),
        )

        errors = ConfigurationValidator.validate_settings(settings)

        assert "Debug mode should be disabled in production" in errors
        assert "Admin toggle endpoints should be disabled in production" in errors

    def test_empty_context_name(self):
        """Test a blank context name is flagged."""
        settings = ApplicationSettings(routes=RouteSettings(context_name="  "))

        errors = ConfigurationValidator.validate_settings(settings)

        assert errors == ["Route context name must not be empty"]

    def test_unknown_log_format(self):
        """Test an unknown log format is flagged."""
        settings = ApplicationSettings(
            observability=ObservabilitySettings(log_format="xml")
        )

        errors = ConfigurationValidator.validate_settings(settings)

        assert errors == ["Unknown log format: xml"]

    def test_unknown_span_exporter(self):
        """Test an unknown span exporter is flagged."""
        settings = ApplicationSettings(
            observability=ObservabilitySettings(tracing_exporter="zipkin")
        )

        errors = ConfigurationValidator.validate_settings(settings)

        assert errors == ["Unknown span exporter: zipkin"]

    def test_create_app_rejects_invalid_settings(self):
        """Test the application refuses to start on invalid settings."""
        settings = ApplicationSettings(
            observability=ObservabilitySettings(log_format="xml")
        )

        with pytest.raises(ConfigurationError) as exc_info:
            create_app(settings)

        assert exc_info.value.errors == ["Unknown log format: xml"]
