"""Test configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient

# Set required environment variables for tests
os.environ["ENVIRONMENT"] = "testing"

from route_health.config.settings import TestingSettings
from route_health.main import create_app


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    """Create a fake clock."""
    return FakeClock()


@pytest.fixture
def settings():
    """Create testing settings."""
    return TestingSettings()


@pytest.fixture
def app(settings):
    """Create an application for testing."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """Create test client with proper environment setup."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def runtime(app):
    """Runtime attached to the test application."""
    return app.state.runtime
