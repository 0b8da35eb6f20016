"""Tests for the health check registry."""

import pytest

from route_health.domain.exceptions import CheckNotFoundError, DuplicateCheckError
from route_health.domain.models import HealthGroup
from route_health.health import (
    CheckRegistry,
    StaticHealthCheck,
    SwitchHealthCheck,
    ThresholdPhase,
    ThresholdPolicy,
)


class TestCheckRegistry:
    """Test check registry functionality."""

    @pytest.fixture
    def registry(self, clock):
        """Create registry for testing."""
        return CheckRegistry(clock=clock)

    def test_register_in_check_groups(self, registry):
        """Test registering a check in each of its groups."""
        check = StaticHealthCheck(
            "probe", (HealthGroup.LIVENESS, HealthGroup.READINESS)
        )

        added = registry.register(check)

        assert [r.group for r in added] == [HealthGroup.LIVENESS, HealthGroup.READINESS]
        assert len(registry) == 2
        assert "probe" in registry
        assert registry.get("probe") is check

    def test_register_with_explicit_groups(self, registry):
        """Test explicit groups override the check groups."""
        check = StaticHealthCheck("probe", (HealthGroup.LIVENESS,))

        registry.register(check, [HealthGroup.GENERAL, HealthGroup.GENERAL])

        assert [r.group for r in registry.list()] == [HealthGroup.GENERAL]

    def test_register_without_groups(self, registry):
        """Test an empty group list is rejected and nothing is registered."""
        check = StaticHealthCheck("probe", (HealthGroup.LIVENESS,))

        with pytest.raises(ValueError):
            registry.register(check, [])

        assert len(registry) == 0
        assert "probe" not in registry

    def test_duplicate_name_in_group(self, registry):
        """Test duplicate names in one group are rejected."""
        registry.register(StaticHealthCheck("probe", (HealthGroup.LIVENESS,)))

        with pytest.raises(DuplicateCheckError) as exc_info:
            registry.register(StaticHealthCheck("probe", (HealthGroup.LIVENESS,)))

        assert exc_info.value.group == HealthGroup.LIVENESS
        assert exc_info.value.details == {"name": "probe", "group": "liveness"}

    def test_same_name_in_other_group(self, registry):
        """Test a name may be reused in a different group."""
        registry.register(StaticHealthCheck("probe", (HealthGroup.LIVENESS,)))
        registry.register(StaticHealthCheck("probe", (HealthGroup.READINESS,)))

        assert len(registry.registrations_of("probe")) == 2

    def test_failed_register_adds_nothing(self, registry):
        """Test a rejected registration leaves no partial state."""
        registry.register(StaticHealthCheck("probe", (HealthGroup.READINESS,)))

        with pytest.raises(DuplicateCheckError):
            registry.register(
                StaticHealthCheck(
                    "probe", (HealthGroup.LIVENESS, HealthGroup.READINESS)
                )
            )

        assert registry.list(HealthGroup.LIVENESS) == []
        assert len(registry) == 1

    def test_list_keeps_registration_order(self, registry):
        """Test listing by group and across groups."""
        registry.register(StaticHealthCheck("b", (HealthGroup.READINESS,)))
        registry.register(StaticHealthCheck("a", (HealthGroup.LIVENESS,)))
        registry.register(StaticHealthCheck("c", (HealthGroup.READINESS,)))

        assert [r.name for r in registry.list()] == ["b", "a", "c"]
        assert [r.name for r in registry.list(HealthGroup.READINESS)] == ["b", "c"]
        assert registry.list(HealthGroup.GENERAL) == []
        assert registry.names() == ["b", "a", "c"]

    def test_tracker_per_registration(self, registry):
        """Test each group registration gets its own tracker."""
        check = SwitchHealthCheck(
            "flaky",
            (HealthGroup.LIVENESS, HealthGroup.READINESS),
            threshold=ThresholdPolicy(failure_threshold=1),
        )

        first, second = registry.register(check)

        assert first.tracker is not None
        assert second.tracker is not None
        assert first.tracker is not second.tracker

    def test_no_tracker_without_threshold(self, registry):
        """Test checks without a threshold get no tracker."""
        (registration,) = registry.register(
            StaticHealthCheck("probe", (HealthGroup.GENERAL,))
        )

        assert registration.tracker is None

    def test_enable_and_disable(self, registry):
        """Test toggling a check."""
        check = SwitchHealthCheck("switch", (HealthGroup.GENERAL,))
        registry.register(check)

        registry.enable("switch", False)
        assert check.enabled is False

        registry.enable("switch", True)
        assert check.enabled is True

    def test_reenable_resets_trackers(self, registry):
        """Test re-enabling a disabled check restarts its trackers."""
        check = SwitchHealthCheck(
            "switch",
            (HealthGroup.GENERAL,),
            threshold=ThresholdPolicy(failure_threshold=1),
        )
        (registration,) = registry.register(check)
        registration.tracker.record(False)
        assert registration.tracker.phase == ThresholdPhase.STABLE_DOWN

        registry.enable("switch", False)
        registry.enable("switch", True)

        assert registration.tracker.phase == ThresholdPhase.STABLE_UP

    def test_enable_when_enabled_keeps_trackers(self, registry):
        """Test enabling an already enabled check keeps tracker state."""
        check = SwitchHealthCheck(
            "switch",
            (HealthGroup.GENERAL,),
            threshold=ThresholdPolicy(failure_threshold=1),
        )
        (registration,) = registry.register(check)
        registration.tracker.record(False)

        registry.enable("switch", True)

        assert registration.tracker.phase == ThresholdPhase.STABLE_DOWN

    def test_unknown_check(self, registry):
        """Test lookups of unknown names."""
        with pytest.raises(CheckNotFoundError):
            registry.get("missing")
        with pytest.raises(CheckNotFoundError):
            registry.enable("missing", True)
        with pytest.raises(CheckNotFoundError):
            registry.unregister("missing")

    def test_unregister(self, registry):
        """Test removing every registration of a check."""
        registry.register(
            StaticHealthCheck("probe", (HealthGroup.LIVENESS, HealthGroup.READINESS))
        )
        registry.register(StaticHealthCheck("other", (HealthGroup.LIVENESS,)))

        assert registry.unregister("probe") == 2
        assert registry.names() == ["other"]
        assert "probe" not in registry
