"""Health check registry, evaluation and aggregation."""

from .aggregator import AggregateStatusCalculator
from .checks import AtomicFlag, FunctionHealthCheck, HealthCheck
from .evaluator import CheckEvaluator
from .probes import StaticHealthCheck, SwitchHealthCheck
from .registry import CheckRegistry, Registration
from .service import HealthService
from .threshold import ThresholdPhase, ThresholdPolicy, ThresholdState, ThresholdTracker

__all__ = [
    "AggregateStatusCalculator",
    "AtomicFlag",
    "CheckEvaluator",
    "CheckRegistry",
    "FunctionHealthCheck",
    "HealthCheck",
    "HealthService",
    "Registration",
    "StaticHealthCheck",
    "SwitchHealthCheck",
    "ThresholdPhase",
    "ThresholdPolicy",
    "ThresholdState",
    "ThresholdTracker",
]
