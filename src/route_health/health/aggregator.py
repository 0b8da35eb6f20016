"""Aggregation of check entries into a report."""

from collections.abc import Iterable

from ..domain.models import AggregateReport, CheckEntry, HealthStatus


class AggregateStatusCalculator:
    """Folds check entries into one UP/DOWN report.

    The report is DOWN as soon as one entry is DOWN. Entries are kept in
    order and never merged, even when several share a name.
    """

    def aggregate(self, entries: Iterable[CheckEntry]) -> AggregateReport:
        checks = tuple(entries)
        if any(entry.status == HealthStatus.DOWN for entry in checks):
            status = HealthStatus.DOWN
        else:
            status = HealthStatus.UP
        return AggregateReport(status=status, checks=checks)
