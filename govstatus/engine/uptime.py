"""
Uptime Calculator: Aggregate Uptime Over an Observation Window.

Uptime is measured in whole days. Downtime is the summed `duration` of the
incidents that start inside the window and whose type counts as downtime
(constitutional crises only). Service outages and other incident types
never reduce uptime.

    uptime_percentage = (total_days - downtime_days) / total_days * 100

total_days is the floor of the elapsed days between the window ends with
no +1 fencepost, so a single-day window [d, d] spans zero days. That case
is resolved by the empty-window policy instead of dividing by zero.

Time of day is kept. Plain dates stand for midnight, so a window opening
at noon spans one day less than its dates suggest and excludes an
incident that started that same day.
"""

from typing import Literal

from govstatus.catalog.base import IncidentCatalog
from govstatus.models.timeline import UptimeResult

from .classification import counts_as_downtime
from .dates import DateLike, as_datetime, validate_instants, whole_days_between
from .errors import EmptyWindow

EmptyWindowPolicy = Literal["full", "raise"]


class UptimeCalculator:
    """
    Computes UptimeResult for any observation window over one catalog.

    Attributes:
        catalog: Incident catalog read (never mutated) on each query
        empty_window_policy: "full" reports 100.0 for a zero-day window,
            "raise" raises EmptyWindow

    Example:
        >>> calculator = UptimeCalculator(catalog)
        >>> calculator.calculate_uptime(date(1975, 1, 1), date(1975, 12, 31)).downtime_days
        27
    """

    def __init__(self, catalog: IncidentCatalog, empty_window_policy: EmptyWindowPolicy = "full"):
        if empty_window_policy not in ("full", "raise"):
            raise ValueError(f"Unknown empty window policy: {empty_window_policy}")
        self.catalog = catalog
        self.empty_window_policy = empty_window_policy

    def downtime_days(self, window_start: DateLike, window_end: DateLike) -> int:
        """
        Summed duration of downtime incidents starting inside the window.

        Both window ends are inclusive and an incident starts at midnight of
        its start date. Overlap is not enough: an incident that starts
        before the window contributes nothing.
        """
        start, end = validate_instants(window_start, window_end)
        return sum(
            incident.duration
            for incident in self.catalog.list_incidents()
            if counts_as_downtime(incident.type)
            and start <= as_datetime(incident.start_date, start.tzinfo) <= end
        )

    def calculate_uptime(self, window_start: DateLike, window_end: DateLike) -> UptimeResult:
        """
        Compute uptime over [window_start, window_end].

        Args:
            window_start: Start of the window, a date (midnight) or datetime
            window_end: End of the window, a date (midnight) or datetime

        Returns:
            UptimeResult with the unrounded percentage

        Raises:
            InvalidWindow: If window_start is after window_end
            EmptyWindow: If the window spans zero days and the policy is "raise"
        """
        start, end = validate_instants(window_start, window_end)
        total_days = whole_days_between(start, end)
        downtime = self.downtime_days(start, end)

        if total_days == 0:
            if self.empty_window_policy == "raise":
                raise EmptyWindow(window_start, window_end)
            return UptimeResult(uptime_percentage=100.0, total_days=0, downtime_days=downtime)

        uptime_percentage = (total_days - downtime) / total_days * 100
        return UptimeResult(
            uptime_percentage=uptime_percentage,
            total_days=total_days,
            downtime_days=downtime,
        )


def calculate_uptime(
    catalog: IncidentCatalog,
    window_start: DateLike,
    window_end: DateLike,
    empty_window_policy: EmptyWindowPolicy = "full",
) -> UptimeResult:
    """Functional form of UptimeCalculator.calculate_uptime."""
    return UptimeCalculator(catalog, empty_window_policy).calculate_uptime(window_start, window_end)
