"""
Timeline aggregation engine.

Pure functions over an IncidentCatalog and an observation window:

- Uptime calculation: whole-day uptime percentage from downtime incidents
- Monthly grid: per-month incident overlap and severity tier
- Classification: downtime policy and month-tier precedence as data

Nothing here logs, caches or mutates the catalog; identical inputs give
identical outputs.
"""

__all__ = [
    "EmptyWindow",
    "InvalidWindow",
    "MalformedIncident",
    "MalformedService",
    "MonthlyGridBuilder",
    "TimelineError",
    "UptimeCalculator",
    "calculate_uptime",
    "generate_monthly_data",
]

from govstatus.engine.errors import (
    EmptyWindow,
    InvalidWindow,
    MalformedIncident,
    MalformedService,
    TimelineError,
)
from govstatus.engine.timeline import MonthlyGridBuilder, generate_monthly_data
from govstatus.engine.uptime import UptimeCalculator, calculate_uptime
