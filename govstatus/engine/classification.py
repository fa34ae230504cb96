"""
Classification policy for the timeline.

Two policies live here as data so they can be read and tested on their own:

- DOWNTIME_TYPES: incident types whose duration counts as downtime in the
  uptime statistic. Only constitutional crises qualify; technical service
  outages are shown on the timeline but excluded from uptime.
- TIER_PRECEDENCE: ordered (incident type, month tier) pairs. The first
  pair whose type is present among a month's incidents sets the tier.
  partial-disruption and funding-delay have no entry and leave a month
  at NORMAL.
"""

from typing import Iterable

from govstatus.models.enums import IncidentType, MonthSeverity
from govstatus.models.incidents import GovernmentIncident

DOWNTIME_TYPES: frozenset[IncidentType] = frozenset({IncidentType.CONSTITUTIONAL_CRISIS})

TIER_PRECEDENCE: tuple[tuple[IncidentType, MonthSeverity], ...] = (
    (IncidentType.CONSTITUTIONAL_CRISIS, MonthSeverity.CRITICAL),
    (IncidentType.SERVICE_OUTAGE, MonthSeverity.WARNING),
)

DEFAULT_TIER = MonthSeverity.NORMAL


def counts_as_downtime(incident_type: IncidentType) -> bool:
    """Whether incidents of this type contribute to downtime days."""
    return incident_type in DOWNTIME_TYPES


def month_tier(incidents: Iterable[GovernmentIncident]) -> MonthSeverity:
    """Resolve the tier of a month from the incidents overlapping it."""
    present = {incident.type for incident in incidents}
    for incident_type, tier in TIER_PRECEDENCE:
        if incident_type in present:
            return tier
    return DEFAULT_TIER
