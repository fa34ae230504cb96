"""
Enumeration types for the government uptime timeline.

All enums inherit from str so they serialize to their wire values
('constitutional-crisis', 'critical', ...) without custom encoders.
"""

from enum import Enum


class IncidentType(str, Enum):
    """
    Classification of a government incident.

    Drives downtime accounting: only constitutional crises count as
    downtime in the uptime statistic.
    """

    CONSTITUTIONAL_CRISIS = "constitutional-crisis"
    PARTIAL_DISRUPTION = "partial-disruption"
    SERVICE_OUTAGE = "service-outage"
    FUNDING_DELAY = "funding-delay"

    @property
    def label(self) -> str:
        """Display label, e.g. "Constitutional Crisis"."""
        return self.value.replace("-", " ").title()


class Severity(str, Enum):
    """
    Display severity of an individual incident.

    Independent of IncidentType; it never feeds the month tier.
    """

    CRITICAL = "critical"
    MAJOR = "major"
    MINOR = "minor"


class MonthSeverity(str, Enum):
    """Severity tier of a calendar month cell on the timeline."""

    CRITICAL = "critical"
    WARNING = "warning"
    NORMAL = "normal"


class ServiceCategory(str, Enum):
    """Grouping of monitored services."""

    CORE = "core"
    TAXATION = "taxation"
    SOCIAL_SERVICES = "social-services"
    HEALTH = "health"
    PARLIAMENT = "parliament"
    OTHER = "other"

    @property
    def label(self) -> str:
        """Display heading for the group."""
        return _CATEGORY_LABELS.get(self, self.value)


class ServiceHealth(str, Enum):
    """Reported status of a monitored service."""

    OPERATIONAL = "operational"
    DEGRADED = "degraded"
    OUTAGE = "outage"
    UNKNOWN = "unknown"


_CATEGORY_LABELS = {
    ServiceCategory.CORE: "Core Services",
    ServiceCategory.TAXATION: "Taxation",
    ServiceCategory.SOCIAL_SERVICES: "Social Services",
    ServiceCategory.HEALTH: "Health",
    ServiceCategory.PARLIAMENT: "Parliament",
    ServiceCategory.OTHER: "Other",
}
