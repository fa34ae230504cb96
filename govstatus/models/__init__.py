"""
Pydantic v2 data models for the government uptime timeline.

Model Organization:
    - enums: Closed classifications (incident type, severity, month tier, service status)
    - incidents: GovernmentIncident catalog records
    - services: ServiceDescriptor catalog records
    - timeline: Derived MonthCell and UptimeResult records

Usage:
    >>> from govstatus.models import GovernmentIncident, IncidentType, Severity
    >>> incident = GovernmentIncident(
    ...     name="Census Website Failure",
    ...     start_date=date(2016, 8, 9),
    ...     end_date=date(2016, 8, 11),
    ...     duration=2,
    ...     type=IncidentType.SERVICE_OUTAGE,
    ...     severity=Severity.MAJOR,
    ... )
"""

from .enums import (
    IncidentType,
    MonthSeverity,
    ServiceCategory,
    ServiceHealth,
    Severity,
)
from .incidents import GovernmentIncident
from .services import ServiceDescriptor
from .timeline import MonthCell, UptimeResult

__all__ = [
    # Enumerations
    "IncidentType",
    "MonthSeverity",
    "ServiceCategory",
    "ServiceHealth",
    "Severity",
    # Catalog records
    "GovernmentIncident",
    "ServiceDescriptor",
    # Derived records
    "MonthCell",
    "UptimeResult",
]
