"""
Read-only catalogs of incidents and monitored services.

Both catalogs hold tuples of frozen models, so every reader sees the same
snapshot and nothing downstream can mutate the records.
"""

from collections import Counter
from typing import Iterable

from govstatus.models.enums import IncidentType, ServiceCategory
from govstatus.models.incidents import GovernmentIncident
from govstatus.models.services import ServiceDescriptor


class IncidentCatalog:
    """
    Immutable, ordered collection of historical incidents.

    Insertion order is the order of the source table and is preserved by
    every accessor except sorted_by_recency().

    Example:
        >>> catalog = IncidentCatalog(incidents)
        >>> [i.name for i in catalog.sorted_by_recency()][:1]
        ['Medicare Outage']
    """

    __slots__ = ("_incidents",)

    def __init__(self, incidents: Iterable[GovernmentIncident] = ()):
        self._incidents: tuple[GovernmentIncident, ...] = tuple(incidents)

    def __len__(self) -> int:
        return len(self._incidents)

    def __iter__(self):
        return iter(self._incidents)

    def __repr__(self) -> str:
        return f"IncidentCatalog({len(self._incidents)} incidents)"

    def list_incidents(self) -> tuple[GovernmentIncident, ...]:
        """All incidents in catalog order."""
        return self._incidents

    def sorted_by_recency(self) -> list[GovernmentIncident]:
        """
        Incidents ordered by start_date, most recent first.

        sorted() is stable, so incidents sharing a start_date keep their
        catalog order.
        """
        return sorted(self._incidents, key=lambda i: i.start_date, reverse=True)

    def count_by_type(self) -> dict[IncidentType, int]:
        """Incident count per type; every type is present, zero included."""
        counts = Counter(incident.type for incident in self._incidents)
        return {incident_type: counts.get(incident_type, 0) for incident_type in IncidentType}

    def total_duration(self, incident_type: IncidentType) -> int:
        """Summed duration in days of all incidents of one type."""
        return sum(i.duration for i in self._incidents if i.type == incident_type)


class ServiceCatalog:
    """Immutable, ordered collection of monitored-service descriptors."""

    __slots__ = ("_services",)

    def __init__(self, services: Iterable[ServiceDescriptor] = ()):
        self._services: tuple[ServiceDescriptor, ...] = tuple(services)

    def __len__(self) -> int:
        return len(self._services)

    def __iter__(self):
        return iter(self._services)

    def list_services(self) -> tuple[ServiceDescriptor, ...]:
        return self._services

    def group_by_category(self) -> dict[ServiceCategory, tuple[ServiceDescriptor, ...]]:
        """
        Services grouped by category.

        Groups appear in the order their first service does, and services
        keep catalog order within a group.
        """
        groups: dict[ServiceCategory, list[ServiceDescriptor]] = {}
        for service in self._services:
            groups.setdefault(service.category, []).append(service)
        return {category: tuple(services) for category, services in groups.items()}
