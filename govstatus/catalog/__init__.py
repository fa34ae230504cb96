"""
Incident and service catalogs.

The catalogs are process-wide immutable tables, loaded once on first use
from the packaged JSON (or from the paths configured in settings).
"""

from functools import lru_cache

from govstatus.config import get_settings

from .base import IncidentCatalog, ServiceCatalog
from .loader import load_incident_catalog, load_service_catalog


@lru_cache
def get_catalog() -> IncidentCatalog:
    """
    Get cached incident catalog instance (singleton).

    Returns:
        IncidentCatalog loaded from settings.incident_catalog_path or the
        packaged table
    """
    settings = get_settings()
    return load_incident_catalog(settings.incident_catalog_path)


@lru_cache
def get_service_catalog() -> ServiceCatalog:
    """Get cached service catalog instance (singleton)."""
    settings = get_settings()
    return load_service_catalog(settings.service_catalog_path)


def list_incidents():
    """Incidents of the default catalog, in catalog order."""
    return get_catalog().list_incidents()


def list_services():
    """Services of the default catalog, in catalog order."""
    return get_service_catalog().list_services()


__all__ = [
    "IncidentCatalog",
    "ServiceCatalog",
    "get_catalog",
    "get_service_catalog",
    "list_incidents",
    "list_services",
    "load_incident_catalog",
    "load_service_catalog",
]
