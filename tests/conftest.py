"""
Pytest configuration and shared fixtures for the govstatus test suite.

Provides model factories, catalogs built from explicit incident lists,
the packaged catalog, and a FastAPI test client.
"""

import os
from datetime import date
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

# Set testing environment BEFORE importing app
os.environ["TESTING"] = "true"
os.environ["DEV_MODE"] = "true"

from govstatus.catalog import get_catalog, get_service_catalog
from govstatus.catalog.base import IncidentCatalog, ServiceCatalog
from govstatus.models.enums import IncidentType, ServiceCategory, ServiceHealth, Severity
from govstatus.models.incidents import GovernmentIncident
from govstatus.models.services import ServiceDescriptor


# ---------------------------------------------------------------------------
# Pydantic model factories, reusable across all test suites
# ---------------------------------------------------------------------------


def make_incident(
    start_date: date = date(2016, 8, 9),
    end_date: date = date(2016, 8, 11),
    duration: int = 2,
    incident_type: IncidentType = IncidentType.SERVICE_OUTAGE,
    severity: Severity = Severity.MAJOR,
    **overrides,
) -> GovernmentIncident:
    """Factory function for creating test GovernmentIncident objects."""
    defaults = dict(
        name=f"Test incident {uuid4().hex[:6]}",
        start_date=start_date,
        end_date=end_date,
        duration=duration,
        type=incident_type,
        severity=severity,
        description="Synthetic incident for tests",
        affected_services=("Test service",),
        sources=("https://example.org/incident",),
    )
    defaults.update(overrides)
    return GovernmentIncident(**defaults)


def make_crisis(start_date: date, end_date: date, duration: int, **overrides) -> GovernmentIncident:
    """Factory for constitutional-crisis incidents."""
    return make_incident(
        start_date=start_date,
        end_date=end_date,
        duration=duration,
        incident_type=IncidentType.CONSTITUTIONAL_CRISIS,
        severity=overrides.pop("severity", Severity.CRITICAL),
        **overrides,
    )


def make_service(service_id: str = "mygov", **overrides) -> ServiceDescriptor:
    """Factory function for creating test ServiceDescriptor objects."""
    defaults = dict(
        id=service_id,
        name=service_id.title(),
        category=ServiceCategory.CORE,
        status=ServiceHealth.OPERATIONAL,
        url=f"https://{service_id}.example.org",
    )
    defaults.update(overrides)
    return ServiceDescriptor(**defaults)


def incident_row(**overrides) -> dict:
    """Raw camelCase catalog row as it appears in the JSON table."""
    row = {
        "name": "Row incident",
        "startDate": "2021-06-01",
        "endDate": "2021-06-02",
        "duration": 1,
        "type": "service-outage",
        "severity": "major",
        "description": "",
        "affectedServices": ["myGov portal"],
        "sources": [],
    }
    row.update(overrides)
    return row


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def packaged_catalog() -> IncidentCatalog:
    """The incident catalog shipped with the package."""
    return get_catalog()


@pytest.fixture
def packaged_services() -> ServiceCatalog:
    """The service catalog shipped with the package."""
    return get_service_catalog()


@pytest.fixture
def sample_incidents():
    """Mixed incidents covering every type, including a three-month crisis."""
    return [
        make_crisis(date(2000, 3, 20), date(2000, 5, 2), 43, name="Three month crisis"),
        make_incident(date(2000, 7, 4), date(2000, 7, 5), 1, name="July outage"),
        make_incident(
            date(2000, 7, 4),
            date(2000, 7, 4),
            0,
            incident_type=IncidentType.PARTIAL_DISRUPTION,
            severity=Severity.MINOR,
            name="July disruption",
        ),
        make_incident(
            date(2001, 1, 10),
            date(2001, 1, 20),
            10,
            incident_type=IncidentType.FUNDING_DELAY,
            name="Funding delay",
        ),
    ]


@pytest.fixture
def sample_catalog(sample_incidents) -> IncidentCatalog:
    """IncidentCatalog over sample_incidents."""
    return IncidentCatalog(sample_incidents)


@pytest.fixture
def client():
    """FastAPI test client for integration tests."""
    from govstatus.main import app

    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

