"""
Integration tests for the govstatus API.

All endpoints tested:
- System: health, diagnostics, config
- Incidents: feed, rejected submission
- Status: service feed
- Timeline: uptime, months, summary, error mapping
"""

from datetime import date, datetime

import pytest
from fastapi.testclient import TestClient

from govstatus.catalog import get_catalog
from govstatus.config import Settings, get_settings


# ============================================================================
# System Endpoints
# ============================================================================


def test_health_success(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_request_id_is_echoed(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


def test_request_id_generated_when_missing(client: TestClient):
    response = client.get("/health")

    assert response.headers["X-Request-ID"]


def test_system_diagnostics_reports_catalogs(client: TestClient):
    response = client.get("/api/system/diagnostics")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["catalogs"]["incidents"] == {"source": "packaged", "records": 4}
    assert data["catalogs"]["services"] == {"source": "packaged", "records": 7}
    assert data["uptime_seconds"] >= 0


def test_system_config(client: TestClient):
    response = client.get("/api/system/config")

    data = response.json()["data"]
    assert data["tracking_start"] == "1975-01-01"
    assert data["uptime_display_precision"] == 6
    assert data["empty_window_policy"] == "full"


# ============================================================================
# Incident Feed
# ============================================================================


def test_incidents_feed_sorted_by_recency(client: TestClient):
    response = client.get("/api/incidents")

    assert response.status_code == 200
    names = [i["name"] for i in response.json()["incidents"]]
    assert names == [
        "Medicare Outage",
        "MyGov System Outage",
        "Census Website Failure",
        "1975 Australian Constitutional Crisis",
    ]


def test_incidents_feed_metadata(client: TestClient):
    metadata = client.get("/api/incidents").json()["metadata"]

    assert metadata["total"] == 4
    assert metadata["constitutional_crises"] == 1
    assert metadata["service_outages"] == 3
    assert metadata["by_type"] == {
        "constitutional-crisis": 1,
        "partial-disruption": 0,
        "service-outage": 3,
        "funding-delay": 0,
    }


def test_incidents_feed_uses_camel_case(client: TestClient):
    crisis = client.get("/api/incidents").json()["incidents"][-1]

    assert crisis["startDate"] == "1975-10-15"
    assert crisis["endDate"] == "1975-11-11"
    assert crisis["duration"] == 27
    assert crisis["type"] == "constitutional-crisis"
    assert crisis["severity"] == "critical"
    assert len(crisis["affectedServices"]) == 3


def test_incidents_feed_timestamp_is_iso(client: TestClient):
    timestamp = client.get("/api/incidents").json()["timestamp"]

    assert datetime.fromisoformat(timestamp).tzinfo is not None


def test_incidents_feed_uses_catalog_dependency(client: TestClient, sample_catalog):
    client.app.dependency_overrides[get_catalog] = lambda: sample_catalog

    metadata = client.get("/api/incidents").json()["metadata"]

    assert metadata["total"] == 4
    assert metadata["constitutional_crises"] == 1
    assert metadata["service_outages"] == 1


def test_submit_incident_rejected(client: TestClient):
    response = client.post("/api/incidents", json={"name": "New incident"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Admin authentication required"


def test_submit_incident_rejected_with_token(client: TestClient):
    response = client.post(
        "/api/incidents",
        json={"name": "New incident"},
        headers={"Authorization": "Bearer anything"},
    )

    assert response.status_code == 401


# ============================================================================
# Status Feed
# ============================================================================


def test_status_feed_lists_services(client: TestClient):
    body = client.get("/api/status").json()

    ids = [s["id"] for s in body["services"]]
    assert ids == [
        "mygov",
        "ato",
        "services-australia",
        "medicare",
        "centrelink",
        "parliament",
        "abs",
    ]
    assert all(s["status"] == "operational" for s in body["services"])
    assert "statusPageUrl" not in body["services"][-1]


def test_status_feed_next_update_hint(client: TestClient):
    metadata = client.get("/api/status").json()["metadata"]

    last_update = datetime.fromisoformat(metadata["lastUpdate"])
    next_update = datetime.fromisoformat(metadata["nextUpdate"])
    assert (next_update - last_update).total_seconds() == 60


def test_status_feed_groups_services_by_category(client: TestClient):
    groups = client.get("/api/status").json()["metadata"]["byCategory"]

    assert [g["category"] for g in groups] == [
        "core",
        "taxation",
        "social-services",
        "health",
        "parliament",
        "other",
    ]
    social = groups[2]
    assert social["label"] == "Social Services"
    assert social["serviceIds"] == ["services-australia", "centrelink"]


def test_incidents_feed_type_labels(client: TestClient):
    labels = client.get("/api/incidents").json()["metadata"]["type_labels"]

    assert labels["constitutional-crisis"] == "Constitutional Crisis"
    assert labels["service-outage"] == "Service Outage"
    assert len(labels) == 4


# ============================================================================
# Timeline
# ============================================================================


def test_uptime_for_1975(client: TestClient):
    response = client.get("/api/timeline/uptime", params={"start": "1975-01-01", "end": "1975-12-31"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["totalDays"] == 364
    assert data["downtimeDays"] == 27
    assert data["uptimePercentage"] == pytest.approx((364 - 27) / 364 * 100)


def test_uptime_reversed_window_is_bad_request(client: TestClient):
    response = client.get("/api/timeline/uptime", params={"start": "1976-01-01", "end": "1975-01-01"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "InvalidWindow"


def test_uptime_zero_length_window_defaults_to_full(client: TestClient):
    response = client.get("/api/timeline/uptime", params={"start": "1980-01-01", "end": "1980-01-01"})

    assert response.status_code == 200
    assert response.json()["data"]["uptimePercentage"] == 100.0


def test_uptime_zero_length_window_raise_policy(client: TestClient):
    client.app.dependency_overrides[get_settings] = lambda: Settings(empty_window_policy="raise")

    response = client.get("/api/timeline/uptime", params={"start": "1980-01-01", "end": "1980-01-01"})

    assert response.status_code == 422
    assert response.json()["error"] == "EmptyWindow"


def test_uptime_malformed_date_rejected(client: TestClient):
    response = client.get("/api/timeline/uptime", params={"start": "yesterday"})

    assert response.status_code == 422


def test_months_for_1975(client: TestClient):
    response = client.get("/api/timeline/months", params={"start": "1975-01-01", "end": "1975-12-31"})

    assert response.status_code == 200
    cells = response.json()["data"]
    assert len(cells) == 12
    assert [c["severity"] for c in cells].count("critical") == 2
    october, november = cells[9], cells[10]
    assert october["monthName"] == "Oct"
    assert october["fullMonthName"] == "October"
    assert october["hasIncident"] is True
    assert november["incidents"][0]["name"] == "1975 Australian Constitutional Crisis"


def test_months_default_window_runs_to_today(client: TestClient):
    cells = client.get("/api/timeline/months").json()["data"]
    today = date.today()

    assert (cells[0]["year"], cells[0]["month"]) == (1975, 0)
    assert (cells[-1]["year"], cells[-1]["month"]) == (today.year, today.month - 1)
    assert len(cells) == (today.year - 1975) * 12 + today.month


def test_months_reversed_window_is_bad_request(client: TestClient):
    response = client.get("/api/timeline/months", params={"start": "2000-02-01", "end": "2000-01-01"})

    assert response.status_code == 400


def test_summary_headline(client: TestClient):
    data = client.get("/api/timeline/summary").json()["data"]

    assert data["downtimeDays"] == 27
    assert data["yearsTracked"] == date.today().year - 1975
    assert data["hasCurrentIncident"] is False
    assert data["serviceOutageDays"] == 4
    assert data["trackingStart"] == "1975-01-01"
    whole, decimals = data["uptimeDisplay"].split(".")
    assert whole == "99"
    assert len(decimals) == 6
