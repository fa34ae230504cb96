"""
Catalog loader (JSON table -> frozen models).

The incident and service tables ship inside the package as JSON and are
parsed once at start-up. A single bad record rejects the whole table:
the loader never returns a partially loaded catalog.
"""

import json
from importlib import resources
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from govstatus.catalog.base import IncidentCatalog, ServiceCatalog
from govstatus.engine.errors import MalformedIncident, MalformedRecord, MalformedService
from govstatus.models.incidents import GovernmentIncident
from govstatus.models.services import ServiceDescriptor

INCIDENTS_RESOURCE = "incidents.json"
SERVICES_RESOURCE = "services.json"


def _read_table(source: Optional[Union[str, Path]], resource: str) -> str:
    if source is None:
        return resources.files("govstatus.catalog").joinpath("data").joinpath(resource).read_text(
            encoding="utf-8"
        )
    return Path(source).read_text(encoding="utf-8")


def _parse_rows(raw: str, error_cls: type[MalformedRecord]) -> list[Any]:
    try:
        rows = json.loads(raw)
    except json.JSONDecodeError as e:
        raise error_cls(f"table is not valid JSON: {e}") from e
    if not isinstance(rows, list):
        raise error_cls("table must be a JSON array of records")
    return rows


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err.get("loc", ()))
    return f"{loc}: {err['msg']}" if loc else err["msg"]


def parse_incidents(rows: list[Any]) -> IncidentCatalog:
    """
    Validate raw incident rows into an IncidentCatalog.

    Args:
        rows: Decoded records (camelCase or snake_case keys)

    Returns:
        IncidentCatalog in row order

    Raises:
        MalformedIncident: On the first record that fails validation
    """
    incidents = []
    for index, row in enumerate(rows):
        name = row.get("name") if isinstance(row, dict) else None
        try:
            incidents.append(GovernmentIncident.model_validate(row))
        except ValidationError as e:
            raise MalformedIncident(_first_error(e), index=index, name=name) from e
    return IncidentCatalog(incidents)


def parse_services(rows: list[Any]) -> ServiceCatalog:
    """Validate raw service rows into a ServiceCatalog."""
    services = []
    for index, row in enumerate(rows):
        name = row.get("name") if isinstance(row, dict) else None
        try:
            services.append(ServiceDescriptor.model_validate(row))
        except ValidationError as e:
            raise MalformedService(_first_error(e), index=index, name=name) from e
    return ServiceCatalog(services)


def load_incident_catalog(path: Optional[Union[str, Path]] = None) -> IncidentCatalog:
    """Load the incident table from `path`, or the packaged table when None."""
    raw = _read_table(path, INCIDENTS_RESOURCE)
    return parse_incidents(_parse_rows(raw, MalformedIncident))


def load_service_catalog(path: Optional[Union[str, Path]] = None) -> ServiceCatalog:
    """Load the service table from `path`, or the packaged table when None."""
    raw = _read_table(path, SERVICES_RESOURCE)
    return parse_services(_parse_rows(raw, MalformedService))
