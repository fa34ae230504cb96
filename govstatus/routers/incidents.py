"""
Incident feed router - historical incidents sorted by recency.

Wired to:
- IncidentCatalog for the read feed
- require_admin for the (always rejected) submission endpoint
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from govstatus.auth.dependencies import require_admin
from govstatus.catalog import IncidentCatalog, get_catalog
from govstatus.models.enums import IncidentType
from govstatus.utils.logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.get("")
async def list_incidents(catalog: IncidentCatalog = Depends(get_catalog)):
    """
    List all historical incidents, most recent first.

    Returns:
        Feed with a timestamp, the sorted incidents and per-type counts.
    """
    sorted_incidents = catalog.sorted_by_recency()
    counts = catalog.count_by_type()

    logger.info("incidents_list", total=len(sorted_incidents))

    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "incidents": [i.model_dump(mode="json", by_alias=True) for i in sorted_incidents],
        "metadata": {
            "total": len(sorted_incidents),
            "constitutional_crises": counts[IncidentType.CONSTITUTIONAL_CRISIS],
            "service_outages": counts[IncidentType.SERVICE_OUTAGE],
            "by_type": {t.value: n for t, n in counts.items()},
            "type_labels": {t.value: t.label for t in IncidentType},
        },
    }


@router.post("", dependencies=[Depends(require_admin)])
async def submit_incident():
    """
    Submit a new incident.

    The catalog is read-only; require_admin rejects every request with 401
    before this body runs.
    """
    return None
