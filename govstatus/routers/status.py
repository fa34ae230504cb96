"""
Service status router - monitored services and the next poll hint.

Statuses come straight from the service catalog; nothing is polled.
"""

from datetime import datetime, timedelta, timezone

from fastapi import APIRouter, Depends

from govstatus.catalog import ServiceCatalog, get_service_catalog
from govstatus.config import Settings, get_settings
from govstatus.utils.logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.get("")
async def list_service_status(
    services: ServiceCatalog = Depends(get_service_catalog),
    settings: Settings = Depends(get_settings),
):
    """
    Get the status of all monitored services.

    Returns:
        Feed with a timestamp, the services, and when the next update is due.
    """
    now = datetime.now(timezone.utc)
    next_update = now + timedelta(seconds=settings.status_poll_interval_seconds)

    logger.debug("service_status_list", services=len(services))

    return {
        "timestamp": now.isoformat(),
        "services": [
            s.model_dump(mode="json", by_alias=True, exclude_none=True)
            for s in services.list_services()
        ],
        "metadata": {
            "lastUpdate": now.isoformat(),
            "nextUpdate": next_update.isoformat(),
            "byCategory": [
                {
                    "category": category.value,
                    "label": category.label,
                    "serviceIds": [s.id for s in group],
                }
                for category, group in services.group_by_category().items()
            ],
        },
    }
