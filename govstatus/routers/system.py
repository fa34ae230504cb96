"""
System diagnostics router.

Wired to:
- Incident and service catalogs for table counts
- Settings for configuration
"""

import time

from fastapi import APIRouter, Depends

from govstatus import __version__
from govstatus.catalog import IncidentCatalog, ServiceCatalog, get_catalog, get_service_catalog
from govstatus.config import Settings, get_settings
from govstatus.utils.logging import get_logger

logger = get_logger(__name__)
router = APIRouter()

# Track startup time for uptime calculation
_startup_time = time.time()


@router.get("/diagnostics")
async def system_diagnostics(
    catalog: IncidentCatalog = Depends(get_catalog),
    services: ServiceCatalog = Depends(get_service_catalog),
    settings: Settings = Depends(get_settings),
):
    """
    Get system diagnostics.
    Reports process uptime, catalog sources and table sizes.
    """
    logger.info("diagnostics_request")

    return {
        "success": True,
        "data": {
            "version": __version__,
            "uptime_seconds": round(time.time() - _startup_time, 1),
            "catalogs": {
                "incidents": {
                    "source": settings.incident_catalog_path or "packaged",
                    "records": len(catalog),
                },
                "services": {
                    "source": settings.service_catalog_path or "packaged",
                    "records": len(services),
                },
            },
        },
    }


@router.get("/config")
async def get_system_config(settings: Settings = Depends(get_settings)):
    """
    Get system configuration (non-sensitive values only).
    """
    return {
        "success": True,
        "data": {
            "log_level": settings.log_level,
            "tracking_start": settings.tracking_start.isoformat(),
            "uptime_display_precision": settings.uptime_display_precision,
            "empty_window_policy": settings.empty_window_policy,
            "status_poll_interval_seconds": settings.status_poll_interval_seconds,
        },
    }
