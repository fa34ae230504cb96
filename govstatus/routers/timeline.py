"""
Timeline router - uptime statistic and monthly grid for a window.

Wired to:
- UptimeCalculator for the uptime statistic
- MonthlyGridBuilder for the calendar grid

Both windows default to [settings.tracking_start, today]. Engine errors
(InvalidWindow, EmptyWindow) propagate to the app-level handler.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends

from govstatus.catalog import IncidentCatalog, get_catalog
from govstatus.config import Settings, get_settings
from govstatus.engine.timeline import MonthlyGridBuilder
from govstatus.engine.uptime import UptimeCalculator
from govstatus.models.enums import IncidentType
from govstatus.utils.logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


def _window(settings: Settings, start: Optional[date], end: Optional[date]) -> tuple[date, date]:
    return start or settings.tracking_start, end or date.today()


@router.get("/uptime")
async def get_uptime(
    start: Optional[date] = None,
    end: Optional[date] = None,
    catalog: IncidentCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """
    Get uptime over an observation window.

    Args:
        start: Window start (default: tracking start)
        end: Window end (default: today)
    """
    window_start, window_end = _window(settings, start, end)
    calculator = UptimeCalculator(catalog, settings.empty_window_policy)
    result = calculator.calculate_uptime(window_start, window_end)

    logger.info(
        "uptime_computed",
        start=window_start,
        end=window_end,
        downtime_days=result.downtime_days,
    )

    return {"success": True, "data": result.model_dump(mode="json", by_alias=True)}


@router.get("/months")
async def get_monthly_grid(
    start: Optional[date] = None,
    end: Optional[date] = None,
    catalog: IncidentCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """
    Get the month-by-month severity grid for an observation window.

    Args:
        start: Window start (default: tracking start)
        end: Window end (default: today)
    """
    window_start, window_end = _window(settings, start, end)
    cells = MonthlyGridBuilder(catalog).generate_monthly_data(window_start, window_end)

    logger.info(
        "monthly_grid_built",
        start=window_start,
        end=window_end,
        months=len(cells),
        months_with_incidents=sum(1 for c in cells if c.has_incident),
    )

    return {
        "success": True,
        "data": [c.model_dump(mode="json", by_alias=True) for c in cells],
    }


@router.get("/summary")
async def get_summary(
    catalog: IncidentCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """
    Headline figures for the status page since tracking began.

    Live monitoring does not exist, so hasCurrentIncident is always False.
    """
    window_start, window_end = _window(settings, None, None)
    result = UptimeCalculator(catalog, settings.empty_window_policy).calculate_uptime(
        window_start, window_end
    )
    precision = settings.uptime_display_precision

    return {
        "success": True,
        "data": {
            **result.model_dump(mode="json", by_alias=True),
            "uptimeDisplay": f"{result.uptime_percentage:.{precision}f}",
            "yearsTracked": window_end.year - window_start.year,
            "hasCurrentIncident": False,
            "serviceOutageDays": catalog.total_duration(IncidentType.SERVICE_OUTAGE),
            "trackingStart": window_start.isoformat(),
        },
    }
