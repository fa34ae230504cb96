"""
Monthly Grid Builder: Calendar Projection of the Incident Catalog.

Partitions an observation window into calendar months, from the month
containing the window start through the month containing the window end.
Each month collects every incident whose date range overlaps it (both ends
inclusive), so an incident spanning three months shows up in three cells.
The month tier comes from the precedence table in classification.py.
"""

from govstatus.catalog.base import IncidentCatalog
from govstatus.models.incidents import GovernmentIncident
from govstatus.models.timeline import MonthCell

from .classification import month_tier
from .dates import DateLike, iter_months, month_bounds, month_labels, overlaps, validate_window


class MonthlyGridBuilder:
    """
    Builds the month-by-month severity grid for one catalog.

    Example:
        >>> builder = MonthlyGridBuilder(catalog)
        >>> cells = builder.generate_monthly_data(date(1975, 1, 1), date(1975, 12, 31))
        >>> [c.severity.value for c in cells[9:11]]
        ['critical', 'critical']
    """

    def __init__(self, catalog: IncidentCatalog):
        self.catalog = catalog

    def build_cell(self, year: int, month: int) -> MonthCell:
        """Build the cell for a 1-based calendar month."""
        month_start, month_end = month_bounds(year, month)
        incidents = tuple(
            incident
            for incident in self.catalog.list_incidents()
            if overlaps(incident.start_date, incident.end_date, month_start, month_end)
        )
        short_name, long_name = month_labels(month)
        return MonthCell(
            year=year,
            month=month - 1,
            month_name=short_name,
            full_month_name=long_name,
            has_incident=bool(incidents),
            incidents=incidents,
            severity=month_tier(incidents),
        )

    def generate_monthly_data(self, window_start: DateLike, window_end: DateLike) -> list[MonthCell]:
        """
        One MonthCell per calendar month of the window, chronological.

        Raises:
            InvalidWindow: If window_start is after window_end
        """
        start, end = validate_window(window_start, window_end)
        return [self.build_cell(year, month) for year, month in iter_months(start, end)]


def generate_monthly_data(
    catalog: IncidentCatalog, window_start: DateLike, window_end: DateLike
) -> list[MonthCell]:
    """Functional form of MonthlyGridBuilder.generate_monthly_data."""
    return MonthlyGridBuilder(catalog).generate_monthly_data(window_start, window_end)


def incidents_in_window(
    catalog: IncidentCatalog, window_start: DateLike, window_end: DateLike
) -> list[GovernmentIncident]:
    """Catalog incidents overlapping the window, in catalog order."""
    start, end = validate_window(window_start, window_end)
    return [i for i in catalog.list_incidents() if overlaps(i.start_date, i.end_date, start, end)]
