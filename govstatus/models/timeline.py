"""
Derived timeline records.

MonthCell and UptimeResult are recomputed on every query from the
incident catalog and an observation window. They are never stored.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import MonthSeverity
from .incidents import GovernmentIncident


class MonthCell(BaseModel):
    """
    One calendar month of the timeline grid.

    Attributes:
        year: Calendar year
        month: 0-based month index (0 = January)
        month_name: Short label ("Jan")
        full_month_name: Long label ("January")
        has_incident: True when any incident overlaps the month
        incidents: Overlapping incidents in catalog order
        severity: Month tier derived from the incident types
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    year: int
    month: int = Field(ge=0, le=11)
    month_name: str
    full_month_name: str
    has_incident: bool
    incidents: tuple[GovernmentIncident, ...] = ()
    severity: MonthSeverity = MonthSeverity.NORMAL


class UptimeResult(BaseModel):
    """
    Aggregate uptime over an observation window.

    uptime_percentage is unrounded; formatting belongs to the display layer.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    uptime_percentage: float
    total_days: int = Field(ge=0)
    downtime_days: int = Field(ge=0)
