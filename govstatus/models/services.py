"""
Monitored service descriptors.

Display-only records; the aggregation engine never reads them.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import ServiceCategory, ServiceHealth


class ServiceDescriptor(BaseModel):
    """
    A government service shown on the status board.

    Attributes:
        id: Stable slug (e.g. "mygov")
        name: Display name
        category: Service grouping
        status: Last known status (static until a poller exists)
        last_checked: When the status was last checked, if ever
        uptime: Last measured uptime percentage, if any
        url: Public service URL
        status_page_url: Official status page, when one exists
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(min_length=1, description="Stable service slug")
    name: str = Field(min_length=1, description="Display name")
    category: ServiceCategory = Field(description="Service grouping")
    status: ServiceHealth = Field(default=ServiceHealth.UNKNOWN, description="Last known status")
    last_checked: Optional[datetime] = Field(default=None, description="Last status check")
    uptime: Optional[float] = Field(default=None, ge=0.0, le=100.0, description="Uptime percentage")
    url: Optional[str] = Field(default=None, description="Public service URL")
    status_page_url: Optional[str] = Field(default=None, description="Official status page")
