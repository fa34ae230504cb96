"""
Incident models for the government uptime timeline.

Incidents are loaded once from the packaged catalog and never change,
so the model is frozen. Field names are snake_case in Python and
camelCase on the wire to match the served feed.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .enums import IncidentType, Severity


class GovernmentIncident(BaseModel):
    """
    A recorded disruption to government operations or to a specific service.

    Attributes:
        name: Human-readable title
        start_date: First day of the incident
        end_date: Last day of the incident (never before start_date)
        duration: Day count used for downtime accounting. Authoritative:
            it is not recomputed from, or reconciled with, the dates.
        type: Classification driving downtime accounting and month tiers
        severity: Display severity, independent of type
        description: Free text summary
        affected_services: Ordered list of affected services
        sources: Ordered list of source URLs
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    name: str = Field(min_length=1, description="Human-readable title")
    start_date: date = Field(description="First day of the incident")
    end_date: date = Field(description="Last day of the incident")
    duration: int = Field(ge=0, description="Incident length in days")
    type: IncidentType = Field(description="Incident classification")
    severity: Severity = Field(description="Display severity")
    description: str = Field(default="", description="Free text summary")
    affected_services: tuple[str, ...] = Field(
        default=(), description="Ordered list of affected services"
    )
    sources: tuple[str, ...] = Field(default=(), description="Ordered list of source URLs")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject names that are only whitespace."""
        if not v.strip():
            raise ValueError("Incident name must not be blank")
        return v

    @field_validator("end_date")
    @classmethod
    def validate_date_range(cls, v: date, info) -> date:
        """Ensure the incident does not end before it starts."""
        if "start_date" in info.data and v < info.data["start_date"]:
            raise ValueError("end_date must not be before start_date")
        return v

