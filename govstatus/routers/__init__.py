"""API routers for all endpoints."""

from govstatus.routers import incidents, status, system, timeline

__all__ = [
    "incidents",
    "status",
    "system",
    "timeline",
]
