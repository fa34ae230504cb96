"""
Typed failures raised by the timeline engine and catalog loader.

The engine raises these and does nothing else; logging and mapping to
feed responses happen in the serving layer.
"""

from datetime import date
from typing import Optional


class TimelineError(ValueError):
    """Base class for all timeline engine failures."""


class InvalidWindow(TimelineError):
    """Observation window starts after it ends."""

    def __init__(self, window_start: date, window_end: date):
        self.window_start = window_start
        self.window_end = window_end
        super().__init__(
            f"Observation window start {window_start.isoformat()} "
            f"is after end {window_end.isoformat()}"
        )


class EmptyWindow(TimelineError):
    """Observation window spans zero whole days, so uptime is undefined."""

    def __init__(self, window_start: date, window_end: date):
        self.window_start = window_start
        self.window_end = window_end
        super().__init__(
            f"Observation window {window_start.isoformat()}..{window_end.isoformat()} "
            "spans zero days"
        )


class MalformedRecord(TimelineError):
    """A catalog record failed validation at load time."""

    kind = "record"

    def __init__(self, reason: str, index: Optional[int] = None, name: Optional[str] = None):
        self.index = index
        self.name = name
        self.reason = reason
        where = f"{self.kind} {index}" if index is not None else self.kind
        if name:
            where = f"{where} ({name!r})"
        super().__init__(f"Malformed {where}: {reason}")


class MalformedIncident(MalformedRecord):
    """An incident record is invalid (dates out of order, unknown type, ...)."""

    kind = "incident"


class MalformedService(MalformedRecord):
    """A service descriptor is invalid."""

    kind = "service"
