"""Authorization for the incident write endpoint."""

from govstatus.auth.dependencies import require_admin

__all__ = ["require_admin"]
