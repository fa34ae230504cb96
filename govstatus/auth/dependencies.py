"""
FastAPI dependencies for authorization.

There is no incident write path, so no credential is ever accepted:
every request to an admin endpoint is rejected with 401.
"""

from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from govstatus.utils.logging import get_logger

logger = get_logger(__name__)
security = HTTPBearer(auto_error=False)


async def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> None:
    """
    Reject the request as unauthenticated.

    Args:
        credentials: HTTP Bearer token credentials, if any

    Raises:
        HTTPException: Always (401)
    """
    logger.warning(
        "auth_failed",
        reason="missing_token" if credentials is None else "admin_writes_disabled",
    )
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Admin authentication required",
        headers={"WWW-Authenticate": "Bearer"},
    )
