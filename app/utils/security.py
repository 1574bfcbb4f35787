"""Access key check for the highlighting endpoints."""
import logging
import secrets
from typing import Optional

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from app.config import settings

logger = logging.getLogger(__name__)

# auto_error=False so a missing key gets our own 401 instead of FastAPI's 403
access_key_header = APIKeyHeader(name=settings.ACCESS_KEY_HEADER, auto_error=False)


def require_access_key(access_key: Optional[str] = Security(access_key_header)) -> str:
    """
    Reject requests that do not carry the configured access key.

    The key itself is validated non-empty when settings load, so there is no
    "unconfigured" case to handle here.

    Raises:
        HTTPException: 401 if the header is missing or the key does not match
    """
    if not access_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Access key required in the '{settings.ACCESS_KEY_HEADER}' header"
        )

    if not secrets.compare_digest(access_key, settings.ACCESS_KEY):
        logger.warning("Rejected request with an invalid access key")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid access key"
        )

    return access_key
