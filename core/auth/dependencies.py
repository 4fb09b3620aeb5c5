"""FastAPI dependencies for the authenticated user.

Accepts `Authorization: Bearer <session_token>` issued by /api/auth/login.
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException

from core.errors import (
    ERROR_ADMIN_REQUIRED,
    ERROR_AUTH_REQUIRED,
    ERROR_INVALID_SESSION,
)
from core.logging import get_logger, sanitize_id_for_logging
from core.services.database import get_database
from core.services.models import User

from .session import verify_web_session_token

logger = get_logger(__name__)


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token part of a Bearer header, or None."""
    if not authorization:
        return None
    parts = authorization.split(" ")
    if len(parts) == 2 and parts[0].lower() == "bearer" and parts[1]:
        return parts[1]
    return None


async def get_current_user(
    authorization: str = Header(None, alias="Authorization"),
) -> User:
    """Resolve the session token to a user record (401 otherwise)."""
    token = extract_bearer_token(authorization)
    if not token:
        raise HTTPException(status_code=401, detail=ERROR_AUTH_REQUIRED)

    session = verify_web_session_token(token)
    if not session:
        raise HTTPException(status_code=401, detail=ERROR_INVALID_SESSION)

    db = get_database()
    user = await db.get_user(session["user_id"])
    if not user:
        # Account removed after the session was issued
        logger.warning(
            "Session for missing user %s", sanitize_id_for_logging(session["user_id"])
        )
        raise HTTPException(status_code=401, detail=ERROR_INVALID_SESSION)
    return user


async def verify_admin(user: User = Depends(get_current_user)) -> User:
    """Require the admin role (403 otherwise)."""
    if not user.is_admin:
        raise HTTPException(status_code=403, detail=ERROR_ADMIN_REQUIRED)
    return user
