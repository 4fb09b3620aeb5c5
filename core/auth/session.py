"""Web session utilities (in-memory)."""
import secrets
from datetime import datetime, timezone, timedelta
from typing import Dict, Optional

from core.config import get_session_ttl_days

_web_sessions: Dict[str, dict] = {}


def create_web_session(user_id: int, username: str, is_admin: bool) -> str:
    """Create a new web session and return the token."""
    session_token = secrets.token_urlsafe(32)
    now = datetime.now(timezone.utc)
    _web_sessions[session_token] = {
        "user_id": user_id,
        "username": username,
        "is_admin": is_admin,
        "created_at": now.isoformat(),
        "expires_at": (now + timedelta(days=get_session_ttl_days())).isoformat()
    }
    return session_token


def verify_web_session_token(token: str) -> Optional[dict]:
    """Verify a web session token and return session data."""
    session = _web_sessions.get(token)
    if not session:
        return None

    # Check expiration
    expires_at = datetime.fromisoformat(session["expires_at"])
    if datetime.now(timezone.utc) > expires_at:
        del _web_sessions[token]
        return None

    return session


def revoke_web_session(token: str) -> bool:
    """Drop a session token. Returns False if it was unknown."""
    return _web_sessions.pop(token, None) is not None


def clear_web_sessions() -> None:
    _web_sessions.clear()
