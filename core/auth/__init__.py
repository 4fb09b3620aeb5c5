"""Authentication package.

FastAPI dependencies live in `core.auth.dependencies` (they need the database).
"""
from .credentials import AuthSession
from .passwords import hash_password, needs_rehash, verify_password
from .session import create_web_session, revoke_web_session, verify_web_session_token

__all__ = [
    "AuthSession",
    "create_web_session",
    "verify_web_session_token",
    "revoke_web_session",
    "hash_password",
    "needs_rehash",
    "verify_password",
]
