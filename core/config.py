"""
Environment configuration.

All settings come from environment variables (a local .env is loaded by the
API entry point). Values are read on call, so tests can use monkeypatch.setenv.
"""
import os
from pathlib import Path

DEFAULT_ORDER_API_BASE_URL = "http://localhost:8000/api"
DEFAULT_CHECKOUT_TIMEOUT = 30.0
DEFAULT_SESSION_TTL_DAYS = 7


def get_order_api_base_url() -> str:
    """Base URL of the Order API (without trailing slash)."""
    return os.environ.get("ORDER_API_BASE_URL", DEFAULT_ORDER_API_BASE_URL).rstrip("/")


def get_checkout_timeout() -> float:
    """Seconds to wait for the Order API before a checkout attempt fails."""
    raw = os.environ.get("CHECKOUT_TIMEOUT_SECONDS")
    if not raw:
        return DEFAULT_CHECKOUT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_CHECKOUT_TIMEOUT
    return value if value > 0 else DEFAULT_CHECKOUT_TIMEOUT


def get_cart_storage_dir() -> Path:
    """Directory holding the local cart file."""
    return Path(os.environ.get("CART_STORAGE_DIR", Path.home() / ".kira-shop")).expanduser()


def get_session_ttl_days() -> int:
    """Lifetime of a login session in days."""
    try:
        return int(os.environ.get("SESSION_TTL_DAYS", DEFAULT_SESSION_TTL_DAYS))
    except ValueError:
        return DEFAULT_SESSION_TTL_DAYS


def get_cors_origins() -> list[str]:
    """Allowed CORS origins (comma separated, '*' by default)."""
    raw = os.environ.get("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_admin_seed() -> dict[str, str]:
    """Credentials of the admin account seeded into the in-memory database."""
    return {
        "username": os.environ.get("ADMIN_USERNAME", "admin"),
        "password": os.environ.get("ADMIN_PASSWORD", "adminpassword"),
        "email": os.environ.get("ADMIN_EMAIL", "admin@kira.com"),
    }
