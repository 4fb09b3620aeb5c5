"""
Logging for Kira Shop.

    from core.logging import get_logger
    logger = get_logger(__name__)

Anything a client controls (ids, idempotency keys, error messages from the
Order API) goes through one of the sanitize_* helpers before it is logged.
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Control characters that would let a value start a fake log line
_LOG_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": None})


def _configure() -> None:
    root = logging.getLogger()
    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO))

    # OrderApiClient logs its own failures
    logging.getLogger("httpx").setLevel(logging.WARNING)


_configure()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def sanitize_id_for_logging(id_value) -> str:
    """First 8 characters of an id with control characters escaped; "N/A" when empty."""
    if id_value is None or id_value == "":
        return "N/A"
    return str(id_value).translate(_LOG_ESCAPES)[:8]


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """Escaped and truncated copy of a free-form string ("..." marks a cut)."""
    if not value:
        return "N/A"
    safe = str(value).translate(_LOG_ESCAPES)
    return safe if len(safe) <= max_length else f"{safe[:max_length]}..."


__all__ = ["get_logger", "sanitize_id_for_logging", "sanitize_string_for_logging"]
