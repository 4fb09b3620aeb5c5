"""Durable key-value slots for the cart.

A slot holds exactly one serialized cart under CART_STORAGE_KEY and is owned
by a single CartStore. Writes always replace the whole value.
"""
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol

from core.db import RedisKeys, TTL, get_redis_sync

CART_STORAGE_KEY = "kira-cart"


class CartSlot(Protocol):
    """Storage cell the CartStore reads once and overwrites on every mutation."""

    def read(self) -> Optional[str]:
        ...

    def write(self, value: str) -> None:
        ...


class MemoryCartSlot:
    """In-process slot (tests, ephemeral sessions)."""

    def __init__(self, initial: Optional[str] = None, key: str = CART_STORAGE_KEY):
        self.key = key
        self._values: Dict[str, str] = {}
        if initial is not None:
            self._values[key] = initial

    def read(self) -> Optional[str]:
        return self._values.get(self.key)

    def write(self, value: str) -> None:
        self._values[self.key] = value


class FileCartSlot:
    """Slot backed by a JSON file on the local disk."""

    def __init__(self, directory, key: str = CART_STORAGE_KEY):
        self.key = key
        self.directory = Path(directory)
        self.path = self.directory / f"{key}.json"

    def read(self) -> Optional[str]:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def write(self, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        # Write to a temp file first so a crash never leaves a half-written cart
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, prefix=f".{self.key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise


class RedisCartSlot:
    """Slot stored in Upstash Redis, for carts hosted server-side."""

    def __init__(self, redis=None, key: str = CART_STORAGE_KEY, ttl: int = TTL.CART):
        self._redis = redis  # Lazy initialization
        self.key = RedisKeys.cart_key(key)
        self.ttl = ttl

    @property
    def redis(self):
        """Get Redis client (lazy initialization)."""
        if self._redis is None:
            self._redis = get_redis_sync()
        return self._redis

    def read(self) -> Optional[str]:
        value = self.redis.get(self.key)
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return str(value)

    def write(self, value: str) -> None:
        self.redis.set(self.key, value, ex=self.ttl)
