"""Cart package: models, storage slots, and the cart store."""
from .models import CartLineItem, Cart, CartSnapshot
from .service import CartStore
from .storage import CART_STORAGE_KEY, CartSlot, FileCartSlot, MemoryCartSlot, RedisCartSlot

__all__ = [
    "CartLineItem",
    "Cart",
    "CartSnapshot",
    "CartStore",
    "CART_STORAGE_KEY",
    "CartSlot",
    "FileCartSlot",
    "MemoryCartSlot",
    "RedisCartSlot",
]
