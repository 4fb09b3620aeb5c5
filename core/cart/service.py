"""Cart store: the single source of truth for the in-progress cart."""
import json
from typing import Callable, List, Optional

from core.logging import get_logger, sanitize_id_for_logging
from core.services.money import parse_decimal
from .models import Cart, CartLineItem, CartSnapshot
from .storage import CartSlot

logger = get_logger(__name__)

CartListener = Callable[["CartStore"], None]


def _product_field(product, *names, default=None):
    """Read the first present field from a mapping or an object."""
    for name in names:
        if isinstance(product, dict):
            if product.get(name) is not None:
                return product[name]
        else:
            value = getattr(product, name, None)
            if value is not None:
                return value
    return default


def _require_quantity(quantity) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValueError("quantity must be an integer")
    return quantity


class CartStore:
    """
    Holds the user's cart, persists it to a slot and notifies listeners.

    Every mutation fully applies, writes the whole cart through to the slot
    and notifies subscribers before returning. Reads (subtotal, item count)
    are recomputed from the line items on every call.

    Usage:
        store = CartStore(FileCartSlot(get_cart_storage_dir()))
        store.add_item(product, 2)
        store.get_subtotal()
    """

    def __init__(self, slot: CartSlot):
        self._slot = slot
        self._listeners: List[CartListener] = []
        self._cart = self._load()

    def _load(self) -> Cart:
        """Restore the persisted cart; anything unreadable means an empty cart."""
        try:
            raw = self._slot.read()
        except Exception as e:
            logger.warning(f"Failed to read persisted cart: {e}")
            return Cart()

        if not raw:
            return Cart()

        try:
            return Cart.from_records(json.loads(raw))
        except (json.JSONDecodeError, ValueError, TypeError) as e:
            logger.warning(f"Discarding corrupted cart data: {e}")
            return Cart()

    def _save(self) -> None:
        try:
            self._slot.write(json.dumps(self._cart.to_records()))
        except Exception as e:
            # In-memory state stays authoritative; next mutation retries the write
            logger.error(f"Failed to persist cart: {e}")

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Cart listener failed")

    def _commit(self) -> None:
        self._save()
        self._notify()

    # ==================== READS ====================

    @property
    def items(self) -> tuple:
        """Copies of the current line items, in insertion order."""
        return tuple(item.copy() for item in self._cart.items)

    @property
    def is_empty(self) -> bool:
        return self._cart.is_empty

    def get_item(self, product_id) -> Optional[CartLineItem]:
        item = self._cart.find(product_id)
        return item.copy() if item else None

    def get_subtotal(self):
        return self._cart.subtotal

    def get_item_count(self) -> int:
        return self._cart.item_count

    def snapshot(self) -> CartSnapshot:
        """Consistent copy of the line items and their subtotal."""
        items = self.items
        return CartSnapshot(items=items, subtotal=Cart(items=list(items)).subtotal)

    # ==================== MUTATIONS ====================

    def add_item(self, product, quantity: int = 1) -> None:
        """
        Add a product, merging with an existing line item for the same product.

        Args:
            product: mapping or object with id, name, price and image_url/image
            quantity: positive number of units to add

        Raises:
            ValueError: invalid quantity or product fields (cart is unchanged)
        """
        quantity = _require_quantity(quantity)
        if quantity < 1:
            raise ValueError("quantity must be a positive integer")

        product_id = _product_field(product, "id", "product_id")
        if product_id is None:
            raise ValueError("product must have an id")

        existing = self._cart.find(product_id)
        if existing:
            existing.quantity += quantity
        else:
            unit_price = parse_decimal(_product_field(product, "price", "unit_price"))
            if unit_price < 0:
                raise ValueError("price must be non-negative")
            self._cart.items.append(
                CartLineItem(
                    product_id=product_id,
                    name=str(_product_field(product, "name", default="")),
                    unit_price=unit_price,
                    quantity=quantity,
                    image_ref=str(_product_field(product, "image_url", "image", default="")),
                )
            )

        logger.debug(f"Added {quantity} x product {sanitize_id_for_logging(product_id)} to cart")
        self._commit()

    def remove_item(self, product_id) -> None:
        """Remove the line item for product_id; no-op if absent."""
        remaining = [item for item in self._cart.items if item.product_id != product_id]
        if len(remaining) == len(self._cart.items):
            return
        self._cart.items = remaining
        self._commit()

    def update_quantity(self, product_id, quantity: int) -> None:
        """Set the quantity; zero or less removes the item. Unknown ids are ignored."""
        quantity = _require_quantity(quantity)
        if quantity <= 0:
            self.remove_item(product_id)
            return

        item = self._cart.find(product_id)
        if item is None or item.quantity == quantity:
            return
        item.quantity = quantity
        self._commit()

    def clear(self) -> None:
        """Empty the cart unconditionally."""
        self._cart.items = []
        self._commit()

    # ==================== OBSERVERS ====================

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Register a change listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: CartListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)
