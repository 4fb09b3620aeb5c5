"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Any, List, Optional

from core.services.money import multiply, parse_decimal, round_money


@dataclass
class CartLineItem:
    """Single product entry in the cart, with a display snapshot taken at add time."""
    product_id: Any
    name: str
    unit_price: Decimal
    quantity: int = 1
    image_ref: str = ""

    def __post_init__(self):
        # Held in cents
        self.unit_price = round_money(self.unit_price)

    @property
    def line_total(self) -> Decimal:
        """Total price for all units."""
        return multiply(self.unit_price, self.quantity)

    def copy(self) -> "CartLineItem":
        return replace(self)

    def to_dict(self) -> dict:
        """Convert to the persisted record format."""
        return {
            "id": self.product_id,
            "name": self.name,
            "price": str(self.unit_price),
            "image": self.image_ref,
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartLineItem":
        """
        Create from a persisted record.

        Raises:
            ValueError: if the record is not a valid line item
        """
        if not isinstance(data, dict):
            raise ValueError(f"Cart record must be an object, got {type(data).__name__}")
        try:
            product_id = data["id"]
            name = data["name"]
            raw_price = data["price"]
            quantity = data["quantity"]
        except KeyError as e:
            raise ValueError(f"Cart record is missing {e.args[0]!r}")

        if product_id is None:
            raise ValueError("Cart record has no product id")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValueError(f"Invalid quantity for product {product_id!r}: {quantity!r}")
        unit_price = parse_decimal(raw_price)
        if unit_price < 0:
            raise ValueError(f"Negative price for product {product_id!r}")

        return cls(
            product_id=product_id,
            name=str(name),
            unit_price=unit_price,
            quantity=quantity,
            image_ref=str(data.get("image") or ""),
        )


@dataclass
class Cart:
    """Ordered collection of line items, unique by product_id."""
    items: List[CartLineItem] = field(default_factory=list)

    @property
    def item_count(self) -> int:
        """Total number of units in cart."""
        return sum(item.quantity for item in self.items)

    @property
    def subtotal(self) -> Decimal:
        """Sum of line totals."""
        return round_money(sum((item.line_total for item in self.items), Decimal("0")))

    @property
    def is_empty(self) -> bool:
        return not self.items

    def find(self, product_id) -> Optional[CartLineItem]:
        return next((item for item in self.items if item.product_id == product_id), None)

    def to_records(self) -> list:
        """Convert to the persisted representation (list of records)."""
        return [item.to_dict() for item in self.items]

    @classmethod
    def from_records(cls, records) -> "Cart":
        """
        Create from the persisted representation.

        Raises:
            ValueError: if the data is not a list of valid, unique line items
        """
        if not isinstance(records, list):
            raise ValueError("Persisted cart must be a list of line items")
        items = [CartLineItem.from_dict(record) for record in records]
        seen = set()
        for item in items:
            key = repr(item.product_id)
            if key in seen:
                raise ValueError(f"Duplicate line item for product {item.product_id!r}")
            seen.add(key)
        return cls(items=items)


@dataclass(frozen=True)
class CartSnapshot:
    """Read of the cart taken at one instant; unaffected by later mutations."""
    items: tuple
    subtotal: Decimal

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items
