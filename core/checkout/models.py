"""Checkout value objects."""
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Tuple

from core.cart.models import CartSnapshot
from core.services.money import to_float


class CheckoutState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class SubmissionItem:
    product_id: Any
    quantity: int
    unit_price: Decimal


@dataclass(frozen=True)
class OrderSubmission:
    """One order request, built from a cart snapshot and discarded after the call."""
    total_amount: Decimal
    items: Tuple[SubmissionItem, ...]
    idempotency_key: str

    @classmethod
    def from_snapshot(cls, snapshot: CartSnapshot, idempotency_key: str) -> "OrderSubmission":
        return cls(
            total_amount=snapshot.subtotal,
            items=tuple(
                SubmissionItem(
                    product_id=item.product_id,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                )
                for item in snapshot.items
            ),
            idempotency_key=idempotency_key,
        )

    @property
    def fingerprint(self) -> tuple:
        """Identity of the order contents, independent of the idempotency key."""
        return (
            self.total_amount,
            tuple((repr(i.product_id), i.quantity, i.unit_price) for i in self.items),
        )

    def to_payload(self) -> dict:
        """Request body for POST /orders."""
        return {
            "total_amount": to_float(self.total_amount),
            "items": [
                {
                    "product_id": item.product_id,
                    "quantity": item.quantity,
                    "price": to_float(item.unit_price),
                }
                for item in self.items
            ],
        }


ORDER_PLACED_MESSAGE = "Order placed successfully"


@dataclass(frozen=True)
class CheckoutResult:
    """Outcome of a successful checkout."""
    order: dict = field(default_factory=dict)
    message: str = ORDER_PLACED_MESSAGE

    @property
    def order_id(self) -> Optional[Any]:
        return self.order.get("id")
