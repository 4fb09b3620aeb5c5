"""
Order placement.

Validates the submitted lines against the claimed total and replays
orders already created under the same idempotency key.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from core.errors import ERROR_ORDER_EMPTY, ERROR_ORDER_TOTAL_MISMATCH
from core.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging
from core.services.models import Order, OrderItem
from core.services.money import multiply, round_money

logger = get_logger(__name__)


class OrderValidationError(ValueError):
    """Submitted order is inconsistent (empty, or total does not match lines)."""


@dataclass
class PlacedOrder:
    order: Order
    items: List[OrderItem] = field(default_factory=list)
    created: bool = True


def compute_items_total(items: List[dict]):
    """Sum of price * quantity over the lines, rounded to cents."""
    return round_money(sum((multiply(i["price"], i["quantity"]) for i in items), start=round_money(0)))


class OrderService:
    """Creates orders for authenticated users."""

    def __init__(self, db):
        self.db = db

    async def place_order(
        self,
        user_id: int,
        total_amount,
        items: List[dict],
        idempotency_key: Optional[str] = None,
    ) -> PlacedOrder:
        if idempotency_key:
            existing = await self.db.get_order_by_idempotency_key(user_id, idempotency_key)
            if existing:
                logger.info(
                    "Replaying order %s for key %s",
                    sanitize_id_for_logging(existing.id),
                    sanitize_string_for_logging(idempotency_key),
                )
                return PlacedOrder(
                    order=existing,
                    items=await self.db.get_order_items(existing.id),
                    created=False,
                )

        if not items:
            raise OrderValidationError(ERROR_ORDER_EMPTY)

        expected = compute_items_total(items)
        if round_money(total_amount) != expected:
            logger.warning(
                "Order total mismatch for user %s: claimed %s, lines sum to %s",
                sanitize_id_for_logging(user_id), round_money(total_amount), expected,
            )
            raise OrderValidationError(ERROR_ORDER_TOTAL_MISMATCH)

        order, order_items = await self.db.create_order(user_id, expected, items, idempotency_key)
        logger.info(
            "Order %s created for user %s (%d lines, total %s)",
            sanitize_id_for_logging(order.id), sanitize_id_for_logging(user_id),
            len(order_items), expected,
        )
        return PlacedOrder(order=order, items=order_items)
