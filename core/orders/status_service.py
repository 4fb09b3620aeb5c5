"""
Order Status Management Service

Admins may move an order to any of the known statuses.
"""
from typing import Optional

from core.logging import get_logger, sanitize_id_for_logging
from core.services.models import Order

logger = get_logger(__name__)

ORDER_STATUSES = ("pending", "processing", "completed", "cancelled")


def is_valid_status(status) -> bool:
    return isinstance(status, str) and status in ORDER_STATUSES


class OrderStatusService:
    """Centralized service for order status management."""

    def __init__(self, db):
        self.db = db

    async def update_status(self, order_id: int, new_status: str) -> Optional[Order]:
        """
        Update order status.

        Raises:
            ValueError: unknown status

        Returns:
            The updated order, or None if it does not exist
        """
        if not is_valid_status(new_status):
            raise ValueError(f"Unknown order status: {new_status!r}")

        order = await self.db.update_order_status(order_id, new_status)
        if order:
            logger.info(
                "Order %s status set to %s", sanitize_id_for_logging(order_id), new_status
            )
        return order
