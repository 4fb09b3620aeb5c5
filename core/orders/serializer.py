"""Order response serializers."""
from typing import Any, Dict, Iterable, Optional

from core.services.models import Order, OrderItem


def build_item_payload(item: OrderItem) -> Dict[str, Any]:
    """Build the API representation of a single order line."""
    return item.public()


def build_order_payload(order: Order, items: Optional[Iterable[OrderItem]] = None) -> Dict[str, Any]:
    """
    Build the API representation of an order.

    Args:
        order: Order header
        items: Order lines; omitted from the payload when None
    """
    payload = order.public()
    if items is not None:
        payload["items"] = [build_item_payload(item) for item in items]
    return payload
